"""Infrastructure layer — record sources.

This layer depends on stdlib and the domain value types it produces.
It must never import from services, commands, or output.
"""
