"""Subcommand modules for surveyctl.

Provides register_commands() which uses deferred imports to keep
``surveyctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from surveyctl.commands.analyze import analyze
    from surveyctl.commands.generate import generate

    cli.add_command(analyze)
    cli.add_command(generate)
