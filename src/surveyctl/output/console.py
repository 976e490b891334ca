"""Rich Console factory and theme for surveyctl output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

SURVEY_THEME = Theme(
    {
        "survey.ok": "bold green",
        "survey.error": "bold red",
        "survey.warning": "bold yellow",
        "survey.op": "bold cyan",
        "survey.key": "dim",
        "survey.section": "bold",
        "survey.name": "bold blue",
        "survey.city": "cyan",
        "survey.money": "green",
        "survey.outlier": "magenta",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=SURVEY_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def format_money(value: float) -> str:
    """Income amount with thousands separators, e.g. ``52,340.50 UAH``."""
    if float(value).is_integer():
        return f"{int(value):,} UAH"
    return f"{value:,.2f} UAH"
