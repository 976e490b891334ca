"""Command: analyze — gather, filter, group, and summarize survey records."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from surveyctl.commands._base import SurveyCommand
from surveyctl.services.analysis import AnalysisService

if TYPE_CHECKING:
    from surveyctl.commands._context import AppContext

_ANALYZE_EXAMPLES = """\
  surveyctl analyze
  surveyctl analyze --city Lviv --skip 20 --limit 300
  surveyctl analyze -c Odesa -s 10 -l 150 --min-age 30 --max-age 60
  surveyctl analyze --seed 42 --top 3
  surveyctl --json analyze -c Kharkiv"""


@click.command(cls=SurveyCommand, examples=_ANALYZE_EXAMPLES)
@click.option("-c", "--city", default=None, help="City to collect residents of [default: Kyiv].")
@click.option(
    "-s", "--skip", type=int, default=None, help="Matching residents to skip [default: 50]."
)
@click.option(
    "-l", "--limit", type=int, default=None, help="Maximum residents to collect [default: 500]."
)
@click.option("--min-age", type=int, default=None, help="Minimum age, inclusive [default: 25].")
@click.option("--max-age", type=int, default=None, help="Maximum age, inclusive [default: 50].")
@click.option("--top", type=click.IntRange(min=0), default=None, help="Name groups to list.")
@click.option("--seed", type=int, default=None, help="Random seed for reproducible data.")
@click.pass_obj
def analyze(
    app: AppContext,
    city: str | None,
    skip: int | None,
    limit: int | None,
    min_age: int | None,
    max_age: int | None,
    top: int | None,
    seed: int | None,
) -> None:
    """Sample residents of a city and report income statistics and outliers.

    Unset options fall back to the [analysis] section of surveyctl.toml.
    """
    svc = AnalysisService(app.settings, seed=seed)
    result = svc.analyze(
        city=city,
        skip=skip,
        limit=limit,
        min_age=min_age,
        max_age=max_age,
        top=top,
    )
    app.emit(result)
