"""Command: generate — print raw synthetic records."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from surveyctl.commands._base import SurveyCommand
from surveyctl.services.generate import GenerateService

if TYPE_CHECKING:
    from surveyctl.commands._context import AppContext


@click.command(
    cls=SurveyCommand,
    examples="""\
  surveyctl generate
  surveyctl generate --count 20 --city Lviv
  surveyctl --json generate -n 3 --seed 7""",
)
@click.option("-n", "--count", type=int, default=10, show_default=True, help="Records to emit.")
@click.option("-c", "--city", default=None, help="Only emit residents of this city.")
@click.option("--seed", type=int, default=None, help="Random seed for reproducible data.")
@click.pass_obj
def generate(app: AppContext, count: int, city: str | None, seed: int | None) -> None:
    """Emit records from the synthetic survey source."""
    app.emit(GenerateService(app.settings, seed=seed).generate(count, city=city))
