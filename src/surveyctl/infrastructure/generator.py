"""Synthetic record source.

Produces an endless stream of random survey records. Names and cities
are drawn uniformly from the configured lists; ages fall in
``[min_age, min_age + age_span)`` and incomes in
``[income_min, income_min + income_span)``.

A ``seed`` makes the stream reproducible; ``max_records`` turns it into
a finite stream, which bounds gathering when the target city is rare.
"""

from __future__ import annotations

import random
from collections.abc import Iterator
from datetime import date

from surveyctl.config.models import GeneratorConfig
from surveyctl.domain.records import Record


def _years_before(today: date, years: int) -> date:
    try:
        return today.replace(year=today.year - years)
    except ValueError:
        # Feb 29 in a non-leap target year.
        return today.replace(year=today.year - years, day=28)


class RecordGenerator:
    """Pull-based, unbounded (unless configured otherwise) record source.

    Each call to :meth:`stream` starts a new iterator sharing the same RNG,
    so two streams from one generator do not repeat each other.
    """

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        *,
        today: date | None = None,
    ) -> None:
        self._config = config or GeneratorConfig()
        self._rng = random.Random(self._config.seed)
        self._today = today

    def next_record(self) -> Record:
        """Generate a single record."""
        cfg = self._config
        rng = self._rng
        today = self._today or date.today()
        age = cfg.min_age + rng.randrange(cfg.age_span)
        return Record(
            first_name=rng.choice(cfg.first_names),
            last_name=rng.choice(cfg.last_names),
            birth_date=_years_before(today, age),
            city=rng.choice(cfg.cities),
            monthly_income=cfg.income_min + rng.randrange(cfg.income_span),
        )

    def stream(self) -> Iterator[Record]:
        """Yield records on demand until ``max_records`` (if any) is reached."""
        remaining = self._config.max_records
        while remaining is None or remaining > 0:
            yield self.next_record()
            if remaining is not None:
                remaining -= 1