"""Combinable income statistics — min, max, mean, population std.

The accumulator is a pure reduction over an immutable partial state:

- :func:`empty` is the identity element.
- :func:`accumulate` folds one record into a partial.
- :func:`combine` merges two partials (commutative, associative).
- :func:`finish` produces the final :class:`IncomeStatistics`.

Partials keep an exact integer total, so the mean is the same however
the input was split. The sum of squared deviations is merged with the
parallel variance formula (Chan et al.), so shards can be accumulated
independently and combined without keeping the raw values.

INVARIANT: ``std`` is the population deviation (divisor ``n``), not the
sample deviation (``n - 1``).
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from functools import reduce

from pydantic import BaseModel

from surveyctl.domain.records import Record


class IncomeStatistics(BaseModel):
    """Final statistics. All zero for an empty input."""

    model_config = {"frozen": True}

    min: int = 0
    max: int = 0
    avg: float = 0.0
    std: float = 0.0


@dataclass(frozen=True)
class IncomePartial:
    """Partial accumulator state. Never mutated; every step returns a new one."""

    count: int = 0
    total: int = 0
    minimum: int | None = None
    maximum: int | None = None
    m2: float = 0.0

    @property
    def mean(self) -> float:
        return self.total / self.count if self.count else 0.0


_EMPTY = IncomePartial()


def empty() -> IncomePartial:
    """Identity partial: no values seen."""
    return _EMPTY


def accumulate_value(partial: IncomePartial, value: int) -> IncomePartial:
    """Fold a single income value into *partial*."""
    count = partial.count + 1
    total = partial.total + value
    old_mean = partial.mean
    new_mean = total / count
    return IncomePartial(
        count=count,
        total=total,
        minimum=value if partial.minimum is None else min(partial.minimum, value),
        maximum=value if partial.maximum is None else max(partial.maximum, value),
        m2=partial.m2 + (value - old_mean) * (value - new_mean),
    )


def accumulate(partial: IncomePartial, record: Record) -> IncomePartial:
    """Fold one record's monthly income into *partial*."""
    return accumulate_value(partial, record.monthly_income)


def accumulate_all(
    records: Iterable[Record], partial: IncomePartial | None = None
) -> IncomePartial:
    """Fold every record of *records*, starting from *partial* (default: empty)."""
    return reduce(accumulate, records, partial if partial is not None else empty())


def combine(a: IncomePartial, b: IncomePartial) -> IncomePartial:
    """Merge two independently accumulated partials."""
    if a.count == 0:
        return b
    if b.count == 0:
        return a
    count = a.count + b.count
    delta = b.mean - a.mean
    assert a.minimum is not None and b.minimum is not None
    assert a.maximum is not None and b.maximum is not None
    return IncomePartial(
        count=count,
        total=a.total + b.total,
        minimum=min(a.minimum, b.minimum),
        maximum=max(a.maximum, b.maximum),
        m2=a.m2 + b.m2 + delta * delta * a.count * b.count / count,
    )


def finish(partial: IncomePartial) -> IncomeStatistics:
    """Produce the final statistics; defaults for an empty partial."""
    if partial.count == 0:
        return IncomeStatistics()
    assert partial.minimum is not None and partial.maximum is not None
    return IncomeStatistics(
        min=partial.minimum,
        max=partial.maximum,
        avg=partial.mean,
        # Rounding can push m2 a hair below zero for constant inputs.
        std=math.sqrt(max(partial.m2, 0.0) / partial.count),
    )


def income_statistics(records: Iterable[Record]) -> IncomeStatistics:
    """One-shot statistics over *records*."""
    return finish(accumulate_all(records))
