"""Age filtering and first-name grouping over gathered records."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from datetime import date

from pydantic import BaseModel, Field, model_validator

from surveyctl.domain.records import Record


class AgeRange(BaseModel):
    """Inclusive age bounds. Both ends non-negative, ``min_age <= max_age``."""

    model_config = {"frozen": True}

    min_age: int = Field(ge=0)
    max_age: int = Field(ge=0)

    @model_validator(mode="after")
    def _ordered(self) -> AgeRange:
        if self.min_age > self.max_age:
            msg = f"min_age ({self.min_age}) must not exceed max_age ({self.max_age})"
            raise ValueError(msg)
        return self

    def contains(self, age: int) -> bool:
        return self.min_age <= age <= self.max_age


def filter_by_age(
    records: Iterable[Record],
    age_range: AgeRange,
    *,
    today: date | None = None,
) -> list[Record]:
    """Keep records whose age lies inside *age_range* (inclusive)."""
    today = today or date.today()
    return [r for r in records if age_range.contains(r.age(today))]


def group_by_first_name(records: Iterable[Record]) -> dict[str, list[Record]]:
    """Partition records by first name. Each group keeps input order."""
    groups: dict[str, list[Record]] = {}
    for record in records:
        groups.setdefault(record.first_name, []).append(record)
    return groups


def largest_groups(
    groups: Mapping[str, Sequence[Record]], top: int | None = None
) -> list[tuple[str, int]]:
    """``(name, size)`` pairs, largest first; ties ordered by name."""
    ranked = sorted(
        ((name, len(members)) for name, members in groups.items()),
        key=lambda pair: (-pair[1], pair[0]),
    )
    return ranked if top is None else ranked[:top]
