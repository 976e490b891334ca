"""Survey record value type.

A Record is a single survey participant. It is frozen: pipeline stages
build new collections and never modify a record in place.

INVARIANT: age is derived from ``birth_date`` at query time, never stored.
"""

from __future__ import annotations

from datetime import date
from typing import Any

from pydantic import BaseModel


def full_years_between(start: date, end: date) -> int:
    """Number of complete years from *start* to *end*."""
    years = end.year - start.year
    if (end.month, end.day) < (start.month, start.day):
        years -= 1
    return years


class Record(BaseModel):
    """One survey participant."""

    model_config = {"frozen": True}

    first_name: str
    last_name: str
    birth_date: date
    city: str
    monthly_income: int

    def age(self, today: date | None = None) -> int:
        """Age in full years, relative to *today* (default: the current date)."""
        return full_years_between(self.birth_date, today or date.today())

    def to_row(self, today: date | None = None) -> dict[str, Any]:
        """Flat dict for display, including the derived age."""
        return {
            "first_name": self.first_name,
            "last_name": self.last_name,
            "age": self.age(today),
            "city": self.city,
            "monthly_income": self.monthly_income,
        }
