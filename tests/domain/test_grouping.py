"""Tests for age filtering and first-name grouping."""

from __future__ import annotations

from collections.abc import Callable
from datetime import date

import pytest
from pydantic import ValidationError

from surveyctl.domain.grouping import (
    AgeRange,
    filter_by_age,
    group_by_first_name,
    largest_groups,
)
from surveyctl.domain.records import Record


class TestAgeRange:
    def test_inclusive_bounds(self) -> None:
        ages = AgeRange(min_age=25, max_age=50)
        assert ages.contains(25)
        assert ages.contains(50)
        assert not ages.contains(24)
        assert not ages.contains(51)

    def test_single_age(self) -> None:
        assert AgeRange(min_age=30, max_age=30).contains(30)

    def test_min_above_max_rejected(self) -> None:
        with pytest.raises(ValidationError, match="must not exceed"):
            AgeRange(min_age=51, max_age=50)

    def test_negative_rejected(self) -> None:
        with pytest.raises(ValidationError):
            AgeRange(min_age=-1, max_age=50)


class TestFilterByAge:
    def test_keeps_range(self, make_record: Callable[..., Record], today: date) -> None:
        records = [make_record(age=a) for a in (18, 24, 25, 37, 50, 51, 57)]
        kept = filter_by_age(records, AgeRange(min_age=25, max_age=50), today=today)
        assert [r.age(today) for r in kept] == [25, 37, 50]

    def test_empty_input(self, today: date) -> None:
        assert filter_by_age([], AgeRange(min_age=0, max_age=99), today=today) == []


class TestGrouping:
    def test_groups_keep_input_order(self, make_record: Callable[..., Record]) -> None:
        records = [
            make_record("Olena", monthly_income=1),
            make_record("Ihor", monthly_income=2),
            make_record("Olena", monthly_income=3),
        ]
        groups = group_by_first_name(records)
        assert set(groups) == {"Olena", "Ihor"}
        assert [r.monthly_income for r in groups["Olena"]] == [1, 3]

    def test_largest_groups_sorted_by_size_then_name(
        self, make_record: Callable[..., Record]
    ) -> None:
        names = ["Taras", "Sofia", "Taras", "Andriy", "Sofia", "Taras", "Ihor"]
        groups = group_by_first_name(make_record(n) for n in names)
        assert largest_groups(groups) == [
            ("Taras", 3),
            ("Sofia", 2),
            ("Andriy", 1),
            ("Ihor", 1),
        ]
        assert largest_groups(groups, top=2) == [("Taras", 3), ("Sofia", 2)]

    def test_empty(self) -> None:
        assert group_by_first_name([]) == {}
        assert largest_groups({}, top=5) == []
