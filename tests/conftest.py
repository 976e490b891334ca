"""Shared pytest fixtures and test helpers for surveyctl tests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator
from datetime import date
from pathlib import Path

import pytest
from click.testing import CliRunner

from surveyctl.config.settings import SurveySettings
from surveyctl.domain.records import Record
from surveyctl.services.telemetry import _current_span, disable_telemetry

TODAY = date(2025, 6, 15)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer env vars from leaking into settings."""
    monkeypatch.delenv("SURVEYCTL_CONFIG", raising=False)
    for name in ("ANALYSIS", "GENERATOR", "JSON_OUTPUT", "QUIET", "VERBOSE", "LOG_JSON"):
        monkeypatch.delenv(f"SURVEYCTL_{name}", raising=False)


@pytest.fixture(autouse=True)
def _reset_telemetry() -> Generator[None]:
    """``--verbose`` enables telemetry for the whole thread; undo it per test."""
    yield
    disable_telemetry()
    _current_span.set(None)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """CLI invocations reconfigure logging; restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("surveyctl")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory so no surveyctl.toml is discovered."""
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings(tmp_path: Path) -> SurveySettings:
    """Settings with code defaults only."""
    return SurveySettings.from_cli(start=tmp_path)


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def make_record() -> Callable[..., Record]:
    """Factory for records with sensible defaults; override any field by keyword."""

    def _make(
        first_name: str = "Olena",
        *,
        last_name: str = "Koval",
        city: str = "Kyiv",
        monthly_income: int = 30000,
        age: int = 30,
        birth_date: date | None = None,
    ) -> Record:
        return Record(
            first_name=first_name,
            last_name=last_name,
            birth_date=birth_date or TODAY.replace(year=TODAY.year - age),
            city=city,
            monthly_income=monthly_income,
        )

    return _make
