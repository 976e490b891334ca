"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, surveyctl.toml only contains
overrides. An empty (or missing) file reproduces the built-in analysis.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- surveyctl.toml sections ---


class AnalysisConfig(BaseModel):
    """[analysis] section — defaults for ``surveyctl analyze``."""

    model_config = {"frozen": True}

    city: str = "Kyiv"
    skip: int = 50
    limit: int = 500
    min_age: int = 25
    max_age: int = 50
    top_groups: int = Field(default=5, ge=0)
    sample_size: int = Field(default=5, ge=0)


class GeneratorConfig(BaseModel):
    """[generator] section — synthetic record source."""

    model_config = {"frozen": True}

    seed: int | None = None
    max_records: int | None = None
    first_names: list[str] = Field(
        default_factory=lambda: ["Andriy", "Olena", "Ihor", "Oksana", "Taras", "Sofia"],
        min_length=1,
    )
    last_names: list[str] = Field(
        default_factory=lambda: ["Shevchenko", "Ivanov", "Petrenko", "Koval", "Rudenko"],
        min_length=1,
    )
    cities: list[str] = Field(
        default_factory=lambda: ["Kyiv", "Lviv", "Odesa", "Dnipro", "Kharkiv"],
        min_length=1,
    )
    min_age: int = 18
    age_span: int = Field(default=40, gt=0)
    income_min: int = 20000
    income_span: int = Field(default=80000, gt=0)
