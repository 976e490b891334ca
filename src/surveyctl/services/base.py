"""BaseService — shared foundation for surveyctl services.

Every service receives the resolved :class:`SurveySettings` and,
optionally, a record source. Without one, each operation pulls from a
fresh :class:`RecordGenerator` built from the ``[generator]`` config
section (``seed`` overrides the configured seed). Tests pass a finite list.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from pydantic import ValidationError

from surveyctl.infrastructure.generator import RecordGenerator

if TYPE_CHECKING:
    from surveyctl.config.settings import SurveySettings
    from surveyctl.domain.records import Record


class BaseService:
    """Base for service-layer classes.

    Usage::

        class AnalysisService(BaseService):
            def analyze(self, ...) -> ServiceResult:
                people = gather(self._records(), cfg)
                ...
    """

    def __init__(
        self,
        settings: SurveySettings,
        source: Iterable[Record] | None = None,
        *,
        seed: int | None = None,
    ) -> None:
        self._settings = settings
        self._source = source
        self._seed = seed

    def _records(self) -> Iterable[Record]:
        """The record source for one operation."""
        if self._source is not None:
            return self._source
        config = self._settings.generator
        if self._seed is not None:
            config = config.model_copy(update={"seed": self._seed})
        return RecordGenerator(config).stream()

    def _unreachable_city(self, city: str) -> str | None:
        """Explain why gathering *city* from the generator would never finish.

        An endless generator that cannot produce *city* would be pulled
        forever. A ``max_records`` bound ends the stream, and injected
        sources are bounded by whoever passes them in.
        """
        config = self._settings.generator
        if self._source is not None or config.max_records is not None:
            return None
        if city in config.cities:
            return None
        known = ", ".join(config.cities)
        return f"city '{city}' is never generated (generator cities: {known})"

    @staticmethod
    def _describe_validation(exc: ValidationError) -> str:
        """Collapse a pydantic error into a single human-readable line."""
        parts = []
        for err in exc.errors():
            loc = ".".join(str(p) for p in err["loc"])
            msg = err["msg"].removeprefix("Value error, ")
            parts.append(f"{loc}: {msg}" if loc else msg)
        return "; ".join(parts)
