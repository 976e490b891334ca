"""GenerateService — dump raw records from the configured source."""

from __future__ import annotations

from datetime import date
from itertools import islice

import structlog
from pydantic import ValidationError

from surveyctl.domain.gatherer import GatherConfig, gather
from surveyctl.services.base import BaseService
from surveyctl.services.result import ServiceResult
from surveyctl.services.telemetry import traced

log = structlog.get_logger(__name__)


class GenerateService(BaseService):
    """Emits a bounded slice of the record stream."""

    @traced
    def generate(
        self,
        count: int,
        *,
        city: str | None = None,
        today: date | None = None,
    ) -> ServiceResult:
        """Return the first *count* records, optionally only from *city*.

        With a city, records are taken through the gatherer (no skip), so
        the source is consumed only until *count* residents are found.
        """
        if city is None:
            if count <= 0:
                return ServiceResult.failure(
                    "generate", "INVALID_CONFIG", f"count must be greater than 0, got {count}"
                )
            records = list(islice(self._records(), count))
        else:
            try:
                cfg = GatherConfig(target_city=city, skip_count=0, limit=count)
            except ValidationError as exc:
                return ServiceResult.failure(
                    "generate", "INVALID_CONFIG", self._describe_validation(exc)
                )
            unreachable = self._unreachable_city(city)
            if unreachable:
                return ServiceResult.failure("generate", "INVALID_CONFIG", unreachable)
            records = gather(self._records(), cfg)

        log.debug("generate.complete", count=len(records), city=city)
        warnings: list[str] = []
        if len(records) < count:
            warnings.append(f"Source exhausted after {len(records)} of {count} records")

        return ServiceResult(
            ok=True,
            op="generate",
            data={
                "count": len(records),
                "items": [
                    {**r.to_row(today), "birth_date": r.birth_date.isoformat()} for r in records
                ],
            },
            warnings=warnings,
        )
