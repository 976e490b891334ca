"""AnalysisService — the full survey pipeline behind ``surveyctl analyze``.

Stages, each traced as a child span under --verbose:

1. gather   — city filter with skip/limit over the record source
2. filter   — inclusive age range
3. group    — partition by first name
4. stats    — one accumulator partial per group, combined into the total
5. outliers — 1.5 x IQR over the filtered incomes

All parameters are validated before the source is touched.
"""

from __future__ import annotations

from datetime import date
from functools import reduce
from typing import Any

import structlog
from pydantic import ValidationError

from surveyctl.domain.gatherer import GatherConfig, gather
from surveyctl.domain.grouping import (
    AgeRange,
    filter_by_age,
    group_by_first_name,
    largest_groups,
)
from surveyctl.domain.outliers import analyze_incomes, outlier_percentage
from surveyctl.domain.statistics import accumulate_all, combine, empty, finish
from surveyctl.services.base import BaseService
from surveyctl.services.result import ServiceResult
from surveyctl.services.telemetry import trace_span, traced

log = structlog.get_logger(__name__)


class AnalysisService(BaseService):
    """Runs gather → filter → group → statistics → outliers."""

    @traced
    def analyze(
        self,
        *,
        city: str | None = None,
        skip: int | None = None,
        limit: int | None = None,
        min_age: int | None = None,
        max_age: int | None = None,
        top: int | None = None,
        sample_size: int | None = None,
        today: date | None = None,
    ) -> ServiceResult:
        """Analyze a bounded sample of the record source.

        Unset arguments fall back to the ``[analysis]`` config section.

        Args:
            city: Only records from this city are gathered (exact match).
            skip: Matching records to skip before collecting.
            limit: Maximum records to collect.
            min_age: Lower age bound, inclusive.
            max_age: Upper age bound, inclusive.
            top: Number of largest name groups to report.
            sample_size: Number of collected records to include as a sample.
            today: Reference date for ages (default: the current date).
        """
        defaults = self._settings.analysis
        try:
            gather_cfg = GatherConfig(
                target_city=city if city is not None else defaults.city,
                skip_count=skip if skip is not None else defaults.skip,
                limit=limit if limit is not None else defaults.limit,
            )
            age_range = AgeRange(
                min_age=min_age if min_age is not None else defaults.min_age,
                max_age=max_age if max_age is not None else defaults.max_age,
            )
        except ValidationError as exc:
            message = self._describe_validation(exc)
            log.debug("analyze.invalid_config", reason=message)
            return ServiceResult.failure("analyze", "INVALID_CONFIG", message)

        unreachable = self._unreachable_city(gather_cfg.target_city)
        if unreachable:
            log.debug("analyze.invalid_config", reason=unreachable)
            return ServiceResult.failure("analyze", "INVALID_CONFIG", unreachable)

        top = top if top is not None else defaults.top_groups
        sample_size = sample_size if sample_size is not None else defaults.sample_size
        today = today or date.today()
        warnings: list[str] = []

        with trace_span("gather") as span:
            people = gather(self._records(), gather_cfg)
            if span:
                span.annotate("collected", len(people))
        log.debug("stage.complete", stage="gather", count=len(people))
        if len(people) < gather_cfg.limit:
            warnings.append(
                f"Source exhausted: collected {len(people)} of {gather_cfg.limit} "
                f"residents of {gather_cfg.target_city}"
            )

        with trace_span("filter") as span:
            filtered = filter_by_age(people, age_range, today=today)
            if span:
                span.annotate("kept", len(filtered))
        log.debug("stage.complete", stage="filter", count=len(filtered))
        if not filtered:
            warnings.append(
                f"No records within ages {age_range.min_age}-{age_range.max_age}"
            )

        with trace_span("group") as span:
            groups = group_by_first_name(filtered)
            if span:
                span.annotate("groups", len(groups))
        log.debug("stage.complete", stage="group", count=len(groups))

        with trace_span("stats"):
            partials = {name: accumulate_all(members) for name, members in groups.items()}
            overall = finish(reduce(combine, partials.values(), empty()))
        log.debug("stage.complete", stage="stats", avg=overall.avg)

        with trace_span("outliers") as span:
            outliers = analyze_incomes(filtered)
            if span:
                span.annotate("outliers", outliers.outlier_count)
        log.debug("stage.complete", stage="outliers", count=outliers.outlier_count)

        top_groups: list[dict[str, Any]] = [
            {"name": name, "size": size, "statistics": finish(partials[name]).model_dump()}
            for name, size in largest_groups(groups, top)
        ]

        return ServiceResult(
            ok=True,
            op="analyze",
            data={
                "params": {
                    "city": gather_cfg.target_city,
                    "skip": gather_cfg.skip_count,
                    "limit": gather_cfg.limit,
                    "min_age": age_range.min_age,
                    "max_age": age_range.max_age,
                },
                "collected": len(people),
                "filtered": len(filtered),
                "group_count": len(groups),
                "top_groups": top_groups,
                "statistics": overall.model_dump(),
                "outliers": {
                    **outliers.model_dump(),
                    "percentage": round(outlier_percentage(outliers), 2),
                },
                "sample": [r.to_row(today) for r in people[:sample_size]],
            },
            warnings=warnings,
        )
