"""IQR outlier rule over income values.

Quartiles are taken by index from the sorted values, without
interpolation: ``Q1 = sorted[n // 4]`` and ``Q3 = sorted[3 * n // 4]``.
A value is an outlier when it lies strictly outside
``[Q1 - 1.5 * IQR, Q3 + 1.5 * IQR]``.

For very small inputs Q1 and Q3 can coincide, giving IQR = 0; every
value other than Q1 is then an outlier. That behavior is kept as is.
"""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel

from surveyctl.domain.records import Record

IQR_MULTIPLIER = 1.5


class OutlierResult(BaseModel):
    """Normal/outlier counts plus the quartiles and fences that produced them.

    INVARIANT: ``normal_count + outlier_count`` equals the input size.
    Quartile fields are None for an empty input.
    """

    model_config = {"frozen": True}

    normal_count: int = 0
    outlier_count: int = 0
    q1: float | None = None
    q3: float | None = None
    iqr: float | None = None
    lower: float | None = None
    upper: float | None = None

    @property
    def total(self) -> int:
        return self.normal_count + self.outlier_count


def analyze_outliers(values: Iterable[int]) -> OutlierResult:
    """Classify *values* with the 1.5 x IQR rule and return the counts."""
    ordered = sorted(values)
    n = len(ordered)
    if n == 0:
        return OutlierResult()

    q1 = float(ordered[n // 4])
    q3 = float(ordered[3 * n // 4])
    iqr = q3 - q1
    lower = q1 - IQR_MULTIPLIER * iqr
    upper = q3 + IQR_MULTIPLIER * iqr

    outliers = sum(1 for v in ordered if v < lower or v > upper)
    return OutlierResult(
        normal_count=n - outliers,
        outlier_count=outliers,
        q1=q1,
        q3=q3,
        iqr=iqr,
        lower=lower,
        upper=upper,
    )


def analyze_incomes(records: Iterable[Record]) -> OutlierResult:
    """Run :func:`analyze_outliers` over the monthly incomes of *records*."""
    return analyze_outliers(r.monthly_income for r in records)


def outlier_percentage(result: OutlierResult) -> float:
    """Share of outliers in percent; 0.0 for an empty input."""
    if result.total == 0:
        return 0.0
    return result.outlier_count * 100.0 / result.total
