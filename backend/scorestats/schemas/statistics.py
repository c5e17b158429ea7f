"""Client-facing statistics responses.

Rounding and Undefined -> null conversion happen here and nowhere else.
"""

from __future__ import annotations

from scorestats.analytics.types import (
    InsufficientData,
    Interpretation,
    Ok,
    StatisticsReport,
    UserInsufficientData,
    UserTrendReport,
    unwrap_or_none,
)
from scorestats.schemas.common import DENSITY_DECIMALS, DISPLAY_DECIMALS, CamelModel


def _round(value: float | None, ndigits: int = DISPLAY_DECIMALS) -> float | None:
    if value is None:
        return None
    return round(value, ndigits)


class GaussianPointResponse(CamelModel):
    x: float
    y: float


class HistogramBinResponse(CamelModel):
    range: str
    count: int
    frequency: float


class StatisticsResponse(CamelModel):
    count: int
    mean: float
    median: float
    variance: float
    standard_deviation: float
    coefficient_of_variation: float | None
    max_score: float
    min_score: float
    gaussian_curve: list[GaussianPointResponse] | None
    histogram: list[HistogramBinResponse]
    interpretation: Interpretation

    @classmethod
    def from_report(cls, report: StatisticsReport) -> StatisticsResponse:
        curve = None
        if isinstance(report.gaussian_curve, Ok):
            curve = [
                GaussianPointResponse(x=round(p.x, DISPLAY_DECIMALS), y=round(p.y, DENSITY_DECIMALS))
                for p in report.gaussian_curve.value
            ]

        return cls(
            count=report.count,
            mean=round(report.mean, DISPLAY_DECIMALS),
            median=round(report.median, DISPLAY_DECIMALS),
            variance=round(report.variance, DISPLAY_DECIMALS),
            standard_deviation=round(report.standard_deviation, DISPLAY_DECIMALS),
            coefficient_of_variation=_round(unwrap_or_none(report.coefficient_of_variation)),
            max_score=report.max_score,
            min_score=report.min_score,
            gaussian_curve=curve,
            histogram=[
                HistogramBinResponse(
                    range=b.range,
                    count=b.count,
                    frequency=round(b.frequency, DISPLAY_DECIMALS),
                )
                for b in report.histogram
            ],
            interpretation=report.interpretation,
        )


class InsufficientDataResponse(CamelModel):
    count: int = 0
    message: str

    @classmethod
    def from_result(cls, result: InsufficientData) -> InsufficientDataResponse:
        return cls(count=result.count, message=result.message)


class UserTrendResponse(CamelModel):
    user_id: str
    count: int
    mean: float
    standard_deviation: float
    max_score: float
    min_score: float
    last_score: float
    improvement_percent: float | None

    @classmethod
    def from_report(cls, report: UserTrendReport) -> UserTrendResponse:
        return cls(
            user_id=report.user_id,
            count=report.count,
            mean=round(report.mean, DISPLAY_DECIMALS),
            standard_deviation=round(report.standard_deviation, DISPLAY_DECIMALS),
            max_score=report.max_score,
            min_score=report.min_score,
            last_score=report.last_score,
            improvement_percent=_round(unwrap_or_none(report.improvement_percent)),
        )


class UserInsufficientDataResponse(CamelModel):
    user_id: str
    count: int = 0
    message: str

    @classmethod
    def from_result(cls, result: UserInsufficientData) -> UserInsufficientDataResponse:
        return cls(user_id=result.user_id, count=result.count, message=result.message)
