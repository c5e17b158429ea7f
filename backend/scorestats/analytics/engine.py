"""Score analytics orchestrator.

Composes the descriptive, Gaussian, histogram and trend calculators into
the two reports exposed to the service layer.  Inputs are policed here:
anything that is not a finite real number is rejected before any
arithmetic runs.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from numbers import Real

from scorestats.analytics.descriptive import describe, interpret_variability, plot_bounds
from scorestats.analytics.gaussian import gaussian_curve
from scorestats.analytics.histogram import build_histogram
from scorestats.analytics.trend import analyze_user_trend
from scorestats.analytics.types import (
    InsufficientData,
    ScoreRecord,
    StatisticsReport,
    UserInsufficientData,
    UserTrendReport,
)


# Keeps sums and squared deviations well inside float range
MAX_ABS_SCORE = 1e12


class InvalidScoreError(ValueError):
    """Raised when a score collection fails boundary validation."""


def validate_score(score: object, position: int | None = None) -> float:
    where = f" at position {position}" if position is not None else ""
    # bool is a Real subclass but never a meaningful score
    if isinstance(score, bool) or not isinstance(score, Real):
        raise InvalidScoreError(f"Score{where} must be a number, got {type(score).__name__}")
    value = float(score)
    if not math.isfinite(value):
        raise InvalidScoreError(f"Score{where} must be finite, got {value}")
    if abs(value) > MAX_ABS_SCORE:
        raise InvalidScoreError(f"Score{where} is out of range, got {value}")
    return value


def validate_scores(scores: Iterable[object]) -> list[float]:
    return [validate_score(s, i) for i, s in enumerate(scores)]


def compute_global_statistics(scores: Sequence[float]) -> StatisticsReport | InsufficientData:
    """Descriptive statistics, density curve and histogram for all scores."""
    values = validate_scores(scores)
    if not values:
        return InsufficientData()

    stats = describe(values)
    lo, hi = plot_bounds(stats)

    return StatisticsReport(
        count=stats.count,
        mean=stats.mean,
        median=stats.median,
        variance=stats.variance,
        standard_deviation=stats.standard_deviation,
        coefficient_of_variation=stats.coefficient_of_variation,
        max_score=stats.max_score,
        min_score=stats.min_score,
        gaussian_curve=gaussian_curve(stats),
        histogram=build_histogram(values, lo, hi),
        interpretation=interpret_variability(stats),
    )


def compute_user_trend(
    user_id: str,
    records: Sequence[ScoreRecord],
) -> UserTrendReport | UserInsufficientData:
    """Trend report for one user.

    Records are re-sorted newest first, so callers need not pre-sort, but
    every record must belong to ``user_id``.
    """
    if not user_id:
        raise InvalidScoreError("user_id must not be empty")

    for i, record in enumerate(records):
        if record.user_id != user_id:
            raise InvalidScoreError(
                f"Record at position {i} belongs to user '{record.user_id}', expected '{user_id}'"
            )
        validate_score(record.score, i)

    return analyze_user_trend(user_id, records)
