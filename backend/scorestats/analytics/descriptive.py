"""Pure math: population descriptive statistics over a list of scores."""

from __future__ import annotations

import math
import statistics
from collections.abc import Sequence

from scorestats.analytics.types import DescriptiveStats, Interpretation, Ok, Ratio, Undefined

LOW_VARIABILITY_CV = 15.0
MODERATE_VARIABILITY_CV = 30.0


def percent_ratio(numerator: float, denominator: float, reason: str) -> Ratio:
    """``numerator / denominator * 100``, or Undefined when the denominator is zero.

    A quotient too large to represent (tiny denominator) is also Undefined.
    """
    if denominator == 0:
        return Undefined(reason)
    value = numerator / denominator * 100
    if not math.isfinite(value):
        return Undefined("ratio overflow")
    return Ok(value)


def describe(scores: Sequence[float]) -> DescriptiveStats:
    """Compute population statistics (divisor n, not n-1).

    Raises ValueError on an empty sequence; callers check for the
    insufficient-data case before getting here.
    """
    n = len(scores)
    if n == 0:
        raise ValueError("describe() requires at least one score")

    mean = statistics.fmean(scores)
    variance = float(statistics.pvariance(scores))
    std_dev = math.sqrt(variance)

    return DescriptiveStats(
        count=n,
        mean=mean,
        median=float(statistics.median(scores)),
        variance=variance,
        standard_deviation=std_dev,
        coefficient_of_variation=percent_ratio(std_dev, mean, "zero mean"),
        max_score=max(scores),
        min_score=min(scores),
    )


def interpret_variability(stats: DescriptiveStats) -> Interpretation:
    """Label dispersion from the coefficient of variation.

    A zero or vanishing mean leaves CV undefined: any spread at all counts
    as high variability, and an all-zero collection counts as low.
    """
    cv = stats.coefficient_of_variation
    if isinstance(cv, Undefined):
        return Interpretation.HIGH if stats.standard_deviation > 0 else Interpretation.LOW

    if cv.value < LOW_VARIABILITY_CV:
        return Interpretation.LOW
    if cv.value < MODERATE_VARIABILITY_CV:
        return Interpretation.MODERATE
    return Interpretation.HIGH


def plot_bounds(stats: DescriptiveStats) -> tuple[int, int]:
    """Integer ``(lo, hi)`` range shared by the density curve and the histogram.

    The observed range is padded by one standard deviation on each side.
    """
    lo = math.floor(stats.min_score - stats.standard_deviation)
    hi = math.ceil(stats.max_score + stats.standard_deviation)
    return lo, hi
