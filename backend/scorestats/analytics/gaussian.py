"""Discretized normal density curve fitted to a score distribution.

Pure math.  The curve is used as an overlay for the histogram, so it spans
the same padded ``[lo, hi]`` range.
"""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass

from scorestats.analytics.descriptive import plot_bounds
from scorestats.analytics.types import DescriptiveStats, GaussianPoint, Ok, Undefined

CURVE_POINTS = 51


@dataclass(frozen=True)
class GaussianCurve:
    """Lazy, restartable sequence of ``CURVE_POINTS`` density samples.

    Iterating twice yields the same points; nothing is materialized until
    iteration.
    """

    mean: float
    variance: float
    lo: int
    hi: int
    points: int = CURVE_POINTS

    @property
    def step(self) -> float:
        return (self.hi - self.lo) / (self.points - 1)

    def density(self, x: float) -> float:
        std_dev = math.sqrt(self.variance)
        exponent = -((x - self.mean) ** 2) / (2 * self.variance)
        return math.exp(exponent) / (std_dev * math.sqrt(2 * math.pi))

    def __len__(self) -> int:
        return self.points

    def __iter__(self) -> Iterator[GaussianPoint]:
        last = self.points - 1
        for i in range(self.points):
            # lo/hi are integers, so the endpoints come out exact
            x = self.lo + (self.hi - self.lo) * i / last
            yield GaussianPoint(x=x, y=self.density(x))


def gaussian_curve(stats: DescriptiveStats) -> Ok[GaussianCurve] | Undefined:
    """Fit a normal density to the sample mean and standard deviation.

    Identical scores have zero variance and no density curve.
    """
    if stats.variance == 0:
        return Undefined("zero variance")

    lo, hi = plot_bounds(stats)
    return Ok(GaussianCurve(mean=stats.mean, variance=stats.variance, lo=lo, hi=hi))
