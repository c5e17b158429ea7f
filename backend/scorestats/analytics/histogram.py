"""Pure math: equal-width frequency histogram over the padded score range."""

from __future__ import annotations

import math
from collections.abc import Sequence

from scorestats.analytics.types import HistogramBin

DEFAULT_BIN_COUNT = 10


def bin_index(score: float, lo: float, bin_width: float, bin_count: int) -> int:
    """Bucket for ``score``; values at the top edge are clamped into the last bin."""
    if bin_width == 0:
        return bin_count - 1
    return min(math.floor((score - lo) / bin_width), bin_count - 1)


def build_histogram(
    scores: Sequence[float],
    lo: float,
    hi: float,
    bin_count: int = DEFAULT_BIN_COUNT,
) -> list[HistogramBin]:
    """Count scores into ``bin_count`` bins spanning ``[lo, hi]``.

    The bin counts always sum to ``len(scores)``.
    """
    n = len(scores)
    if n == 0:
        return []

    bin_width = (hi - lo) / bin_count
    counts = [0] * bin_count
    for score in scores:
        counts[bin_index(score, lo, bin_width, bin_count)] += 1

    bins: list[HistogramBin] = []
    for i, count in enumerate(counts):
        start = lo + i * bin_width
        bins.append(
            HistogramBin(
                start=start,
                end=start + bin_width,
                count=count,
                frequency=count / n * 100,
            )
        )
    return bins
