"""Tests for the equal-width frequency histogram."""

import pytest

from scorestats.analytics.descriptive import describe, plot_bounds
from scorestats.analytics.histogram import DEFAULT_BIN_COUNT, bin_index, build_histogram


class TestBinIndex:

    def test_top_edge_clamped_to_last_bin(self) -> None:
        assert bin_index(100.0, 0.0, 10.0, 10) == 9

    def test_lower_edge_inclusive(self) -> None:
        assert bin_index(10.0, 0.0, 10.0, 10) == 1

    def test_zero_width_goes_to_last_bin(self) -> None:
        assert bin_index(5.0, 5.0, 0.0, 10) == 9


class TestBuildHistogram:

    def test_ten_bins_by_default(self) -> None:
        assert DEFAULT_BIN_COUNT == 10
        assert len(build_histogram([1, 2, 3], 0, 10)) == 10

    def test_max_value_lands_in_last_bin(self) -> None:
        scores = [float(v) for v in range(0, 101, 10)]
        bins = build_histogram(scores, 0, 100)
        assert [b.count for b in bins] == [1, 1, 1, 1, 1, 1, 1, 1, 1, 2]
        assert sum(b.count for b in bins) == 11

    def test_range_labels(self) -> None:
        bins = build_histogram([0.0, 100.0], 0, 100)
        assert bins[0].range == "0.0-10.0"
        assert bins[9].range == "90.0-100.0"
        assert (bins[3].start, bins[3].end) == (30.0, 40.0)

    def test_frequency_is_percentage(self) -> None:
        bins = build_histogram([1.0, 1.0, 1.0, 9.0], 0, 10)
        assert bins[1].frequency == pytest.approx(75.0)
        assert bins[9].frequency == pytest.approx(25.0)
        assert sum(b.frequency for b in bins) == pytest.approx(100.0)

    def test_constant_integer_scores(self) -> None:
        bins = build_histogram([5.0, 5.0, 5.0], 5, 5)
        assert sum(b.count for b in bins) == 3
        assert bins[-1].count == 3

    def test_empty(self) -> None:
        assert build_histogram([], 0, 10) == []

    @pytest.mark.parametrize(
        "scores",
        [
            [1, 2, 3, 4, 5],
            [0.1, 0.2, 0.30000000000000004, 99.99],
            [-40.5, -3.0, 0.0, 17.25, 17.25, 88.0],
            [3.3] * 7,
            [1e-9, 2e-9, 1e6],
        ],
    )
    def test_counts_sum_to_n(self, scores: list[float]) -> None:
        lo, hi = plot_bounds(describe(scores))
        bins = build_histogram(scores, lo, hi)
        assert sum(b.count for b in bins) == len(scores)
