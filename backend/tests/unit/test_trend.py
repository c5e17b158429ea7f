"""Tests for per-user trend analysis."""

from datetime import datetime, timedelta, timezone

import pytest

from scorestats.analytics.trend import analyze_user_trend, improvement_percent, newest_first
from scorestats.analytics.types import Ok, ScoreRecord, Undefined, UserInsufficientData, UserTrendReport

NOW = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)


def _records(*scores: float, user_id: str = "u1") -> list[ScoreRecord]:
    """Build records newest first: the first score is the most recent."""
    return [
        ScoreRecord(user_id=user_id, score=s, recorded_at=NOW - timedelta(minutes=i))
        for i, s in enumerate(scores)
    ]


class TestImprovementPercent:

    def test_newest_vs_oldest(self) -> None:
        result = improvement_percent(_records(80.0, 50.0))
        assert isinstance(result, Ok)
        assert result.value == pytest.approx(60.0)

    def test_ignores_middle_records(self) -> None:
        result = improvement_percent(_records(40.0, 100.0, 0.5, 80.0))
        assert isinstance(result, Ok)
        assert result.value == pytest.approx(-50.0)

    def test_single_record(self) -> None:
        assert improvement_percent(_records(70.0)) == Undefined("single record")

    def test_zero_baseline(self) -> None:
        assert improvement_percent(_records(30.0, 0.0)) == Undefined("zero baseline")


class TestNewestFirst:

    def test_resorts_oldest_first_input(self) -> None:
        records = _records(3.0, 2.0, 1.0)
        assert newest_first(list(reversed(records))) == records

    def test_ties_keep_input_order(self) -> None:
        a = ScoreRecord(user_id="u1", score=1.0, recorded_at=NOW)
        b = ScoreRecord(user_id="u1", score=2.0, recorded_at=NOW)
        assert newest_first([a, b]) == [a, b]


class TestAnalyzeUserTrend:

    def test_full_report(self) -> None:
        report = analyze_user_trend("u1", _records(80.0, 60.0, 50.0))
        assert isinstance(report, UserTrendReport)
        assert report.user_id == "u1"
        assert report.count == 3
        assert report.mean == pytest.approx(190.0 / 3)
        assert report.max_score == 80.0
        assert report.min_score == 50.0
        assert report.last_score == 80.0
        assert report.improvement_percent == Ok(pytest.approx(60.0))

    def test_unsorted_input(self) -> None:
        records = list(reversed(_records(80.0, 50.0)))
        report = analyze_user_trend("u1", records)
        assert isinstance(report, UserTrendReport)
        assert report.last_score == 80.0
        assert isinstance(report.improvement_percent, Ok)
        assert report.improvement_percent.value == pytest.approx(60.0)

    def test_single_record(self) -> None:
        report = analyze_user_trend("u1", _records(42.0))
        assert isinstance(report, UserTrendReport)
        assert report.standard_deviation == 0.0
        assert report.last_score == 42.0
        assert report.improvement_percent == Undefined("single record")

    def test_no_records(self) -> None:
        report = analyze_user_trend("ghost", [])
        assert report == UserInsufficientData(user_id="ghost")
        assert report.count == 0
