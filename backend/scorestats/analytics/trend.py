"""Per-user trend: descriptive stats plus newest-vs-oldest improvement."""

from __future__ import annotations

from collections.abc import Sequence

from scorestats.analytics.descriptive import describe, percent_ratio
from scorestats.analytics.types import (
    Ratio,
    ScoreRecord,
    Undefined,
    UserInsufficientData,
    UserTrendReport,
)


def newest_first(records: Sequence[ScoreRecord]) -> list[ScoreRecord]:
    """Order records by ``recorded_at`` descending.

    The sort is stable, so records sharing a timestamp keep the order the
    storage layer returned them in.
    """
    return sorted(records, key=lambda r: r.recorded_at, reverse=True)


def improvement_percent(ordered: Sequence[ScoreRecord]) -> Ratio:
    """Percentage change from the oldest score to the newest one.

    ``ordered`` must be newest first.  This is a point-to-point comparison,
    not a fitted trend line.
    """
    if len(ordered) < 2:
        return Undefined("single record")

    last_score = ordered[0].score
    oldest_score = ordered[-1].score
    return percent_ratio(last_score - oldest_score, oldest_score, "zero baseline")


def analyze_user_trend(
    user_id: str,
    records: Sequence[ScoreRecord],
) -> UserTrendReport | UserInsufficientData:
    if not records:
        return UserInsufficientData(user_id=user_id)

    ordered = newest_first(records)
    stats = describe([r.score for r in ordered])

    return UserTrendReport(
        user_id=user_id,
        count=stats.count,
        mean=stats.mean,
        standard_deviation=stats.standard_deviation,
        max_score=stats.max_score,
        min_score=stats.min_score,
        last_score=ordered[0].score,
        improvement_percent=improvement_percent(ordered),
    )
