"""Tests for the Score ORM mapping."""

from datetime import datetime, timezone

from scorestats.analytics.types import ScoreRecord
from scorestats.models.score import Score


class TestScoreModel:

    def test_user_history_index(self) -> None:
        indexes = {ix.name: [c.name for c in ix.columns] for ix in Score.__table__.indexes}
        assert indexes == {"ix_scores_user_id_created_at": ["user_id", "created_at"]}

    def test_to_record(self) -> None:
        when = datetime(2025, 2, 1, tzinfo=timezone.utc)
        row = Score(id="s-1", user_id="alice", score=12.5, created_at=when)
        assert row.recorded_at == when
        assert row.to_record() == ScoreRecord(user_id="alice", score=12.5, recorded_at=when)
