from datetime import datetime

from sqlalchemy import Float, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from scorestats.analytics.types import ScoreRecord
from scorestats.models.base import Base


class Score(Base):
    """A submitted quiz/game score. Rows are never updated after insert."""

    __tablename__ = "scores"
    # per-user history is read newest first
    __table_args__ = (Index("ix_scores_user_id_created_at", "user_id", "created_at"),)

    user_id: Mapped[str] = mapped_column(String(128), nullable=False)
    score: Mapped[float] = mapped_column(Float, nullable=False)

    @property
    def recorded_at(self) -> datetime:
        return self.created_at

    def to_record(self) -> ScoreRecord:
        return ScoreRecord(user_id=self.user_id, score=self.score, recorded_at=self.created_at)
