"""Score storage + analytics orchestration.

Load from DB → hand a materialized collection to the pure analytics engine
→ return its report.  The engine never touches the session.
"""

from __future__ import annotations

import uuid

import structlog
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from scorestats.analytics.engine import InvalidScoreError, compute_global_statistics, compute_user_trend
from scorestats.analytics.types import (
    InsufficientData,
    ScoreRecord,
    StatisticsReport,
    UserInsufficientData,
    UserTrendReport,
)
from scorestats.core.exceptions import NotFoundError, ValidationError
from scorestats.models.score import Score

logger = structlog.get_logger()


class StatisticsService:
    """Persists scores and computes statistics over them."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def save_score(self, user_id: str, score: float) -> Score:
        record = Score(user_id=user_id, score=score)
        self.db.add(record)
        await self.db.flush()
        await self.db.refresh(record)
        logger.info("score_saved", score_id=record.id, user_id=user_id, score=score)
        return record

    async def get_score(self, score_id: str) -> Score:
        # ids are uuids; anything else cannot match a row and would fail in the driver
        try:
            uuid.UUID(score_id)
        except ValueError:
            raise NotFoundError("Score", score_id) from None
        result = await self.db.execute(select(Score).where(Score.id == score_id))
        record = result.scalar_one_or_none()
        if not record:
            raise NotFoundError("Score", score_id)
        return record

    async def list_scores(
        self,
        offset: int = 0,
        limit: int = 20,
        user_id: str | None = None,
    ) -> tuple[int, list[Score]]:
        """Page through scores, newest first."""
        query = select(Score)
        count_query = select(func.count(Score.id))
        if user_id:
            query = query.where(Score.user_id == user_id)
            count_query = count_query.where(Score.user_id == user_id)

        total = (await self.db.execute(count_query)).scalar_one()
        result = await self.db.execute(
            query.order_by(Score.created_at.desc(), Score.id.desc()).offset(offset).limit(limit)
        )
        return total, list(result.scalars().all())

    async def load_all_scores(self) -> list[float]:
        result = await self.db.execute(select(Score.score))
        return list(result.scalars().all())

    async def load_user_records(self, user_id: str) -> list[ScoreRecord]:
        """A user's records, newest first."""
        result = await self.db.execute(
            select(Score)
            .where(Score.user_id == user_id)
            .order_by(Score.created_at.desc(), Score.id.desc())
        )
        return [row.to_record() for row in result.scalars().all()]

    async def global_statistics(self) -> StatisticsReport | InsufficientData:
        scores = await self.load_all_scores()

        try:
            report = compute_global_statistics(scores)
        except InvalidScoreError as e:
            logger.error("global_statistics_invalid_input", error=str(e))
            raise ValidationError(str(e)) from e

        if isinstance(report, InsufficientData):
            logger.info("global_statistics_insufficient_data")
        else:
            logger.info(
                "global_statistics_computed",
                count=report.count,
                interpretation=report.interpretation.value,
            )
        return report

    async def user_trend(self, user_id: str) -> UserTrendReport | UserInsufficientData:
        records = await self.load_user_records(user_id)

        try:
            report = compute_user_trend(user_id, records)
        except InvalidScoreError as e:
            logger.error("user_trend_invalid_input", user_id=user_id, error=str(e))
            raise ValidationError(str(e)) from e

        logger.info("user_trend_computed", user_id=user_id, count=report.count)
        return report
