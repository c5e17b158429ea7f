"""Test fixtures for ScoreStats."""

from collections.abc import AsyncGenerator
from datetime import datetime, timedelta, timezone

import pytest
from httpx import ASGITransport, AsyncClient
from uuid_extensions import uuid7

from scorestats.analytics.types import ScoreRecord
from scorestats.api.v1.scores import get_statistics_service
from scorestats.core.exceptions import NotFoundError
from scorestats.main import app
from scorestats.models.score import Score
from scorestats.services.statistics_service import StatisticsService

BASE_TIME = datetime(2025, 1, 1, tzinfo=timezone.utc)


class InMemoryStatisticsService(StatisticsService):
    """StatisticsService backed by a list instead of Postgres.

    Only the storage methods are replaced; analytics go through the real
    engine path.
    """

    def __init__(self) -> None:
        super().__init__(db=None)  # type: ignore[arg-type]
        self.rows: list[Score] = []

    def add_row(self, user_id: str, score: float) -> Score:
        row = Score(
            id=str(uuid7()),
            user_id=user_id,
            score=score,
            created_at=BASE_TIME + timedelta(seconds=len(self.rows)),
        )
        self.rows.append(row)
        return row

    def _newest_first(self, user_id: str | None = None) -> list[Score]:
        rows = [r for r in self.rows if user_id is None or r.user_id == user_id]
        return sorted(rows, key=lambda r: r.created_at, reverse=True)

    async def save_score(self, user_id: str, score: float) -> Score:
        return self.add_row(user_id, score)

    async def get_score(self, score_id: str) -> Score:
        for row in self.rows:
            if row.id == score_id:
                return row
        raise NotFoundError("Score", score_id)

    async def list_scores(
        self,
        offset: int = 0,
        limit: int = 20,
        user_id: str | None = None,
    ) -> tuple[int, list[Score]]:
        rows = self._newest_first(user_id)
        return len(rows), rows[offset:offset + limit]

    async def load_all_scores(self) -> list[float]:
        return [r.score for r in self.rows]

    async def load_user_records(self, user_id: str) -> list[ScoreRecord]:
        return [r.to_record() for r in self._newest_first(user_id)]


@pytest.fixture
def score_service() -> InMemoryStatisticsService:
    return InMemoryStatisticsService()


@pytest.fixture
async def client(score_service: InMemoryStatisticsService) -> AsyncGenerator[AsyncClient, None]:
    app.dependency_overrides[get_statistics_service] = lambda: score_service
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()
