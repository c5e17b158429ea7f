"""Score submission and analytics endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from scorestats.analytics.types import InsufficientData, UserInsufficientData
from scorestats.db.session import get_db
from scorestats.schemas.score import ScoreCreate, ScoreListResponse, ScoreResponse
from scorestats.schemas.statistics import (
    InsufficientDataResponse,
    StatisticsResponse,
    UserInsufficientDataResponse,
    UserTrendResponse,
)
from scorestats.services.statistics_service import StatisticsService

router = APIRouter(prefix="/scores", tags=["scores"])


def get_statistics_service(db: AsyncSession = Depends(get_db)) -> StatisticsService:
    return StatisticsService(db)


@router.post("", response_model=ScoreResponse, status_code=status.HTTP_201_CREATED)
async def save_score(
    body: ScoreCreate,
    service: StatisticsService = Depends(get_statistics_service),
) -> ScoreResponse:
    record = await service.save_score(body.user_id, body.score)
    return ScoreResponse.model_validate(record)


@router.get("", response_model=ScoreListResponse)
async def list_scores(
    offset: int = Query(default=0, ge=0),
    limit: int = Query(default=20, ge=1, le=100),
    service: StatisticsService = Depends(get_statistics_service),
) -> ScoreListResponse:
    total, records = await service.list_scores(offset=offset, limit=limit)
    items = [ScoreResponse.model_validate(r) for r in records]
    return ScoreListResponse(total=total, offset=offset, limit=limit, items=items)


# ---------------------------------------------------------------
# Analytics (declared before /{score_id} so the literal path wins)
# ---------------------------------------------------------------


@router.get(
    "/analytics",
    response_model=StatisticsResponse | InsufficientDataResponse,
)
async def get_statistics(
    service: StatisticsService = Depends(get_statistics_service),
) -> StatisticsResponse | InsufficientDataResponse:
    """Global descriptive statistics, density curve and histogram."""
    report = await service.global_statistics()
    if isinstance(report, InsufficientData):
        return InsufficientDataResponse.from_result(report)
    return StatisticsResponse.from_report(report)


@router.get(
    "/analytics/users/{user_id}",
    response_model=UserTrendResponse | UserInsufficientDataResponse,
)
async def get_user_statistics(
    user_id: str,
    service: StatisticsService = Depends(get_statistics_service),
) -> UserTrendResponse | UserInsufficientDataResponse:
    """Per-user statistics with the newest-vs-oldest improvement percent."""
    report = await service.user_trend(user_id)
    if isinstance(report, UserInsufficientData):
        return UserInsufficientDataResponse.from_result(report)
    return UserTrendResponse.from_report(report)


@router.get("/users/{user_id}", response_model=ScoreListResponse)
async def list_user_scores(
    user_id: str,
    offset: int = Query(default=0, ge=0),
    limit: int = Query(default=20, ge=1, le=100),
    service: StatisticsService = Depends(get_statistics_service),
) -> ScoreListResponse:
    total, records = await service.list_scores(offset=offset, limit=limit, user_id=user_id)
    items = [ScoreResponse.model_validate(r) for r in records]
    return ScoreListResponse(total=total, offset=offset, limit=limit, items=items)


@router.get("/{score_id}", response_model=ScoreResponse)
async def get_score(
    score_id: str,
    service: StatisticsService = Depends(get_statistics_service),
) -> ScoreResponse:
    record = await service.get_score(score_id)
    return ScoreResponse.model_validate(record)
