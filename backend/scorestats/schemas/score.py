from datetime import datetime

from pydantic import Field, field_validator

from scorestats.analytics.engine import MAX_ABS_SCORE
from scorestats.schemas.common import CamelModel, PaginatedResponse


class ScoreCreate(CamelModel):
    user_id: str = Field(..., min_length=1, max_length=128)
    score: float = Field(..., strict=True, allow_inf_nan=False, ge=-MAX_ABS_SCORE, le=MAX_ABS_SCORE)

    @field_validator("user_id")
    @classmethod
    def user_id_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("userId must not be blank")
        return v


class ScoreResponse(CamelModel):
    id: str
    user_id: str
    score: float
    recorded_at: datetime

    model_config = {"from_attributes": True}


class ScoreListResponse(PaginatedResponse):
    items: list[ScoreResponse]
