from fastapi import APIRouter

from scorestats.api.v1 import health, scores

api_router = APIRouter()

# Health (no prefix)
api_router.include_router(health.router)

# V1 endpoints
api_router.include_router(scores.router)
