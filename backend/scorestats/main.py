from contextlib import asynccontextmanager
from collections.abc import AsyncGenerator

import structlog
from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError
from starlette.middleware.cors import CORSMiddleware

from scorestats.api.router import api_router
from scorestats.config import settings
from scorestats.core.exceptions import (
    ScoreStatsError,
    http_exception_handler,
    request_validation_error_handler,
    scorestats_error_handler,
)
from scorestats.core.logging import setup_logging
from scorestats.core.middleware import RequestIdMiddleware, TimingMiddleware
from scorestats.db.session import close_db, init_db

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    setup_logging(debug=settings.debug)
    logger.info("starting_scorestats", app_name=settings.app_name, debug=settings.debug)
    await init_db()
    yield
    await close_db()
    logger.info("shutting_down_scorestats")


def create_app() -> FastAPI:
    app = FastAPI(
        title="ScoreStats API",
        description="Quiz score analytics: descriptive statistics, density curve, histogram, user trends",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Middleware (order matters: last added = first executed)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(TimingMiddleware)
    app.add_middleware(RequestIdMiddleware)

    # Exception handlers
    app.add_exception_handler(ScoreStatsError, scorestats_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(HTTPException, http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)  # type: ignore[arg-type]

    # Routes
    app.include_router(api_router, prefix="/api/v1")

    return app


app = create_app()
