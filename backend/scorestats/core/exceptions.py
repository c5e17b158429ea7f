from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class ScoreStatsError(Exception):
    """Base exception for ScoreStats."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class NotFoundError(ScoreStatsError):
    def __init__(self, resource: str, resource_id: str) -> None:
        super().__init__(
            message=f"{resource} with id '{resource_id}' not found",
            status_code=404,
        )


class ValidationError(ScoreStatsError):
    def __init__(self, message: str) -> None:
        super().__init__(message=message, status_code=422)


async def scorestats_error_handler(request: Request, exc: ScoreStatsError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message, "type": type(exc).__name__},
    )


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail, "type": "HTTPException"},
    )


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # "input" may hold NaN/Infinity, "ctx" may hold exception objects; neither is JSON-safe
    errors = [{k: v for k, v in err.items() if k not in ("input", "ctx")} for err in exc.errors()]
    return JSONResponse(
        status_code=422,
        content={"error": errors, "type": "RequestValidationError"},
    )
