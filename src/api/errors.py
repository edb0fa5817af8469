"""Structured error responses and exception handlers for consistent API error handling."""

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from src.core.errors import ErrorKind, OnboardingError

logger = structlog.get_logger()


class ErrorResponse(BaseModel):
    """Standardized error response schema."""

    error: str
    message: str


def create_error_response(kind: ErrorKind, message: str) -> JSONResponse:
    """Create standardized error response with the status code of its kind."""
    body = ErrorResponse(error=kind.value, message=message)
    return JSONResponse(status_code=kind.status_code, content=body.model_dump())


async def onboarding_error_handler(request: Request, exc: OnboardingError) -> JSONResponse:
    return create_error_response(exc.kind, exc.message)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("request_validation_failed", path=request.url.path, errors=str(exc.errors()))
    return create_error_response(ErrorKind.INVALID_INPUT, "Request body must be a JSON object with a repoUrl string")


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unexpected_error", path=request.url.path, error=str(exc))
    return create_error_response(
        ErrorKind.INTERNAL_ERROR,
        str(exc) or "An unexpected error occurred while analyzing the repository.",
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(OnboardingError, onboarding_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_error_handler)
