"""
Custom exception handlers for consistent API error responses.

Boundary validation failures are reported as client errors that name the
offending parameter; no partial result is returned.
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse
import logging

from modules.analytics.exceptions import (
    AnalyticsBaseException,
    handle_analytics_exception,
)

logger = logging.getLogger(__name__)


async def handle_analytics_error(
    request: Request, exc: AnalyticsBaseException
) -> JSONResponse:
    """Convert analytics validation errors to a 400 response"""
    logger.warning(
        f"{exc.error_code} at {request.url.path}: {exc.message}",
        extra={"details": exc.details},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            **handle_analytics_exception(exc),
            "path": str(request.url.path),
        },
    )


async def handle_value_error(request: Request, exc: ValueError) -> JSONResponse:
    """Convert ValueError to consistent API response"""
    logger.warning(f"ValueError at {request.url.path}: {str(exc)}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": {
                "code": "VALIDATION_ERROR",
                "message": str(exc),
                "details": {},
            },
            "path": str(request.url.path),
        },
    )


def register_exception_handlers(app):
    """Register all exception handlers with the FastAPI app"""
    app.add_exception_handler(AnalyticsBaseException, handle_analytics_error)
    app.add_exception_handler(ValueError, handle_value_error)
