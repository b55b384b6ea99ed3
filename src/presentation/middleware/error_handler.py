"""Error handling middleware and exception handlers."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
import structlog

from src.domain.exceptions import (
    DomainException,
    InvalidPurchaseRequestException,
    ProfileStoreUnavailableException,
)
from .request_context import get_request_id

logger = structlog.get_logger(__name__)


def _error_response(status_code: int, code: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": code,
            "message": message,
            "request_id": get_request_id(),
        },
    )


def error_handler_middleware(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI app.

    Maps domain exceptions to appropriate HTTP responses. Business
    denials never reach these handlers; they are 200 responses.
    """

    @app.exception_handler(InvalidPurchaseRequestException)
    async def invalid_request_handler(
        request: Request,
        exc: InvalidPurchaseRequestException,
    ) -> JSONResponse:
        """Handle invalid request errors."""
        return _error_response(400, exc.code, exc.message)

    @app.exception_handler(ProfileStoreUnavailableException)
    async def profile_store_handler(
        request: Request,
        exc: ProfileStoreUnavailableException,
    ) -> JSONResponse:
        """Handle profile store failures."""
        logger.error(
            "profile_store_unavailable",
            request_id=get_request_id(),
            message=exc.message,
        )
        return _error_response(
            503,
            exc.code,
            "Service temporarily unavailable. Please try again.",
        )

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle generic domain exceptions."""
        logger.warning(
            "domain_exception",
            request_id=get_request_id(),
            code=exc.code,
            message=exc.message,
        )
        return _error_response(400, exc.code, exc.message)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception(
            "unhandled_exception",
            request_id=get_request_id(),
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return _error_response(500, "INTERNAL_ERROR", "An unexpected error occurred.")
