"""
Centralized error handlers for FastAPI.

Maps domain errors to HTTP responses with a single switch on ErrorKind.
No stack traces or internal details are exposed to clients beyond the
operation message a domain error carries.
All error responses use the ErrorResponse schema and carry the security
headers, including the catch-all 500 that bypasses the middleware stack.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from promotion_tracking.domain.promotion.errors import (
    ErrorKind,
    InvalidPromotionError,
    PromotionDomainError,
)
from promotion_tracking.shared.security.headers import SECURE_HEADERS

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_404 = 404
HTTP_500 = 500

STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: HTTP_404,
    ErrorKind.INVALID: HTTP_400,
    ErrorKind.INTERNAL: HTTP_500,
}


def _error_response(status_code: int, error: str, detail: str | None = None) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, str | None] = {"error": error}
    if detail:
        body["detail"] = detail
    return JSONResponse(status_code=status_code, content=body, headers=SECURE_HEADERS)


def status_for(exc: PromotionDomainError) -> int:
    """Return the HTTP status for a domain error's kind."""
    return STATUS_BY_KIND.get(exc.kind, HTTP_500)


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(PromotionDomainError)
    async def handle_promotion_domain(
        _request: Request, exc: PromotionDomainError
    ) -> JSONResponse:
        """Switch on the error kind to pick the response status."""
        status_code = status_for(exc)
        if status_code >= HTTP_500:
            cause = exc.__cause__
            logger.error(
                "Promotion operation failed: %s (%s)",
                exc.message,
                type(cause).__name__ if cause else "no cause",
            )
        else:
            logger.warning("Promotion request rejected: %s", exc.message)
        return _error_response(status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Undecodable or invalid request input never reaches the service."""
        logger.warning("Invalid request input: %d error(s)", len(exc.errors()))
        return _error_response(HTTP_400, InvalidPromotionError.default_message)

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, "Internal server error")
