"""
Rate limiting configuration and setup.

Uses slowapi to enforce a per-client limit on every API route. The limit
is applied through a router-level dependency, and the limiter is built per
application so each app instance keeps its own counters.
"""

from typing import Callable

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

from promotion_tracking.core.config import Settings
HTTP_429 = 429


def build_limiter(settings: Settings) -> Limiter:
    """Create a limiter applying ``settings.rate_limit_default`` to all routes."""
    return Limiter(
        key_func=get_remote_address,
        default_limits=[settings.rate_limit_default],
        enabled=settings.rate_limit_enabled,
    )


def build_rate_limit_dependency(limiter: Limiter, limit: str) -> Callable[[Request], None]:
    """Return a FastAPI dependency that counts the request against ``limit``.

    Counters are kept per client address and per request path. A request
    over the limit raises RateLimitExceeded before the endpoint runs.
    """

    @limiter.limit(limit)
    def enforce_rate_limit(request: Request) -> None:
        return None

    return enforce_rate_limit


def rate_limit_exceeded_handler(
    _request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Handle rate limit exceeded errors with a clean JSON response.

    Args:
        _request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 JSON response with a clear error message.
    """
    return JSONResponse(
        status_code=HTTP_429,
        content={"error": "Rate limit exceeded", "detail": str(exc.detail)},
    )
