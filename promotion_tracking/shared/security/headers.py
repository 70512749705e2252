"""
Secure HTTP headers middleware.

Adds security-related headers to every response, including error
responses produced by the exception handlers. Promotion payloads are
never cacheable by intermediaries.
"""

from typing import Mapping, Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

SECURE_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Content-Security-Policy": "default-src 'self'",
    "Cache-Control": "no-store",
}


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Set a fixed block of security headers on every outgoing response.

    Headers already set by the endpoint are overwritten.
    """

    def __init__(self, app: ASGIApp, headers: Optional[Mapping[str, str]] = None) -> None:
        super().__init__(app)
        self._headers = dict(SECURE_HEADERS if headers is None else headers)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)
        response.headers.update(self._headers)
        return response
