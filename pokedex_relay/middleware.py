"""Response header middleware for the relay."""

from __future__ import annotations

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "X-XSS-Protection": "1; mode=block",
}


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Stamp the hardening headers and the allowed origin on every response.

    ``CORSMiddleware`` only answers origins that ask; this middleware
    advertises the configured origin on every response, errors included.
    """

    def __init__(self, app: ASGIApp, allowed_origin: str) -> None:
        super().__init__(app)
        self.allowed_origin = allowed_origin

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        response = await call_next(request)
        response.headers["Access-Control-Allow-Origin"] = self.allowed_origin
        response.headers["Access-Control-Allow-Credentials"] = "true"
        for name, value in SECURITY_HEADERS.items():
            response.headers[name] = value
        return response
