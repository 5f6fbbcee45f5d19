"""
CORS handling for every route.

Preflight requests are answered directly with 200 and an empty body. Every
other response, including errors, gets the same CORS headers.
"""

import os
from typing import Iterable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

DEFAULT_ALLOWED_ORIGINS = (
    "http://localhost:5173,http://localhost:5174,https://balagh-admin.vercel.app"
)
ALLOW_METHODS = "GET,POST,PUT,DELETE,OPTIONS"
ALLOW_HEADERS = "Content-Type, Authorization, X-Requested-With"
MAX_AGE = "86400"


def get_allowed_origins() -> list[str]:
    raw = os.getenv("CORS_ALLOWED_ORIGINS", DEFAULT_ALLOWED_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def cors_headers(origin: str | None, allowed_origins: Iterable[str]) -> dict[str, str]:
    """Echo an allow-listed origin, otherwise allow any origin."""
    headers = {
        "Access-Control-Allow-Methods": ALLOW_METHODS,
        "Access-Control-Allow-Headers": ALLOW_HEADERS,
        "Access-Control-Max-Age": MAX_AGE,
    }
    if origin and origin in allowed_origins:
        headers["Access-Control-Allow-Origin"] = origin
        headers["Access-Control-Allow-Credentials"] = "true"
        headers["Vary"] = "Origin"
    else:
        headers["Access-Control-Allow-Origin"] = "*"
    return headers


class CORSHeadersMiddleware(BaseHTTPMiddleware):
    """Answer preflights and stamp CORS headers on all responses."""

    def __init__(self, app, allowed_origins: Iterable[str] | None = None):
        super().__init__(app)
        self.allowed_origins = frozenset(
            allowed_origins if allowed_origins is not None else get_allowed_origins()
        )

    async def dispatch(self, request: Request, call_next) -> Response:
        if request.method == "OPTIONS":
            response = Response(status_code=200)
        else:
            response = await call_next(request)

        headers = cors_headers(request.headers.get("origin"), self.allowed_origins)
        for name, value in headers.items():
            response.headers[name] = value
        return response
