"""
FastAPI application for the Balagh email backend.

Run locally with `python main.py`; serverless platforms import `app`.
"""

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.cors import CORSHeadersMiddleware
from api.responses import error_response
from api.routes import register_routes

load_dotenv()

logger = logging.getLogger(__name__)


async def http_exception_handler(request, exc: StarletteHTTPException):
    if exc.status_code == 405:
        return error_response(405, "Method not allowed")
    return error_response(exc.status_code, str(exc.detail))


def create_app(allowed_origins: list[str] | None = None) -> FastAPI:
    """Create and configure the application."""
    app = FastAPI(title="Balagh Email Backend", version="1.0.0")

    app.add_middleware(CORSHeadersMiddleware, allowed_origins=allowed_origins)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    register_routes(app)
    return app


app = create_app()
