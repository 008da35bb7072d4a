"""Employees API — FastAPI application factory."""


import logging
import sys

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings
from app.core.exceptions import register_exception_handlers
from app.core.response import PAGINATION_HEADER
from app.middleware.request_logging import RequestLoggingMiddleware
from app.routers.companies import router as companies_router
from app.routers.employees import router as employees_router
from app.schemas.common import HealthResponse


def _configure_logging() -> None:
    """Set up structured logging for the application."""
    level = logging.DEBUG if settings.is_development else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    # Quiet noisy libraries
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


def create_app() -> FastAPI:
    _configure_logging()

    app = FastAPI(
        title=settings.app_name,
        version="1.0.0",
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
    )

    # --- CORS (X-Pagination must be readable by browser clients) ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=[PAGINATION_HEADER],
    )

    # --- Request logging ---
    app.add_middleware(RequestLoggingMiddleware)

    # --- Global exception handlers ---
    register_exception_handlers(app)

    # --- API routes (/api/*) ---
    app.include_router(companies_router, prefix="/api")
    app.include_router(employees_router, prefix="/api")

    # --- Health check ---
    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health():
        return HealthResponse(app=settings.app_name, env=settings.app_env)

    return app


app = create_app()
