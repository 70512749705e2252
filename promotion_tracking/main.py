"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (health and promotions)
- Error handlers (centralized domain-to-HTTP mapping)
- Security middleware (headers, rate limiting)
- Logging configuration
- Database engine lifecycle (built at startup, disposed at shutdown)

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI
from slowapi.errors import RateLimitExceeded

from promotion_tracking.core.config import Settings, settings as default_settings
from promotion_tracking.infrastructure.database import build_engine, create_schema
from promotion_tracking.interfaces.health import router as health_router
from promotion_tracking.interfaces.promotion.router import router as promotion_router
from promotion_tracking.shared.errors.handlers import register_error_handlers
from promotion_tracking.shared.logging import configure_logging
from promotion_tracking.shared.security.headers import SecurityHeadersMiddleware
from promotion_tracking.shared.security.rate_limiting import (
    build_limiter,
    build_rate_limit_dependency,
    rate_limit_exceeded_handler,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: own the database engine for the process lifetime."""
    settings: Settings = app.state.settings
    engine = build_engine(settings)
    try:
        if settings.auto_create_schema:
            create_schema(engine)
        app.state.engine = engine
        logger.info("%s %s started", settings.project_name, settings.version)
        yield
    finally:
        engine.dispose()
        logger.info("Database engine disposed")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and security middleware.
    This is the composition root of the application.

    Args:
        settings: Settings to use instead of the environment-loaded ones.

    Returns:
        A fully configured FastAPI application instance.
    """
    settings = settings or default_settings
    configure_logging(level=settings.log_level, sql_echo=settings.db_echo)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # --- Rate Limiting ---
    limiter = build_limiter(settings)
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    rate_limited = [
        Depends(build_rate_limit_dependency(limiter, settings.rate_limit_default))
    ]

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix=settings.api_prefix, dependencies=rate_limited)
    app.include_router(promotion_router, prefix=settings.api_prefix, dependencies=rate_limited)

    return app


app = create_app()
