"""
Application factory for FastAPI.

The factory pattern allows for:
- Easy testing with custom settings
- Clear separation of app creation from route definitions

Usage:
    from mesoplan.backend.main import create_app
    from mesoplan.backend.settings import Settings

    # Default app (uses get_settings())
    app = create_app()

    # Test app with custom settings
    test_settings = Settings(environment="test", _env_file=None)
    test_app = create_app(settings=test_settings)
"""

import logging
from typing import Optional

import sentry_sdk
from fastapi import FastAPI

from mesoplan.backend.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure a FastAPI application instance.

    Args:
        settings: Optional Settings instance. If not provided, uses get_settings()
                  which loads from environment variables.

    Returns:
        Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    # Initialize Sentry for error tracking
    _init_sentry(settings)

    app = FastAPI(
        title="Mesoplan API",
        description="Mesocycle plan generation and validation",
        version="0.1.0",
    )

    _include_routers(app)

    return app


def _init_sentry(settings: Settings) -> None:
    """Initialize Sentry SDK if DSN is configured."""
    if settings.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.environment,
            traces_sample_rate=0.1,
        )
        logger.info("Sentry initialized for mesoplan")


def _include_routers(app: FastAPI) -> None:
    """Include all API routers in the application."""
    from mesoplan.api.routers import generation_router, health_router, plans_router

    # Health router (no prefix - /health at root)
    app.include_router(health_router)

    app.include_router(generation_router)
    app.include_router(plans_router)


# Default app instance for uvicorn
# This allows: uvicorn mesoplan.backend.main:app --reload
app = create_app()
