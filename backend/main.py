"""
Workout Roulette API application factory.

create_app() wires Sentry, CORS and the health/exercises/workouts routers
around a Settings instance. Tests build their own app with test settings
and override repositories through app.dependency_overrides.

Usage:
    # Served by uvicorn (see backend/__main__.py)
    uvicorn backend.main:app --port 8001

    # In tests
    app = create_app(settings=Settings(environment="test", _env_file=None))
"""

import logging
from typing import Optional

import sentry_sdk
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the API app.

    Args:
        settings: Settings to use; defaults to the cached environment settings

    Returns:
        FastAPI app with all routers mounted
    """
    if settings is None:
        settings = get_settings()

    _init_sentry(settings)

    app = FastAPI(
        title="Workout Roulette API",
        description="Randomized, time-bounded workout generation and exercise catalog",
        version="1.0.0",
    )

    _configure_cors(app, settings)
    _include_routers(app)

    logger.info(
        f"Workout Roulette API created (environment={settings.environment}, "
        f"catalog_backend={settings.catalog_backend})"
    )
    return app


def _init_sentry(settings: Settings) -> None:
    """Report errors to Sentry when a DSN is set."""
    if settings.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.environment,
            traces_sample_rate=0.1,
            profiles_sample_rate=0.1,
            enable_tracing=True,
        )
        logger.info("Sentry initialized for workout-roulette-api")


def _configure_cors(app: FastAPI, settings: Settings) -> None:
    """Allow local dev clients plus the configured origins."""
    trusted_origins = [
        "http://localhost:3000",
        "http://localhost:8081",
    ]
    trusted_origins.extend(settings.cors_origins_list)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=trusted_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def _include_routers(app: FastAPI) -> None:
    """Mount the routers; imported here so settings load first."""
    from api.routers import (
        exercises_router,
        health_router,
        workouts_router,
    )

    for router in (health_router, exercises_router, workouts_router):
        app.include_router(router)


# Module-level app for uvicorn
app = create_app()
