"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic. Used by main.py; no business
logic here, only wiring of infrastructure (logging, cache, tracing,
DB engine dispose).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from sportsdb.core.config import get_settings
from sportsdb.infrastructure.persistence import database
from sportsdb.shared.telemetry.logging import setup_logging
from sportsdb.shared.telemetry.telemetry import (
    SearchTelemetry,
    get_telemetry,
    set_telemetry,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup order: logging, Redis cache (if enabled), tracing (if enabled).
    Shutdown order: cache disconnect, tracing shutdown, SQL engine dispose.
    """
    settings = get_settings()

    # ---- Startup ----
    setup_logging()

    if settings.redis_enabled:
        from sportsdb.infrastructure.cache.redis_cache import CacheService

        cache = CacheService()
        await cache.connect()
        app.state.cache = cache
    else:
        app.state.cache = None

    if settings.telemetry_enabled:
        telemetry = SearchTelemetry.from_settings(settings)
        telemetry.start(app, engine=database.get_engine())
        set_telemetry(telemetry)

    logger.info("%s %s started", settings.app_name, settings.app_version)

    yield

    # ---- Shutdown ----
    if getattr(app.state, "cache", None) is not None:
        await app.state.cache.disconnect()

    telemetry_instance = get_telemetry()
    if telemetry_instance is not None:
        telemetry_instance.shutdown()
        set_telemetry(None)

    if database.engine is not None:
        await database.engine.dispose()
        logger.info("Database engine disposed")
