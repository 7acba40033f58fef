"""Application lifespan: startup and shutdown.

Wiring of infrastructure only (telemetry, SQL engine dispose); no business
logic here.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from community_search.core.config import get_settings
from community_search.infrastructure.persistence import database
from community_search.shared.telemetry.logging import setup_logging
from community_search.shared.telemetry.telemetry import (
    TelemetryConfig,
    get_telemetry,
    set_telemetry,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup: logging, telemetry (if enabled) with FastAPI and SQLAlchemy
    instrumentation. Shutdown: telemetry flush, SQL engine dispose.
    """
    settings = get_settings()
    setup_logging()

    if settings.telemetry_enabled:
        telemetry = TelemetryConfig(
            service_name=settings.app_name,
            service_version=settings.app_version,
            enabled=True,
            environment=settings.telemetry_environment,
        )
        telemetry.setup_telemetry(
            exporter_type=settings.telemetry_exporter,
            otlp_endpoint=settings.telemetry_otlp_endpoint,
            sample_rate=settings.telemetry_sample_rate,
        )
        set_telemetry(telemetry)
        telemetry.instrument_fastapi(app)
        if settings.database_url:
            database.get_session_factory()
            telemetry.instrument_sqlalchemy(database.engine)
        logger.info("Telemetry initialized")

    if not settings.database_url:
        logger.warning("DATABASE_URL is not set; search endpoints will answer 503")

    yield

    telemetry_instance = get_telemetry()
    if telemetry_instance is not None:
        telemetry_instance.shutdown()
        set_telemetry(None)
        logger.info("Telemetry shutdown complete")

    if database.engine is not None:
        await database.dispose_engine()
        logger.info("Database engine disposed")
