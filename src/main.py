"""
Production FastAPI Application

Hotel booking API: database engines, DI wiring, tracing and logging setup.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import SERVICE_NAME, create_app
from src.platform.config.di import (
    cleanup as cleanup_container,
    container,
    setup as setup_container,
)
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.database.orm_db_setting import dispose_engines, get_engine
from src.platform.logging.loguru_io import Logger
from src.platform.logging.loguru_io_config import intercept_std_logging
from src.platform.observability.tracing import TracingConfig


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    Logger.base.info('🚀 [Hotel Booking] Starting up...')

    intercept_std_logging()

    tracing = TracingConfig(service_name=SERVICE_NAME)
    tracing.setup()
    Logger.base.info('📊 [Hotel Booking] OpenTelemetry tracing configured')

    setup_container()
    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Hotel Booking] Dependency injection wired')

    tracing.instrument_sqlalchemy(engines=[get_engine(), get_engine(read_only=True)])
    Logger.base.info('🗄️  [Hotel Booking] Database engines ready + instrumented')

    Logger.base.info('✅ [Hotel Booking] Ready to serve requests')

    yield

    Logger.base.info('🛑 [Hotel Booking] Shutting down...')

    await dispose_engines()
    Logger.base.info('🗄️  [Hotel Booking] Database engines disposed')

    # Flush remaining spans
    tracing.shutdown()

    container.unwire()
    cleanup_container()

    Logger.base.info('👋 [Hotel Booking] Shutdown complete')


app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
