"""
FastAPI application factory.

Creates and configures the main application instance.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from autoledger.api.middleware import (
    ErrorHandlerMiddleware,
    LoggingMiddleware,
    setup_exception_handlers,
)
from autoledger.api.routes import (
    expenses_router,
    health_router,
    reports_router,
    settings_router,
    vehicles_router,
)
from autoledger.config import configure_logging, get_logger, get_settings
from autoledger.core.services import ReportAssembler
from autoledger.infrastructure.storage.sqlite import open_store

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application lifespan handler.

    Runs migrations and opens the store on startup; closes it on shutdown.
    """
    settings = get_settings()
    configure_logging()

    logger.info(
        "application_starting",
        host=settings.api.host,
        port=settings.api.port,
        debug=settings.api.debug,
        report_timezone=settings.report.timezone or "local",
    )

    try:
        store = await open_store(
            settings.storage.db_path,
            pool_size=settings.storage.pool_size,
            busy_timeout=settings.storage.busy_timeout,
        )
    except Exception as e:
        logger.error("database_init_failed", error=str(e))
        raise

    app.state.store = store
    app.state.assembler = ReportAssembler(store.vehicles, tz=settings.report.tzinfo())
    logger.info("application_started")

    try:
        yield
    finally:
        logger.info("application_stopping")
        await store.close()
        logger.info("application_stopped")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    app = FastAPI(
        title="AutoLedger API",
        description="Used-vehicle inventory, expense tracking and tax reports",
        version=settings.app_version,
        docs_url="/docs" if settings.api.debug else None,
        redoc_url="/redoc" if settings.api.debug else None,
        lifespan=lifespan,
    )

    # Add middleware
    app.add_middleware(ErrorHandlerMiddleware)
    app.add_middleware(LoggingMiddleware)

    # CORS
    if settings.api.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.api.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    setup_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(vehicles_router)
    app.include_router(expenses_router)
    app.include_router(reports_router)
    app.include_router(settings_router)

    return app
