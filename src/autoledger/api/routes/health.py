"""
Health check endpoint.
"""

import time

import aiosqlite
from fastapi import APIRouter, Depends

from autoledger.api.dependencies import get_store_handle
from autoledger.application.dto.responses import HealthResponse
from autoledger.config import get_logger, get_settings
from autoledger.infrastructure.storage.sqlite import StoreHandle
from autoledger.infrastructure.storage.sqlite.migrations import get_current_version

logger = get_logger(__name__)

router = APIRouter(tags=["health"])

# Track startup time
_start_time = time.time()


@router.get("/health", response_model=HealthResponse)
async def health_check(
    store: StoreHandle = Depends(get_store_handle),
) -> HealthResponse:
    """
    Service status, uptime and database reachability.

    Reports "unhealthy" rather than failing when SQLite cannot be queried.
    """
    database = "ok"
    schema_version = None
    try:
        async with store.pool.acquire() as conn:
            await conn.execute("SELECT 1")
            schema_version = await get_current_version(conn)
    except aiosqlite.Error as e:
        logger.warning("health_database_unreachable", error=str(e))
        database = "error"

    return HealthResponse(
        status="healthy" if database == "ok" else "unhealthy",
        version=get_settings().app_version,
        uptime_seconds=time.time() - _start_time,
        database=database,
        schema_version=schema_version,
    )
