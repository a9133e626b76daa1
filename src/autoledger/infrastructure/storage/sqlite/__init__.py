"""SQLite storage implementations."""

from dataclasses import dataclass
from pathlib import Path

from autoledger.config import get_logger
from autoledger.infrastructure.storage.sqlite.connection import ConnectionPool
from autoledger.infrastructure.storage.sqlite.dealer_profile_store import SQLiteDealerProfileStore
from autoledger.infrastructure.storage.sqlite.expense_store import SQLiteExpenseStore
from autoledger.infrastructure.storage.sqlite.migrations import initialize_database
from autoledger.infrastructure.storage.sqlite.vehicle_store import SQLiteVehicleStore

logger = get_logger(__name__)


@dataclass
class StoreHandle:
    """An open connection pool and the stores bound to it."""

    pool: ConnectionPool
    vehicles: SQLiteVehicleStore
    expenses: SQLiteExpenseStore
    profiles: SQLiteDealerProfileStore

    async def close(self) -> None:
        await self.pool.close()


async def open_store(
    db_path: Path,
    pool_size: int = 5,
    busy_timeout: int = 30000,
    migrate: bool = True,
) -> StoreHandle:
    """
    Open the record store at db_path.

    Applies pending migrations first unless migrate is False. The caller
    owns the returned handle and must close it.
    """
    if migrate:
        await initialize_database(db_path)

    pool = ConnectionPool(db_path, pool_size=pool_size, busy_timeout=busy_timeout)
    await pool.initialize()
    logger.info("store_opened", db_path=str(db_path))
    return StoreHandle(
        pool=pool,
        vehicles=SQLiteVehicleStore(pool),
        expenses=SQLiteExpenseStore(pool),
        profiles=SQLiteDealerProfileStore(pool),
    )


__all__ = [
    "ConnectionPool",
    "SQLiteDealerProfileStore",
    "SQLiteExpenseStore",
    "SQLiteVehicleStore",
    "StoreHandle",
    "open_store",
]
