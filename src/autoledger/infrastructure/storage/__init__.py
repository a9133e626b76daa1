"""Storage infrastructure implementations."""

from autoledger.infrastructure.storage.sqlite import (
    ConnectionPool,
    SQLiteExpenseStore,
    SQLiteVehicleStore,
    StoreHandle,
    open_store,
)

__all__ = [
    "ConnectionPool",
    "SQLiteExpenseStore",
    "SQLiteVehicleStore",
    "StoreHandle",
    "open_store",
]
