"""Core interfaces (ports) for dependency injection."""

from autoledger.core.interfaces.dealer_profile_store import IDealerProfileStore
from autoledger.core.interfaces.vehicle_store import IExpenseStore, IVehicleStore

__all__ = [
    "IVehicleStore",
    "IExpenseStore",
    "IDealerProfileStore",
]
