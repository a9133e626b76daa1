"""Abstract interfaces for vehicle and expense storage."""

from abc import ABC, abstractmethod
from datetime import datetime
from decimal import Decimal

from autoledger.core.entities.vehicle import Expense, Vehicle, VehicleStatus


class IVehicleStore(ABC):
    """Interface for vehicle persistence. Loaded vehicles carry their expenses."""

    @abstractmethod
    async def create_vehicle(self, vehicle: Vehicle) -> Vehicle:
        """Create a vehicle. Raises DuplicateRegistrationError on a taken reg number."""
        pass

    @abstractmethod
    async def get_vehicle(self, vehicle_id: str) -> Vehicle | None:
        """Get vehicle by ID with its expenses."""
        pass

    @abstractmethod
    async def get_vehicle_by_reg(self, reg_number: str) -> Vehicle | None:
        """Get vehicle by registration number (case-sensitive)."""
        pass

    @abstractmethod
    async def update_vehicle(self, vehicle: Vehicle) -> Vehicle:
        """Update descriptive fields; status and sale fields are left untouched."""
        pass

    @abstractmethod
    async def mark_sold(
        self, vehicle_id: str, sold_price: Decimal, sold_date: datetime
    ) -> Vehicle:
        """Atomically move an AVAILABLE vehicle to SOLD."""
        pass

    @abstractmethod
    async def delete_vehicle(self, vehicle_id: str) -> bool:
        """Delete a vehicle and all of its expenses."""
        pass

    @abstractmethod
    async def list_vehicles(
        self,
        status: VehicleStatus | None = None,
        limit: int = 100,
        offset: int = 0,
    ) -> list[Vehicle]:
        """List vehicles, newest first."""
        pass

    @abstractmethod
    async def list_sold_between(self, start: datetime, end: datetime) -> list[Vehicle]:
        """
        List SOLD vehicles whose sold date lies in [start, end].

        Both bounds are inclusive. Ordered by sold date ascending.
        """
        pass


class IExpenseStore(ABC):
    """Interface for expense persistence."""

    @abstractmethod
    async def add_expense(self, expense: Expense) -> Expense:
        """Record an expense against an existing vehicle."""
        pass

    @abstractmethod
    async def get_expense(self, expense_id: str) -> Expense | None:
        """Get expense by ID."""
        pass

    @abstractmethod
    async def update_expense(self, expense: Expense) -> Expense:
        """Update an expense in place."""
        pass

    @abstractmethod
    async def delete_expense(self, expense_id: str) -> bool:
        """Delete an expense."""
        pass

    @abstractmethod
    async def list_expenses(
        self, vehicle_id: str, public_only: bool = False
    ) -> list[Expense]:
        """List a vehicle's expenses ordered by date."""
        pass
