"""Add Expense Use Case: records a cost against a vehicle."""

from dataclasses import dataclass

from autoledger.application.dto.requests import CreateExpenseRequest
from autoledger.config import get_logger
from autoledger.core.entities.vehicle import Expense, resolve_is_public
from autoledger.core.exceptions import VehicleNotFoundError
from autoledger.core.interfaces.vehicle_store import IExpenseStore, IVehicleStore

logger = get_logger(__name__)


@dataclass
class AddExpenseResult:
    """Result of adding an expense."""

    expense: Expense


class AddExpenseUseCase:
    """Attach an expense to an existing vehicle."""

    def __init__(self, vehicle_store: IVehicleStore, expense_store: IExpenseStore):
        self._vehicle_store = vehicle_store
        self._expense_store = expense_store

    async def execute(self, vehicle_id: str, request: CreateExpenseRequest) -> AddExpenseResult:
        """Execute add expense use case."""
        logger.info(
            "add_expense_started",
            vehicle_id=vehicle_id,
            category=request.category.value,
        )

        vehicle = await self._vehicle_store.get_vehicle(vehicle_id)
        if vehicle is None:
            raise VehicleNotFoundError(vehicle_id)

        expense = Expense(
            vehicle_id=vehicle_id,
            description=request.description,
            amount=request.amount,
            date=request.date,
            category=request.category,
            is_public=resolve_is_public(request.category, request.is_public),
        )
        expense = await self._expense_store.add_expense(expense)

        logger.info("add_expense_complete", expense_id=expense.id, is_public=expense.is_public)
        return AddExpenseResult(expense=expense)
