"""Update Expense Use Case."""

from dataclasses import dataclass

from autoledger.application.dto.requests import UpdateExpenseRequest
from autoledger.config import get_logger
from autoledger.core.entities.vehicle import Expense, resolve_is_public
from autoledger.core.exceptions import ExpenseNotFoundError
from autoledger.core.interfaces.vehicle_store import IExpenseStore

logger = get_logger(__name__)


@dataclass
class UpdateExpenseResult:
    """Result of updating an expense."""

    expense: Expense


class UpdateExpenseUseCase:
    """Replace an expense's fields, keeping its id, vehicle and creation time."""

    def __init__(self, expense_store: IExpenseStore):
        self._expense_store = expense_store

    async def execute(self, expense_id: str, request: UpdateExpenseRequest) -> UpdateExpenseResult:
        """Execute update expense use case."""
        logger.info("update_expense_started", expense_id=expense_id)

        current = await self._expense_store.get_expense(expense_id)
        if current is None:
            raise ExpenseNotFoundError(expense_id)

        expense = Expense(
            id=current.id,
            vehicle_id=current.vehicle_id,
            description=request.description,
            amount=request.amount,
            date=request.date,
            category=request.category,
            is_public=resolve_is_public(request.category, request.is_public),
            created_at=current.created_at,
        )
        expense = await self._expense_store.update_expense(expense)

        logger.info("update_expense_complete", expense_id=expense_id)
        return UpdateExpenseResult(expense=expense)
