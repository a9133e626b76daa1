"""Expense endpoints.

Expenses are created and listed under their vehicle and addressed by their
own ID for updates and deletion.
"""

from fastapi import APIRouter, Depends, status

from autoledger.api.dependencies import (
    get_add_expense_use_case,
    get_expense_store,
    get_update_expense_use_case,
    get_vehicle_store,
)
from autoledger.application.dto.requests import CreateExpenseRequest, UpdateExpenseRequest
from autoledger.application.dto.responses import (
    ErrorResponse,
    ExpenseListResponse,
    ExpenseResponse,
    MessageResponse,
)
from autoledger.application.use_cases import AddExpenseUseCase, UpdateExpenseUseCase
from autoledger.core.exceptions import ExpenseNotFoundError, VehicleNotFoundError
from autoledger.core.interfaces import IExpenseStore, IVehicleStore

router = APIRouter(prefix="/api", tags=["expenses"])


@router.post(
    "/vehicles/{vehicle_id}/expenses",
    response_model=ExpenseResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)
async def add_expense(
    vehicle_id: str,
    request: CreateExpenseRequest,
    use_case: AddExpenseUseCase = Depends(get_add_expense_use_case),
) -> ExpenseResponse:
    """Record an expense against a vehicle."""
    result = await use_case.execute(vehicle_id, request)
    return ExpenseResponse.from_entity(result.expense)


@router.get(
    "/vehicles/{vehicle_id}/expenses",
    response_model=ExpenseListResponse,
    responses={404: {"model": ErrorResponse}},
)
async def list_expenses(
    vehicle_id: str,
    public_only: bool = False,
    vehicles: IVehicleStore = Depends(get_vehicle_store),
    expenses: IExpenseStore = Depends(get_expense_store),
) -> ExpenseListResponse:
    """List a vehicle's expenses, oldest first."""
    if await vehicles.get_vehicle(vehicle_id) is None:
        raise VehicleNotFoundError(vehicle_id)

    items = await expenses.list_expenses(vehicle_id, public_only=public_only)
    return ExpenseListResponse(
        vehicle_id=vehicle_id,
        expenses=[ExpenseResponse.from_entity(e) for e in items],
        total=len(items),
    )


@router.patch(
    "/expenses/{expense_id}",
    response_model=ExpenseResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)
async def update_expense(
    expense_id: str,
    request: UpdateExpenseRequest,
    use_case: UpdateExpenseUseCase = Depends(get_update_expense_use_case),
) -> ExpenseResponse:
    """Replace an expense's fields."""
    result = await use_case.execute(expense_id, request)
    return ExpenseResponse.from_entity(result.expense)


@router.delete(
    "/expenses/{expense_id}",
    response_model=MessageResponse,
    responses={404: {"model": ErrorResponse}},
)
async def delete_expense(
    expense_id: str,
    store: IExpenseStore = Depends(get_expense_store),
) -> MessageResponse:
    """Delete an expense."""
    if not await store.delete_expense(expense_id):
        raise ExpenseNotFoundError(expense_id)
    return MessageResponse(message="Expense deleted successfully.")
