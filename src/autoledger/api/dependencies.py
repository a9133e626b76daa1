"""
Dependency injection container for FastAPI.

Stores and the report assembler are built once in the application lifespan
and kept on ``app.state``; these providers hand them to route handlers.
Tests replace them through ``app.dependency_overrides``.
"""

from fastapi import Depends, Request

from autoledger.application.use_cases import (
    AddExpenseUseCase,
    CreateVehicleUseCase,
    MarkVehicleSoldUseCase,
    UpdateDealerProfileUseCase,
    UpdateExpenseUseCase,
    UpdateVehicleUseCase,
)
from autoledger.core.interfaces import IDealerProfileStore, IExpenseStore, IVehicleStore
from autoledger.core.services import ReportAssembler
from autoledger.infrastructure.storage.sqlite import StoreHandle


def get_store_handle(request: Request) -> StoreHandle:
    """Get the store handle opened at startup."""
    return request.app.state.store


# Store dependencies
def get_vehicle_store(handle: StoreHandle = Depends(get_store_handle)) -> IVehicleStore:
    """Get vehicle store."""
    return handle.vehicles


def get_expense_store(handle: StoreHandle = Depends(get_store_handle)) -> IExpenseStore:
    """Get expense store."""
    return handle.expenses


def get_dealer_profile_store(
    handle: StoreHandle = Depends(get_store_handle),
) -> IDealerProfileStore:
    """Get dealer profile store."""
    return handle.profiles


def get_report_assembler(request: Request) -> ReportAssembler:
    """Get report assembler."""
    return request.app.state.assembler


# Use case dependencies
def get_create_vehicle_use_case(
    vehicles: IVehicleStore = Depends(get_vehicle_store),
) -> CreateVehicleUseCase:
    return CreateVehicleUseCase(vehicles)


def get_update_vehicle_use_case(
    vehicles: IVehicleStore = Depends(get_vehicle_store),
) -> UpdateVehicleUseCase:
    return UpdateVehicleUseCase(vehicles)


def get_mark_vehicle_sold_use_case(
    vehicles: IVehicleStore = Depends(get_vehicle_store),
) -> MarkVehicleSoldUseCase:
    return MarkVehicleSoldUseCase(vehicles)


def get_add_expense_use_case(
    vehicles: IVehicleStore = Depends(get_vehicle_store),
    expenses: IExpenseStore = Depends(get_expense_store),
) -> AddExpenseUseCase:
    return AddExpenseUseCase(vehicles, expenses)


def get_update_expense_use_case(
    expenses: IExpenseStore = Depends(get_expense_store),
) -> UpdateExpenseUseCase:
    return UpdateExpenseUseCase(expenses)


def get_update_dealer_profile_use_case(
    profiles: IDealerProfileStore = Depends(get_dealer_profile_store),
) -> UpdateDealerProfileUseCase:
    return UpdateDealerProfileUseCase(profiles)
