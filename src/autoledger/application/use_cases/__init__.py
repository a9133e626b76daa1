"""Application use cases."""

from autoledger.application.use_cases.add_expense import AddExpenseResult, AddExpenseUseCase
from autoledger.application.use_cases.create_vehicle import (
    CreateVehicleResult,
    CreateVehicleUseCase,
)
from autoledger.application.use_cases.mark_vehicle_sold import (
    MarkVehicleSoldResult,
    MarkVehicleSoldUseCase,
)
from autoledger.application.use_cases.update_dealer_profile import (
    UpdateDealerProfileResult,
    UpdateDealerProfileUseCase,
)
from autoledger.application.use_cases.update_expense import (
    UpdateExpenseResult,
    UpdateExpenseUseCase,
)
from autoledger.application.use_cases.update_vehicle import (
    UpdateVehicleResult,
    UpdateVehicleUseCase,
)

__all__ = [
    "CreateVehicleUseCase",
    "CreateVehicleResult",
    "UpdateVehicleUseCase",
    "UpdateVehicleResult",
    "MarkVehicleSoldUseCase",
    "MarkVehicleSoldResult",
    "AddExpenseUseCase",
    "AddExpenseResult",
    "UpdateExpenseUseCase",
    "UpdateExpenseResult",
    "UpdateDealerProfileUseCase",
    "UpdateDealerProfileResult",
]
