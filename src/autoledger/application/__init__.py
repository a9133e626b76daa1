"""
Application layer - use cases and DTOs.

Use cases take their stores through the constructor and are the only entry
point for API handlers that write records.
"""

from autoledger.application.dto import (
    CreateExpenseRequest,
    CreateVehicleRequest,
    ErrorResponse,
    MarkSoldRequest,
    ReportResponse,
    UpdateExpenseRequest,
    UpdateVehicleRequest,
    VehicleResponse,
)
from autoledger.application.use_cases import (
    AddExpenseUseCase,
    CreateVehicleUseCase,
    MarkVehicleSoldUseCase,
    UpdateExpenseUseCase,
    UpdateVehicleUseCase,
)

__all__ = [
    "CreateVehicleRequest",
    "UpdateVehicleRequest",
    "MarkSoldRequest",
    "CreateExpenseRequest",
    "UpdateExpenseRequest",
    "VehicleResponse",
    "ReportResponse",
    "ErrorResponse",
    "CreateVehicleUseCase",
    "UpdateVehicleUseCase",
    "MarkVehicleSoldUseCase",
    "AddExpenseUseCase",
    "UpdateExpenseUseCase",
]
