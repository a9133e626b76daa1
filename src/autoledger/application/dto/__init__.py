"""Request and response DTOs."""

from autoledger.application.dto.requests import (
    CreateExpenseRequest,
    CreateVehicleRequest,
    MarkSoldRequest,
    UpdateDealerProfileRequest,
    UpdateExpenseRequest,
    UpdateVehicleRequest,
)
from autoledger.application.dto.responses import (
    DealerProfileResponse,
    ErrorResponse,
    ExpenseListResponse,
    ExpenseResponse,
    HealthResponse,
    MessageResponse,
    PublicExpenseResponse,
    ReportResponse,
    VehicleListResponse,
    VehicleResponse,
    VehicleSummaryResponse,
    VerificationResponse,
)

__all__ = [
    # Requests
    "CreateVehicleRequest",
    "UpdateVehicleRequest",
    "MarkSoldRequest",
    "CreateExpenseRequest",
    "UpdateExpenseRequest",
    "UpdateDealerProfileRequest",
    # Responses
    "VehicleResponse",
    "VehicleListResponse",
    "ExpenseResponse",
    "ExpenseListResponse",
    "PublicExpenseResponse",
    "VerificationResponse",
    "VehicleSummaryResponse",
    "DealerProfileResponse",
    "MessageResponse",
    "ReportResponse",
    "HealthResponse",
    "ErrorResponse",
]
