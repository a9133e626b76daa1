"""Response DTOs for API endpoints.

Pydantic v2 models for API response serialization.
These are the ONLY contracts between use cases and API layer.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from autoledger.core.entities.dealer import DealerProfile
from autoledger.core.entities.money import Money
from autoledger.core.entities.report import AnnualReport, MonthlyReport, VehicleSummary
from autoledger.core.entities.vehicle import (
    Expense,
    ExpenseCategory,
    Vehicle,
    VehicleStatus,
)


class ExpenseResponse(BaseModel):
    """Expense response DTO."""

    id: str
    vehicle_id: str
    description: str
    amount: Money
    date: datetime
    category: ExpenseCategory
    is_public: bool
    created_at: datetime

    @classmethod
    def from_entity(cls, expense: Expense) -> "ExpenseResponse":
        return cls(**expense.model_dump())


class VehicleResponse(BaseModel):
    """Vehicle response DTO, expenses included."""

    id: str
    make: str
    model: str
    year: int
    reg_number: str
    vin: str | None = None
    purchase_price: Money
    purchase_date: datetime
    status: VehicleStatus
    sold_price: Money | None = None
    sold_date: datetime | None = None
    profit_margin: Money
    images: list[str] = Field(default_factory=list)
    expenses: list[ExpenseResponse] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, vehicle: Vehicle) -> "VehicleResponse":
        data = vehicle.model_dump(exclude={"expenses"})
        return cls(
            **data,
            expenses=[ExpenseResponse.from_entity(e) for e in vehicle.expenses],
        )


class VehicleListResponse(BaseModel):
    """Paginated vehicle list."""

    vehicles: list[VehicleResponse]
    total: int
    limit: int
    offset: int


class ExpenseListResponse(BaseModel):
    vehicle_id: str
    expenses: list[ExpenseResponse]
    total: int


class PublicExpenseResponse(BaseModel):
    """An expense as shown to buyers: no amount."""

    description: str
    date: datetime
    category: ExpenseCategory


class VerificationResponse(BaseModel):
    """Buyer-facing history of a vehicle.

    Only expenses flagged public are listed, newest first.
    """

    id: str
    make: str
    model: str
    year: int
    reg_number: str
    vin: str | None = None
    status: VehicleStatus
    company_name: str | None = Field(
        default=None, description="Dealer vouching for the history, None before setup"
    )
    public_expenses: list[PublicExpenseResponse] = Field(default_factory=list)

    @classmethod
    def from_entity(
        cls, vehicle: Vehicle, profile: DealerProfile | None = None
    ) -> "VerificationResponse":
        public = sorted(vehicle.public_expenses, key=lambda e: e.date, reverse=True)
        return cls(
            id=vehicle.id,
            make=vehicle.make,
            model=vehicle.model,
            year=vehicle.year,
            reg_number=vehicle.reg_number,
            vin=vehicle.vin,
            status=vehicle.status,
            company_name=profile.company_name if profile else None,
            public_expenses=[
                PublicExpenseResponse(
                    description=e.description, date=e.date, category=e.category
                )
                for e in public
            ],
        )


class DealerProfileResponse(BaseModel):
    """Dealer profile response DTO."""

    company_name: str
    address: str | None = None
    phone: str | None = None
    email: str | None = None
    updated_at: datetime

    @classmethod
    def from_entity(cls, profile: DealerProfile) -> "DealerProfileResponse":
        return cls(**profile.model_dump())


class VehicleSummaryResponse(VehicleSummary):
    """Cost position of a vehicle."""


class MessageResponse(BaseModel):
    """Plain acknowledgement for write endpoints without a body to return."""

    success: bool = True
    message: str


class ReportResponse(BaseModel):
    """Report envelope: data on success, a single message on failure."""

    success: bool
    data: AnnualReport | MonthlyReport | None = None
    message: str | None = None


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    uptime_seconds: float
    database: str = Field(..., description="ok or error")
    schema_version: str | None = None


class ErrorResponse(BaseModel):
    """Standardized error response DTO.

    Every error response includes:
    - error_code: machine-readable code (e.g. VEHICLE_NOT_FOUND)
    - message: human-readable description
    - hint: suggested recovery action
    - path: request path that triggered the error
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error description")
    hint: str | None = Field(default=None, description="Suggested recovery action")
    detail: str | None = Field(default=None, description="Additional details")
    path: str | None = Field(default=None, description="Request path")
    timestamp: datetime = Field(default_factory=datetime.now)
