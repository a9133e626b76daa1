"""Vehicle inventory and expense domain entities."""

from datetime import UTC, datetime
from decimal import Decimal
from enum import Enum
from uuid import uuid4

from pydantic import BaseModel, Field, field_validator

from autoledger.core.entities.money import Money


def utc_now() -> datetime:
    return datetime.now(UTC)


def new_id() -> str:
    return str(uuid4())


def ensure_utc(value: datetime | None) -> datetime | None:
    """Normalize an aware timestamp to UTC; naive timestamps are rejected."""
    if value is None:
        return None
    if value.tzinfo is None or value.utcoffset() is None:
        raise ValueError("timestamp must carry a UTC offset")
    return value.astimezone(UTC)


class VehicleStatus(str, Enum):
    """Inventory status of a vehicle."""

    AVAILABLE = "AVAILABLE"
    SOLD = "SOLD"


class ExpenseCategory(str, Enum):
    """Expense categories, in report column order."""

    REPAIR = "REPAIR"
    BROKER_FEE = "BROKER_FEE"
    TRAVEL = "TRAVEL"
    DOCUMENTATION = "DOCUMENTATION"
    OTHER = "OTHER"


def resolve_is_public(category: ExpenseCategory, is_public: bool | None) -> bool:
    """Repairs are public unless the caller says otherwise; nothing else is."""
    if is_public is not None:
        return is_public
    return category == ExpenseCategory.REPAIR


class Expense(BaseModel):
    """A cost item owned by exactly one vehicle."""

    id: str = Field(default_factory=new_id)
    vehicle_id: str
    description: str
    amount: Money
    date: datetime
    category: ExpenseCategory
    is_public: bool = False
    created_at: datetime = Field(default_factory=utc_now)

    @field_validator("date", "created_at")
    @classmethod
    def normalize_timestamps(cls, v: datetime) -> datetime:
        return ensure_utc(v)


class Vehicle(BaseModel):
    """
    A unit of inventory.

    Read paths never enforce the SOLD invariant so that a damaged row
    (SOLD without sold price or date) can still be reported on.
    """

    id: str = Field(default_factory=new_id)
    make: str
    model: str
    year: int
    reg_number: str
    vin: str | None = None
    purchase_price: Money
    purchase_date: datetime
    status: VehicleStatus = VehicleStatus.AVAILABLE
    sold_price: Money | None = None
    sold_date: datetime | None = None
    profit_margin: Money = Decimal("15")
    images: list[str] = Field(default_factory=list)
    expenses: list[Expense] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @field_validator("purchase_date", "sold_date", "created_at", "updated_at")
    @classmethod
    def normalize_timestamps(cls, v: datetime | None) -> datetime | None:
        return ensure_utc(v)

    @property
    def label(self) -> str:
        """Display label used on report lines."""
        return f"{self.make} {self.model}"

    @property
    def is_sold(self) -> bool:
        return self.status == VehicleStatus.SOLD

    @property
    def public_expenses(self) -> list[Expense]:
        return [e for e in self.expenses if e.is_public]
