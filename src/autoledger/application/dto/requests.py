"""Request DTOs for API endpoints.

Pydantic v2 models for API request validation.
These are the ONLY contracts between API and use cases.

Inputs are never coerced: numeric strings are not numbers, numbers are not
timestamps, timestamps must carry an offset and booleans must be booleans.
"""

from datetime import UTC, datetime
from decimal import Decimal
from typing import Annotated, Any

from pydantic import (
    AfterValidator,
    AwareDatetime,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    EmailStr,
    Field,
    StrictBool,
    StrictInt,
    StrictStr,
    field_validator,
    model_validator,
)

from autoledger.core.entities.money import to_decimal
from autoledger.core.entities.vehicle import ExpenseCategory

MIN_VEHICLE_YEAR = 1900

# Cent rounding of any accepted amount stays inside the 28-digit Decimal context
MAX_AMOUNT = Decimal("999999999999.99")


def _strict_money(value: Any) -> Decimal:
    if isinstance(value, bool) or not isinstance(value, int | float | Decimal):
        raise ValueError("must be a number")
    return to_decimal(value)


def _strict_timestamp(value: Any) -> Any:
    if isinstance(value, bool | int | float | Decimal):
        raise ValueError("must be an ISO-8601 timestamp with a UTC offset")
    return value


def _positive(value: Decimal) -> Decimal:
    if not value.is_finite():
        raise ValueError("must be a finite number")
    if value <= 0:
        raise ValueError("must be greater than 0")
    if value > MAX_AMOUNT:
        raise ValueError(f"must not exceed {MAX_AMOUNT}")
    return value


def _percentage(value: Decimal) -> Decimal:
    if not value.is_finite() or not 0 <= value <= 100:
        raise ValueError("must be between 0 and 100")
    return value


PositiveMoney = Annotated[Decimal, BeforeValidator(_strict_money), AfterValidator(_positive)]
Percentage = Annotated[Decimal, BeforeValidator(_strict_money), AfterValidator(_percentage)]
Timestamp = Annotated[AwareDatetime, BeforeValidator(_strict_timestamp)]
ImageUrl = Annotated[StrictStr, Field(min_length=1, max_length=2048)]


def _blank_is_none(value: Any) -> Any:
    return None if value == "" else value


ProfileText = Annotated[StrictStr, Field(max_length=200)]
OptionalText = Annotated[ProfileText | None, BeforeValidator(_blank_is_none)]


def _max_vehicle_year() -> int:
    return datetime.now(UTC).year + 1


class _Request(BaseModel):
    model_config = ConfigDict(extra="forbid")


class CreateVehicleRequest(_Request):
    """Request to add a vehicle to inventory."""

    make: StrictStr = Field(..., min_length=1, max_length=100, examples=["Toyota"])
    model: StrictStr = Field(..., min_length=1, max_length=100, examples=["Corolla"])
    year: StrictInt = Field(..., ge=MIN_VEHICLE_YEAR, examples=[2019])
    reg_number: StrictStr = Field(
        ...,
        min_length=1,
        max_length=32,
        description="Registration number, unique across inventory",
        examples=["ABC123"],
    )
    vin: StrictStr | None = Field(default=None, max_length=32)
    purchase_price: PositiveMoney = Field(..., description="Price paid")
    purchase_date: Timestamp = Field(..., description="When the vehicle was bought")
    profit_margin: Percentage = Field(
        default=Decimal("15"),
        description="Target margin in percent over break-even cost",
    )
    images: list[ImageUrl] = Field(
        default_factory=list,
        description="Photo URLs in display order",
    )

    @field_validator("year")
    @classmethod
    def year_not_in_future(cls, v: int) -> int:
        if v > _max_vehicle_year():
            raise ValueError(f"must not be later than {_max_vehicle_year()}")
        return v

    @field_validator("vin")
    @classmethod
    def blank_vin_is_none(cls, v: str | None) -> str | None:
        return v or None


class UpdateVehicleRequest(_Request):
    """Partial update of a vehicle's descriptive fields.

    Status and sale fields cannot be set here; use the sell endpoint.
    """

    make: StrictStr | None = Field(default=None, min_length=1, max_length=100)
    model: StrictStr | None = Field(default=None, min_length=1, max_length=100)
    year: StrictInt | None = Field(default=None, ge=MIN_VEHICLE_YEAR)
    reg_number: StrictStr | None = Field(default=None, min_length=1, max_length=32)
    vin: StrictStr | None = Field(default=None, max_length=32)
    purchase_price: PositiveMoney | None = None
    purchase_date: Timestamp | None = None
    profit_margin: Percentage | None = None
    images: list[ImageUrl] | None = None

    @field_validator("year")
    @classmethod
    def year_not_in_future(cls, v: int | None) -> int | None:
        if v is not None and v > _max_vehicle_year():
            raise ValueError(f"must not be later than {_max_vehicle_year()}")
        return v

    @model_validator(mode="after")
    def required_fields_not_null(self) -> "UpdateVehicleRequest":
        for name in self.model_fields_set:
            if name != "vin" and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self

    def changes(self) -> dict[str, Any]:
        """Only the fields the caller actually sent."""
        updates = self.model_dump(exclude_unset=True)
        if "vin" in updates:
            updates["vin"] = updates["vin"] or None
        return updates


class MarkSoldRequest(_Request):
    """Request to record the sale of an available vehicle."""

    sold_price: PositiveMoney = Field(..., description="Sale price")
    sold_date: Timestamp = Field(..., description="When the sale happened")


class CreateExpenseRequest(_Request):
    """Request to record an expense against a vehicle.

    When ``is_public`` is omitted, repairs are public and everything else
    is private.
    """

    description: StrictStr = Field(..., min_length=1, max_length=500)
    amount: PositiveMoney
    date: Timestamp
    category: ExpenseCategory
    is_public: StrictBool | None = None


class UpdateExpenseRequest(CreateExpenseRequest):
    """Replace an expense's fields. The owning vehicle never changes."""


class UpdateDealerProfileRequest(_Request):
    """Replace the dealer profile. Omitted or blank optional fields are cleared."""

    company_name: StrictStr = Field(..., min_length=1, max_length=200, examples=["Bitgard"])
    address: OptionalText = None
    phone: OptionalText = None
    email: Annotated[EmailStr | None, BeforeValidator(_blank_is_none)] = None

    @field_validator("company_name")
    @classmethod
    def company_name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v
