"""Dealer profile entity."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from autoledger.core.entities.vehicle import ensure_utc, utc_now


class DealerProfile(BaseModel):
    """The dealership's own details, shown on public verification pages."""

    company_name: str
    address: str | None = None
    phone: str | None = None
    email: str | None = None
    updated_at: datetime = Field(default_factory=utc_now)

    @field_validator("updated_at")
    @classmethod
    def normalize_timestamp(cls, v: datetime) -> datetime:
        return ensure_utc(v)
