"""Row <-> entity conversion shared by the SQLite stores."""

import json
from datetime import UTC, datetime
from decimal import Decimal

import aiosqlite

from autoledger.core.entities.dealer import DealerProfile
from autoledger.core.entities.vehicle import (
    Expense,
    ExpenseCategory,
    Vehicle,
    VehicleStatus,
)


def to_db_timestamp(value: datetime) -> str:
    """UTC text with a fixed layout: 2024-12-31T23:59:59.000000+00:00."""
    return value.astimezone(UTC).isoformat(timespec="microseconds")


def to_db_money(value: Decimal) -> str:
    return str(value)


def _money(value: str | None) -> Decimal | None:
    return Decimal(value) if value is not None else None


def _timestamp(value: str | None) -> datetime | None:
    return datetime.fromisoformat(value) if value else None


def row_to_expense(row: aiosqlite.Row) -> Expense:
    """Convert a database row to an Expense entity."""
    return Expense(
        id=row["id"],
        vehicle_id=row["vehicle_id"],
        description=row["description"],
        amount=Decimal(row["amount"]),
        date=datetime.fromisoformat(row["date"]),
        category=ExpenseCategory(row["category"]),
        is_public=bool(row["is_public"]),
        created_at=datetime.fromisoformat(row["created_at"]),
    )


def row_to_vehicle(row: aiosqlite.Row, expenses: list[Expense] | None = None) -> Vehicle:
    """Convert a database row to a Vehicle entity."""
    return Vehicle(
        id=row["id"],
        make=row["make"],
        model=row["model"],
        year=row["year"],
        reg_number=row["reg_number"],
        vin=row["vin"],
        purchase_price=Decimal(row["purchase_price"]),
        purchase_date=datetime.fromisoformat(row["purchase_date"]),
        status=VehicleStatus(row["status"]),
        sold_price=_money(row["sold_price"]),
        sold_date=_timestamp(row["sold_date"]),
        profit_margin=Decimal(row["profit_margin"]),
        images=json.loads(row["images"]) if row["images"] else [],
        expenses=expenses or [],
        created_at=datetime.fromisoformat(row["created_at"]),
        updated_at=datetime.fromisoformat(row["updated_at"]),
    )


def to_db_images(images: list[str]) -> str:
    return json.dumps(images)


def row_to_profile(row: aiosqlite.Row) -> DealerProfile:
    """Convert a database row to the DealerProfile entity."""
    return DealerProfile(
        company_name=row["company_name"],
        address=row["address"],
        phone=row["phone"],
        email=row["email"],
        updated_at=datetime.fromisoformat(row["updated_at"]),
    )
