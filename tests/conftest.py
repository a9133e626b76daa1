"""Pytest configuration and fixtures."""

from collections.abc import Callable, Generator
from datetime import UTC, datetime
from decimal import Decimal
from pathlib import Path

import pytest

from autoledger.config import reset_settings
from autoledger.core.entities import (
    Expense,
    ExpenseCategory,
    Vehicle,
    VehicleStatus,
)


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Point settings at a throwaway data dir and a fixed reporting zone."""
    monkeypatch.setenv("STORAGE_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("REPORT_TIMEZONE", "UTC")
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def make_expense() -> Callable[..., Expense]:
    """Factory for expenses; amounts may be given as strings for exactness."""

    def _make(
        amount: str | Decimal = "100.00",
        category: ExpenseCategory = ExpenseCategory.REPAIR,
        vehicle_id: str = "veh-1",
        date: datetime | None = None,
        is_public: bool = False,
        description: str = "Brake pads",
    ) -> Expense:
        return Expense(
            vehicle_id=vehicle_id,
            description=description,
            amount=Decimal(amount),
            date=date or datetime(2024, 3, 1, 12, 0, tzinfo=UTC),
            category=category,
            is_public=is_public,
        )

    return _make


@pytest.fixture
def make_vehicle() -> Callable[..., Vehicle]:
    """Factory for vehicles; sold when a sold price or date is given."""

    def _make(
        reg_number: str = "ABC123",
        purchase_price: str | Decimal = "10000",
        sold_price: str | Decimal | None = None,
        sold_date: datetime | None = None,
        expenses: list[Expense] | None = None,
        status: VehicleStatus | None = None,
        vehicle_id: str | None = None,
        make: str = "Toyota",
        model: str = "Corolla",
    ) -> Vehicle:
        if status is None:
            status = (
                VehicleStatus.SOLD
                if sold_price is not None or sold_date is not None
                else VehicleStatus.AVAILABLE
            )
        fields = {}
        if vehicle_id is not None:
            fields["id"] = vehicle_id
        return Vehicle(
            **fields,
            make=make,
            model=model,
            year=2018,
            reg_number=reg_number,
            purchase_price=Decimal(purchase_price),
            purchase_date=datetime(2024, 1, 10, 9, 0, tzinfo=UTC),
            status=status,
            sold_price=Decimal(sold_price) if sold_price is not None else None,
            sold_date=sold_date,
            expenses=expenses or [],
        )

    return _make
