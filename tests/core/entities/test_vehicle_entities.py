"""Tests for vehicle, expense and money entities."""

from datetime import UTC, datetime, timedelta, timezone
from decimal import Decimal

import pytest
from pydantic import ValidationError as PydanticValidationError

from autoledger.core.entities import (
    Expense,
    ExpenseCategory,
    Vehicle,
    VehicleStatus,
    resolve_is_public,
    round_currency,
    to_decimal,
)


class TestMoney:
    """Tests for cent rounding."""

    def test_half_rounds_up(self):
        assert round_currency(Decimal("1500.555")) == Decimal("1500.56")

    def test_half_rounds_away_from_zero_for_negatives(self):
        assert round_currency(Decimal("-0.005")) == Decimal("-0.01")

    def test_float_input_uses_shortest_repr(self):
        # Decimal(1500.555) would be 1500.55499999...
        assert round_currency(1500.555) == Decimal("1500.56")

    def test_to_decimal_keeps_decimal(self):
        value = Decimal("12.345")
        assert to_decimal(value) is value

    def test_to_decimal_int(self):
        assert to_decimal(15) == Decimal("15")


class TestExpense:
    """Tests for Expense entity."""

    def test_naive_date_rejected(self):
        with pytest.raises(PydanticValidationError):
            Expense(
                vehicle_id="veh-1",
                description="Tyres",
                amount=Decimal("400"),
                date=datetime(2024, 1, 1),
                category=ExpenseCategory.REPAIR,
            )

    def test_date_normalized_to_utc(self):
        plus_two = timezone(timedelta(hours=2))
        expense = Expense(
            vehicle_id="veh-1",
            description="Tyres",
            amount=Decimal("400"),
            date=datetime(2024, 1, 1, 1, 0, tzinfo=plus_two),
            category=ExpenseCategory.REPAIR,
        )
        assert expense.date == datetime(2023, 12, 31, 23, 0, tzinfo=UTC)
        assert expense.date.tzinfo == UTC

    def test_private_by_default(self, make_expense):
        assert make_expense().is_public is False

    def test_json_amount_is_number(self, make_expense):
        data = make_expense(amount="1500.55").model_dump(mode="json")
        assert data["amount"] == 1500.55


class TestResolveIsPublic:
    """Repairs default to public; other categories to private."""

    def test_repair_defaults_public(self):
        assert resolve_is_public(ExpenseCategory.REPAIR, None) is True

    @pytest.mark.parametrize(
        "category",
        [
            ExpenseCategory.BROKER_FEE,
            ExpenseCategory.TRAVEL,
            ExpenseCategory.DOCUMENTATION,
            ExpenseCategory.OTHER,
        ],
    )
    def test_other_categories_default_private(self, category):
        assert resolve_is_public(category, None) is False

    def test_explicit_value_wins(self):
        assert resolve_is_public(ExpenseCategory.REPAIR, False) is False
        assert resolve_is_public(ExpenseCategory.TRAVEL, True) is True


class TestVehicle:
    """Tests for Vehicle entity."""

    def test_defaults(self, make_vehicle):
        vehicle = make_vehicle()
        assert vehicle.status == VehicleStatus.AVAILABLE
        assert vehicle.profit_margin == Decimal("15")
        assert vehicle.expenses == []
        assert vehicle.id

    def test_label(self, make_vehicle):
        assert make_vehicle(make="Volvo", model="V70").label == "Volvo V70"

    def test_is_sold(self, make_vehicle):
        assert make_vehicle(sold_price="12000").is_sold
        assert not make_vehicle().is_sold

    def test_sold_without_price_is_loadable(self, make_vehicle):
        # Damaged rows must still load so reports can degrade gracefully
        vehicle = make_vehicle(status=VehicleStatus.SOLD)
        assert vehicle.sold_price is None
        assert vehicle.sold_date is None

    def test_public_expenses(self, make_vehicle, make_expense):
        public = make_expense(is_public=True)
        private = make_expense(is_public=False)
        vehicle = make_vehicle(expenses=[public, private])
        assert vehicle.public_expenses == [public]

    def test_naive_purchase_date_rejected(self):
        with pytest.raises(PydanticValidationError):
            Vehicle(
                make="Toyota",
                model="Corolla",
                year=2018,
                reg_number="ABC123",
                purchase_price=Decimal("10000"),
                purchase_date=datetime(2024, 1, 1),
            )
