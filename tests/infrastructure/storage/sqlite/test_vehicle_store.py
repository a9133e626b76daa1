"""Tests for SQLiteVehicleStore against a migrated temporary database."""

from datetime import UTC, datetime, timedelta, timezone
from decimal import Decimal

import pytest

from autoledger.core.entities import VehicleStatus
from autoledger.core.exceptions import (
    DuplicateRegistrationError,
    VehicleNotFoundError,
    VehicleStateError,
)


class TestCreateAndGet:
    async def test_round_trip(self, store, make_vehicle):
        created = await store.vehicles.create_vehicle(make_vehicle(purchase_price="1500.555"))

        loaded = await store.vehicles.get_vehicle(created.id)

        assert loaded is not None
        assert loaded.reg_number == "ABC123"
        assert loaded.purchase_price == Decimal("1500.555")
        assert loaded.purchase_date == datetime(2024, 1, 10, 9, 0, tzinfo=UTC)
        assert loaded.status == VehicleStatus.AVAILABLE
        assert loaded.expenses == []

    async def test_missing_returns_none(self, store):
        assert await store.vehicles.get_vehicle("missing") is None

    async def test_duplicate_registration(self, store, make_vehicle):
        await store.vehicles.create_vehicle(make_vehicle(reg_number="ABC123"))

        with pytest.raises(DuplicateRegistrationError):
            await store.vehicles.create_vehicle(make_vehicle(reg_number="ABC123"))

    async def test_lookup_by_registration_is_exact(self, store, make_vehicle):
        await store.vehicles.create_vehicle(make_vehicle(reg_number="ABC123"))

        assert await store.vehicles.get_vehicle_by_reg("ABC123") is not None
        assert await store.vehicles.get_vehicle_by_reg("abc123") is None

    async def test_offset_timestamps_normalized(self, store, make_vehicle):
        vehicle = make_vehicle()
        vehicle.purchase_date = datetime(2024, 1, 10, 11, 0, tzinfo=timezone(timedelta(hours=2)))

        created = await store.vehicles.create_vehicle(vehicle)
        loaded = await store.vehicles.get_vehicle(created.id)

        assert loaded.purchase_date == datetime(2024, 1, 10, 9, 0, tzinfo=UTC)
        assert loaded.purchase_date.utcoffset() == timedelta(0)

    async def test_expenses_loaded_in_date_order(self, store, make_vehicle, make_expense):
        vehicle = await store.vehicles.create_vehicle(make_vehicle())
        await store.expenses.add_expense(
            make_expense(vehicle_id=vehicle.id, date=datetime(2024, 3, 5, tzinfo=UTC))
        )
        await store.expenses.add_expense(
            make_expense(vehicle_id=vehicle.id, date=datetime(2024, 2, 1, tzinfo=UTC))
        )

        loaded = await store.vehicles.get_vehicle(vehicle.id)

        assert [e.date.day for e in loaded.expenses] == [1, 5]


class TestUpdateAndDelete:
    async def test_update_descriptive_fields(self, store, make_vehicle):
        vehicle = await store.vehicles.create_vehicle(make_vehicle())
        vehicle.make = "Lexus"
        vehicle.purchase_price = Decimal("9999.99")

        await store.vehicles.update_vehicle(vehicle)
        loaded = await store.vehicles.get_vehicle(vehicle.id)

        assert loaded.make == "Lexus"
        assert loaded.purchase_price == Decimal("9999.99")
        assert loaded.updated_at >= loaded.created_at

    async def test_images_kept_in_order(self, store, make_vehicle):
        vehicle = make_vehicle()
        vehicle.images = ["https://cdn.example/front.jpg", "https://cdn.example/side.jpg"]
        created = await store.vehicles.create_vehicle(vehicle)
        assert (await store.vehicles.get_vehicle(created.id)).images == vehicle.images

        created.images = ["https://cdn.example/rear.jpg"]
        await store.vehicles.update_vehicle(created)

        loaded = await store.vehicles.get_vehicle(created.id)
        assert loaded.images == ["https://cdn.example/rear.jpg"]

    async def test_update_missing_raises(self, store, make_vehicle):
        with pytest.raises(VehicleNotFoundError):
            await store.vehicles.update_vehicle(make_vehicle(vehicle_id="missing"))

    async def test_update_to_taken_registration(self, store, make_vehicle):
        await store.vehicles.create_vehicle(make_vehicle(reg_number="AAA111"))
        other = await store.vehicles.create_vehicle(make_vehicle(reg_number="BBB222"))
        other.reg_number = "AAA111"

        with pytest.raises(DuplicateRegistrationError):
            await store.vehicles.update_vehicle(other)

    async def test_delete_cascades_to_expenses(self, store, make_vehicle, make_expense):
        vehicle = await store.vehicles.create_vehicle(make_vehicle())
        expense = await store.expenses.add_expense(make_expense(vehicle_id=vehicle.id))

        assert await store.vehicles.delete_vehicle(vehicle.id) is True

        assert await store.vehicles.get_vehicle(vehicle.id) is None
        assert await store.expenses.get_expense(expense.id) is None
        assert await store.vehicles.delete_vehicle(vehicle.id) is False


class TestMarkSold:
    async def test_marks_sold(self, store, make_vehicle):
        vehicle = await store.vehicles.create_vehicle(make_vehicle())
        sold_date = datetime(2024, 6, 15, 12, 0, tzinfo=UTC)

        sold = await store.vehicles.mark_sold(vehicle.id, Decimal("15000.50"), sold_date)

        assert sold.status == VehicleStatus.SOLD
        assert sold.sold_price == Decimal("15000.50")
        assert sold.sold_date == sold_date

    async def test_cannot_sell_twice(self, store, make_vehicle):
        vehicle = await store.vehicles.create_vehicle(make_vehicle())
        sold_date = datetime(2024, 6, 15, tzinfo=UTC)
        await store.vehicles.mark_sold(vehicle.id, Decimal("15000"), sold_date)

        with pytest.raises(VehicleStateError):
            await store.vehicles.mark_sold(vehicle.id, Decimal("16000"), sold_date)

        loaded = await store.vehicles.get_vehicle(vehicle.id)
        assert loaded.sold_price == Decimal("15000")

    async def test_missing_vehicle(self, store):
        with pytest.raises(VehicleNotFoundError):
            await store.vehicles.mark_sold("missing", Decimal("1"), datetime(2024, 1, 1, tzinfo=UTC))


class TestListing:
    async def test_status_filter_newest_first(self, store, make_vehicle):
        first = await store.vehicles.create_vehicle(make_vehicle(reg_number="AAA111"))
        second = await store.vehicles.create_vehicle(make_vehicle(reg_number="BBB222"))
        await store.vehicles.mark_sold(first.id, Decimal("1"), datetime(2024, 6, 1, tzinfo=UTC))

        everything = await store.vehicles.list_vehicles()
        available = await store.vehicles.list_vehicles(status=VehicleStatus.AVAILABLE)

        assert [v.id for v in everything] == [second.id, first.id]
        assert [v.id for v in available] == [second.id]

    async def test_limit_and_offset(self, store, make_vehicle):
        for reg in ("AAA111", "BBB222", "CCC333"):
            await store.vehicles.create_vehicle(make_vehicle(reg_number=reg))

        page = await store.vehicles.list_vehicles(limit=2, offset=1)

        assert [v.reg_number for v in page] == ["BBB222", "AAA111"]


class TestListSoldBetween:
    @pytest.fixture
    async def sold(self, store, make_vehicle):
        """Three sold vehicles around the end of 2024 plus one unsold."""
        dates = {
            "AAA111": datetime(2024, 12, 31, 23, 59, 59, tzinfo=UTC),
            "BBB222": datetime(2024, 1, 1, 0, 0, tzinfo=UTC),
            "CCC333": datetime(2025, 1, 1, 0, 0, tzinfo=UTC),
        }
        for reg, sold_date in dates.items():
            vehicle = await store.vehicles.create_vehicle(make_vehicle(reg_number=reg))
            await store.vehicles.mark_sold(vehicle.id, Decimal("12000"), sold_date)
        await store.vehicles.create_vehicle(make_vehicle(reg_number="DDD444"))
        return dates

    async def test_bounds_inclusive_and_ordered(self, store, sold):
        vehicles = await store.vehicles.list_sold_between(
            datetime(2024, 1, 1, tzinfo=UTC),
            datetime(2024, 12, 31, 23, 59, 59, tzinfo=UTC),
        )

        assert [v.reg_number for v in vehicles] == ["BBB222", "AAA111"]

    async def test_end_is_exact(self, store, sold):
        vehicles = await store.vehicles.list_sold_between(
            datetime(2024, 1, 1, 0, 0, 0, 1, tzinfo=UTC),
            datetime(2024, 12, 31, 23, 59, 58, tzinfo=UTC),
        )

        assert vehicles == []

    async def test_expenses_included(self, store, sold, make_expense):
        vehicle = await store.vehicles.get_vehicle_by_reg("BBB222")
        await store.expenses.add_expense(make_expense(vehicle_id=vehicle.id, amount="250.25"))

        vehicles = await store.vehicles.list_sold_between(
            datetime(2024, 1, 1, tzinfo=UTC),
            datetime(2024, 1, 31, tzinfo=UTC),
        )

        assert len(vehicles) == 1
        assert vehicles[0].expenses[0].amount == Decimal("250.25")
