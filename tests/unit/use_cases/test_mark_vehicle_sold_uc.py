"""Tests for MarkVehicleSoldUseCase."""

from datetime import UTC, datetime
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from autoledger.application.dto.requests import MarkSoldRequest
from autoledger.application.use_cases import MarkVehicleSoldUseCase
from autoledger.core.exceptions import (
    ValidationError,
    VehicleNotFoundError,
    VehicleStateError,
)


@pytest.fixture
def mock_vehicle_store(make_vehicle):
    store = AsyncMock()
    store.get_vehicle.return_value = make_vehicle(vehicle_id="veh-1")
    store.mark_sold.side_effect = lambda vehicle_id, price, sold_date: make_vehicle(
        vehicle_id=vehicle_id, sold_price=price, sold_date=sold_date
    )
    return store


@pytest.fixture
def use_case(mock_vehicle_store):
    return MarkVehicleSoldUseCase(mock_vehicle_store)


class TestMarkVehicleSoldUseCase:
    async def test_marks_sold(self, use_case, mock_vehicle_store):
        request = MarkSoldRequest(sold_price=15000, sold_date="2024-06-15T14:00:00+02:00")

        result = await use_case.execute("veh-1", request)

        assert result.vehicle.is_sold
        mock_vehicle_store.mark_sold.assert_awaited_once_with(
            "veh-1",
            Decimal("15000"),
            datetime(2024, 6, 15, 12, 0, tzinfo=UTC),
        )

    async def test_not_found(self, use_case, mock_vehicle_store):
        mock_vehicle_store.get_vehicle.return_value = None
        request = MarkSoldRequest(sold_price=15000, sold_date="2024-06-15T12:00:00Z")

        with pytest.raises(VehicleNotFoundError):
            await use_case.execute("missing", request)

    async def test_cannot_sell_twice(self, use_case, mock_vehicle_store, make_vehicle):
        mock_vehicle_store.get_vehicle.return_value = make_vehicle(
            vehicle_id="veh-1",
            sold_price="15000",
            sold_date=datetime(2024, 6, 15, tzinfo=UTC),
        )
        request = MarkSoldRequest(sold_price=16000, sold_date="2024-07-01T12:00:00Z")

        with pytest.raises(VehicleStateError):
            await use_case.execute("veh-1", request)

        mock_vehicle_store.mark_sold.assert_not_awaited()

    async def test_sale_before_purchase_rejected(self, use_case, mock_vehicle_store):
        # Purchase date in the fixture is 2024-01-10
        request = MarkSoldRequest(sold_price=15000, sold_date="2023-12-31T12:00:00Z")

        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute("veh-1", request)

        assert exc_info.value.field == "sold_date"
        mock_vehicle_store.mark_sold.assert_not_awaited()
