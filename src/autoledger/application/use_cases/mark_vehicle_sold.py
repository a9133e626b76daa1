"""Mark Vehicle Sold Use Case: the single AVAILABLE to SOLD transition."""

from dataclasses import dataclass

from autoledger.application.dto.requests import MarkSoldRequest
from autoledger.config import get_logger
from autoledger.core.entities.vehicle import Vehicle, VehicleStatus, ensure_utc
from autoledger.core.exceptions import (
    ValidationError,
    VehicleNotFoundError,
    VehicleStateError,
)
from autoledger.core.interfaces.vehicle_store import IVehicleStore

logger = get_logger(__name__)


@dataclass
class MarkVehicleSoldResult:
    """Result of marking a vehicle sold."""

    vehicle: Vehicle


class MarkVehicleSoldUseCase:
    """Record a sale. A sold vehicle cannot be sold again."""

    def __init__(self, vehicle_store: IVehicleStore):
        self._vehicle_store = vehicle_store

    async def execute(self, vehicle_id: str, request: MarkSoldRequest) -> MarkVehicleSoldResult:
        """Execute mark sold use case."""
        logger.info("mark_vehicle_sold_started", vehicle_id=vehicle_id)

        vehicle = await self._vehicle_store.get_vehicle(vehicle_id)
        if vehicle is None:
            raise VehicleNotFoundError(vehicle_id)
        if vehicle.status != VehicleStatus.AVAILABLE:
            raise VehicleStateError(vehicle_id, vehicle.status.value, "sell")

        sold_date = ensure_utc(request.sold_date)
        if sold_date < vehicle.purchase_date:
            raise ValidationError(
                "sold_date",
                "must not be earlier than the purchase date",
                request.sold_date.isoformat(),
            )

        # The store re-checks status in the same UPDATE
        vehicle = await self._vehicle_store.mark_sold(vehicle_id, request.sold_price, sold_date)

        logger.info(
            "mark_vehicle_sold_complete",
            vehicle_id=vehicle_id,
            sold_date=sold_date.isoformat(),
        )
        return MarkVehicleSoldResult(vehicle=vehicle)
