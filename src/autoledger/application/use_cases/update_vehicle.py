"""Update Vehicle Use Case: partial update of descriptive fields."""

from dataclasses import dataclass

from autoledger.application.dto.requests import UpdateVehicleRequest
from autoledger.config import get_logger
from autoledger.core.entities.vehicle import Vehicle
from autoledger.core.exceptions import DuplicateRegistrationError, VehicleNotFoundError
from autoledger.core.interfaces.vehicle_store import IVehicleStore

logger = get_logger(__name__)


@dataclass
class UpdateVehicleResult:
    """Result of updating a vehicle."""

    vehicle: Vehicle
    changed: list[str]


class UpdateVehicleUseCase:
    """Apply a partial update. Status and sale fields are out of reach here."""

    def __init__(self, vehicle_store: IVehicleStore):
        self._vehicle_store = vehicle_store

    async def execute(
        self, vehicle_id: str, request: UpdateVehicleRequest
    ) -> UpdateVehicleResult:
        """Execute update vehicle use case."""
        changes = request.changes()
        logger.info("update_vehicle_started", vehicle_id=vehicle_id, fields=sorted(changes))

        vehicle = await self._vehicle_store.get_vehicle(vehicle_id)
        if vehicle is None:
            raise VehicleNotFoundError(vehicle_id)

        reg_number = changes.get("reg_number")
        if reg_number and reg_number != vehicle.reg_number:
            other = await self._vehicle_store.get_vehicle_by_reg(reg_number)
            if other is not None and other.id != vehicle_id:
                raise DuplicateRegistrationError(reg_number, other.id)

        if not changes:
            return UpdateVehicleResult(vehicle=vehicle, changed=[])

        updated = Vehicle.model_validate({**vehicle.model_dump(), **changes})
        updated = await self._vehicle_store.update_vehicle(updated)

        logger.info("update_vehicle_complete", vehicle_id=vehicle_id)
        return UpdateVehicleResult(vehicle=updated, changed=sorted(changes))
