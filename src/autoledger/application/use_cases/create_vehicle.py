"""Create Vehicle Use Case: adds an AVAILABLE vehicle to inventory."""

from dataclasses import dataclass

from autoledger.application.dto.requests import CreateVehicleRequest
from autoledger.config import get_logger
from autoledger.core.entities.vehicle import Vehicle, VehicleStatus
from autoledger.core.exceptions import DuplicateRegistrationError
from autoledger.core.interfaces.vehicle_store import IVehicleStore

logger = get_logger(__name__)


@dataclass
class CreateVehicleResult:
    """Result of creating a vehicle."""

    vehicle: Vehicle


class CreateVehicleUseCase:
    """Register a newly purchased vehicle."""

    def __init__(self, vehicle_store: IVehicleStore):
        self._vehicle_store = vehicle_store

    async def execute(self, request: CreateVehicleRequest) -> CreateVehicleResult:
        """Execute create vehicle use case."""
        logger.info("create_vehicle_started", reg_number=request.reg_number)

        existing = await self._vehicle_store.get_vehicle_by_reg(request.reg_number)
        if existing is not None:
            raise DuplicateRegistrationError(request.reg_number, existing.id)

        vehicle = Vehicle(
            **request.model_dump(),
            status=VehicleStatus.AVAILABLE,
        )
        # The UNIQUE constraint still catches a concurrent insert of the same reg
        vehicle = await self._vehicle_store.create_vehicle(vehicle)

        logger.info("create_vehicle_complete", vehicle_id=vehicle.id)
        return CreateVehicleResult(vehicle=vehicle)
