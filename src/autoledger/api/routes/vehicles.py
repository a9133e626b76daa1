"""Vehicle inventory endpoints."""

from fastapi import APIRouter, Depends, Query, status

from autoledger.api.dependencies import (
    get_create_vehicle_use_case,
    get_dealer_profile_store,
    get_mark_vehicle_sold_use_case,
    get_update_vehicle_use_case,
    get_vehicle_store,
)
from autoledger.application.dto.requests import (
    CreateVehicleRequest,
    MarkSoldRequest,
    UpdateVehicleRequest,
)
from autoledger.application.dto.responses import (
    ErrorResponse,
    MessageResponse,
    VehicleListResponse,
    VehicleResponse,
    VehicleSummaryResponse,
    VerificationResponse,
)
from autoledger.application.use_cases import (
    CreateVehicleUseCase,
    MarkVehicleSoldUseCase,
    UpdateVehicleUseCase,
)
from autoledger.core.entities.vehicle import Vehicle, VehicleStatus
from autoledger.core.exceptions import VehicleNotFoundError
from autoledger.core.interfaces import IDealerProfileStore, IVehicleStore
from autoledger.core.services import summarize_vehicle

router = APIRouter(prefix="/api/vehicles", tags=["vehicles"])


async def _get_or_404(store: IVehicleStore, vehicle_id: str) -> Vehicle:
    vehicle = await store.get_vehicle(vehicle_id)
    if vehicle is None:
        raise VehicleNotFoundError(vehicle_id)
    return vehicle


@router.post(
    "",
    response_model=VehicleResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
)
async def create_vehicle(
    request: CreateVehicleRequest,
    use_case: CreateVehicleUseCase = Depends(get_create_vehicle_use_case),
) -> VehicleResponse:
    """Add a vehicle to inventory as AVAILABLE."""
    result = await use_case.execute(request)
    return VehicleResponse.from_entity(result.vehicle)


@router.get("", response_model=VehicleListResponse)
async def list_vehicles(
    status_filter: VehicleStatus | None = Query(default=None, alias="status"),
    limit: int = Query(default=100, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
    store: IVehicleStore = Depends(get_vehicle_store),
) -> VehicleListResponse:
    """List vehicles, newest first."""
    vehicles = await store.list_vehicles(status=status_filter, limit=limit, offset=offset)
    return VehicleListResponse(
        vehicles=[VehicleResponse.from_entity(v) for v in vehicles],
        total=len(vehicles),
        limit=limit,
        offset=offset,
    )


@router.get(
    "/{vehicle_id}",
    response_model=VehicleResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_vehicle(
    vehicle_id: str,
    store: IVehicleStore = Depends(get_vehicle_store),
) -> VehicleResponse:
    """Get a vehicle with all of its expenses."""
    return VehicleResponse.from_entity(await _get_or_404(store, vehicle_id))


@router.patch(
    "/{vehicle_id}",
    response_model=VehicleResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
)
async def update_vehicle(
    vehicle_id: str,
    request: UpdateVehicleRequest,
    use_case: UpdateVehicleUseCase = Depends(get_update_vehicle_use_case),
) -> VehicleResponse:
    """Update descriptive fields of a vehicle."""
    result = await use_case.execute(vehicle_id, request)
    return VehicleResponse.from_entity(result.vehicle)


@router.delete(
    "/{vehicle_id}",
    response_model=MessageResponse,
    responses={404: {"model": ErrorResponse}},
)
async def delete_vehicle(
    vehicle_id: str,
    store: IVehicleStore = Depends(get_vehicle_store),
) -> MessageResponse:
    """Delete a vehicle together with its expenses."""
    if not await store.delete_vehicle(vehicle_id):
        raise VehicleNotFoundError(vehicle_id)
    return MessageResponse(message="Vehicle deleted successfully.")


@router.post(
    "/{vehicle_id}/sell",
    response_model=VehicleResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse, "description": "Vehicle already sold"},
    },
)
async def sell_vehicle(
    vehicle_id: str,
    request: MarkSoldRequest,
    use_case: MarkVehicleSoldUseCase = Depends(get_mark_vehicle_sold_use_case),
) -> VehicleResponse:
    """Mark an AVAILABLE vehicle as SOLD."""
    result = await use_case.execute(vehicle_id, request)
    return VehicleResponse.from_entity(result.vehicle)


@router.get(
    "/{vehicle_id}/summary",
    response_model=VehicleSummaryResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_vehicle_summary(
    vehicle_id: str,
    store: IVehicleStore = Depends(get_vehicle_store),
) -> VehicleSummaryResponse:
    """Break-even cost, target price and (once sold) realised profit."""
    summary = summarize_vehicle(await _get_or_404(store, vehicle_id))
    return VehicleSummaryResponse(**summary.model_dump())


@router.get(
    "/{vehicle_id}/verification",
    response_model=VerificationResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_vehicle_verification(
    vehicle_id: str,
    store: IVehicleStore = Depends(get_vehicle_store),
    profiles: IDealerProfileStore = Depends(get_dealer_profile_store),
) -> VerificationResponse:
    """Buyer-facing vehicle history: public expenses only, without amounts."""
    vehicle = await _get_or_404(store, vehicle_id)
    return VerificationResponse.from_entity(vehicle, await profiles.get_profile())
