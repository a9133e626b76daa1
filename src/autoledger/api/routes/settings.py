"""Dealer settings endpoints."""

from fastapi import APIRouter, Depends

from autoledger.api.dependencies import (
    get_dealer_profile_store,
    get_update_dealer_profile_use_case,
)
from autoledger.application.dto.requests import UpdateDealerProfileRequest
from autoledger.application.dto.responses import DealerProfileResponse, ErrorResponse
from autoledger.application.use_cases import UpdateDealerProfileUseCase
from autoledger.core.exceptions import DealerProfileNotFoundError
from autoledger.core.interfaces import IDealerProfileStore

router = APIRouter(prefix="/api/settings", tags=["settings"])


@router.get(
    "/profile",
    response_model=DealerProfileResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_dealer_profile(
    store: IDealerProfileStore = Depends(get_dealer_profile_store),
) -> DealerProfileResponse:
    """The dealer profile; 404 until it has been saved once."""
    profile = await store.get_profile()
    if profile is None:
        raise DealerProfileNotFoundError()
    return DealerProfileResponse.from_entity(profile)


@router.put(
    "/profile",
    response_model=DealerProfileResponse,
    responses={400: {"model": ErrorResponse}},
)
async def update_dealer_profile(
    request: UpdateDealerProfileRequest,
    use_case: UpdateDealerProfileUseCase = Depends(get_update_dealer_profile_use_case),
) -> DealerProfileResponse:
    """Create or replace the dealer profile."""
    result = await use_case.execute(request)
    return DealerProfileResponse.from_entity(result.profile)
