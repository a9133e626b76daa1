"""Update Dealer Profile Use Case: replaces the single dealer profile."""

from dataclasses import dataclass

from autoledger.application.dto.requests import UpdateDealerProfileRequest
from autoledger.config import get_logger
from autoledger.core.entities.dealer import DealerProfile
from autoledger.core.interfaces.dealer_profile_store import IDealerProfileStore

logger = get_logger(__name__)


@dataclass
class UpdateDealerProfileResult:
    """Result of saving the dealer profile."""

    profile: DealerProfile
    created: bool


class UpdateDealerProfileUseCase:
    """Create the dealer profile on first save, replace it afterwards."""

    def __init__(self, profile_store: IDealerProfileStore):
        self._profile_store = profile_store

    async def execute(self, request: UpdateDealerProfileRequest) -> UpdateDealerProfileResult:
        existing = await self._profile_store.get_profile()

        profile = await self._profile_store.save_profile(
            DealerProfile(**request.model_dump())
        )

        logger.info("dealer_profile_updated", created=existing is None)
        return UpdateDealerProfileResult(profile=profile, created=existing is None)
