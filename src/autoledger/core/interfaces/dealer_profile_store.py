"""Abstract interface for the dealer profile."""

from abc import ABC, abstractmethod

from autoledger.core.entities.dealer import DealerProfile


class IDealerProfileStore(ABC):
    """Interface for the single dealer profile record."""

    @abstractmethod
    async def get_profile(self) -> DealerProfile | None:
        """Get the profile, None when it was never saved."""
        pass

    @abstractmethod
    async def save_profile(self, profile: DealerProfile) -> DealerProfile:
        """Create or replace the profile."""
        pass
