"""Tests for UpdateDealerProfileUseCase."""

from unittest.mock import AsyncMock

import pytest

from autoledger.application.dto.requests import UpdateDealerProfileRequest
from autoledger.application.use_cases import UpdateDealerProfileUseCase
from autoledger.core.entities import DealerProfile


@pytest.fixture
def mock_profile_store():
    store = AsyncMock()
    store.get_profile.return_value = None
    store.save_profile.side_effect = lambda profile: profile
    return store


class TestUpdateDealerProfileUseCase:
    async def test_first_save_creates(self, mock_profile_store):
        request = UpdateDealerProfileRequest(company_name="Bitgard", email="")

        result = await UpdateDealerProfileUseCase(mock_profile_store).execute(request)

        assert result.created is True
        assert result.profile.company_name == "Bitgard"
        assert result.profile.email is None

    async def test_replaces_existing(self, mock_profile_store):
        mock_profile_store.get_profile.return_value = DealerProfile(
            company_name="Old", address="Somewhere"
        )
        request = UpdateDealerProfileRequest(company_name="New")

        result = await UpdateDealerProfileUseCase(mock_profile_store).execute(request)

        assert result.created is False
        saved = mock_profile_store.save_profile.await_args.args[0]
        assert saved.company_name == "New"
        assert saved.address is None
