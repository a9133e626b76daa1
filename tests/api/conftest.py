"""Fixtures for API tests: the app with stores replaced by mocks."""

from collections.abc import AsyncGenerator
from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from autoledger.api.dependencies import (
    get_dealer_profile_store,
    get_expense_store,
    get_vehicle_store,
)
from autoledger.api.main import create_app


@pytest.fixture
def mock_vehicle_store():
    store = AsyncMock()
    store.get_vehicle.return_value = None
    store.get_vehicle_by_reg.return_value = None
    return store


@pytest.fixture
def mock_expense_store():
    return AsyncMock()


@pytest.fixture
def mock_profile_store():
    store = AsyncMock()
    store.get_profile.return_value = None
    return store


@pytest.fixture
def app(mock_vehicle_store, mock_expense_store, mock_profile_store) -> FastAPI:
    app = create_app()
    app.dependency_overrides[get_vehicle_store] = lambda: mock_vehicle_store
    app.dependency_overrides[get_expense_store] = lambda: mock_expense_store
    app.dependency_overrides[get_dealer_profile_store] = lambda: mock_profile_store
    return app


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
