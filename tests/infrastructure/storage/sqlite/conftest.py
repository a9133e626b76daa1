"""Pytest fixtures for SQLite storage tests."""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest

from autoledger.infrastructure.storage.sqlite import StoreHandle, open_store


@pytest.fixture
def temp_db_path(tmp_path: Path) -> Path:
    """Create a temporary database path."""
    return tmp_path / "test.db"


@pytest.fixture
async def store(temp_db_path: Path) -> AsyncGenerator[StoreHandle, None]:
    """A migrated database with every store bound to a small pool."""
    handle = await open_store(temp_db_path, pool_size=2)
    yield handle
    await handle.close()
