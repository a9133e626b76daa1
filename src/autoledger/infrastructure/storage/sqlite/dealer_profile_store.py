"""SQLite implementation of the dealer profile store."""

import aiosqlite

from autoledger.config import get_logger
from autoledger.core.entities.dealer import DealerProfile
from autoledger.core.exceptions import DatabaseError
from autoledger.core.interfaces.dealer_profile_store import IDealerProfileStore
from autoledger.infrastructure.storage.sqlite.connection import ConnectionPool
from autoledger.infrastructure.storage.sqlite.rows import row_to_profile, to_db_timestamp

logger = get_logger(__name__)

# The table holds at most one row, always under this id.
PROFILE_ID = 1


class SQLiteDealerProfileStore(IDealerProfileStore):
    """SQLite implementation of the dealer profile store."""

    def __init__(self, pool: ConnectionPool):
        self._pool = pool

    async def get_profile(self) -> DealerProfile | None:
        async with self._pool.acquire() as conn:
            cursor = await conn.execute(
                "SELECT * FROM dealer_profile WHERE id = ?", (PROFILE_ID,)
            )
            row = await cursor.fetchone()
            return row_to_profile(row) if row else None

    async def save_profile(self, profile: DealerProfile) -> DealerProfile:
        try:
            async with self._pool.transaction() as conn:
                await conn.execute(
                    """
                    INSERT INTO dealer_profile (
                        id, company_name, address, phone, email, updated_at
                    ) VALUES (?, ?, ?, ?, ?, ?)
                    ON CONFLICT(id) DO UPDATE SET
                        company_name = excluded.company_name,
                        address = excluded.address,
                        phone = excluded.phone,
                        email = excluded.email,
                        updated_at = excluded.updated_at
                    """,
                    (
                        PROFILE_ID,
                        profile.company_name,
                        profile.address,
                        profile.phone,
                        profile.email,
                        to_db_timestamp(profile.updated_at),
                    ),
                )
        except aiosqlite.IntegrityError as e:
            raise DatabaseError("save_profile", str(e)) from e

        logger.info("dealer_profile_saved", company_name=profile.company_name)
        return profile
