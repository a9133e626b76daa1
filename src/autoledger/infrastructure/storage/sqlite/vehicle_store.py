"""SQLite implementation of vehicle storage."""

from datetime import UTC, datetime
from decimal import Decimal

import aiosqlite

from autoledger.config import get_logger
from autoledger.core.entities.vehicle import Expense, Vehicle, VehicleStatus
from autoledger.core.exceptions import (
    DatabaseError,
    DuplicateRegistrationError,
    VehicleNotFoundError,
    VehicleStateError,
)
from autoledger.core.interfaces.vehicle_store import IVehicleStore
from autoledger.infrastructure.storage.sqlite.connection import ConnectionPool
from autoledger.infrastructure.storage.sqlite.rows import (
    row_to_expense,
    row_to_vehicle,
    to_db_images,
    to_db_money,
    to_db_timestamp,
)

logger = get_logger(__name__)


class SQLiteVehicleStore(IVehicleStore):
    """SQLite implementation of vehicle storage."""

    def __init__(self, pool: ConnectionPool):
        self._pool = pool

    async def create_vehicle(self, vehicle: Vehicle) -> Vehicle:
        """Insert a vehicle. Expenses on the entity are ignored."""
        now = datetime.now(UTC)
        vehicle.created_at = now
        vehicle.updated_at = now
        try:
            async with self._pool.transaction() as conn:
                await conn.execute(
                    """
                    INSERT INTO vehicles (
                        id, make, model, year, reg_number, vin,
                        purchase_price, purchase_date, status,
                        sold_price, sold_date, profit_margin, images,
                        created_at, updated_at
                    ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                    """,
                    (
                        vehicle.id,
                        vehicle.make,
                        vehicle.model,
                        vehicle.year,
                        vehicle.reg_number,
                        vehicle.vin,
                        to_db_money(vehicle.purchase_price),
                        to_db_timestamp(vehicle.purchase_date),
                        vehicle.status.value,
                        to_db_money(vehicle.sold_price) if vehicle.sold_price is not None else None,
                        to_db_timestamp(vehicle.sold_date) if vehicle.sold_date else None,
                        to_db_money(vehicle.profit_margin),
                        to_db_images(vehicle.images),
                        to_db_timestamp(vehicle.created_at),
                        to_db_timestamp(vehicle.updated_at),
                    ),
                )
        except aiosqlite.IntegrityError as e:
            if "reg_number" in str(e):
                raise DuplicateRegistrationError(vehicle.reg_number) from e
            raise DatabaseError("create_vehicle", str(e)) from e

        logger.info("vehicle_created", vehicle_id=vehicle.id, reg_number=vehicle.reg_number)
        vehicle.expenses = []
        return vehicle

    async def get_vehicle(self, vehicle_id: str) -> Vehicle | None:
        """Get vehicle by ID with expenses."""
        async with self._pool.snapshot() as conn:
            cursor = await conn.execute("SELECT * FROM vehicles WHERE id = ?", (vehicle_id,))
            row = await cursor.fetchone()
            if row is None:
                return None
            expenses = await self._load_expenses(conn, [vehicle_id])
            return row_to_vehicle(row, expenses.get(vehicle_id))

    async def get_vehicle_by_reg(self, reg_number: str) -> Vehicle | None:
        """Get vehicle by registration number with expenses."""
        async with self._pool.snapshot() as conn:
            cursor = await conn.execute(
                "SELECT * FROM vehicles WHERE reg_number = ?", (reg_number,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            expenses = await self._load_expenses(conn, [row["id"]])
            return row_to_vehicle(row, expenses.get(row["id"]))

    async def update_vehicle(self, vehicle: Vehicle) -> Vehicle:
        """Update descriptive fields. Status and sale fields are never written here."""
        vehicle.updated_at = datetime.now(UTC)
        try:
            async with self._pool.transaction() as conn:
                cursor = await conn.execute(
                    """
                    UPDATE vehicles SET
                        make = ?, model = ?, year = ?, reg_number = ?, vin = ?,
                        purchase_price = ?, purchase_date = ?, profit_margin = ?,
                        images = ?, updated_at = ?
                    WHERE id = ?
                    """,
                    (
                        vehicle.make,
                        vehicle.model,
                        vehicle.year,
                        vehicle.reg_number,
                        vehicle.vin,
                        to_db_money(vehicle.purchase_price),
                        to_db_timestamp(vehicle.purchase_date),
                        to_db_money(vehicle.profit_margin),
                        to_db_images(vehicle.images),
                        to_db_timestamp(vehicle.updated_at),
                        vehicle.id,
                    ),
                )
                if cursor.rowcount == 0:
                    raise VehicleNotFoundError(vehicle.id)
        except aiosqlite.IntegrityError as e:
            if "reg_number" in str(e):
                raise DuplicateRegistrationError(vehicle.reg_number) from e
            raise DatabaseError("update_vehicle", str(e)) from e

        logger.info("vehicle_updated", vehicle_id=vehicle.id)
        return vehicle

    async def mark_sold(
        self, vehicle_id: str, sold_price: Decimal, sold_date: datetime
    ) -> Vehicle:
        """Set status, sold price and sold date in one conditional update."""
        async with self._pool.transaction() as conn:
            cursor = await conn.execute(
                """
                UPDATE vehicles SET
                    status = ?, sold_price = ?, sold_date = ?, updated_at = ?
                WHERE id = ? AND status = ?
                """,
                (
                    VehicleStatus.SOLD.value,
                    to_db_money(sold_price),
                    to_db_timestamp(sold_date),
                    to_db_timestamp(datetime.now(UTC)),
                    vehicle_id,
                    VehicleStatus.AVAILABLE.value,
                ),
            )
            if cursor.rowcount == 0:
                cursor = await conn.execute(
                    "SELECT status FROM vehicles WHERE id = ?", (vehicle_id,)
                )
                row = await cursor.fetchone()
                if row is None:
                    raise VehicleNotFoundError(vehicle_id)
                raise VehicleStateError(vehicle_id, row["status"], "sell")

        logger.info("vehicle_marked_sold", vehicle_id=vehicle_id, sold_date=sold_date.isoformat())
        vehicle = await self.get_vehicle(vehicle_id)
        if vehicle is None:
            raise VehicleNotFoundError(vehicle_id)
        return vehicle

    async def delete_vehicle(self, vehicle_id: str) -> bool:
        """Delete a vehicle; its expenses go with it (ON DELETE CASCADE)."""
        async with self._pool.transaction() as conn:
            cursor = await conn.execute("DELETE FROM vehicles WHERE id = ?", (vehicle_id,))
            deleted = cursor.rowcount > 0

        if deleted:
            logger.info("vehicle_deleted", vehicle_id=vehicle_id)
        return deleted

    async def list_vehicles(
        self,
        status: VehicleStatus | None = None,
        limit: int = 100,
        offset: int = 0,
    ) -> list[Vehicle]:
        """List vehicles, newest first."""
        query = "SELECT * FROM vehicles"
        params: list = []
        if status is not None:
            query += " WHERE status = ?"
            params.append(status.value)
        query += " ORDER BY created_at DESC, id LIMIT ? OFFSET ?"
        params.extend([limit, offset])

        async with self._pool.snapshot() as conn:
            cursor = await conn.execute(query, params)
            rows = await cursor.fetchall()
            expenses = await self._load_expenses(conn, [r["id"] for r in rows])
            return [row_to_vehicle(r, expenses.get(r["id"])) for r in rows]

    async def list_sold_between(self, start: datetime, end: datetime) -> list[Vehicle]:
        """SOLD vehicles with start <= sold_date <= end, oldest sale first."""
        async with self._pool.snapshot() as conn:
            cursor = await conn.execute(
                """
                SELECT * FROM vehicles
                WHERE status = ? AND sold_date >= ? AND sold_date <= ?
                ORDER BY sold_date ASC, id ASC
                """,
                (VehicleStatus.SOLD.value, to_db_timestamp(start), to_db_timestamp(end)),
            )
            rows = await cursor.fetchall()
            expenses = await self._load_expenses(conn, [r["id"] for r in rows])

        logger.debug(
            "sold_vehicles_loaded",
            start=start.isoformat(),
            end=end.isoformat(),
            count=len(rows),
        )
        return [row_to_vehicle(r, expenses.get(r["id"])) for r in rows]

    @staticmethod
    async def _load_expenses(
        conn: aiosqlite.Connection, vehicle_ids: list[str]
    ) -> dict[str, list[Expense]]:
        """Load expenses for many vehicles in one query, grouped by vehicle."""
        if not vehicle_ids:
            return {}

        placeholders = ", ".join("?" for _ in vehicle_ids)
        cursor = await conn.execute(
            f"""
            SELECT * FROM expenses
            WHERE vehicle_id IN ({placeholders})
            ORDER BY date ASC, created_at ASC, id ASC
            """,
            vehicle_ids,
        )
        grouped: dict[str, list[Expense]] = {}
        for row in await cursor.fetchall():
            grouped.setdefault(row["vehicle_id"], []).append(row_to_expense(row))
        return grouped
