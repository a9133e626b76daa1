"""SQLite implementation of expense storage."""

import aiosqlite

from autoledger.config import get_logger
from autoledger.core.entities.vehicle import Expense
from autoledger.core.exceptions import (
    DatabaseError,
    ExpenseNotFoundError,
    VehicleNotFoundError,
)
from autoledger.core.interfaces.vehicle_store import IExpenseStore
from autoledger.infrastructure.storage.sqlite.connection import ConnectionPool
from autoledger.infrastructure.storage.sqlite.rows import (
    row_to_expense,
    to_db_money,
    to_db_timestamp,
)

logger = get_logger(__name__)


class SQLiteExpenseStore(IExpenseStore):
    """SQLite implementation of expense storage."""

    def __init__(self, pool: ConnectionPool):
        self._pool = pool

    async def add_expense(self, expense: Expense) -> Expense:
        try:
            async with self._pool.transaction() as conn:
                await conn.execute(
                    """
                    INSERT INTO expenses (
                        id, vehicle_id, description, amount, date,
                        category, is_public, created_at
                    ) VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                    """,
                    (
                        expense.id,
                        expense.vehicle_id,
                        expense.description,
                        to_db_money(expense.amount),
                        to_db_timestamp(expense.date),
                        expense.category.value,
                        1 if expense.is_public else 0,
                        to_db_timestamp(expense.created_at),
                    ),
                )
        except aiosqlite.IntegrityError as e:
            if "FOREIGN KEY" in str(e):
                raise VehicleNotFoundError(expense.vehicle_id) from e
            raise DatabaseError("add_expense", str(e)) from e

        logger.info(
            "expense_added",
            expense_id=expense.id,
            vehicle_id=expense.vehicle_id,
            category=expense.category.value,
        )
        return expense

    async def get_expense(self, expense_id: str) -> Expense | None:
        async with self._pool.acquire() as conn:
            cursor = await conn.execute("SELECT * FROM expenses WHERE id = ?", (expense_id,))
            row = await cursor.fetchone()
            return row_to_expense(row) if row else None

    async def update_expense(self, expense: Expense) -> Expense:
        """Rewrite the mutable fields of an expense. The owning vehicle never changes."""
        try:
            async with self._pool.transaction() as conn:
                cursor = await conn.execute(
                    """
                    UPDATE expenses SET
                        description = ?, amount = ?, date = ?,
                        category = ?, is_public = ?
                    WHERE id = ?
                    """,
                    (
                        expense.description,
                        to_db_money(expense.amount),
                        to_db_timestamp(expense.date),
                        expense.category.value,
                        1 if expense.is_public else 0,
                        expense.id,
                    ),
                )
                if cursor.rowcount == 0:
                    raise ExpenseNotFoundError(expense.id)
        except aiosqlite.IntegrityError as e:
            raise DatabaseError("update_expense", str(e)) from e

        logger.info("expense_updated", expense_id=expense.id)
        return expense

    async def delete_expense(self, expense_id: str) -> bool:
        async with self._pool.transaction() as conn:
            cursor = await conn.execute("DELETE FROM expenses WHERE id = ?", (expense_id,))
            deleted = cursor.rowcount > 0

        if deleted:
            logger.info("expense_deleted", expense_id=expense_id)
        return deleted

    async def list_expenses(
        self, vehicle_id: str, public_only: bool = False
    ) -> list[Expense]:
        query = "SELECT * FROM expenses WHERE vehicle_id = ?"
        if public_only:
            query += " AND is_public = 1"
        query += " ORDER BY date ASC, created_at ASC, id ASC"

        async with self._pool.acquire() as conn:
            cursor = await conn.execute(query, (vehicle_id,))
            rows = await cursor.fetchall()
            return [row_to_expense(row) for row in rows]
