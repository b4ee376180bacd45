"""Ledger store: durable CRUD over the expenses table."""
import datetime as dt
from typing import Callable, Iterable, TypeVar

import structlog
from sqlalchemy import text
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import SQLAlchemyError

from .category import ExpenseCategory, empty_totals
from .errors import StorageError
from .expense import Expense, ExpenseDraft, encode_date, from_row, to_row

log = structlog.get_logger(__name__)

T = TypeVar("T")

_SELECT_COLUMNS = "SELECT id, name, amount, date, category FROM expenses"
# Newest first; equal dates keep insertion order.
_ORDER_BY = "ORDER BY date DESC, id ASC"


class LedgerStore:
    """The authoritative set of expense records.

    One instance is created per process and handed to whatever needs it.
    Every method runs in its own transaction; any database failure is
    reported as :class:`StorageError` and never retried here.
    """

    def __init__(self, engine: Engine):
        self._engine = engine

    def _run(self, operation: str, fn: Callable[[Connection], T]) -> T:
        try:
            with self._engine.begin() as conn:
                return fn(conn)
        except SQLAlchemyError as exc:
            log.error("storage_error", operation=operation, error=str(exc))
            raise StorageError(f"{operation} failed: {exc}") from exc

    @staticmethod
    def _insert(conn: Connection, draft: ExpenseDraft) -> int:
        conn.execute(
            text(
                """
                INSERT INTO expenses (name, amount, date, category)
                VALUES (:name, :amount, :date, :category);
                """
            ),
            to_row(draft),
        )
        return int(conn.execute(text("SELECT last_insert_rowid() AS id;")).mappings().first()["id"])

    def create(self, draft: ExpenseDraft) -> int:
        """Insert a new expense and return its id."""
        expense_id = self._run("create", lambda conn: self._insert(conn, draft))
        log.info("expense_created", id=expense_id, category=draft.category.display_name)
        return expense_id

    def create_many(self, drafts: Iterable[ExpenseDraft]) -> list[int]:
        """Insert several expenses in one transaction."""
        drafts = list(drafts)
        ids = self._run("create_many", lambda conn: [self._insert(conn, d) for d in drafts])
        log.info("expenses_created", count=len(ids))
        return ids

    def get(self, expense_id: int) -> Expense | None:
        """Get an expense by id, or None when there is no such record."""

        def _op(conn: Connection) -> Expense | None:
            row = conn.execute(
                text(f"{_SELECT_COLUMNS} WHERE id = :id;"),
                {"id": int(expense_id)},
            ).mappings().first()
            return from_row(row) if row else None

        return self._run("get", _op)

    def list_all(self) -> list[Expense]:
        """All expenses, newest first."""

        def _op(conn: Connection) -> list[Expense]:
            rows = conn.execute(text(f"{_SELECT_COLUMNS} {_ORDER_BY};")).mappings().all()
            return [from_row(r) for r in rows]

        return self._run("list", _op)

    def list_by_date_range(self, start: dt.datetime, end: dt.datetime) -> list[Expense]:
        """Expenses dated within [start, end], both bounds included."""

        def _op(conn: Connection) -> list[Expense]:
            rows = conn.execute(
                text(
                    f"""
                    {_SELECT_COLUMNS}
                    WHERE date >= :start AND date <= :end
                    {_ORDER_BY};
                    """
                ),
                {"start": encode_date(start), "end": encode_date(end)},
            ).mappings().all()
            return [from_row(r) for r in rows]

        return self._run("list_by_date_range", _op)

    def update(self, expense: Expense) -> int:
        """Replace every field of the record with ``expense.id``.

        Returns the number of rows changed: 1, or 0 when the id is unknown.
        """
        if expense.id is None:
            raise ValueError("Cannot update an expense without an id")

        def _op(conn: Connection) -> int:
            result = conn.execute(
                text(
                    """
                    UPDATE expenses
                       SET name = :name,
                           amount = :amount,
                           date = :date,
                           category = :category
                     WHERE id = :id;
                    """
                ),
                {"id": int(expense.id), **to_row(expense)},
            )
            return int(result.rowcount)

        affected = self._run("update", _op)
        if affected:
            log.info("expense_updated", id=expense.id)
        else:
            log.warning("expense_update_missed", id=expense.id)
        return affected

    def delete(self, expense_id: int) -> int:
        """Delete one expense; returns 1, or 0 when the id is unknown."""
        affected = self._run(
            "delete",
            lambda conn: int(
                conn.execute(text("DELETE FROM expenses WHERE id = :id;"), {"id": int(expense_id)}).rowcount
            ),
        )
        log.info("expense_deleted", id=expense_id, affected=affected)
        return affected

    def delete_all(self) -> int:
        affected = self._run(
            "delete_all",
            lambda conn: int(conn.execute(text("DELETE FROM expenses;")).rowcount),
        )
        log.info("expenses_cleared", affected=affected)
        return affected

    def count(self) -> int:
        return self._run(
            "count",
            lambda conn: int(conn.execute(text("SELECT COUNT(*) AS n FROM expenses;")).mappings().first()["n"]),
        )

    def totals_by_category(self) -> dict[ExpenseCategory, float]:
        """Sum of amounts per category over the whole ledger.

        Every category is present, with 0.0 for those never used.
        """

        def _op(conn: Connection) -> dict[ExpenseCategory, float]:
            rows = conn.execute(
                text(
                    """
                    SELECT category, COALESCE(SUM(amount), 0) AS total
                    FROM expenses
                    GROUP BY category;
                    """
                )
            ).mappings()
            result = empty_totals()
            for r in rows:
                result[ExpenseCategory.from_code(r["category"])] = float(r["total"] or 0.0)
            return result

        return self._run("totals_by_category", _op)
