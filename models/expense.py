"""Expense records and their database row encoding.

Dates are kept as naive local wall-clock datetimes. They are written to the
database as fixed-width ISO-8601 text (always with microseconds) so that
comparing the stored strings gives the same order as comparing the dates.
Range queries in the ledger rely on that.
"""
import datetime as dt
from dataclasses import dataclass
from typing import Any, Mapping

from .category import ExpenseCategory

DATE_FORMAT = "%Y-%m-%dT%H:%M:%S.%f"


def normalize_datetime(value: dt.date | dt.datetime) -> dt.datetime:
    """Coerce a date or datetime to a naive local datetime."""
    if isinstance(value, dt.datetime):
        if value.tzinfo is not None:
            return value.astimezone().replace(tzinfo=None)
        return value
    if isinstance(value, dt.date):
        return dt.datetime.combine(value, dt.time(0, 0, 0))
    raise TypeError(f"Expected date or datetime, got {type(value).__name__}")


def encode_date(value: dt.date | dt.datetime) -> str:
    return normalize_datetime(value).strftime(DATE_FORMAT)


def decode_date(value: str) -> dt.datetime:
    return normalize_datetime(dt.datetime.fromisoformat(value))


@dataclass(frozen=True)
class ExpenseDraft:
    """An expense that has not been persisted yet."""

    name: str
    amount: float
    date: dt.datetime
    category: ExpenseCategory

    def __post_init__(self) -> None:
        object.__setattr__(self, "date", normalize_datetime(self.date))
        object.__setattr__(self, "category", ExpenseCategory.from_code(self.category))
        object.__setattr__(self, "amount", float(self.amount))


@dataclass(frozen=True)
class Expense:
    """A persisted expense. ``id`` is None until the store assigns one."""

    id: int | None
    name: str
    amount: float
    date: dt.datetime
    category: ExpenseCategory

    def __post_init__(self) -> None:
        object.__setattr__(self, "date", normalize_datetime(self.date))
        object.__setattr__(self, "category", ExpenseCategory.from_code(self.category))
        object.__setattr__(self, "amount", float(self.amount))

    @classmethod
    def from_draft(cls, draft: ExpenseDraft, id: int | None = None) -> "Expense":
        return cls(
            id=id,
            name=draft.name,
            amount=draft.amount,
            date=draft.date,
            category=draft.category,
        )

    def to_draft(self) -> ExpenseDraft:
        return ExpenseDraft(
            name=self.name,
            amount=self.amount,
            date=self.date,
            category=self.category,
        )


def to_row(record: Expense | ExpenseDraft) -> dict[str, Any]:
    """Map a record to bind parameters for the expenses table."""
    return {
        "name": record.name,
        "amount": float(record.amount),
        "date": encode_date(record.date),
        "category": int(record.category),
    }


def from_row(row: Mapping[str, Any]) -> Expense:
    return Expense(
        id=int(row["id"]),
        name=str(row["name"]),
        amount=float(row["amount"]),
        date=decode_date(row["date"]),
        category=ExpenseCategory.from_code(row["category"]),
    )
