"""Models package for persistence and spending aggregates."""
from .category import CATEGORY_STYLES, ExpenseCategory, empty_totals
from .errors import LedgerError, StorageError, ValidationError
from .expense import Expense, ExpenseDraft, decode_date, encode_date
from .database import create_ledger_engine, get_engine, init_db
from .ledger import LedgerStore
from .settings import Preferences
from .sample_data import initialize_sample_data, sample_expenses
from .analytics import (
    BudgetProgress,
    active_category_count,
    budget_progress,
    category_breakdown,
    category_shares,
    daily_series,
    first_of_month,
    first_of_next_month,
    most_recent_monday,
    over_budget_amount,
    start_of_day,
    sum_in_range,
    total_this_month,
    total_this_week,
    total_today,
)

__all__ = [
    "CATEGORY_STYLES",
    "ExpenseCategory",
    "empty_totals",
    "LedgerError",
    "StorageError",
    "ValidationError",
    "Expense",
    "ExpenseDraft",
    "decode_date",
    "encode_date",
    "create_ledger_engine",
    "get_engine",
    "init_db",
    "LedgerStore",
    "Preferences",
    "initialize_sample_data",
    "sample_expenses",
    "BudgetProgress",
    "active_category_count",
    "budget_progress",
    "category_breakdown",
    "category_shares",
    "daily_series",
    "first_of_month",
    "first_of_next_month",
    "most_recent_monday",
    "over_budget_amount",
    "start_of_day",
    "sum_in_range",
    "total_this_month",
    "total_this_week",
    "total_today",
]
