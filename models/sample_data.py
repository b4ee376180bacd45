"""Demo expenses inserted the first time the app starts."""
import datetime as dt

import structlog

from .category import ExpenseCategory
from .errors import StorageError
from .expense import ExpenseDraft
from .ledger import LedgerStore
from .settings import Preferences

log = structlog.get_logger(__name__)

# (name, amount, days ago, category)
SAMPLE_EXPENSES: list[tuple[str, float, int, ExpenseCategory]] = [
    ("Lunch at restaurant", 25.50, 0, ExpenseCategory.FOOD),
    ("Coffee", 5.00, 0, ExpenseCategory.FOOD),
    ("Uber ride", 15.75, 1, ExpenseCategory.TRAVEL),
    ("Groceries", 87.30, 1, ExpenseCategory.FOOD),
    ("New shoes", 89.99, 2, ExpenseCategory.SHOPPING),
    ("Electricity bill", 125.00, 2, ExpenseCategory.BILLS),
    ("Movie tickets", 35.00, 3, ExpenseCategory.OTHER),
    ("Gas station", 45.20, 3, ExpenseCategory.TRAVEL),
    ("Dinner", 58.40, 4, ExpenseCategory.FOOD),
    ("Books", 32.99, 4, ExpenseCategory.SHOPPING),
    ("Internet bill", 60.00, 5, ExpenseCategory.BILLS),
    ("Taxi", 12.50, 5, ExpenseCategory.TRAVEL),
    ("Breakfast", 18.75, 6, ExpenseCategory.FOOD),
    ("Clothes shopping", 145.00, 6, ExpenseCategory.SHOPPING),
    ("Phone bill", 50.00, 7, ExpenseCategory.BILLS),
]


def sample_expenses(now: dt.datetime) -> list[ExpenseDraft]:
    return [
        ExpenseDraft(
            name=name,
            amount=amount,
            date=now - dt.timedelta(days=days_ago),
            category=category,
        )
        for name, amount, days_ago, category in SAMPLE_EXPENSES
    ]


def initialize_sample_data(store: LedgerStore, preferences: Preferences, now: dt.datetime) -> int:
    """Seed demo expenses on first launch and clear the first-launch flag.

    The flag is cleared before inserting so a failed flag write never leaves
    demo rows behind; if the insert fails the flag is restored.
    Returns the number of expenses inserted.
    """
    if not preferences.is_first_launch():
        return 0
    preferences.mark_launched()
    try:
        ids = store.create_many(sample_expenses(now))
    except StorageError:
        preferences.reset_first_launch()
        raise
    log.info("sample_data_seeded", count=len(ids))
    return len(ids)
