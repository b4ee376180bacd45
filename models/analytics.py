"""Spending aggregates computed from a snapshot of expenses.

Everything here is a pure function of its arguments. Functions that depend on
the current time take ``now`` explicitly instead of reading the clock.
"""
import datetime as dt
from dataclasses import dataclass
from typing import Mapping, Sequence

from .category import ExpenseCategory, empty_totals
from .expense import Expense, normalize_datetime


@dataclass(frozen=True)
class BudgetProgress:
    remaining: float
    fraction_used: float
    is_over_budget: bool


def start_of_day(now: dt.datetime) -> dt.datetime:
    now = normalize_datetime(now)
    return dt.datetime(now.year, now.month, now.day)


def most_recent_monday(now: dt.datetime) -> dt.datetime:
    """Midnight of the Monday that starts the ISO week containing ``now``."""
    today = start_of_day(now)
    return today - dt.timedelta(days=today.weekday())


def first_of_month(now: dt.datetime) -> dt.datetime:
    now = normalize_datetime(now)
    return dt.datetime(now.year, now.month, 1)


def first_of_next_month(now: dt.datetime) -> dt.datetime:
    now = normalize_datetime(now)
    if now.month == 12:
        return dt.datetime(now.year + 1, 1, 1)
    return dt.datetime(now.year, now.month + 1, 1)


def sum_in_range(records: Sequence[Expense], start: dt.datetime, end: dt.datetime) -> float:
    """Sum amounts of records dated within [start, end], both bounds included."""
    start = normalize_datetime(start)
    end = normalize_datetime(end)
    return float(sum(r.amount for r in records if start <= r.date <= end))


def total_today(records: Sequence[Expense], now: dt.datetime) -> float:
    today = start_of_day(now)
    return sum_in_range(records, today, today + dt.timedelta(days=1))


def total_this_week(records: Sequence[Expense], now: dt.datetime) -> float:
    monday = most_recent_monday(now)
    return sum_in_range(records, monday, monday + dt.timedelta(days=7))


def total_this_month(records: Sequence[Expense], now: dt.datetime) -> float:
    return sum_in_range(records, first_of_month(now), first_of_next_month(now))


def daily_series(records: Sequence[Expense], now: dt.datetime, days: int = 7) -> list[tuple[int, float]]:
    """Daily totals for the last ``days`` calendar days.

    Returns ``(days_ago, total)`` pairs starting with today (``days_ago == 0``).
    Days without spending are included with 0.0.
    """
    today = start_of_day(now).date()
    totals = [0.0] * max(days, 0)
    for r in records:
        days_ago = (today - r.date.date()).days
        if 0 <= days_ago < days:
            totals[days_ago] += r.amount
    return list(enumerate(totals))


def category_breakdown(records: Sequence[Expense]) -> dict[ExpenseCategory, float]:
    """Sum of amounts per category; every category is present."""
    totals = empty_totals()
    for r in records:
        totals[r.category] += r.amount
    return totals


def category_shares(totals: Mapping[ExpenseCategory, float]) -> list[tuple[ExpenseCategory, float, float]]:
    """Non-zero categories as ``(category, amount, percent_of_total)``, largest first."""
    grand_total = sum(totals.values())
    if grand_total <= 0:
        return []
    shares = [
        (category, amount, amount / grand_total * 100.0)
        for category, amount in totals.items()
        if amount > 0
    ]
    return sorted(shares, key=lambda s: (-s[1], int(s[0])))


def active_category_count(totals: Mapping[ExpenseCategory, float]) -> int:
    return sum(1 for amount in totals.values() if amount > 0)


def budget_progress(total_spent: float, budget: float) -> BudgetProgress:
    """Compare spending against the monthly budget.

    A budget of zero or less means none is set: nothing is used and the
    spending is never over budget. ``fraction_used`` is not capped at 1.0.
    """
    has_budget = budget > 0
    return BudgetProgress(
        remaining=budget - total_spent,
        fraction_used=(total_spent / budget) if has_budget else 0.0,
        is_over_budget=has_budget and total_spent > budget,
    )


def over_budget_amount(progress: BudgetProgress) -> float:
    return -progress.remaining if progress.is_over_budget else 0.0
