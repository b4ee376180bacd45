"""Helper utility functions."""
import datetime as dt

from models.category import ExpenseCategory
from .constants import CURRENCY, WEEKDAY_ABBREVIATIONS


def category_label(cat: ExpenseCategory) -> str:
    """Get display label for category."""
    return f"{cat.icon} {cat.display_name}"


def format_amount(value: float, decimals: int = 2) -> str:
    return f"{value:,.{decimals}f} {CURRENCY}"


def format_date(value: dt.datetime) -> str:
    return value.strftime("%b %d, %Y")


def day_label(days_ago: int, now: dt.datetime) -> str:
    """Short chart label for a day counted back from ``now``."""
    if days_ago == 0:
        return "Today"
    if days_ago == 1:
        return "Yest."
    day = now.date() - dt.timedelta(days=days_ago)
    return WEEKDAY_ABBREVIATIONS[day.weekday()]
