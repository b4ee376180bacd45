"""Utilities package."""
from .constants import CURRENCY, TABS, THEME_LABELS, THEME_MODES
from .helpers import category_label, day_label, format_amount, format_date
from .validation import parse_amount, validate_budget_input, validate_expense_input

__all__ = [
    "CURRENCY",
    "TABS",
    "THEME_LABELS",
    "THEME_MODES",
    "category_label",
    "day_label",
    "format_amount",
    "format_date",
    "parse_amount",
    "validate_budget_input",
    "validate_expense_input",
]
