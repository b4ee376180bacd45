"""Checks applied to user input before it reaches the ledger."""
import math

from models.errors import ValidationError


def parse_amount(value: str | float | int | None) -> float:
    """Parse a strictly positive, finite amount."""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError("Please enter an amount")
    if isinstance(value, bool):
        raise ValidationError("Please enter a valid amount")
    try:
        amount = float(value.strip() if isinstance(value, str) else value)
    except (TypeError, ValueError):
        raise ValidationError("Please enter a valid amount") from None
    if not math.isfinite(amount) or amount <= 0:
        raise ValidationError("Please enter a valid amount")
    return amount


def validate_expense_input(name: str | None, amount: str | float | int | None) -> tuple[str, float]:
    """Return the trimmed name and parsed amount, or raise ValidationError."""
    clean_name = (name or "").strip()
    if not clean_name:
        raise ValidationError("Please enter an expense name")
    return clean_name, parse_amount(amount)


def validate_budget_input(value: str | float | int | None) -> float:
    try:
        return parse_amount(value)
    except ValidationError:
        raise ValidationError("Please enter a budget greater than 0") from None
