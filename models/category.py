"""Expense categories and their presentation metadata."""
import enum


class ExpenseCategory(enum.IntEnum):
    """Fixed set of expense categories, stored by integer code."""

    FOOD = 0
    TRAVEL = 1
    SHOPPING = 2
    BILLS = 3
    OTHER = 4

    @classmethod
    def from_code(cls, code: int) -> "ExpenseCategory":
        try:
            return cls(int(code))
        except ValueError:
            raise ValueError(f"Unknown category code: {code!r}") from None

    @property
    def display_name(self) -> str:
        return CATEGORY_STYLES[self][0]

    @property
    def icon(self) -> str:
        return CATEGORY_STYLES[self][1]

    @property
    def color(self) -> str:
        return CATEGORY_STYLES[self][2]


# (display name, icon, colour)
CATEGORY_STYLES: dict[ExpenseCategory, tuple[str, str, str]] = {
    ExpenseCategory.FOOD: ("Food", "🍽️", "#f97316"),
    ExpenseCategory.TRAVEL: ("Travel", "✈️", "#3b82f6"),
    ExpenseCategory.SHOPPING: ("Shopping", "🛍️", "#a855f7"),
    ExpenseCategory.BILLS: ("Bills", "🧾", "#ef4444"),
    ExpenseCategory.OTHER: ("Other", "⋯", "#94a3b8"),
}


def empty_totals() -> dict[ExpenseCategory, float]:
    """Return a totals mapping with every category at zero."""
    return {c: 0.0 for c in ExpenseCategory}
