"""Add and edit expense forms."""
import datetime as dt
import streamlit as st
from models.category import ExpenseCategory
from models.errors import StorageError, ValidationError
from models.expense import Expense, ExpenseDraft
from models.ledger import LedgerStore
from utils.constants import CURRENCY
from utils.helpers import category_label
from utils.validation import validate_expense_input
from .layout import render_header

CATEGORIES = list(ExpenseCategory)


def _expense_datetime(day: dt.date, existing: Expense | None) -> dt.datetime:
    """Keep the original time of day when editing; use the current time for today."""
    if existing is not None and existing.date.date() == day:
        return existing.date
    now = dt.datetime.now()
    if day == now.date():
        return now
    return dt.datetime.combine(day, dt.time(0, 0, 0))


def render_expense_form(store: LedgerStore, existing: Expense | None = None, key: str = "add_expense") -> bool:
    """Render the expense form and save it on submit.

    Returns True once the expense was written, so callers can close an
    editor and rerun.
    """
    is_editing = existing is not None

    with st.form(key, clear_on_submit=not is_editing):
        name = st.text_input(
            "Expense name",
            value=existing.name if is_editing else "",
            placeholder="e.g., Grocery shopping",
        )
        c1, c2 = st.columns([1, 1])
        with c1:
            amount = st.text_input(
                f"Amount ({CURRENCY})",
                value=f"{existing.amount:.2f}" if is_editing else "",
                placeholder="e.g., 25000",
            )
        with c2:
            day = st.date_input(
                "Date",
                value=existing.date.date() if is_editing else dt.date.today(),
            )
        category = st.radio(
            "Category",
            CATEGORIES,
            index=CATEGORIES.index(existing.category) if is_editing else 0,
            horizontal=True,
            format_func=category_label,
        )
        submitted = st.form_submit_button(
            "Update Expense" if is_editing else "Add Expense",
            use_container_width=True,
        )

    if not submitted:
        return False

    try:
        clean_name, parsed_amount = validate_expense_input(name, amount)
    except ValidationError as e:
        st.error(str(e))
        return False

    draft = ExpenseDraft(
        name=clean_name,
        amount=parsed_amount,
        date=_expense_datetime(day, existing),
        category=category,
    )
    try:
        if is_editing:
            if store.update(Expense.from_draft(draft, existing.id)) == 0:
                st.warning("This expense no longer exists.")
                return False
            st.toast("Expense updated successfully")
        else:
            store.create(draft)
            st.toast("Expense added successfully")
    except StorageError as e:
        st.error(f"Error: {e}")
        return False
    return True


def render_add(store: LedgerStore):
    """Render add expense tab."""
    render_header("Add Expense", "Track your spending in seconds", "#f093fb", "#f5576c")
    if render_expense_form(store):
        st.success("✅ Saved! Your expense has been recorded.")
