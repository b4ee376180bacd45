"""Home view: this month at a glance and the expense list."""
import datetime as dt
import streamlit as st
from models.analytics import (
    active_category_count,
    budget_progress,
    category_breakdown,
    category_shares,
    first_of_month,
    first_of_next_month,
)
from models.errors import StorageError
from models.expense import Expense
from models.ledger import LedgerStore
from models.settings import Preferences
from utils.helpers import category_label, format_amount, format_date
from .add import render_expense_form
from .layout import render_card, render_header, render_section_title


def _render_summary(month_records: list[Expense], budget: float) -> None:
    totals = category_breakdown(month_records)
    spent = sum(totals.values())
    progress = budget_progress(spent, budget)

    c1, c2 = st.columns([1, 1])
    with c1:
        render_card(
            "This month",
            format_amount(spent, 0),
            f"{progress.fraction_used * 100:.0f}% of budget" if budget > 0 else "No budget set",
            "#dc2626" if progress.is_over_budget else "#667eea",
        )
    with c2:
        active = active_category_count(totals)
        render_card("Categories", str(active), "with spending" if active else "nothing yet", "#22c55e")

    shares = category_shares(totals)
    if shares:
        render_section_title("Spending by category")
        for category, amount, percent in shares:
            left, right = st.columns([3, 2])
            with left:
                st.write(f"**{category_label(category)}**")
            with right:
                st.caption(f"{format_amount(amount)} · {percent:.0f}%")
            st.progress(min(percent / 100.0, 1.0))


def _render_expense_row(store: LedgerStore, expense: Expense) -> None:
    expense_id = int(expense.id)
    c1, c2, c3 = st.columns([2.6, 1.2, 0.9])
    with c1:
        st.write(f"**{expense.name}**")
        st.caption(f"{category_label(expense.category)} · {format_date(expense.date)}")
    with c2:
        st.write(format_amount(expense.amount))
    with c3:
        a1, a2 = st.columns([1, 1], gap="small")
        with a1:
            if st.button("✏️", key=f"edit_{expense_id}", help="Edit", use_container_width=True):
                st.session_state["_editing_expense_id"] = expense_id
        with a2:
            if st.button("🗑️", key=f"delete_{expense_id}", help="Delete", use_container_width=True):
                st.session_state["_deleting_expense_id"] = expense_id

    if st.session_state.get("_deleting_expense_id") == expense_id:
        st.warning(f'Are you sure you want to delete "{expense.name}"?')
        dc1, dc2, _ = st.columns([1, 1, 3])
        with dc1:
            if st.button("Delete", key=f"confirm_delete_{expense_id}", type="primary"):
                try:
                    store.delete(expense_id)
                except StorageError as e:
                    st.error(f"Error: {e}")
                else:
                    st.session_state.pop("_deleting_expense_id", None)
                    st.session_state.pop("_editing_expense_id", None)
                    st.toast(f"{expense.name} deleted")
                    st.rerun()
        with dc2:
            if st.button("Cancel", key=f"cancel_delete_{expense_id}"):
                st.session_state.pop("_deleting_expense_id", None)
                st.rerun()

    if st.session_state.get("_editing_expense_id") == expense_id:
        st.caption("Edit expense")
        if render_expense_form(store, expense, key=f"edit_form_{expense_id}"):
            st.session_state.pop("_editing_expense_id", None)
            st.rerun()
        if st.button("Close editor", key=f"close_edit_{expense_id}"):
            st.session_state.pop("_editing_expense_id", None)
            st.rerun()


def render_home(store: LedgerStore, preferences: Preferences):
    """Render home tab."""
    now = dt.datetime.now()
    render_header("Smart Expense Tracker", now.strftime("%B %Y"), "#667eea", "#764ba2")

    try:
        month_records = store.list_by_date_range(first_of_month(now), first_of_next_month(now))
        expenses = store.list_all()
        budget = preferences.get_monthly_budget()
    except StorageError as e:
        st.error(f"Could not load your expenses: {e}")
        return

    _render_summary(month_records, budget)

    render_section_title("Recent expenses")
    st.caption(f"{len(expenses)} total")
    if not expenses:
        st.info("No expenses yet. Tap + to add your first one.")
        return

    for expense in expenses:
        _render_expense_row(store, expense)
