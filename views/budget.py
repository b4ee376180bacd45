"""Budget view."""
import calendar
import datetime as dt
import streamlit as st
from models.analytics import (
    budget_progress,
    first_of_month,
    first_of_next_month,
    over_budget_amount,
    total_this_month,
)
from models.errors import StorageError, ValidationError
from models.ledger import LedgerStore
from models.settings import Preferences
from utils.constants import CURRENCY
from utils.helpers import format_amount
from utils.validation import validate_budget_input
from .charts import budget_donut
from .layout import render_card, render_header, render_section_title


def _render_budget_form(preferences: Preferences, budget: float) -> None:
    with st.form("set_budget"):
        value = st.text_input(
            f"Monthly budget ({CURRENCY})",
            value=f"{budget:.0f}" if budget > 0 else "",
            placeholder="e.g., 1000",
        )
        saved = st.form_submit_button("Save budget", use_container_width=True)

    if saved:
        try:
            amount = validate_budget_input(value)
            preferences.set_monthly_budget(amount)
        except ValidationError as e:
            st.error(str(e))
        except StorageError as e:
            st.error(f"Error: {e}")
        else:
            st.toast(f"Budget set to {format_amount(amount)}")
            st.rerun()


def render_budget(store: LedgerStore, preferences: Preferences):
    """Render budget tab."""
    now = dt.datetime.now()
    days_in_month = calendar.monthrange(now.year, now.month)[1]
    render_header(
        "Monthly Budget",
        f"{days_in_month - now.day} days remaining in {now.strftime('%B')}",
        "#43e97b",
        "#38f9d7",
    )

    try:
        budget = preferences.get_monthly_budget()
        month_records = store.list_by_date_range(first_of_month(now), first_of_next_month(now))
    except StorageError as e:
        st.error(f"Could not load your budget: {e}")
        return

    if budget <= 0:
        st.info("Set a monthly budget to track your spending and stay on target")
        _render_budget_form(preferences, budget)
        return

    spent = total_this_month(month_records, now)
    progress = budget_progress(spent, budget)

    st.plotly_chart(budget_donut(spent, budget, progress), use_container_width=True, config={"displayModeBar": False})

    c1, c2, c3 = st.columns(3)
    with c1:
        render_card("Budget", format_amount(budget))
    with c2:
        render_card("Spent", format_amount(spent), color="#f87171")
    with c3:
        render_card(
            "Remaining",
            format_amount(progress.remaining),
            color="#dc2626" if progress.is_over_budget else "#34d399",
        )

    st.progress(min(max(progress.fraction_used, 0.0), 1.0))
    st.caption(f"{progress.fraction_used * 100:.1f}% used")

    if progress.is_over_budget:
        st.error(f"You've spent {format_amount(over_budget_amount(progress))} over your budget this month.")
    elif progress.fraction_used >= 0.8:
        st.warning("You have used most of this month's budget.")

    render_section_title("Update budget")
    _render_budget_form(preferences, budget)
    if st.button("Clear budget"):
        try:
            preferences.clear_budget()
        except StorageError as e:
            st.error(f"Error: {e}")
        else:
            st.rerun()
