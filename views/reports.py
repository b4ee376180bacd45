"""Reports view."""
import datetime as dt
import streamlit as st
from models.analytics import (
    category_breakdown,
    category_shares,
    daily_series,
    total_this_month,
    total_this_week,
    total_today,
)
from models.errors import StorageError
from models.ledger import LedgerStore
from utils.helpers import category_label, format_amount
from .charts import category_pie_chart, spending_bar_chart
from .layout import render_card, render_header, render_section_title


def render_reports(store: LedgerStore):
    """Render reports tab."""
    now = dt.datetime.now()
    render_header("Reports", "Where your money goes", "#4facfe", "#00f2fe")

    try:
        records = store.list_all()
    except StorageError as e:
        st.error(f"Could not load your expenses: {e}")
        return

    c1, c2, c3 = st.columns(3)
    with c1:
        render_card("Today", format_amount(total_today(records, now), 0), color="#f97316")
    with c2:
        render_card("This week", format_amount(total_this_week(records, now), 0), color="#3b82f6")
    with c3:
        render_card("This month", format_amount(total_this_month(records, now), 0), color="#a855f7")

    render_section_title("Last 7 days")
    st.plotly_chart(
        spending_bar_chart(daily_series(records, now, 7), now),
        use_container_width=True,
        config={"displayModeBar": False},
    )

    render_section_title("By category")
    totals = category_breakdown(records)
    fig = category_pie_chart(totals)
    if fig is None:
        st.caption("No expenses to show yet.")
        return
    st.plotly_chart(fig, use_container_width=True, config={"displayModeBar": False})
    for category, amount, percent in category_shares(totals):
        st.markdown(
            f"<span style='color:{category.color}'>●</span> {category_label(category)}: "
            f"**{format_amount(amount)}** ({percent:.1f}%)",
            unsafe_allow_html=True,
        )
