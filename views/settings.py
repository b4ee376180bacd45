"""Settings view."""
import csv
import io
import streamlit as st
from models.errors import StorageError
from models.expense import Expense
from models.ledger import LedgerStore
from models.settings import Preferences
from utils.constants import THEME_LABELS, THEME_MODES
from .layout import render_header, render_section_title


def export_csv(expenses: list[Expense]) -> str:
    """Serialize expenses to CSV text."""
    buf = io.StringIO()
    writer = csv.writer(buf)
    writer.writerow(["date", "name", "category", "amount"])
    for e in expenses:
        writer.writerow([e.date.isoformat(), e.name, e.category.display_name, f"{e.amount:.2f}"])
    return buf.getvalue()


def render_settings(store: LedgerStore, preferences: Preferences):
    """Render settings tab."""
    render_header("Settings", "Appearance and your data", "#fa709a", "#fee140")

    render_section_title("Appearance")
    try:
        current = preferences.get_theme_mode()
    except StorageError as e:
        st.warning(f"Could not load your preferences: {e}")
        current = "system"
    mode = st.radio(
        "Theme",
        THEME_MODES,
        index=THEME_MODES.index(current),
        horizontal=True,
        format_func=lambda m: THEME_LABELS[m],
    )
    if mode != current:
        try:
            preferences.set_theme_mode(mode)
        except StorageError as e:
            st.error(f"Error: {e}")
        else:
            st.rerun()

    render_section_title("Export")
    try:
        expenses = store.list_all()
    except StorageError as e:
        st.error(f"Could not load your expenses: {e}")
        expenses = []
    st.download_button(
        "Export CSV",
        data=export_csv(expenses).encode("utf-8"),
        file_name="expenses.csv",
        mime="text/csv",
        disabled=not expenses,
    )

    render_section_title("Reset")
    st.caption("This will permanently delete all expenses.")
    clear_budget = st.checkbox("Also clear the monthly budget")
    confirm = st.text_input("Type RESET to confirm", value="")
    if st.button("Delete all expenses"):
        if confirm.strip() != "RESET":
            st.error("Type RESET to confirm.")
            return
        try:
            removed = store.delete_all()
            if clear_budget:
                preferences.clear_budget()
        except StorageError as e:
            st.error(f"Error: {e}")
            return
        for k in ["_editing_expense_id", "_deleting_expense_id"]:
            st.session_state.pop(k, None)
        st.success(f"Deleted {removed} expenses.")
