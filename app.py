"""Smart Expense Tracker - mobile-first personal expense tracking.

This is the main entry point: it wires the ledger and preferences once per
process and routes the active tab to its view.
"""
import datetime as dt
import streamlit as st
from models import LedgerStore, Preferences, StorageError, get_engine, initialize_sample_data
from utils.config import log_level, preferences_path, seed_sample_data
from utils.constants import TABS
from utils.log import configure_logging
from views import (
    apply_theme,
    render_add,
    render_bottom_nav,
    render_budget,
    render_home,
    render_reports,
    render_settings,
)

st.set_page_config(
    page_title="Smart Expense Tracker",
    page_icon="💰",
    layout="centered",
)

configure_logging(log_level())

VALID_TABS = {tab_id for tab_id, _, _ in TABS}


@st.cache_resource
def get_store() -> LedgerStore:
    """The single ledger store for this process."""
    return LedgerStore(get_engine())


@st.cache_resource
def get_preferences() -> Preferences:
    return Preferences(preferences_path())


@st.cache_resource
def seed_sample_data_once(_store: LedgerStore, _preferences: Preferences) -> int:
    """Seed demo expenses at most once per process, shared by all sessions."""
    return initialize_sample_data(_store, _preferences, dt.datetime.now())


def get_active_tab() -> str:
    """Get active tab from query parameters."""
    tab = st.query_params.get("tab", "home")
    return tab if tab in VALID_TABS else "home"


def main():
    """Main application entry point."""
    try:
        store = get_store()
    except StorageError as e:
        st.error(f"Could not open the expense database: {e}")
        st.stop()
    preferences = get_preferences()

    if seed_sample_data():
        try:
            seed_sample_data_once(store, preferences)
        except StorageError as e:
            st.error(f"Could not add sample expenses: {e}")

    try:
        theme_mode = preferences.get_theme_mode()
    except StorageError as e:
        st.warning(f"Could not load your preferences: {e}")
        theme_mode = "system"
    apply_theme(theme_mode)

    active_tab = get_active_tab()
    if active_tab == "home":
        render_home(store, preferences)
    elif active_tab == "add":
        render_add(store)
    elif active_tab == "reports":
        render_reports(store)
    elif active_tab == "budget":
        render_budget(store, preferences)
    elif active_tab == "settings":
        render_settings(store, preferences)

    render_bottom_nav(active_tab)


if __name__ == "__main__":
    main()
