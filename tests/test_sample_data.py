"""Tests for first-launch seeding."""
import datetime as dt

import pytest
from sqlalchemy import text

from models.analytics import category_breakdown, daily_series
from models.category import ExpenseCategory
from models.errors import StorageError
from models.sample_data import SAMPLE_EXPENSES, initialize_sample_data, sample_expenses
from models.settings import Preferences


def test_seeds_once(store, preferences, now):
    assert initialize_sample_data(store, preferences, now) == len(SAMPLE_EXPENSES)
    assert preferences.is_first_launch() is False

    assert initialize_sample_data(store, preferences, now) == 0
    assert store.count() == len(SAMPLE_EXPENSES)


def test_skips_when_already_launched(store, preferences, now):
    preferences.mark_launched()

    assert initialize_sample_data(store, preferences, now) == 0
    assert store.list_all() == []


def test_sample_dates_are_relative_to_now(now):
    drafts = sample_expenses(now)

    assert drafts[0].date == now
    assert min(d.date for d in drafts) == now - dt.timedelta(days=7)


def test_seeded_data_covers_every_category_and_the_week(store, preferences, now):
    initialize_sample_data(store, preferences, now)
    records = store.list_all()

    totals = category_breakdown(records)
    assert all(totals[c] > 0 for c in ExpenseCategory)
    assert all(total > 0 for _, total in daily_series(records, now, 7))
    assert sum(totals.values()) == pytest.approx(sum(amount for _, amount, _, _ in SAMPLE_EXPENSES))


def test_unwritable_flag_never_inserts_rows(store, tmp_path, now):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    preferences = Preferences(blocker / "preferences.json")

    for _ in range(3):
        with pytest.raises(StorageError):
            initialize_sample_data(store, preferences, now)

    assert store.count() == 0


def test_failed_insert_restores_first_launch_flag(engine, store, preferences, now):
    with engine.begin() as conn:
        conn.execute(text("DROP TABLE expenses;"))

    with pytest.raises(StorageError):
        initialize_sample_data(store, preferences, now)

    assert preferences.is_first_launch() is True
