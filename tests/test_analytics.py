"""Tests for the pure spending aggregates."""
import datetime as dt

import pytest

from models.analytics import (
    BudgetProgress,
    active_category_count,
    budget_progress,
    category_breakdown,
    category_shares,
    daily_series,
    first_of_month,
    first_of_next_month,
    most_recent_monday,
    over_budget_amount,
    start_of_day,
    sum_in_range,
    total_this_month,
    total_this_week,
    total_today,
)
from models.category import ExpenseCategory
from models.expense import Expense

_next_id = iter(range(1, 10_000))


def expense(amount, date, category=ExpenseCategory.OTHER, name="item"):
    return Expense(id=next(_next_id), name=name, amount=amount, date=date, category=category)


@pytest.fixture
def mixed_records(now):
    return [
        expense(25.50, now, ExpenseCategory.FOOD),
        expense(15.75, now - dt.timedelta(days=1), ExpenseCategory.TRAVEL),
        expense(89.99, now - dt.timedelta(days=2), ExpenseCategory.SHOPPING),
        expense(125.00, now - dt.timedelta(days=6), ExpenseCategory.BILLS),
        expense(50.00, now - dt.timedelta(days=40), ExpenseCategory.BILLS),
    ]


class TestCalendarHelpers:
    def test_start_of_day(self, now):
        assert start_of_day(now) == dt.datetime(2024, 3, 13)

    def test_most_recent_monday(self, now):
        assert most_recent_monday(now) == dt.datetime(2024, 3, 11)

    def test_monday_is_its_own_week_start(self):
        assert most_recent_monday(dt.datetime(2024, 3, 11, 23, 59)) == dt.datetime(2024, 3, 11)

    def test_month_bounds(self, now):
        assert first_of_month(now) == dt.datetime(2024, 3, 1)
        assert first_of_next_month(now) == dt.datetime(2024, 4, 1)

    def test_december_rolls_into_next_year(self):
        assert first_of_next_month(dt.datetime(2024, 12, 31, 22, 0)) == dt.datetime(2025, 1, 1)


class TestSumInRange:
    def test_bounds_are_inclusive(self):
        start = dt.datetime(2024, 3, 1)
        end = dt.datetime(2024, 3, 2)
        records = [
            expense(1.0, start),
            expense(2.0, end),
            expense(4.0, start - dt.timedelta(microseconds=1)),
            expense(8.0, end + dt.timedelta(microseconds=1)),
        ]

        assert sum_in_range(records, start, end) == pytest.approx(3.0)

    def test_empty_input_is_zero(self, now):
        assert sum_in_range([], now, now) == 0.0

    def test_range_covering_everything_sums_all(self, mixed_records):
        start = min(r.date for r in mixed_records)
        end = max(r.date for r in mixed_records)

        assert sum_in_range(mixed_records, start, end) == pytest.approx(sum(r.amount for r in mixed_records))

    def test_input_is_not_modified(self, mixed_records, now):
        before = list(mixed_records)

        sum_in_range(mixed_records, now - dt.timedelta(days=3), now)

        assert mixed_records == before


class TestPeriodTotals:
    def test_total_today(self, mixed_records, now):
        assert total_today(mixed_records, now) == pytest.approx(25.50)

    def test_total_this_week_starts_on_monday(self, mixed_records, now):
        # Mon 11th, Tue 12th and Wed 13th fall inside; the 7th does not.
        assert total_this_week(mixed_records, now) == pytest.approx(25.50 + 15.75 + 89.99)

    def test_total_this_week_excludes_previous_sunday(self, now):
        records = [expense(10.0, dt.datetime(2024, 3, 10, 23, 59)), expense(3.0, dt.datetime(2024, 3, 11))]

        assert total_this_week(records, now) == pytest.approx(3.0)

    def test_total_this_month(self, mixed_records, now):
        assert total_this_month(mixed_records, now) == pytest.approx(25.50 + 15.75 + 89.99 + 125.00)

    def test_total_today_includes_next_midnight(self, now):
        next_midnight = start_of_day(now) + dt.timedelta(days=1)
        records = [expense(4.0, next_midnight), expense(1.0, next_midnight + dt.timedelta(microseconds=1))]

        assert total_today(records, now) == pytest.approx(4.0)

    def test_total_this_week_includes_next_monday_midnight(self, now):
        next_monday = most_recent_monday(now) + dt.timedelta(days=7)
        records = [expense(6.0, next_monday), expense(1.0, next_monday + dt.timedelta(microseconds=1))]

        assert next_monday == dt.datetime(2024, 3, 18)
        assert total_this_week(records, now) == pytest.approx(6.0)

    def test_total_this_month_includes_first_of_next_month(self, now):
        next_month = first_of_next_month(now)
        records = [expense(8.0, next_month), expense(1.0, next_month + dt.timedelta(microseconds=1))]

        assert next_month == dt.datetime(2024, 4, 1)
        assert total_this_month(records, now) == pytest.approx(8.0)

    def test_totals_on_empty_snapshot(self, now):
        assert total_today([], now) == 0.0
        assert total_this_week([], now) == 0.0
        assert total_this_month([], now) == 0.0


class TestDailySeries:
    def test_always_seven_entries(self, now):
        series = daily_series([], now, 7)

        assert series == [(i, 0.0) for i in range(7)]

    def test_groups_by_calendar_day(self, now):
        records = [
            expense(5.0, dt.datetime(2024, 3, 13, 0, 0)),
            expense(7.0, dt.datetime(2024, 3, 13, 23, 59)),
            expense(2.0, dt.datetime(2024, 3, 12, 23, 59)),
            expense(9.0, dt.datetime(2024, 3, 7, 8, 0)),
            expense(100.0, dt.datetime(2024, 3, 6, 8, 0)),
            expense(100.0, dt.datetime(2024, 3, 14, 8, 0)),
        ]

        series = daily_series(records, now, 7)

        assert len(series) == 7
        assert series[0] == (0, pytest.approx(12.0))
        assert series[1] == (1, pytest.approx(2.0))
        assert series[6] == (6, pytest.approx(9.0))
        assert [total for _, total in series[2:6]] == [0.0, 0.0, 0.0, 0.0]

    def test_custom_length(self, mixed_records, now):
        assert [days_ago for days_ago, _ in daily_series(mixed_records, now, 30)] == list(range(30))


class TestCategoryBreakdown:
    def test_every_category_present(self):
        totals = category_breakdown([])

        assert totals == {c: 0.0 for c in ExpenseCategory}

    def test_total_matches_sum_of_amounts(self, mixed_records):
        totals = category_breakdown(mixed_records)

        assert sum(totals.values()) == pytest.approx(sum(r.amount for r in mixed_records))
        assert totals[ExpenseCategory.BILLS] == pytest.approx(175.0)

    def test_shares_skip_empty_categories_and_sort_largest_first(self):
        totals = {c: 0.0 for c in ExpenseCategory}
        totals[ExpenseCategory.FOOD] = 25.0
        totals[ExpenseCategory.BILLS] = 75.0

        shares = category_shares(totals)

        assert [c for c, _, _ in shares] == [ExpenseCategory.BILLS, ExpenseCategory.FOOD]
        assert [p for _, _, p in shares] == [pytest.approx(75.0), pytest.approx(25.0)]
        assert active_category_count(totals) == 2

    def test_shares_empty_without_spending(self):
        assert category_shares({c: 0.0 for c in ExpenseCategory}) == []


class TestBudgetProgress:
    def test_unset_budget_never_over(self):
        assert budget_progress(100, 0) == BudgetProgress(remaining=-100, fraction_used=0.0, is_over_budget=False)

    def test_negative_budget_counts_as_unset(self):
        progress = budget_progress(10, -5)

        assert progress.fraction_used == 0.0
        assert progress.is_over_budget is False

    def test_within_budget(self):
        progress = budget_progress(25.50, 30)

        assert progress.remaining == pytest.approx(4.50)
        assert progress.fraction_used == pytest.approx(0.85)
        assert progress.is_over_budget is False
        assert over_budget_amount(progress) == 0.0

    def test_over_budget_fraction_is_uncapped(self):
        progress = budget_progress(150, 100)

        assert progress.remaining == pytest.approx(-50)
        assert progress.fraction_used == pytest.approx(1.5)
        assert progress.is_over_budget is True
        assert over_budget_amount(progress) == pytest.approx(50)

    def test_exactly_on_budget_is_not_over(self):
        assert budget_progress(100, 100).is_over_budget is False


def test_two_expense_scenario(now):
    records = [
        expense(25.50, now, ExpenseCategory.FOOD),
        expense(15.75, now - dt.timedelta(days=1), ExpenseCategory.TRAVEL),
    ]

    assert total_today(records, now) == pytest.approx(25.50)
    assert category_breakdown(records) == {
        ExpenseCategory.FOOD: pytest.approx(25.50),
        ExpenseCategory.TRAVEL: pytest.approx(15.75),
        ExpenseCategory.SHOPPING: 0.0,
        ExpenseCategory.BILLS: 0.0,
        ExpenseCategory.OTHER: 0.0,
    }
    progress = budget_progress(25.50, 30)
    assert (progress.remaining, progress.fraction_used, progress.is_over_budget) == (
        pytest.approx(4.50),
        pytest.approx(0.85),
        False,
    )
