"""Tests for the figure builders and display helpers used by the views."""
import csv
import datetime as dt
import io

from models.analytics import budget_progress
from models.category import ExpenseCategory, empty_totals
from models.expense import Expense
from utils.helpers import category_label, day_label, format_amount
from views.charts import budget_donut, category_pie_chart, spending_bar_chart
from views.settings import export_csv


def test_day_labels(now):
    assert day_label(0, now) == "Today"
    assert day_label(1, now) == "Yest."
    # 2024-03-13 is a Wednesday
    assert day_label(2, now) == "Mon"
    assert day_label(3, now) == "Sun"


def test_format_amount():
    assert format_amount(1234.5) == "1,234.50 GNF"
    assert format_amount(1234.4, 0) == "1,234 GNF"


def test_category_label_uses_display_name():
    assert category_label(ExpenseCategory.BILLS).endswith("Bills")


def test_bar_chart_runs_oldest_to_today(now):
    series = [(0, 10.0), (1, 0.0), (2, 5.0), (3, 0.0), (4, 0.0), (5, 0.0), (6, 1.0)]

    fig = spending_bar_chart(series, now)

    bar = fig.data[0]
    assert list(bar.y) == [1.0, 0.0, 0.0, 0.0, 5.0, 0.0, 10.0]
    assert list(fig.layout.xaxis.ticktext)[-2:] == ["Yest.", "Today"]


def test_pie_chart_only_shows_spent_categories():
    totals = empty_totals()
    totals[ExpenseCategory.FOOD] = 30.0
    totals[ExpenseCategory.TRAVEL] = 10.0

    fig = category_pie_chart(totals)

    assert list(fig.data[0].labels) == ["Food", "Travel"]
    assert list(fig.data[0].values) == [30.0, 10.0]


def test_pie_chart_is_none_without_spending():
    assert category_pie_chart(empty_totals()) is None


def test_budget_donut_clamps_spent_to_budget():
    progress = budget_progress(150.0, 100.0)

    fig = budget_donut(150.0, 100.0, progress)

    assert list(fig.data[0].values) == [100.0, 0.0]
    assert "over budget" in fig.layout.annotations[0].text


def test_export_csv():
    expenses = [
        Expense(id=1, name="Coffee", amount=5.0, date=dt.datetime(2024, 3, 13, 9, 0), category=ExpenseCategory.FOOD),
    ]

    rows = list(csv.reader(io.StringIO(export_csv(expenses))))

    assert rows == [
        ["date", "name", "category", "amount"],
        ["2024-03-13T09:00:00", "Coffee", "Food", "5.00"],
    ]
