"""Plotly figures for the reports and budget screens."""
import datetime as dt
from typing import Mapping, Sequence

import plotly.graph_objects as go

from models.analytics import BudgetProgress, category_shares
from models.category import ExpenseCategory
from utils.constants import CURRENCY
from utils.helpers import day_label

BAR_COLOR = "#667eea"
TODAY_COLOR = "#2563eb"
SPENT_COLOR = "#f87171"
OVER_COLOR = "#dc2626"
REMAINING_COLOR = "#34d399"


def _base_layout(fig: go.Figure, height: int) -> go.Figure:
    fig.update_layout(
        margin=dict(l=0, r=0, t=10, b=0),
        height=height,
        showlegend=False,
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
    )
    return fig


def spending_bar_chart(series: Sequence[tuple[int, float]], now: dt.datetime) -> go.Figure:
    """Bar per day, oldest on the left and today on the right."""
    ordered = sorted(series, key=lambda item: -item[0])
    positions = list(range(len(ordered)))
    fig = go.Figure(
        data=[
            go.Bar(
                x=positions,
                y=[total for _, total in ordered],
                marker={"color": [TODAY_COLOR if days_ago == 0 else BAR_COLOR for days_ago, _ in ordered]},
                hovertemplate=f"%{{y:,.2f}} {CURRENCY}<extra></extra>",
            )
        ]
    )
    fig.update_xaxes(
        tickmode="array",
        tickvals=positions,
        ticktext=[day_label(days_ago, now) for days_ago, _ in ordered],
    )
    fig.update_yaxes(rangemode="tozero", gridcolor="rgba(148,163,184,0.2)")
    return _base_layout(fig, 260)


def category_pie_chart(totals: Mapping[ExpenseCategory, float]) -> go.Figure | None:
    """Donut of spending per category; None when nothing has been spent."""
    shares = category_shares(totals)
    if not shares:
        return None
    fig = go.Figure(
        data=[
            go.Pie(
                labels=[c.display_name for c, _, _ in shares],
                values=[amount for _, amount, _ in shares],
                marker={
                    "colors": [c.color for c, _, _ in shares],
                    "line": {"color": "rgba(255,255,255,0.8)", "width": 2},
                },
                hole=0.45,
                sort=False,
                textinfo="percent",
                hovertemplate=f"<b>%{{label}}</b><br>%{{value:,.2f}} {CURRENCY}<extra></extra>",
            )
        ]
    )
    return _base_layout(fig, 300)


def budget_donut(total_spent: float, budget: float, progress: BudgetProgress) -> go.Figure:
    """Spent versus remaining ring with the remaining amount in the middle."""
    spent_part = min(max(total_spent, 0.0), budget) if budget > 0 else 0.0
    remaining_part = max(budget - spent_part, 0.0)
    fig = go.Figure(
        data=[
            go.Pie(
                labels=["Spent", "Remaining"],
                values=[spent_part, remaining_part],
                hole=0.75,
                sort=False,
                direction="clockwise",
                rotation=90,
                marker={
                    "colors": [OVER_COLOR if progress.is_over_budget else SPENT_COLOR, REMAINING_COLOR],
                    "line": {"color": "rgba(255,255,255,0.8)", "width": 3},
                },
                textinfo="none",
                hovertemplate=f"<b>%{{label}}</b><br>%{{value:,.0f}} {CURRENCY}<extra></extra>",
            )
        ]
    )
    caption = "over budget" if progress.is_over_budget else "remaining"
    fig.update_layout(
        annotations=[
            dict(
                text=f"<b style='font-size:28px'>{abs(progress.remaining):,.0f}</b><br>"
                     f"<span style='font-size:13px; opacity:0.8'>{CURRENCY} {caption}</span>",
                x=0.5,
                y=0.5,
                showarrow=False,
                align="center",
            )
        ],
    )
    return _base_layout(fig, 300)
