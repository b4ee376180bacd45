"""Views package for UI components."""
from .home import render_home
from .add import render_add
from .reports import render_reports
from .budget import render_budget
from .settings import render_settings
from .navigation import apply_theme, render_bottom_nav

__all__ = [
    "render_home",
    "render_add",
    "render_reports",
    "render_budget",
    "render_settings",
    "apply_theme",
    "render_bottom_nav",
]
