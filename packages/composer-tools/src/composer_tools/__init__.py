"""Terminal rendering and session tools for the server composer."""

from .report import render_form_view, render_memory_validation, render_recommendations, render_rules
from .session import run_form_session

__all__ = [
    "render_form_view",
    "render_memory_validation",
    "render_recommendations",
    "render_rules",
    "run_form_session",
]
