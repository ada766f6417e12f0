"""UI components for Survey Insights."""
from .stats import render_stats_dashboard, sentiment_figure
from .results import render_results, render_failure
from .upload import SURVEY_TEXT_KEY, remember_upload, render_upload_preview

__all__ = [
    "render_stats_dashboard",
    "sentiment_figure",
    "render_results",
    "render_failure",
    "SURVEY_TEXT_KEY",
    "remember_upload",
    "render_upload_preview",
]
