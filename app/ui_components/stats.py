"""Survey statistics dashboard."""
import streamlit as st
import matplotlib.pyplot as plt
from typing import Optional

from survey_insights.models import StatsRecord
from survey_insights.report import stat_cards

from style_utils import SENTIMENT_COLORS, format_percent

STAT_DEFINITIONS = {
    "Total Responses": "Number of responses the model counted in the survey",
    "Positive": "Responses the model classified as positive",
    "Negative": "Responses the model classified as negative",
    "Neutral": "Responses the model classified as neutral",
}


def sentiment_figure(stats: StatsRecord):
    """Horizontal bar chart of sentiment counts, or None if no counts were found."""
    counts = stats.sentiment_counts()
    if not counts:
        return None

    labels = list(counts.keys())
    fig, ax = plt.subplots(figsize=(6, 2.5))
    ax.barh(labels[::-1], [counts[l] for l in labels[::-1]], color=[SENTIMENT_COLORS[l] for l in labels[::-1]])
    ax.set_xlabel("Responses")
    plt.tight_layout()
    return fig


def render_stats_dashboard(stats: Optional[StatsRecord], target=None) -> bool:
    """
    Render the four metric cards and the sentiment chart.

    Args:
        stats: Extracted statistics, or None
        target: Streamlit container to render into (defaults to the page)

    Returns:
        True if statistics were rendered, False if there were none.
    """
    if stats is None:
        return False
    target = target or st

    target.subheader("📊 Survey Statistics")
    cols = target.columns(4)
    for col, (label, value, pct) in zip(cols, stat_cards(stats)):
        with col:
            st.metric(label, value, help=STAT_DEFINITIONS.get(label))
            if pct:
                st.caption(format_percent(pct))

    fig = sentiment_figure(stats)
    if fig is not None:
        target.pyplot(fig)
        plt.close(fig)
    return True
