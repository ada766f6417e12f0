"""Analysis and recommendation sections."""
import streamlit as st

from survey_insights.models import AnalysisOutcome
from survey_insights.report import render_markdown

from style_utils import render_text_panel
from .stats import render_stats_dashboard


def render_results(outcome: AnalysisOutcome, target=None):
    """Render statistics, analysis, recommendations and the report download."""
    target = target or st

    with target.container():
        render_stats_dashboard(outcome.stats)

        st.subheader("📈 Detailed Analysis")
        render_text_panel(outcome.analysis_text)

        st.subheader("💡 Strategic Recommendations")
        render_text_panel(outcome.recommendation_text, accent=True)

        st.caption(f"{outcome.response_count} responses analyzed with `{outcome.model_name}`")
        st.download_button(
            label="Download Report (Markdown)",
            data=render_markdown(outcome),
            file_name="survey_analysis.md",
            mime="text/markdown",
        )


def render_failure(message: str, target=None):
    """Render a single error message with its remediation hints."""
    target = target or st
    target.error(message)
