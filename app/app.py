"""Survey Insights - Streamlit UI"""
import sys
from pathlib import Path

import streamlit as st

app_dir = Path(__file__).parent
if str(app_dir) not in sys.path:
    sys.path.insert(0, str(app_dir))

from survey_insights.errors import SurveyInsightsError
from survey_insights.ingest import count_responses

from llm_utils import analyze_survey, get_default_api_key
from ui_components import SURVEY_TEXT_KEY, remember_upload, render_failure, render_results, render_upload_preview

st.set_page_config(
    page_title="Survey Insights",
    page_icon="📊",
    layout="wide"
)

def render_sidebar() -> str:
    """API key input, prefilled from secrets or the environment."""
    st.sidebar.header("Settings")
    api_key = st.sidebar.text_input(
        "Google AI API key",
        value=get_default_api_key() or "",
        type="password",
        help="Create one in Google AI Studio. Set GOOGLE_API_KEY to prefill.",
    )
    return api_key.strip()


def render_upload():
    """CSV upload with a small preview; fills the survey text area."""
    uploaded = st.file_uploader("Upload survey CSV", type=["csv"])
    try:
        survey = remember_upload(
            st.session_state,
            uploaded.name if uploaded is not None else None,
            uploaded.size if uploaded is not None else 0,
            uploaded.getvalue if uploaded is not None else None,
        )
    except SurveyInsightsError as e:
        st.error(f"Error reading CSV file: {e}")
        return

    if survey is not None:
        render_upload_preview(uploaded.name, survey)


def main():
    st.title("📊 Survey Insights")
    st.caption("Upload survey responses and get an AI analysis with strategic recommendations")

    api_key = render_sidebar()
    render_upload()

    survey_text = st.text_area(
        "Survey responses (one per line)",
        key=SURVEY_TEXT_KEY,
        height=240,
        placeholder="The checkout was quick and easy\nDelivery took two weeks\n...",
    )

    if not st.button("Analyze Survey", type="primary"):
        return

    if not api_key:
        st.error("Please enter your Google AI API key")
        return
    if not survey_text.strip():
        st.error("Please enter survey responses or upload a CSV file")
        return

    n = count_responses(survey_text)
    with st.spinner(f"Analyzing {n} survey responses... This may take a moment."):
        outcome, error, report = analyze_survey(api_key, survey_text)

    results = st.container()
    if error:
        render_failure(error, results)
    else:
        render_results(outcome, results)

    with st.expander("Model resolution details"):
        if report.discovery_error:
            st.markdown(f"**Discovery failed:** {report.discovery_error}")
        st.markdown(f"**Discovered:** {', '.join(report.discovered) if report.discovered else 'none'}")
        st.markdown(f"**Selected:** `{report.selected or 'none'}`")
        if report.failures:
            st.markdown("**Failed candidates:**")
            for f in report.failures:
                st.markdown(f"- `{f['model']}` ({f['kind']}): {f['error'][:200]}")


if __name__ == "__main__":
    main()
