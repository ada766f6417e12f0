"""LLM integration utilities for the Survey Insights UI.

API Key Priority:
1. st.secrets["GOOGLE_API_KEY"] (user-configured secret)
2. GOOGLE_API_KEY / GEMINI_API_KEY environment variables
"""
import streamlit as st
from typing import Optional, Tuple

from survey_insights.chain import run_analysis
from survey_insights.config import get_api_key, load_settings
from survey_insights.errors import SurveyInsightsError, describe_failure
from survey_insights.llm.resolver import resolve_model
from survey_insights.models import AnalysisOutcome, ResolutionReport


def get_default_api_key() -> Optional[str]:
    """
    Get the Google AI API key with the Streamlit secret taking priority.

    Returns:
        API key string or None if not configured.
    """
    try:
        if "GOOGLE_API_KEY" in st.secrets:
            return st.secrets["GOOGLE_API_KEY"]
    except FileNotFoundError:
        # No secrets.toml at all
        pass
    return get_api_key()


def analyze_survey(api_key: str, survey_text: str) -> Tuple[Optional[AnalysisOutcome], Optional[str], ResolutionReport]:
    """
    Resolve a model and run the analysis chain.

    Args:
        api_key: Key typed in the sidebar
        survey_text: Responses, one per line

    Returns:
        (outcome, None, report) on success, (None, error message, report) on failure.
    """
    report = ResolutionReport()
    try:
        model = resolve_model(api_key, settings=load_settings(), report=report)
        outcome = run_analysis(survey_text, model)
    except SurveyInsightsError as e:
        return None, describe_failure(e, api_key), report
    return outcome, None, report
