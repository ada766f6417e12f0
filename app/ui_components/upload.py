"""CSV upload handling and preview."""
import streamlit as st
from typing import Callable, MutableMapping, Optional

from survey_insights.ingest import load_survey_upload
from survey_insights.models import SurveyInput

SURVEY_TEXT_KEY = "survey_text"
UPLOAD_MARKER_KEY = "uploaded_marker"
UPLOAD_SURVEY_KEY = "uploaded_survey"


def remember_upload(
    state: MutableMapping,
    name: Optional[str],
    size: int = 0,
    read_bytes: Optional[Callable[[], bytes]] = None,
) -> Optional[SurveyInput]:
    """
    Keep the parsed upload in session state across reruns.

    A new file (by name and size) is parsed once and fills the survey text
    area; later reruns return the stored SurveyInput without touching the
    text the user may have edited. Clearing the uploader forgets it.

    Raises:
        SurveyInputError: the new file is not a usable CSV.
    """
    if name is None:
        state.pop(UPLOAD_SURVEY_KEY, None)
        state.pop(UPLOAD_MARKER_KEY, None)
        return None

    marker = f"{name}:{size}"
    if state.get(UPLOAD_MARKER_KEY) != marker:
        survey = load_survey_upload(name, read_bytes() if read_bytes else b"")
        state[UPLOAD_MARKER_KEY] = marker
        state[UPLOAD_SURVEY_KEY] = survey
        state[SURVEY_TEXT_KEY] = survey.text
    return state.get(UPLOAD_SURVEY_KEY)


def render_upload_preview(name: str, survey: SurveyInput, target=None):
    """File name, response count and chosen text column."""
    target = target or st
    col1, col2, col3 = target.columns(3)
    with col1:
        st.metric("File", name)
    with col2:
        st.metric("Responses", f"{survey.response_count:,}")
    with col3:
        st.metric("Text column", survey.column or "N/A")
