from __future__ import annotations

import logging
from typing import Protocol, Sequence

from .errors import GenerationError, SurveyInputError
from .ingest import count_responses
from .insights import extract_statistics
from .llm.client import ChatReply, Message, reply_text
from .models import AnalysisOutcome
from .prompts import analysis_messages, recommendation_messages

logger = logging.getLogger(__name__)


class ChatHandle(Protocol):
    model_name: str

    def invoke(self, messages: Sequence[Message]) -> ChatReply: ...


def _generate(model: ChatHandle, step: str, messages: list[Message]) -> str:
    logger.info("Running %s step on %s", step, model.model_name)
    try:
        reply = model.invoke(messages)
    except Exception as e:
        raise GenerationError(step, e) from e
    return reply_text(reply)


def run_analysis(survey_text: str, model: ChatHandle) -> AnalysisOutcome:
    """
    Run the analysis step, then the recommendation step on its output.

    The two calls are strictly sequential: the recommendation prompt is
    built from the analysis text. Statistics are parsed from the analysis.
    """
    text = (survey_text or "").strip()
    if not text:
        raise SurveyInputError("Please enter survey responses or upload a CSV file")

    n = count_responses(text)
    logger.info("Analyzing %d survey responses...", n)
    enhanced = f"Total number of responses: {n}\n\n{text}"

    analysis_text = _generate(model, "analysis", analysis_messages(enhanced))
    recommendation_text = _generate(model, "recommendation", recommendation_messages(analysis_text))

    return AnalysisOutcome(
        analysis_text=analysis_text,
        recommendation_text=recommendation_text,
        stats=extract_statistics(analysis_text),
        response_count=n,
        model_name=model.model_name,
    )
