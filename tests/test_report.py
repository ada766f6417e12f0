from __future__ import annotations

from survey_insights.insights import extract_statistics
from survey_insights.models import AnalysisOutcome
from survey_insights.report import render_markdown, render_stats_markdown, stat_cards


def _outcome(analysis: str) -> AnalysisOutcome:
    return AnalysisOutcome(
        analysis_text=analysis,
        recommendation_text="Hire more support staff.",
        stats=extract_statistics(analysis),
        response_count=5,
        model_name="gemini-1.5-pro",
    )


def test_stat_cards_fill_missing_with_na() -> None:
    stats = extract_statistics("Negative Sentiment: 2 (40%)")
    assert stats is not None
    assert stat_cards(stats) == [
        ("Total Responses", "N/A", None),
        ("Positive", "N/A", None),
        ("Negative", "2", "40"),
        ("Neutral", "N/A", None),
    ]
    assert "| Negative | 2 | 40% |" in render_stats_markdown(stats)


def test_report_without_stats_skips_table() -> None:
    body = render_markdown(_outcome("Mostly prose."))
    assert "Survey Statistics" not in body
    assert "## Detailed Analysis\n\nMostly prose." in body
    assert "## Strategic Recommendations\n\nHire more support staff." in body
    assert "- model: gemini-1.5-pro" in body
