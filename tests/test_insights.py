from __future__ import annotations

from survey_insights.insights import extract_statistics
from survey_insights.models import StatsRecord

SAMPLE_ANALYSIS = """## SURVEY STATISTICS
- Total Responses: 40
- Positive Sentiment: 22 (55%)
- Negative Sentiment: 12 (30.0%)
- Neutral Sentiment: 6 (15%)

## TOPIC BREAKDOWN
- Shipping: 14 responses
"""


def test_total_only() -> None:
    rec = extract_statistics("Total Responses: 42")
    assert rec is not None
    assert rec.total == "42"
    assert rec.as_dict() == {"total": "42"}
    assert rec.positive is None and rec.negative is None and rec.neutral is None


def test_fractional_percentage() -> None:
    rec = extract_statistics("Positive Sentiment: 10 (25.5%)")
    assert rec is not None
    assert rec.positive == "10"
    assert rec.positive_percent == "25.5"
    assert rec.total is None
    assert rec.as_dict() == {"positive": "10", "positivePercent": "25.5"}


def test_no_statistics_is_none_not_empty_record() -> None:
    assert extract_statistics("no statistics here") is None
    assert extract_statistics("") is None
    assert extract_statistics(None) is None


def test_full_block() -> None:
    rec = extract_statistics(SAMPLE_ANALYSIS)
    assert rec == StatsRecord(
        total="40",
        positive="22",
        positive_percent="55",
        negative="12",
        negative_percent="30.0",
        neutral="6",
        neutral_percent="15",
    )


def test_case_insensitive_and_singular_label() -> None:
    rec = extract_statistics("total response: 7\nNEGATIVE SENTIMENT: 3 (42.9%)")
    assert rec is not None
    assert rec.total == "7"
    assert rec.negative == "3"
    assert rec.negative_percent == "42.9"


def test_first_occurrence_wins() -> None:
    rec = extract_statistics("Total Responses: 5\nlater... Total Responses: 9")
    assert rec is not None
    assert rec.total == "5"


def test_zero_is_kept_distinct_from_absent() -> None:
    rec = extract_statistics("Neutral Sentiment: 0 (0%)")
    assert rec is not None
    assert rec.neutral == "0"
    assert rec.neutral_percent == "0"
    assert rec.positive is None


def test_sentiment_without_percentage_is_ignored() -> None:
    assert extract_statistics("Positive Sentiment: 10") is None


def test_idempotent() -> None:
    assert extract_statistics(SAMPLE_ANALYSIS) == extract_statistics(SAMPLE_ANALYSIS)


def test_sentiment_counts() -> None:
    rec = extract_statistics(SAMPLE_ANALYSIS)
    assert rec is not None
    assert rec.sentiment_counts() == {"Positive": 22, "Negative": 12, "Neutral": 6}
