from __future__ import annotations

from typing import Optional

from .models import AnalysisOutcome, StatsRecord

_CARDS: tuple[tuple[str, str, Optional[str]], ...] = (
    ("Total Responses", "total", None),
    ("Positive", "positive", "positive_percent"),
    ("Negative", "negative", "negative_percent"),
    ("Neutral", "neutral", "neutral_percent"),
)


def stat_cards(stats: StatsRecord) -> list[tuple[str, str, Optional[str]]]:
    """(label, value or "N/A", percent or None) for each dashboard card."""
    cards = []
    for label, attr, pct_attr in _CARDS:
        value = getattr(stats, attr) or "N/A"
        pct = getattr(stats, pct_attr) if pct_attr else None
        cards.append((label, value, pct))
    return cards


def render_stats_markdown(stats: Optional[StatsRecord]) -> str:
    if stats is None:
        return ""
    lines = ["## Survey Statistics\n", "\n", "| Metric | Count | Share |\n", "|---|---|---|\n"]
    for label, value, pct in stat_cards(stats):
        lines.append(f"| {label} | {value} | {pct + '%' if pct else ''} |\n")
    return "".join(lines)


def render_markdown(outcome: AnalysisOutcome) -> str:
    """Render an outcome as a standalone Markdown report."""
    lines: list[str] = []
    lines.append("# Survey Analysis\n\n")
    lines.append(f"- responses: {outcome.response_count}\n")
    lines.append(f"- model: {outcome.model_name}\n\n")

    stats_md = render_stats_markdown(outcome.stats)
    if stats_md:
        lines.append(stats_md + "\n")

    lines.append("## Detailed Analysis\n\n")
    lines.append(outcome.analysis_text.strip() + "\n\n")
    lines.append("## Strategic Recommendations\n\n")
    lines.append(outcome.recommendation_text.strip() + "\n")
    return "".join(lines)
