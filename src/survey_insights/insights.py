"""Statistics extraction from the free-text analysis.

The analysis prompt asks the model for a fixed "SURVEY STATISTICS" block.
Each figure is pulled out independently, so a partially followed format
still yields whatever figures are recognizable.
"""

from __future__ import annotations

import re
from typing import Optional

from .models import StatsRecord

_TOTAL_RE = re.compile(r"Total Responses?:\s*(\d+)", re.IGNORECASE)

_SENTIMENT_RES: dict[str, re.Pattern[str]] = {
    label: re.compile(rf"{label.capitalize()} Sentiment:\s*(\d+)\s*\(([\d.]+)%\)", re.IGNORECASE)
    for label in ("positive", "negative", "neutral")
}


def extract_statistics(text: Optional[str]) -> Optional[StatsRecord]:
    """Extract total and sentiment figures from analysis text.

    Returns None when nothing recognizable is found, so callers can tell
    "no statistics" apart from statistics that are all zero. Missing
    figures are left out, never defaulted.
    """
    if not text:
        return None

    fields: dict[str, str] = {}

    m = _TOTAL_RE.search(text)
    if m:
        fields["total"] = m.group(1)

    for label, pattern in _SENTIMENT_RES.items():
        m = pattern.search(text)
        if m:
            fields[label] = m.group(1)
            fields[f"{label}_percent"] = m.group(2)

    if not fields:
        return None
    return StatsRecord(**fields)
