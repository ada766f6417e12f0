from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class ModelDescriptor(BaseModel):
    """
    One entry of the models-listing response.

    name: identifier with the "models/" prefix already stripped
    display_name: human-readable label, used only in diagnostics
    """
    name: str
    display_name: Optional[str] = None


class StatsRecord(BaseModel):
    """
    Statistics extracted from the analysis text.

    Every field is optional: None means "not found in the text", which is
    different from a reported "0". Values are kept as the strings the model
    wrote. Dumped with the camelCase aliases (positivePercent, ...).
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    total: Optional[str] = None
    positive: Optional[str] = None
    positive_percent: Optional[str] = Field(default=None, alias="positivePercent")
    negative: Optional[str] = None
    negative_percent: Optional[str] = Field(default=None, alias="negativePercent")
    neutral: Optional[str] = None
    neutral_percent: Optional[str] = Field(default=None, alias="neutralPercent")

    def as_dict(self) -> dict[str, str]:
        """Present fields only, keyed by alias."""
        return self.model_dump(by_alias=True, exclude_none=True)

    def sentiment_counts(self) -> dict[str, int]:
        counts: dict[str, int] = {}
        for label, value in (("Positive", self.positive), ("Negative", self.negative), ("Neutral", self.neutral)):
            if value is not None:
                counts[label] = int(value)
        return counts


@dataclass(frozen=True)
class SurveyInput:
    """Survey text extracted from an upload, ready for analysis."""

    text: str
    column: Optional[str]
    headers: list[str]
    response_count: int


@dataclass(frozen=True)
class AnalysisOutcome:
    """Everything a caller needs to render one analysis run."""

    analysis_text: str
    recommendation_text: str
    stats: Optional[StatsRecord]
    response_count: int
    model_name: str


@dataclass
class ResolutionReport:
    """Diagnostics collected while resolving a model handle."""

    discovered: list[str] = field(default_factory=list)
    candidates: list[str] = field(default_factory=list)
    discovery_error: Optional[str] = None
    failures: list[dict[str, Any]] = field(default_factory=list)
    selected: Optional[str] = None
