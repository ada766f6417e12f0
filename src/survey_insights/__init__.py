"""Survey Insights: Gemini-backed analysis of free-text survey responses."""

from .chain import run_analysis
from .insights import extract_statistics
from .llm import resolve_model
from .models import AnalysisOutcome, StatsRecord

__all__ = ["AnalysisOutcome", "StatsRecord", "extract_statistics", "resolve_model", "run_analysis"]
