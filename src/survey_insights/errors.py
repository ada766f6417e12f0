from __future__ import annotations

from typing import Optional


class SurveyInsightsError(Exception):
    """Base class for every error raised by survey_insights."""


class SurveyInputError(SurveyInsightsError, ValueError):
    """Raised when the uploaded CSV or pasted text cannot be analyzed."""


class ConfigError(SurveyInsightsError, ValueError):
    """Raised when a SURVEY_INSIGHTS_* setting has an unusable value."""


class ResolutionError(SurveyInsightsError):
    """Raised when no usable model handle could be produced."""


class InvalidCredentials(ResolutionError):
    """API key missing or blank. Raised before any network call."""


class NoCandidates(ResolutionError):
    """The candidate list was empty after merging and filtering."""


class DiscoveryFailed(SurveyInsightsError):
    """The models-listing call failed. Absorbed by the resolver."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ProbeFailed(SurveyInsightsError):
    """A single candidate did not answer the probe. Absorbed by the resolver."""

    def __init__(self, model_name: str, cause: BaseException, kind: str = "other"):
        super().__init__(f"{model_name}: {cause}")
        self.model_name = model_name
        self.cause = cause
        # auth | transient | other
        self.kind = kind


class AllCandidatesFailed(ResolutionError):
    """Every candidate probe failed.

    Carries the diagnostics needed for a useful message: the last error,
    how many candidates were tried and which identifiers discovery returned.
    """

    def __init__(
        self,
        last_error: Optional[BaseException],
        attempted: int,
        discovered: list[str],
        failures: Optional[list[ProbeFailed]] = None,
    ):
        detail = str(last_error) if last_error is not None else "Unknown error"
        super().__init__(f"All {attempted} model(s) failed to initialize. Last error: {detail}")
        self.last_error = last_error
        self.attempted = attempted
        self.discovered = list(discovered)
        self.failures = list(failures or [])

    @property
    def credentials_rejected(self) -> bool:
        return bool(self.failures) and all(f.kind == "auth" for f in self.failures)

    @property
    def transient_only(self) -> bool:
        return bool(self.failures) and all(f.kind == "transient" for f in self.failures)


class GenerationError(SurveyInsightsError):
    """One of the two chain calls (analysis or recommendation) failed."""

    def __init__(self, step: str, cause: BaseException):
        super().__init__(f"{step} step failed: {cause}")
        self.step = step
        self.cause = cause


def _mask_key(api_key: Optional[str]) -> str:
    if not api_key:
        return "<none>"
    return api_key[:6] + "..."


def describe_failure(exc: BaseException, api_key: Optional[str] = None) -> str:
    """Build the single user-facing failure message with remediation hints."""
    if isinstance(exc, InvalidCredentials):
        return (
            "A Google AI API key is required.\n\n"
            "Enter your key, or set GOOGLE_API_KEY in the environment or Streamlit secrets."
        )

    if isinstance(exc, NoCandidates):
        return (
            "No models found. Please check:\n"
            "1. Your API key is valid\n"
            "2. The Generative Language API is enabled\n"
            "3. The fallback model list is not empty (SURVEY_INSIGHTS_FALLBACK_MODELS)"
        )

    if isinstance(exc, AllCandidatesFailed):
        lines = [str(exc), ""]
        found = ", ".join(exc.discovered) if exc.discovered else "none"
        lines.append(f"Available models found: {found}")
        lines.append("")
        lines.append("Troubleshooting:")
        if exc.credentials_rejected:
            lines.append(f"1. The API key ({_mask_key(api_key)}) was rejected; create a new one in Google AI Studio")
            lines.append("2. Verify the Generative Language API is enabled for the key's project")
        elif exc.transient_only:
            lines.append("1. The service looks overloaded or rate limited; wait a moment and retry")
            lines.append("2. Check your quota in Google AI Studio")
        else:
            lines.append(f"1. Check your API key ({_mask_key(api_key)})")
            lines.append("2. Verify the API is enabled in Google Cloud Console")
            if not exc.discovered:
                lines.append("3. Model discovery returned nothing; the key may lack access to the models listing")
        return "\n".join(lines)

    if isinstance(exc, (SurveyInputError, ConfigError)):
        return str(exc)

    if isinstance(exc, GenerationError):
        return f"{exc}\n\nCheck your API key and try again."

    return f"Error: {exc}\n\nCheck your API key and try again."
