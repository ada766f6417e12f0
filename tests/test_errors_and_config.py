from __future__ import annotations

import pytest

from survey_insights.config import DEFAULT_FALLBACK_MODELS, get_api_key, load_settings
from survey_insights.errors import (
    AllCandidatesFailed,
    ConfigError,
    InvalidCredentials,
    NoCandidates,
    ProbeFailed,
    describe_failure,
)


def _failures(*kinds: str) -> list[ProbeFailed]:
    return [ProbeFailed(f"m{i}", RuntimeError(k), kind=k) for i, k in enumerate(kinds)]


def test_all_failed_message_lists_discovered_models() -> None:
    err = AllCandidatesFailed(RuntimeError("404 model not found"), 3, ["gemini-x"], _failures("other", "other", "other"))
    msg = describe_failure(err, "AIzaSyVerySecretKey")
    assert "All 3 model(s) failed" in msg
    assert "404 model not found" in msg
    assert "gemini-x" in msg
    assert "VerySecretKey" not in msg


def test_rejected_credentials_hint() -> None:
    err = AllCandidatesFailed(RuntimeError("401"), 2, [], _failures("auth", "auth"))
    assert err.credentials_rejected
    assert not err.transient_only
    assert "rejected" in describe_failure(err, "key")


def test_transient_hint() -> None:
    err = AllCandidatesFailed(RuntimeError("429"), 2, [], _failures("transient", "transient"))
    assert err.transient_only
    assert "retry" in describe_failure(err, "key")


def test_empty_discovery_hint() -> None:
    err = AllCandidatesFailed(None, 0, [])
    msg = describe_failure(err)
    assert "Unknown error" in msg
    assert "discovery returned nothing" in msg


def test_simple_messages() -> None:
    assert "API key is required" in describe_failure(InvalidCredentials("x"))
    assert "No models found" in describe_failure(NoCandidates("x"))


def test_load_settings_from_env() -> None:
    settings = load_settings(
        {
            "SURVEY_INSIGHTS_FALLBACK_MODELS": " a, ,b ",
            "SURVEY_INSIGHTS_TIMEOUT": "12.5",
            "SURVEY_INSIGHTS_TEMPERATURE": "0.1",
        }
    )
    assert settings.fallback_models == ["a", "b"]
    assert settings.request_timeout == 12.5
    assert settings.temperature == 0.1


def test_load_settings_defaults() -> None:
    settings = load_settings({})
    assert settings.fallback_models == list(DEFAULT_FALLBACK_MODELS)
    assert settings.temperature == 0.7
    assert load_settings({"SURVEY_INSIGHTS_FALLBACK_MODELS": ""}).fallback_models == []


def test_get_api_key_priority() -> None:
    assert get_api_key({"GOOGLE_API_KEY": "g", "GEMINI_API_KEY": "m"}) == "g"
    assert get_api_key({"GOOGLE_API_KEY": "  ", "GEMINI_API_KEY": " m "}) == "m"
    assert get_api_key({}) is None


def test_malformed_numeric_setting_names_the_variable() -> None:
    with pytest.raises(ConfigError, match="SURVEY_INSIGHTS_TIMEOUT"):
        load_settings({"SURVEY_INSIGHTS_TIMEOUT": "soon"})
    with pytest.raises(ConfigError, match="SURVEY_INSIGHTS_TEMPERATURE"):
        load_settings({"SURVEY_INSIGHTS_TEMPERATURE": "warm"})


def test_config_error_message_passes_through() -> None:
    assert describe_failure(ConfigError("Invalid setting (X: bad)")) == "Invalid setting (X: bad)"
