from __future__ import annotations

import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field, ValidationError

from .errors import ConfigError

DEFAULT_DISCOVERY_URL = "https://generativelanguage.googleapis.com/v1/models"
DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/openai/"
DEFAULT_FALLBACK_MODELS: tuple[str, ...] = (
    "gemini-pro",
    "gemini-1.5-flash",
    "gemini-1.5-pro",
)

API_KEY_ENV_VARS: tuple[str, ...] = ("GOOGLE_API_KEY", "GEMINI_API_KEY")


class Settings(BaseModel):
    """
    Runtime knobs for model resolution and generation.

    request_timeout applies to every outbound call (discovery, probes and
    the two generation calls), in seconds.
    """
    discovery_url: str = DEFAULT_DISCOVERY_URL
    base_url: str = DEFAULT_BASE_URL
    fallback_models: list[str] = Field(default_factory=lambda: list(DEFAULT_FALLBACK_MODELS))
    temperature: float = 0.7
    request_timeout: float = 60.0
    probe_prompt: str = "hi"


_ENV_NAMES = {
    "discovery_url": "SURVEY_INSIGHTS_DISCOVERY_URL",
    "base_url": "SURVEY_INSIGHTS_BASE_URL",
    "fallback_models": "SURVEY_INSIGHTS_FALLBACK_MODELS",
    "temperature": "SURVEY_INSIGHTS_TEMPERATURE",
    "request_timeout": "SURVEY_INSIGHTS_TIMEOUT",
}


def _split_models(raw: str) -> list[str]:
    return [m.strip() for m in raw.split(",") if m.strip()]


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from SURVEY_INSIGHTS_* environment variables."""
    env = os.environ if env is None else env
    overrides: dict = {}
    if env.get("SURVEY_INSIGHTS_DISCOVERY_URL"):
        overrides["discovery_url"] = env["SURVEY_INSIGHTS_DISCOVERY_URL"]
    if env.get("SURVEY_INSIGHTS_BASE_URL"):
        overrides["base_url"] = env["SURVEY_INSIGHTS_BASE_URL"]
    if "SURVEY_INSIGHTS_FALLBACK_MODELS" in env:
        # An explicit empty value disables the static fallback list.
        overrides["fallback_models"] = _split_models(env["SURVEY_INSIGHTS_FALLBACK_MODELS"])
    if env.get("SURVEY_INSIGHTS_TEMPERATURE"):
        overrides["temperature"] = env["SURVEY_INSIGHTS_TEMPERATURE"]
    if env.get("SURVEY_INSIGHTS_TIMEOUT"):
        overrides["request_timeout"] = env["SURVEY_INSIGHTS_TIMEOUT"]
    try:
        return Settings(**overrides)
    except ValidationError as e:
        problems = []
        for err in e.errors():
            field_name = err["loc"][0] if err["loc"] else "settings"
            problems.append(f"{_ENV_NAMES.get(field_name, field_name)}: {err['msg']}")
        raise ConfigError(f"Invalid setting ({'; '.join(problems)})") from e


def get_api_key(env: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """
    Look up the Google AI API key.

    Priority order:
    1. GOOGLE_API_KEY
    2. GEMINI_API_KEY

    Returns:
        API key string or None if not configured.
    """
    env = os.environ if env is None else env
    for name in API_KEY_ENV_VARS:
        value = env.get(name)
        if value and value.strip():
            return value.strip()
    return None
