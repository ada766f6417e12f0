from __future__ import annotations

import logging
from typing import Any, Optional

import requests

from ..config import Settings
from ..errors import DiscoveryFailed
from ..models import ModelDescriptor

logger = logging.getLogger(__name__)

_NAME_PREFIX = "models/"


def parse_models_payload(payload: Any) -> list[ModelDescriptor]:
    """Turn a models-listing JSON body into descriptors, in received order."""
    if not isinstance(payload, dict):
        raise DiscoveryFailed("Models listing is not a JSON object")

    models = payload.get("models")
    if not isinstance(models, list) or not models:
        logger.warning("No models found in API response")
        return []

    out: list[ModelDescriptor] = []
    for entry in models:
        if not isinstance(entry, dict):
            continue
        raw_name = entry.get("name")
        if not isinstance(raw_name, str) or not raw_name:
            continue
        name = raw_name[len(_NAME_PREFIX):] if raw_name.startswith(_NAME_PREFIX) else raw_name
        display = entry.get("displayName")
        out.append(ModelDescriptor(name=name, display_name=display if isinstance(display, str) else None))
    return out


def discover_models(
    api_key: str,
    *,
    settings: Optional[Settings] = None,
    session: Optional[requests.Session] = None,
) -> list[ModelDescriptor]:
    """
    Ask the models-listing endpoint which models this key can see.

    The key travels as the `key` query parameter. Any transport error,
    non-2xx status or malformed body raises DiscoveryFailed.
    """
    settings = settings or Settings()
    # requests.get opens and closes its own session
    http = session if session is not None else requests

    logger.info("Fetching available models from %s", settings.discovery_url)
    try:
        resp = http.get(
            settings.discovery_url,
            params={"key": api_key},
            timeout=settings.request_timeout,
        )
    except requests.RequestException as e:
        raise DiscoveryFailed(f"Models listing request failed: {e}") from e

    if not resp.ok:
        raise DiscoveryFailed(
            f"API returned {resp.status_code}: {resp.reason}",
            status_code=resp.status_code,
        )

    try:
        payload = resp.json()
    except ValueError as e:
        raise DiscoveryFailed(f"Models listing is not valid JSON: {e}") from e

    descriptors = parse_models_payload(payload)
    for d in descriptors:
        logger.info("  - %s (%s)", d.name, d.display_name or "no display name")
    return descriptors
