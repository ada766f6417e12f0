from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional

from ..config import Settings
from ..errors import (
    AllCandidatesFailed,
    DiscoveryFailed,
    InvalidCredentials,
    NoCandidates,
    ProbeFailed,
)
from ..models import ModelDescriptor, ResolutionReport
from .client import ChatModel, classify_error
from .discovery import discover_models

logger = logging.getLogger(__name__)

DiscoverFn = Callable[[str, Settings], Iterable[ModelDescriptor]]
ClientFactory = Callable[[str, str, Settings], ChatModel]


def _default_discover(api_key: str, settings: Settings) -> list[ModelDescriptor]:
    return discover_models(api_key, settings=settings)


def _default_client_factory(model_name: str, api_key: str, settings: Settings) -> ChatModel:
    return ChatModel(
        model_name=model_name,
        api_key=api_key,
        temperature=settings.temperature,
        base_url=settings.base_url,
        timeout=settings.request_timeout,
    )


def build_candidates(discovered: Iterable[str], fallback: Iterable[str]) -> list[str]:
    """Discovered names first, then fallbacks; first occurrence wins, blanks dropped."""
    merged = [m for m in [*discovered, *fallback] if m]
    return list(dict.fromkeys(merged))


def resolve_model(
    api_key: Optional[str],
    *,
    settings: Optional[Settings] = None,
    discover: DiscoverFn = _default_discover,
    client_factory: ClientFactory = _default_client_factory,
    report: Optional[ResolutionReport] = None,
) -> ChatModel:
    """
    Return a ChatModel bound to the first candidate that answers a probe.

    Candidates are the discovered models (in listing order) followed by the
    static fallback list. Discovery failure is logged and treated as an
    empty listing. Each candidate gets exactly one probe; the first success
    is returned without touching the rest.

    Raises:
        InvalidCredentials: api_key missing or blank (no network call made).
        NoCandidates: nothing left to try after merging.
        AllCandidatesFailed: every probe failed.
    """
    settings = settings or Settings()
    report = report if report is not None else ResolutionReport()

    key = (api_key or "").strip()
    if not key:
        raise InvalidCredentials("Google AI API key is required")

    try:
        discovered = [d.name for d in discover(key, settings)]
    except DiscoveryFailed as e:
        logger.warning("Model discovery failed, continuing with fallback list: %s", e)
        report.discovery_error = str(e)
        discovered = []
    report.discovered = discovered

    candidates = build_candidates(discovered, settings.fallback_models)
    report.candidates = candidates
    if not candidates:
        raise NoCandidates("No models found to try")

    logger.info("Trying %d model(s)...", len(candidates))

    failures: list[ProbeFailed] = []
    probe = [{"role": "user", "content": settings.probe_prompt}]
    for name in candidates:
        logger.info("  Testing: %s...", name)
        try:
            model = client_factory(name, key, settings)
            model.invoke(probe)
        except Exception as e:
            failure = ProbeFailed(name, e, kind=classify_error(e))
            failures.append(failure)
            report.failures.append({"model": name, "kind": failure.kind, "error": str(e)})
            logger.warning("  %s failed: %s", name, str(e)[:100])
            continue

        logger.info("Initialized with: %s", name)
        report.selected = name
        return model

    raise AllCandidatesFailed(
        last_error=failures[-1].cause if failures else None,
        attempted=len(failures),
        discovered=discovered,
        failures=failures,
    )
