from __future__ import annotations

import pytest
import requests

from survey_insights.config import Settings
from survey_insights.errors import DiscoveryFailed
from survey_insights.llm.discovery import discover_models, parse_models_payload


class FakeResponse:
    def __init__(self, status_code: int, payload=None, reason: str = "OK"):
        self.status_code = status_code
        self.reason = reason
        self._payload = payload

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


class FakeSession:
    def __init__(self, response=None, exc: Exception | None = None):
        self.response = response
        self.exc = exc
        self.calls: list[dict] = []

    def get(self, url, params=None, timeout=None):
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        if self.exc is not None:
            raise self.exc
        return self.response


def test_discover_strips_prefix_and_keeps_order() -> None:
    payload = {
        "models": [
            {"name": "models/gemini-2.0-flash", "displayName": "Gemini 2.0 Flash"},
            {"name": "models/gemini-1.5-pro"},
            {"displayName": "nameless"},
            {"name": "custom-model"},
        ]
    }
    session = FakeSession(FakeResponse(200, payload))
    settings = Settings(request_timeout=5)

    got = discover_models("k-123", settings=settings, session=session)

    assert [d.name for d in got] == ["gemini-2.0-flash", "gemini-1.5-pro", "custom-model"]
    assert got[0].display_name == "Gemini 2.0 Flash"
    assert got[1].display_name is None
    assert session.calls == [{"url": settings.discovery_url, "params": {"key": "k-123"}, "timeout": 5}]


def test_non_2xx_raises_with_status() -> None:
    session = FakeSession(FakeResponse(403, {}, reason="Forbidden"))
    with pytest.raises(DiscoveryFailed) as ei:
        discover_models("k", session=session)
    assert ei.value.status_code == 403
    assert "403" in str(ei.value)


def test_transport_error_raises() -> None:
    session = FakeSession(exc=requests.ConnectionError("dns failure"))
    with pytest.raises(DiscoveryFailed):
        discover_models("k", session=session)


def test_invalid_json_raises() -> None:
    session = FakeSession(FakeResponse(200, ValueError("not json")))
    with pytest.raises(DiscoveryFailed):
        discover_models("k", session=session)


def test_missing_or_empty_models_list_is_empty() -> None:
    assert parse_models_payload({}) == []
    assert parse_models_payload({"models": []}) == []


def test_non_object_payload_raises() -> None:
    with pytest.raises(DiscoveryFailed):
        parse_models_payload(["models/gemini-pro"])


def test_without_session_uses_requests_get(monkeypatch) -> None:
    calls: list[dict] = []

    def fake_get(url, params=None, timeout=None):
        calls.append({"url": url, "params": params, "timeout": timeout})
        return FakeResponse(200, {"models": [{"name": "models/gemini-pro"}]})

    monkeypatch.setattr("survey_insights.llm.discovery.requests.get", fake_get)
    models = discover_models("k", settings=Settings(request_timeout=5.0))

    assert [m.name for m in models] == ["gemini-pro"]
    assert calls[0]["params"] == {"key": "k"}
    assert calls[0]["timeout"] == 5.0
