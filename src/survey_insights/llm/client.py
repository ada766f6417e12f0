from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

import openai
from openai import OpenAI

from ..config import DEFAULT_BASE_URL

Message = dict[str, str]


@dataclass(frozen=True)
class ChatReply:
    """Normalized reply from a chat model.

    content is whatever the provider put in the message body: usually a
    string, sometimes a list of fragments, sometimes nothing. text is a
    separate plain-text field some providers expose. raw keeps the full
    payload for the last-resort serialization.
    """

    content: Any = None
    text: Optional[str] = None
    raw: Any = None

    @classmethod
    def from_completion(cls, resp: Any) -> "ChatReply":
        raw = resp.model_dump() if hasattr(resp, "model_dump") else resp
        content = None
        choices = getattr(resp, "choices", None) or []
        if choices:
            message = getattr(choices[0], "message", None)
            content = getattr(message, "content", None)
        return cls(content=content, text=getattr(resp, "text", None), raw=raw)


def _fragment_text(fragment: Any) -> str:
    if isinstance(fragment, dict):
        value = fragment.get("text") or fragment.get("content")
    else:
        value = getattr(fragment, "text", None) or getattr(fragment, "content", None)
    return value if value else str(fragment)


def reply_text(reply: Any) -> str:
    """Pick the display text out of a reply.

    Order: string content, list-of-fragments content, any other non-empty
    content, the separate text field, then the whole reply as JSON.
    """
    content = getattr(reply, "content", None)
    if isinstance(content, str) and content:
        return content
    if isinstance(content, list) and content:
        return "\n".join(_fragment_text(c) for c in content)
    if content:
        return str(content)

    text = getattr(reply, "text", None)
    if text:
        return str(text)

    payload = reply.raw if isinstance(reply, ChatReply) else reply
    return json.dumps(payload, indent=2, default=str)


def classify_error(exc: BaseException) -> str:
    """Bucket a probe failure as auth, transient or other."""
    if isinstance(exc, (openai.APITimeoutError, openai.APIConnectionError)):
        return "transient"
    if isinstance(exc, openai.APIStatusError):
        code = exc.status_code
        if code in (401, 403):
            return "auth"
        if code == 400 and "api key" in str(exc).lower():
            # Gemini reports a bad key as 400 API_KEY_INVALID
            return "auth"
        if code == 429 or code >= 500:
            return "transient"
    return "other"


@dataclass(frozen=True)
class ChatModel:
    """
    Handle bound to one model identifier.

    The resolver only hands these out after a successful probe. max_retries
    is pinned to 0 so a failing candidate costs exactly one request.
    """

    model_name: str
    api_key: str = field(repr=False)
    temperature: float = 0.7
    base_url: str = DEFAULT_BASE_URL
    timeout: Optional[float] = 60.0
    _client: Any = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        client = OpenAI(
            api_key=self.api_key,
            base_url=self.base_url,
            timeout=self.timeout,
            max_retries=0,
        )
        object.__setattr__(self, "_client", client)

    def invoke(self, messages: Sequence[Message]) -> ChatReply:
        resp = self._client.chat.completions.create(
            model=self.model_name,
            messages=[{"role": m["role"], "content": m["content"]} for m in messages],
            temperature=self.temperature,
        )
        return ChatReply.from_completion(resp)
