"""Gemini access: model discovery, chat handles and candidate resolution."""

from .client import ChatModel, ChatReply, reply_text
from .discovery import discover_models
from .resolver import build_candidates, resolve_model

__all__ = [
    "ChatModel",
    "ChatReply",
    "build_candidates",
    "discover_models",
    "reply_text",
    "resolve_model",
]
