# src/llm/models.py — v2
"""LLM-specific types: Message, JudgeReply."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel


class Message(BaseModel):
    """Single message in a conversation."""

    role: Literal["user", "assistant", "system"]
    content: str


class JudgeReply(BaseModel):
    """Raw text reply of a provider, before score parsing."""

    content: str
    model: str
    provider: str
    latency_ms: int
    raw_response: Any = None
