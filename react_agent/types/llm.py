"""LLM provider types."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from .messages import Message


@dataclass
class TokenUsage:
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


@dataclass
class CompletionParams:
    messages: list[Message]
    model: str
    temperature: float = 0.7
    max_tokens: int | None = None


@dataclass
class Choice:
    content: str | None = None
    role: str = "assistant"
    finish_reason: str | None = None


@dataclass
class Completion:
    choices: list[Choice] = field(default_factory=list)
    usage: TokenUsage = field(default_factory=TokenUsage)


@runtime_checkable
class LLMProvider(Protocol):
    async def complete(self, params: CompletionParams) -> Completion: ...
