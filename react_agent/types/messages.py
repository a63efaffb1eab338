"""Message types."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SystemMessage:
    content: str
    role: str = "system"


@dataclass(frozen=True)
class UserMessage:
    content: str = ""
    role: str = "user"


@dataclass(frozen=True)
class AssistantMessage:
    content: str
    role: str = "assistant"


@dataclass(frozen=True)
class ToolMessage:
    content: str
    tool_call_id: str
    role: str = "tool"


Message = SystemMessage | UserMessage | AssistantMessage | ToolMessage
