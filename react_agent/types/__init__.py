"""Core type definitions: re-exported from sub-modules."""

from .llm import Choice, Completion, CompletionParams, LLMProvider, TokenUsage
from .messages import AssistantMessage, Message, SystemMessage, ToolMessage, UserMessage
from .response import Command, StructuredResponse, Thoughts, parse_response
from .tools import ToolContext

__all__ = [
    "Message", "SystemMessage", "UserMessage", "AssistantMessage", "ToolMessage",
    "Choice", "Completion", "CompletionParams", "LLMProvider", "TokenUsage",
    "Command", "StructuredResponse", "Thoughts", "parse_response",
    "ToolContext",
]
