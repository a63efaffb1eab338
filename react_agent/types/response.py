"""The JSON shape the model must emit on every turn."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, ValidationError

from ..errors import ParseError


class Thoughts(BaseModel):
    text: str
    reasoning: str
    plan: str
    criticism: str
    speak: str


class Command(BaseModel):
    name: str
    args: dict[str, Any] = Field(default_factory=dict)


class StructuredResponse(BaseModel):
    thoughts: Thoughts
    command: Command


def parse_response(text: str) -> StructuredResponse:
    """Validate ``text`` as a StructuredResponse; raise ParseError otherwise."""
    try:
        return StructuredResponse.model_validate_json(text.strip())
    except ValidationError as e:
        raise ParseError(text, f"Invalid response: {e.error_count()} error(s)", e) from e
