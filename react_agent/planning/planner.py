"""Planner: prompt construction and the single LLM round trip."""

from __future__ import annotations

import logging
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateError as JinjaError

from ..config import Language
from ..errors import TemplateError, TransportError
from ..types import (
    AssistantMessage,
    Completion,
    CompletionParams,
    LLMProvider,
    Message,
    SystemMessage,
    UserMessage,
)

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"

SYSTEM_TEMPLATE = "system.prompt"
RESPONSE_FORMAT_TEMPLATE = "response_format.prompt"
REPAIR_TEMPLATE = "fix_response_format.prompt"
COMMAND_RESULT_TEMPLATE = "command_result.prompt"
COMMAND_ERROR_TEMPLATE = "command_error.prompt"

_TEMPLATES = (
    SYSTEM_TEMPLATE,
    RESPONSE_FORMAT_TEMPLATE,
    REPAIR_TEMPLATE,
    COMMAND_RESULT_TEMPLATE,
    COMMAND_ERROR_TEMPLATE,
)


class Planner:
    """Renders the agent's prompts and issues chat-completion requests.

    Templates are loaded when the planner is built, so a missing or broken
    template surfaces as a TemplateError before any step runs.
    """

    def __init__(self, template_dir: str | Path | None = None, max_tokens: int | None = None) -> None:
        self._env = Environment(
            loader=FileSystemLoader(str(template_dir or TEMPLATE_DIR)),
            undefined=StrictUndefined,
            autoescape=False,
        )
        self._max_tokens = max_tokens
        self._templates: dict[str, Template] = {}
        for name in _TEMPLATES:
            try:
                self._templates[name] = self._env.get_template(name)
            except JinjaError as e:
                raise TemplateError(name, str(e) or type(e).__name__, e) from e
        self._response_format = self._render(RESPONSE_FORMAT_TEMPLATE)

    def _render(self, name: str, **context: object) -> str:
        try:
            return self._templates[name].render(**context)
        except JinjaError as e:
            raise TemplateError(name, str(e), e) from e

    def response_format(self) -> str:
        return self._response_format

    def build_system_message(
        self,
        goal: str,
        language: Language | str,
        tool_catalog: str,
        resources: str = "",
    ) -> SystemMessage:
        content = self._render(
            SYSTEM_TEMPLATE,
            language=str(language),
            goal=goal,
            commands=tool_catalog,
            resources=resources,
            response_format=self._response_format,
        )
        return SystemMessage(content=content)

    def build_user_message(self, text: str) -> UserMessage:
        return UserMessage(content=text)

    def build_assistant_message(self, text: str) -> AssistantMessage:
        return AssistantMessage(content=text)

    def build_repair_message(self, malformed_text: str) -> UserMessage:
        content = self._render(
            REPAIR_TEMPLATE, response=malformed_text, response_format=self._response_format
        )
        return UserMessage(content=content)

    def build_command_result(self, result: str) -> UserMessage:
        content = self._render(
            COMMAND_RESULT_TEMPLATE, result=result, response_format=self._response_format
        )
        return UserMessage(content=content)

    def build_error_message(self, error: str) -> UserMessage:
        content = self._render(
            COMMAND_ERROR_TEMPLATE, error=error, response_format=self._response_format
        )
        return UserMessage(content=content)

    async def call(
        self,
        provider: LLMProvider,
        model: str,
        temperature: float,
        transcript: list[Message],
    ) -> Completion:
        """One round trip. No retry, no parsing."""
        params = CompletionParams(
            messages=transcript,
            model=model,
            temperature=temperature,
            max_tokens=self._max_tokens,
        )
        try:
            return await provider.complete(params)
        except TransportError:
            raise
        except Exception as e:
            raise TransportError(type(provider).__name__, str(e) or type(e).__name__, cause=e) from e
