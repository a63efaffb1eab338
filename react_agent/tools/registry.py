"""Tool registry: the closed set of commands and their resolution."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from pydantic import ValidationError

from ..errors import MissingArgument, UnknownTool
from ..types import Command, ToolContext
from .base import Tool
from .code_interpreter import CodeInterpreter
from .file_tools import FileAppend, FileWrite
from .finish import Finish
from .search import Search

logger = logging.getLogger(__name__)

# Declaration order is catalog order.
DEFAULT_TOOLS: tuple[type[Tool], ...] = (Search, FileWrite, FileAppend, CodeInterpreter, Finish)


class ToolRegistry:
    def __init__(
        self,
        context: ToolContext | None = None,
        tools: Sequence[type[Tool]] = DEFAULT_TOOLS,
    ) -> None:
        self.context = context or ToolContext()
        self._tools: dict[str, type[Tool]] = {}
        for tool in tools:
            if tool.name in self._tools:
                raise ValueError(f"Duplicate tool name: {tool.name}")
            self._tools[tool.name] = tool

    def names(self) -> list[str]:
        return list(self._tools)

    def get(self, name: str) -> type[Tool] | None:
        return self._tools.get(name)

    def describe_all(self) -> str:
        return "\n".join(f"- {tool.describe()}" for tool in self._tools.values())

    def resources(self) -> str:
        return "\n".join(
            f"- {tool.resource}"
            for tool in self._tools.values()
            if not tool.terminates and tool.resource
        )

    def resolve(self, command: Command) -> Tool:
        tool_cls = self._tools.get(command.name)
        if tool_cls is None:
            raise UnknownTool(command.name)
        try:
            args = tool_cls.Args.model_validate(command.args)
        except ValidationError as e:
            loc = e.errors()[0]["loc"]
            field = str(loc[0]) if loc else "args"
            raise MissingArgument(command.name, field, e) from e
        tool = tool_cls(args, self.context)
        logger.debug("Resolved %r", tool)
        return tool
