"""Tool base: uniform execute/describe contract for every command."""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar

from pydantic import BaseModel

from ..errors import ToolExecutionError
from ..types import ToolContext

logger = logging.getLogger(__name__)


class Tool(ABC):
    """A command the model can issue. Built per command, executed once."""

    name: ClassVar[str]
    description: ClassVar[str]
    resource: ClassVar[str] = ""
    Args: ClassVar[type[BaseModel]]
    terminates: ClassVar[bool] = False

    def __init__(self, args: BaseModel, context: ToolContext) -> None:
        self.args = args
        self.context = context

    @classmethod
    def describe(cls) -> str:
        """Catalog fragment: name, purpose and argument schema as JSON."""
        schema = cls.Args.model_json_schema()
        props: dict[str, Any] = schema.get("properties", {})
        fragment = {
            "name": cls.name,
            "description": cls.description,
            "args": [
                {
                    "name": field,
                    "type": spec.get("type", "string"),
                    "description": spec.get("description", ""),
                }
                for field, spec in props.items()
            ],
        }
        return json.dumps(fragment, ensure_ascii=False)

    async def execute(self) -> str:
        try:
            return await self._run()
        except ToolExecutionError:
            raise
        except Exception as e:
            logger.debug("Tool %s raised %r", self.name, e)
            raise ToolExecutionError(self.name, str(e) or type(e).__name__, e) from e

    @abstractmethod
    async def _run(self) -> str: ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.args!r})"
