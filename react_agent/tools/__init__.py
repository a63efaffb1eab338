"""Tools the agent can command, and the registry that builds them."""

from .base import Tool
from .code_interpreter import CodeInterpreter
from .file_tools import FileAppend, FileWrite
from .finish import Finish
from .registry import DEFAULT_TOOLS, ToolRegistry
from .search import Search, SearchParameters, SearchResponse, TavilyClient

__all__ = [
    "Tool",
    "ToolRegistry",
    "DEFAULT_TOOLS",
    "Search",
    "FileWrite",
    "FileAppend",
    "CodeInterpreter",
    "Finish",
    "TavilyClient",
    "SearchParameters",
    "SearchResponse",
]
