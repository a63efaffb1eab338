"""Tool types."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..tools.search import TavilyClient


@dataclass
class ToolContext:
    """Collaborators shared by every tool built for one registry."""

    search_client: TavilyClient | None = None
    output_dir: Path = Path("output")
    code_timeout: float = 30.0
