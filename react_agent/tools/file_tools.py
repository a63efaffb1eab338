"""File commands: write and append inside the output directory."""

from __future__ import annotations

from pathlib import Path

import aiofiles
from pydantic import BaseModel, Field

from ..errors import ToolExecutionError
from .base import Tool


class FileArgs(BaseModel):
    filename: str = Field(description="File name, relative to the output directory")
    content: str = Field(description="Text to write")


def _resolve(tool: str, output_dir: Path, filename: str) -> Path:
    root = output_dir.resolve()
    target = (root / filename).resolve()
    try:
        target.relative_to(root)
    except ValueError:
        raise ToolExecutionError(tool, f"Path outside output directory: {filename}") from None
    if target == root:
        raise ToolExecutionError(tool, "filename must not be empty")
    return target


class FileWrite(Tool):
    name = "file_write"
    description = "File writer: writes content to a file, replacing what it held"
    resource = "Writing content to files"
    Args = FileArgs

    async def _run(self) -> str:
        path = _resolve(self.name, self.context.output_dir, self.args.filename)
        path.parent.mkdir(parents=True, exist_ok=True)
        async with aiofiles.open(path, "w", encoding="utf-8") as f:
            await f.write(self.args.content)
        return f"Wrote {len(self.args.content)} characters to {self.args.filename}"


class FileAppend(Tool):
    name = "file_append"
    description = "File appender: appends content to the end of a file created earlier"
    resource = "Appending content to the end of files"
    Args = FileArgs

    async def _run(self) -> str:
        path = _resolve(self.name, self.context.output_dir, self.args.filename)
        if not path.is_file():
            raise ToolExecutionError(
                self.name, f"{self.args.filename} does not exist, create it with file_write first"
            )
        async with aiofiles.open(path, "a", encoding="utf-8") as f:
            await f.write(self.args.content)
        return f"Appended {len(self.args.content)} characters to {self.args.filename}"
