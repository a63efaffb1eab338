"""Code interpreter: runs Python in a fresh interpreter subprocess."""

from __future__ import annotations

import asyncio
import sys

from pydantic import BaseModel, Field

from ..errors import ToolExecutionError
from .base import Tool

SUPPORTED_LANGUAGES = ("python",)

# A lone expression prints its value; anything else runs as a script.
_RUNNER = """\
import sys
source = sys.stdin.read()
scope = {"__name__": "__main__"}
try:
    code = compile(source, "<agent>", "eval")
except SyntaxError:
    exec(compile(source, "<agent>", "exec"), scope)
else:
    result = eval(code, scope)
    if result is not None:
        print(result)
"""


class CodeArgs(BaseModel):
    language: str = Field(description="Programming language; supported: Python")
    code: str = Field(description="Source code to execute")


class CodeInterpreter(Tool):
    name = "code_interpreter"
    description = "Executes code and returns its output"
    resource = "Executing code to compute results"
    Args = CodeArgs

    async def _run(self) -> str:
        if self.args.language.lower() not in SUPPORTED_LANGUAGES:
            raise ToolExecutionError(self.name, f"Unsupported language: {self.args.language}")
        proc = await asyncio.create_subprocess_exec(
            sys.executable, "-I", "-c", _RUNNER,
            stdin=asyncio.subprocess.PIPE,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
        try:
            stdout, stderr = await asyncio.wait_for(
                proc.communicate(self.args.code.encode()),
                timeout=self.context.code_timeout,
            )
        except asyncio.TimeoutError:
            proc.kill()
            await proc.wait()
            raise ToolExecutionError(
                self.name, f"Timed out after {self.context.code_timeout:g}s"
            ) from None
        if proc.returncode != 0:
            tail = stderr.decode(errors="replace").strip().splitlines()[-5:]
            raise ToolExecutionError(self.name, "\n".join(tail) or f"exit code {proc.returncode}")
        return stdout.decode(errors="replace").strip()
