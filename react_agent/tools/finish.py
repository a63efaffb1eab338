"""Finish: the command that ends the loop."""

from __future__ import annotations

from pydantic import BaseModel, Field

from .base import Tool


class FinishArgs(BaseModel):
    result: str = Field(description="The final result")


class Finish(Tool):
    name = "finish"
    description = "Completes the user's goal"
    resource = "Completing the user's goal"
    Args = FinishArgs
    terminates = True

    async def _run(self) -> str:
        return self.args.result
