"""
Pytest Configuration and Fixtures
"""

import json

import pytest

from react_agent.config import AgentConfig
from react_agent.types import Choice, Completion


def structured(name: str, args: dict | None = None, speak: str = "On it.") -> str:
    """A well-formed model answer issuing ``name`` with ``args``."""
    return json.dumps({
        "thoughts": {
            "text": "thinking",
            "reasoning": "because",
            "plan": "- do it",
            "criticism": "none",
            "speak": speak,
        },
        "command": {"name": name, "args": args or {}},
    })


class ScriptedProvider:
    """Replays scripted answers; an Exception entry is raised instead."""

    def __init__(self, script):
        self._script = list(script)
        self.calls = []
        self.closed = False

    async def complete(self, params):
        self.calls.append(params)
        item = self._script[min(len(self.calls) - 1, len(self._script) - 1)]
        if isinstance(item, Exception):
            raise item
        if isinstance(item, Completion):
            return item
        return Completion(choices=[Choice(content=item)])

    async def aclose(self):
        self.closed = True


@pytest.fixture
def config() -> AgentConfig:
    return AgentConfig.load(
        api_key="test-key",
        base_url="http://localhost:8000/v1",
        model="test-model",
        language="english",
        max_steps=5,
    )
