"""The ReAct agent loop."""

from .react import AgentRun, LoopState, ReActAgent

__all__ = ["ReActAgent", "AgentRun", "LoopState"]
