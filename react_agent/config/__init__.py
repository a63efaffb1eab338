"""Agent configuration."""

from .agent import AgentConfig, Language

__all__ = ["AgentConfig", "Language"]
