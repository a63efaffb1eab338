"""Prompt templates and the planning round trip."""

from .planner import TEMPLATE_DIR, Planner

__all__ = ["Planner", "TEMPLATE_DIR"]
