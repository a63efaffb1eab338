"""Per-run conversational memory."""

from .short_memory import ShortMemory

__all__ = ["ShortMemory"]
