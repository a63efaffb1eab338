"""Short memory: the per-run conversational transcript."""

from __future__ import annotations

from ..types import Message, SystemMessage


class ShortMemory:
    """One system directive plus the ordered turn messages. Unbounded."""

    name = "short_memory"

    def __init__(self) -> None:
        self._system: SystemMessage | None = None
        self._history: list[Message] = []

    @property
    def system(self) -> SystemMessage | None:
        return self._system

    def set_system(self, message: SystemMessage) -> None:
        self._system = message

    def append(self, message: Message) -> None:
        if isinstance(message, SystemMessage):
            self.set_system(message)
            return
        self._history.append(message)

    def snapshot(self) -> list[Message]:
        """System message first (if any), then turns in insertion order.

        Returns a new list; later appends never show up in it.
        """
        messages: list[Message] = [self._system] if self._system is not None else []
        messages.extend(self._history)
        return messages

    messages = snapshot

    def __len__(self) -> int:
        return len(self._history)
