"""Base LLM provider with optional retry."""

from __future__ import annotations

import asyncio
import random
from dataclasses import dataclass

from ..errors import TransportError
from ..types import Completion, CompletionParams


@dataclass
class RetryConfig:
    # Zero by default: the agent loop charges each failed call to its step budget.
    max_retries: int = 0
    base_delay: float = 1.0
    max_delay: float = 30.0


class BaseLLMProvider:
    """Subclass and implement _do_complete. Failures surface as TransportError."""

    name = "base"

    def __init__(self, retry: RetryConfig | None = None) -> None:
        self._retry = retry or RetryConfig()

    async def complete(self, params: CompletionParams) -> Completion:
        return await self._with_retry(params)

    async def _do_complete(self, params: CompletionParams) -> Completion:
        raise NotImplementedError

    async def aclose(self) -> None:
        """Release transport resources. Nothing to release by default."""

    async def _with_retry(self, params: CompletionParams) -> Completion:
        last_err: Exception | None = None
        for i in range(self._retry.max_retries + 1):
            try:
                return await self._do_complete(params)
            except Exception as e:
                last_err = e
                if i < self._retry.max_retries:
                    delay = min(
                        self._retry.base_delay * (2 ** i) + random.random() * 0.1,
                        self._retry.max_delay,
                    )
                    await asyncio.sleep(delay)
        if isinstance(last_err, TransportError):
            raise last_err
        raise TransportError(
            self.name,
            str(last_err) or type(last_err).__name__,
            status_code=getattr(last_err, "status_code", None),
            cause=last_err,
        ) from last_err
