"""OpenAI-compatible LLM provider."""

from __future__ import annotations

from openai import AsyncOpenAI

from ..config import AgentConfig
from ..types import Choice, Completion, CompletionParams, Message, TokenUsage
from .base import BaseLLMProvider, RetryConfig


def _msg_to_dict(m: Message) -> dict:
    d: dict = {"role": m.role, "content": m.content}
    if hasattr(m, "tool_call_id"):
        d["tool_call_id"] = m.tool_call_id
    return d


class OpenAIProvider(BaseLLMProvider):
    name = "openai"

    def __init__(self, config: AgentConfig, retry: RetryConfig | None = None) -> None:
        super().__init__(retry=retry)
        self._client = AsyncOpenAI(api_key=config.api_key, base_url=str(config.base_url))

    async def aclose(self) -> None:
        await self._client.close()

    async def _do_complete(self, params: CompletionParams) -> Completion:
        kwargs: dict = {
            "model": params.model,
            "messages": [_msg_to_dict(m) for m in params.messages],
            "temperature": params.temperature,
        }
        if params.max_tokens:
            kwargs["max_tokens"] = params.max_tokens
        resp = await self._client.chat.completions.create(**kwargs)
        choices = [
            Choice(
                content=c.message.content,
                role=c.message.role,
                finish_reason=c.finish_reason,
            )
            for c in resp.choices
        ]
        usage = TokenUsage()
        if resp.usage:
            usage = TokenUsage(
                prompt_tokens=resp.usage.prompt_tokens,
                completion_tokens=resp.usage.completion_tokens,
                total_tokens=resp.usage.total_tokens,
            )
        return Completion(choices=choices, usage=usage)
