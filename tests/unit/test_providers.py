"""Unit tests for providers (base retry, OpenAI adapter)."""

from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

from react_agent.config import AgentConfig
from react_agent.errors import TransportError
from react_agent.providers import BaseLLMProvider, OpenAIProvider, RetryConfig
from react_agent.types import Choice, Completion, CompletionParams, SystemMessage, UserMessage


class _FakeProvider(BaseLLMProvider):
    name = "fake"

    def __init__(self, fail_n=0, **kw):
        super().__init__(**kw)
        self._fail_n = fail_n
        self._calls = 0

    async def _do_complete(self, params):
        self._calls += 1
        if self._calls <= self._fail_n:
            raise ConnectionError("boom")
        return Completion(choices=[Choice(content="ok")])


def _params():
    return CompletionParams(messages=[UserMessage(content="hi")], model="m")


class TestRetryConfig:
    def test_defaults(self):
        r = RetryConfig()
        assert r.max_retries == 0
        assert r.base_delay == 1.0


class TestBaseLLMProvider:
    async def test_complete_success(self):
        p = _FakeProvider()
        r = await p.complete(_params())
        assert r.choices[0].content == "ok"

    async def test_single_attempt_by_default(self):
        p = _FakeProvider(fail_n=1)
        with pytest.raises(TransportError) as info:
            await p.complete(_params())
        assert p._calls == 1
        assert info.value.provider == "fake"
        assert isinstance(info.value.cause, ConnectionError)

    async def test_retry_then_succeed(self):
        p = _FakeProvider(fail_n=2, retry=RetryConfig(max_retries=3, base_delay=0.01))
        r = await p.complete(_params())
        assert r.choices[0].content == "ok"
        assert p._calls == 3

    async def test_retry_exhausted(self):
        p = _FakeProvider(fail_n=10, retry=RetryConfig(max_retries=1, base_delay=0.01))
        with pytest.raises(TransportError):
            await p.complete(_params())
        assert p._calls == 2


def _response(*contents):
    return SimpleNamespace(
        choices=[
            SimpleNamespace(message=SimpleNamespace(content=c, role="assistant"), finish_reason="stop")
            for c in contents
        ],
        usage=SimpleNamespace(prompt_tokens=3, completion_tokens=4, total_tokens=7),
    )


class TestOpenAIProvider:
    @pytest.fixture
    def provider(self, config):
        p = OpenAIProvider(config)
        create = AsyncMock(return_value=_response("first", None))
        p._client = SimpleNamespace(chat=SimpleNamespace(completions=SimpleNamespace(create=create)))
        return p

    async def test_request_shape(self, provider):
        params = CompletionParams(
            messages=[SystemMessage(content="sys"), UserMessage(content="hi")],
            model="gpt-x",
            temperature=0.1,
        )
        await provider.complete(params)
        kwargs = provider._client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "gpt-x"
        assert kwargs["temperature"] == 0.1
        assert kwargs["messages"] == [
            {"role": "system", "content": "sys"},
            {"role": "user", "content": "hi"},
        ]
        assert "max_tokens" not in kwargs

    async def test_all_choices_returned(self, provider):
        completion = await provider.complete(_params())
        assert [c.content for c in completion.choices] == ["first", None]
        assert completion.usage.total_tokens == 7

    async def test_client_error_becomes_transport_error(self, provider):
        provider._client.chat.completions.create.side_effect = RuntimeError("503")
        with pytest.raises(TransportError, match="503"):
            await provider.complete(_params())

    def test_built_from_config(self):
        config = AgentConfig.load(api_key="k", base_url="http://localhost:9/v1", model="m")
        provider = OpenAIProvider(config)
        assert str(provider._client.base_url).startswith("http://localhost:9/v1")

    async def test_aclose_closes_client(self, provider):
        provider._client.close = AsyncMock()
        await provider.aclose()
        provider._client.close.assert_awaited_once()
