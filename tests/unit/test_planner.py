"""Unit tests for the Planner."""

import shutil

import pytest

from react_agent.config import Language
from react_agent.errors import TemplateError, TransportError
from react_agent.planning import TEMPLATE_DIR, Planner
from react_agent.tools import ToolRegistry
from react_agent.types import AssistantMessage, SystemMessage, UserMessage
from tests.conftest import ScriptedProvider


@pytest.fixture
def planner() -> Planner:
    return Planner()


class TestMessages:
    def test_system_message_embeds_everything(self, planner):
        registry = ToolRegistry()
        message = planner.build_system_message(
            "what is 2+1?", Language.ENGLISH, registry.describe_all(), registry.resources()
        )
        assert isinstance(message, SystemMessage)
        assert "what is 2+1?" in message.content
        assert "english" in message.content
        assert registry.describe_all() in message.content
        assert planner.response_format() in message.content

    def test_system_message_is_byte_stable(self, planner):
        catalog = ToolRegistry().describe_all()
        a = planner.build_system_message("goal", "chinese", catalog)
        b = planner.build_system_message("goal", "chinese", catalog)
        assert a == b

    def test_wrappers(self, planner):
        assert planner.build_user_message("hi") == UserMessage(content="hi")
        assert planner.build_assistant_message("yo") == AssistantMessage(content="yo")

    def test_repair_embeds_text_verbatim(self, planner):
        bad = '{"thoughts": oops {{ not jinja }}'
        message = planner.build_repair_message(bad)
        assert message.role == "user"
        assert bad in message.content
        assert planner.response_format() in message.content

    def test_command_result(self, planner):
        message = planner.build_command_result("42")
        assert message.content.startswith("Command result: 42")
        assert planner.response_format() in message.content

    def test_error_message_carries_error(self, planner):
        message = planner.build_error_message('Unknown command "fly"')
        assert 'Unknown command "fly"' in message.content
        assert message.role == "user"


class TestTemplates:
    def test_missing_template_dir(self, tmp_path):
        with pytest.raises(TemplateError):
            Planner(template_dir=tmp_path / "nowhere")

    def test_missing_single_template(self, tmp_path):
        shutil.copytree(TEMPLATE_DIR, tmp_path / "t")
        (tmp_path / "t" / "fix_response_format.prompt").unlink()
        with pytest.raises(TemplateError) as info:
            Planner(template_dir=tmp_path / "t")
        assert info.value.template == "fix_response_format.prompt"

    def test_malformed_placeholder(self, tmp_path):
        shutil.copytree(TEMPLATE_DIR, tmp_path / "t")
        (tmp_path / "t" / "command_result.prompt").write_text("Result: {{ result ", encoding="utf-8")
        with pytest.raises(TemplateError):
            Planner(template_dir=tmp_path / "t")

    def test_undefined_placeholder_fails_on_render(self, tmp_path):
        shutil.copytree(TEMPLATE_DIR, tmp_path / "t")
        (tmp_path / "t" / "system.prompt").write_text("{{ persona }} {{ goal }}", encoding="utf-8")
        planner = Planner(template_dir=tmp_path / "t")
        with pytest.raises(TemplateError):
            planner.build_system_message("goal", "english", "")


class TestCall:
    async def test_passes_transcript_and_settings(self, planner):
        provider = ScriptedProvider(["answer"])
        transcript = [SystemMessage(content="sys"), UserMessage(content="hi")]
        completion = await planner.call(provider, "m-1", 0.2, transcript)
        assert completion.choices[0].content == "answer"
        params = provider.calls[0]
        assert params.model == "m-1"
        assert params.temperature == 0.2
        assert params.messages == transcript

    async def test_wraps_failures(self, planner):
        provider = ScriptedProvider([ConnectionError("reset by peer")])
        with pytest.raises(TransportError, match="reset by peer"):
            await planner.call(provider, "m", 0.7, [])
        assert len(provider.calls) == 1

    async def test_transport_error_passes_through(self, planner):
        err = TransportError("openai", "rate limited", status_code=429)
        provider = ScriptedProvider([err])
        with pytest.raises(TransportError) as info:
            await planner.call(provider, "m", 0.7, [])
        assert info.value is err
