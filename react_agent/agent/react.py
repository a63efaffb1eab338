"""ReAct agent: plan, act, observe, until ``finish`` or the step budget runs out."""

from __future__ import annotations

import asyncio
import enum
import logging
from collections.abc import AsyncGenerator
from typing import Any

from ..config import AgentConfig
from ..errors import ParseError, ResolutionError, ToolExecutionError, TransportError
from ..memory import ShortMemory
from ..planning import Planner
from ..providers import OpenAIProvider
from ..tools import Tool, ToolRegistry
from ..types import AssistantMessage, LLMProvider, Message, StructuredResponse, parse_response

logger = logging.getLogger(__name__)


class LoopState(str, enum.Enum):
    INIT = "init"
    PLANNING = "planning"
    TOOL_EXECUTING = "tool_executing"
    DONE = "done"


class AgentRun:
    """The message stream of one invocation.

    Iterating it drives the loop one message at a time; nothing runs ahead
    of the consumer. ``aclose()`` (or abandoning the iterator) stops the run
    before its next step. ``memory``, ``state`` and ``steps`` are exposed
    for inspection only.
    """

    def __init__(self, agent: ReActAgent, memory: ShortMemory, echo: Message, signal: Any) -> None:
        self.memory = memory
        self.state = LoopState.INIT
        self.steps = 0
        self._gen = agent._loop(self, echo, signal)

    @property
    def finished(self) -> bool:
        return self.state is LoopState.DONE

    def __aiter__(self) -> AgentRun:
        return self

    async def __anext__(self) -> Message:
        return await self._gen.__anext__()

    async def aclose(self) -> None:
        await self._gen.aclose()


class ReActAgent:
    """Drives one model through the thought/command loop.

    The provider, tool registry and planner are shared and stateless; every
    ``invoke`` owns a fresh ShortMemory, so several invocations may run
    concurrently on one agent.

    Each step acts on at most one answer: the first choice that parses.
    A run therefore yields at most ``max_steps`` speak messages.
    """

    def __init__(
        self,
        config: AgentConfig,
        provider: LLMProvider | None = None,
        tools: ToolRegistry | None = None,
        planner: Planner | None = None,
    ) -> None:
        self.config = config
        self.provider = provider or OpenAIProvider(config)
        self.tools = tools or ToolRegistry()
        self.planner = planner or Planner(max_tokens=config.max_tokens)
        # Tools still running after their consumer was cancelled.
        self._detached: set[asyncio.Future] = set()

    def invoke(self, goal: str, signal: Any = None) -> AgentRun:
        """Start a run and return its message stream.

        Prompt rendering happens here, so configuration errors are raised
        before the stream yields anything. ``signal`` is an optional
        ``asyncio.Event``; once set, no further step begins.
        """
        memory = ShortMemory()
        memory.set_system(
            self.planner.build_system_message(
                goal,
                self.config.language,
                self.tools.describe_all(),
                self.tools.resources(),
            )
        )
        # Echoed to the caller only; the goal is already in the system message.
        echo = self.planner.build_user_message(goal)
        return AgentRun(self, memory, echo, signal)

    async def run(self, goal: str, signal: Any = None) -> str | None:
        """Drain the stream; return the finishing result, or None if the budget ran out."""
        last: Message | None = None
        stream = self.invoke(goal, signal=signal)
        async for message in stream:
            last = message
        return last.content if stream.finished and last is not None else None

    async def aclose(self) -> None:
        """Close the provider's transport, if it holds one."""
        close = getattr(self.provider, "aclose", None)
        if close is not None:
            await close()

    async def _loop(self, run: AgentRun, echo: Message, signal: Any) -> AsyncGenerator[Message, None]:
        memory = run.memory
        max_steps = self.config.max_steps
        logger.info("Goal: %s", echo.content)
        yield echo

        for step in range(1, max_steps + 1):
            if _is_aborted(signal):
                logger.info("Run aborted before step %d", step)
                return
            run.state = LoopState.PLANNING
            run.steps = step
            logger.debug("Step %d/%d", step, max_steps)
            transcript = memory.snapshot()
            try:
                completion = await self.planner.call(
                    self.provider, self.config.model, self.config.temperature, transcript
                )
            except TransportError as e:
                logger.warning("Step %d: model call failed: %s", step, e)
                continue

            response, raw, malformed = None, None, None
            for choice in completion.choices:
                if not choice.content:
                    continue
                try:
                    response = parse_response(choice.content)
                except ParseError:
                    malformed = malformed or choice.content
                    continue
                raw = choice.content
                break

            if response is None:
                if malformed is not None:
                    logger.info("Step %d: unparseable response, requesting a repair", step)
                    memory.append(self.planner.build_repair_message(malformed))
                continue

            memory.append(self.planner.build_assistant_message(raw))
            yield AssistantMessage(content=response.thoughts.speak)
            if _is_aborted(signal):
                logger.info("Run aborted during step %d", step)
                return

            run.state = LoopState.TOOL_EXECUTING
            try:
                tool, result = await self._act(response)
            except (ResolutionError, ToolExecutionError) as e:
                logger.info("Step %d: %s", step, e)
                memory.append(self.planner.build_error_message(str(e)))
                run.state = LoopState.PLANNING
                continue

            if tool.terminates:
                run.state = LoopState.DONE
                logger.info("Finished after %d step(s)", step)
                yield AssistantMessage(content=result)
                return
            memory.append(self.planner.build_command_result(result))
            run.state = LoopState.PLANNING

        logger.warning("Step budget (%d) exhausted without finishing", max_steps)

    async def _act(self, response: StructuredResponse) -> tuple[Tool, str]:
        tool = self.tools.resolve(response.command)
        logger.info("Executing %r", tool)
        task = asyncio.ensure_future(tool.execute())
        try:
            # Cancelling the consumer must not cut a started side effect short.
            result = await asyncio.shield(task)
        except asyncio.CancelledError:
            self._detached.add(task)
            task.add_done_callback(self._reap_detached)
            raise
        return tool, result

    def _reap_detached(self, task: asyncio.Future) -> None:
        self._detached.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.warning("Command finished after cancellation with an error: %s", exc)


def _is_aborted(signal: Any) -> bool:
    return bool(signal and (signal.is_set() if hasattr(signal, "is_set") else False))
