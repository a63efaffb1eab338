"""
react-agent: a ReAct-style autonomous agent loop.

Given a goal, the agent asks a chat-completion model for a structured
"thoughts + command" answer, runs the command against a small closed set of
tools, feeds the result back, and repeats until the model issues ``finish``
or the step budget runs out.

```python
from react_agent import AgentConfig, ReActAgent

config = AgentConfig.load(api_key="...", base_url="https://api.openai.com/v1", model="gpt-4o-mini")
agent = ReActAgent(config)
async for message in agent.invoke("what is 2+1?"):
    print(message.role, message.content)
```
"""

from .agent import AgentRun, LoopState, ReActAgent
from .config import AgentConfig, Language
from .errors import (
    AgentError,
    ConfigurationError,
    MissingArgument,
    ParseError,
    ResolutionError,
    TemplateError,
    ToolExecutionError,
    TransportError,
    UnknownTool,
)
from .memory import ShortMemory
from .planning import Planner
from .tools import ToolRegistry
from .types import (
    AssistantMessage,
    Command,
    Message,
    StructuredResponse,
    SystemMessage,
    ToolContext,
    ToolMessage,
    UserMessage,
)

__version__ = "0.1.0"

__all__ = [
    "ReActAgent",
    "AgentRun",
    "LoopState",
    "AgentConfig",
    "Language",
    "ShortMemory",
    "Planner",
    "ToolRegistry",
    "ToolContext",
    "Message",
    "SystemMessage",
    "UserMessage",
    "AssistantMessage",
    "ToolMessage",
    "Command",
    "StructuredResponse",
    "AgentError",
    "ConfigurationError",
    "TemplateError",
    "TransportError",
    "ParseError",
    "ResolutionError",
    "UnknownTool",
    "MissingArgument",
    "ToolExecutionError",
]
