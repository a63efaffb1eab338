"""Command-line entry point: run one goal and print the conversation."""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

from .agent import ReActAgent
from .config import AgentConfig
from .errors import ConfigurationError
from .tools import TavilyClient, ToolRegistry
from .types import Message, ToolContext

_ROLE_STYLES = {
    "user": "bold green",
    "assistant": "bold blue",
    "tool": "bold magenta",
}


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="react-agent", description=__doc__)
    parser.add_argument("goal", help="What the agent should accomplish")
    parser.add_argument("--model", help="Model identifier (default: $OPENAI_MODEL)")
    parser.add_argument("--language", choices=["chinese", "english"])
    parser.add_argument("--max-steps", type=int)
    parser.add_argument("--temperature", type=float)
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path(os.environ.get("AGENT_OUTPUT_DIR", "output")),
        help="Directory for file_write/file_append (default: ./output)",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def _print_message(console: Console, message: Message) -> None:
    stamp = datetime.now().strftime("%m-%d %H:%M:%S")
    role = message.role.capitalize()
    style = _ROLE_STYLES.get(message.role, "bold")
    line = Text.assemble((f"[{stamp}] ", "dim"), (f"{role}: ", style), message.content)
    console.print(line, highlight=False, soft_wrap=True)


async def _run(agent: ReActAgent, goal: str, console: Console) -> bool:
    try:
        stream = agent.invoke(goal)
        async for message in stream:
            _print_message(console, message)
        return stream.finished
    finally:
        await agent.aclose()


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = _parse_args(argv)
    console = Console()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )

    try:
        config = AgentConfig.from_env(
            model=args.model,
            language=args.language,
            max_steps=args.max_steps,
            temperature=args.temperature,
        )
        tavily_key = os.environ.get("TAVILY_API_KEY")
        context = ToolContext(
            search_client=TavilyClient(tavily_key) if tavily_key else None,
            output_dir=args.output_dir,
        )
        agent = ReActAgent(config, tools=ToolRegistry(context))
        finished = asyncio.run(_run(agent, args.goal, console))
    except ConfigurationError as e:
        console.print(Text.assemble(("Configuration error: ", "bold red"), str(e)))
        return 2
    except KeyboardInterrupt:
        return 130

    if not finished:
        console.print("[yellow]Step budget exhausted without a final result.[/yellow]")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
