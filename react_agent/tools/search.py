"""Web search: Tavily API client and the ``search`` command."""

from __future__ import annotations

import logging

import aiohttp
from pydantic import BaseModel, Field

from ..errors import ToolExecutionError
from .base import Tool

logger = logging.getLogger(__name__)

TAVILY_BASE_URL = "https://api.tavily.com"


class SearchParameters(BaseModel):
    query: str
    search_depth: str | None = None  # "basic" | "advanced"
    topic: str | None = None  # "general" | "news"
    max_results: int | None = None
    include_images: bool | None = None
    include_answer: bool | None = None
    include_raw_content: bool | None = None
    include_domains: list[str] | None = None
    exclude_domains: list[str] | None = None
    use_cache: bool | None = None


class SearchItem(BaseModel):
    title: str
    url: str
    content: str
    raw_content: str | None = None
    score: float = 0.0


class SearchResponse(BaseModel):
    query: str
    answer: str | None = None
    response_time: float = 0.0
    images: list[str] = Field(default_factory=list)
    results: list[SearchItem] = Field(default_factory=list)

    def __str__(self) -> str:
        lines = []
        if self.answer:
            lines.append(f"Answer: {self.answer}")
        for i, item in enumerate(self.results, 1):
            lines.append(f"{i}. {item.title}\n   URL: {item.url}\n   {item.content}")
        return "\n".join(lines) if lines else f"No results for: {self.query}"


class TavilyClient:
    """Stateless Tavily client; one instance may serve many concurrent agents."""

    def __init__(
        self,
        api_key: str,
        base_url: str = TAVILY_BASE_URL,
        timeout: float = 30.0,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = aiohttp.ClientTimeout(total=timeout)

    async def search(self, params: SearchParameters) -> SearchResponse:
        body = params.model_dump(exclude_none=True)
        body["api_key"] = self._api_key
        async with aiohttp.ClientSession(timeout=self._timeout) as session:
            async with session.post(f"{self._base_url}/search", json=body) as resp:
                if resp.status != 200:
                    text = await resp.text()
                    raise ToolExecutionError("search", f"Tavily returned {resp.status}: {text[:200]}")
                data = await resp.json()
        return SearchResponse.model_validate(data)


class SearchArgs(BaseModel):
    query: str = Field(description="The content to search for")


class Search(Tool):
    name = "search"
    description = (
        "Search engine: use it to gather information from the internet "
        "when your own knowledge is not enough to reach the goal"
    )
    resource = "Internet access for searches and information gathering"
    Args = SearchArgs

    async def _run(self) -> str:
        client = self.context.search_client
        if client is None:
            raise ToolExecutionError(self.name, "search backend is not configured")
        logger.info("Searching: %s", self.args.query)
        response = await client.search(SearchParameters(query=self.args.query))
        return str(response)
