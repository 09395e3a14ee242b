"""DuckDuckGo text search client with pluggable backends."""

from __future__ import annotations

import random
from collections.abc import Awaitable, Callable, Mapping
from typing import Any

import httpx

from ddgsearch.backends.api import search_api
from ddgsearch.backends.html import search_html
from ddgsearch.config.schema import Config
from ddgsearch.fetcher import ResilientFetcher, Sleeper
from ddgsearch.models import SearchOptions, SearchResult

USER_AGENTS: tuple[str, ...] = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/114.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Windows NT 10.0; WOW64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/114.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Windows NT 10.0) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/114.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 13_4) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/114.0.0.0 Safari/537.36",
)
REFERER = "https://duckduckgo.com/"


def default_headers() -> dict[str, str]:
    """Browser-like headers with a randomly picked User-Agent."""
    return {"User-Agent": random.choice(USER_AGENTS), "Referer": REFERER}


class DDGS:
    """DuckDuckGo search client dispatching to the feed or HTML backend."""

    _BACKENDS: dict[str, Callable[..., Awaitable[list[SearchResult]]]] = {
        "api": search_api,
        "html": search_html,
    }

    def __init__(
        self,
        config: Config | None = None,
        *,
        headers: Mapping[str, str] | None = None,
        timeout_ms: int | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        sleep: Sleeper | None = None,
    ):
        self.config = config or Config()
        http_cfg = self.config.http
        self.headers: dict[str, str] = dict(headers or http_cfg.headers or default_headers())
        self.timeout = (timeout_ms if timeout_ms is not None else http_cfg.timeout_ms) / 1000
        self._transport = transport
        self._sleep = sleep
        self._defaults = SearchOptions(
            region=self.config.search.region,
            safesearch=self.config.search.safesearch,
            timelimit=self.config.search.timelimit,
            backend=self.config.search.backend,
        )

    def resolve_options(
        self,
        options: SearchOptions | Mapping[str, Any] | None = None,
        **overrides: Any,
    ) -> SearchOptions:
        """Apply defaults and overrides, then validate."""
        if isinstance(options, SearchOptions):
            return SearchOptions.from_dict(overrides, defaults=options)
        merged = {**(options or {}), **overrides}
        return SearchOptions.from_dict(merged, defaults=self._defaults)

    async def text(
        self,
        keywords: str,
        options: SearchOptions | Mapping[str, Any] | None = None,
        **overrides: Any,
    ) -> list[SearchResult]:
        """
        Run a text search.

        Args:
            keywords: Query string.
            options: SearchOptions or a mapping with region, safesearch,
                timelimit and backend keys. Missing values use the defaults.
            **overrides: Option values taking precedence over ``options``.

        Returns:
            Results in discovery order; may be partial or empty if the
            upstream stops answering mid-pagination.
        """
        resolved = self.resolve_options(options, **overrides)
        searcher = self._BACKENDS[resolved.backend]
        kwargs: dict[str, Any] = {}
        if resolved.backend == "html":
            kwargs["page_delay"] = self.config.http.page_delay

        async with self._client() as client:
            fetcher = self._fetcher(client)
            return await searcher(fetcher=fetcher, keywords=keywords, options=resolved, **kwargs)

    search = text

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            headers=self.headers,
            timeout=self.timeout,
            follow_redirects=True,
            transport=self._transport,
        )

    def _fetcher(self, client: httpx.AsyncClient) -> ResilientFetcher:
        kwargs: dict[str, Any] = {}
        if self._sleep is not None:
            kwargs["sleep"] = self._sleep
        return ResilientFetcher(
            client,
            max_attempts=self.config.http.max_attempts,
            retry_delay=self.config.http.retry_delay,
            **kwargs,
        )
