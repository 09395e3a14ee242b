"""HTTP fetch with bounded retries and soft-block detection."""

from __future__ import annotations

import asyncio
import re
from collections.abc import Awaitable, Callable
from typing import Any

import httpx
from loguru import logger

from ddgsearch.errors import RateLimitedError, TransportError

# Anti-bot redirect targets look like ".../506-00.js".
_SOFT_BLOCK_URL_RE = re.compile(r"[0-9]{3}-[0-9]{2}.js")

Sleeper = Callable[[float], Awaitable[Any]]


def is_soft_block(response: httpx.Response) -> bool:
    """Check whether a response is a rate-limit signal disguised as success."""
    return response.status_code == 202 or bool(_SOFT_BLOCK_URL_RE.search(str(response.url)))


def _is_hard_block(exc: httpx.HTTPError) -> bool:
    # Status errors embed the request URL, which may contain "418" in the query.
    if isinstance(exc, httpx.HTTPStatusError):
        return exc.response.status_code == 418
    return "418" in str(exc)


class ResilientFetcher:
    """Issue one logical request with up to ``max_attempts`` tries."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        *,
        max_attempts: int = 3,
        retry_delay: float = 3.0,
        sleep: Sleeper = asyncio.sleep,
    ):
        self.client = client
        self.max_attempts = max(1, max_attempts)
        self.retry_delay = retry_delay
        self.sleep = sleep

    async def fetch(self, method: str, url: str, **kwargs: Any) -> httpx.Response | None:
        """
        Fetch a URL, retrying soft blocks and transport errors.

        Returns:
            The response on status 200, or None when the attempts ran out
            without a transport error being raised.

        Raises:
            RateLimitedError: On a 418 hard block, without retrying.
            TransportError: When the last attempt fails with a transport error.
        """
        for attempt in range(1, self.max_attempts + 1):
            last = attempt == self.max_attempts
            try:
                response = await self.client.request(method, url, follow_redirects=True, **kwargs)
                response.raise_for_status()
            except httpx.HTTPError as e:
                logger.warning("fetch {} {} (attempt {}/{}): {}", method, url, attempt, self.max_attempts, e)
                if _is_hard_block(e):
                    raise RateLimitedError(f"blocked by upstream (418) for {url}: {e}") from e
                if last:
                    raise TransportError(
                        f"{method} {url} failed after {self.max_attempts} attempts: {e}"
                    ) from e
            else:
                if is_soft_block(response):
                    logger.warning(
                        "fetch {} {} (attempt {}/{}): soft block, status={} final_url={}",
                        method,
                        url,
                        attempt,
                        self.max_attempts,
                        response.status_code,
                        response.url,
                    )
                elif response.status_code == 200:
                    return response

            if not last:
                await self.sleep(self.retry_delay)
        return None
