"""Feed backend: paginates links.duckduckgo.com/d.js."""

from __future__ import annotations

import json
import re
from typing import Any

from ddgsearch.errors import MissingKeywordsError, TokenAcquisitionError
from ddgsearch.fetcher import ResilientFetcher
from ddgsearch.models import SearchOptions, SearchResult
from ddgsearch.normalize import normalize_text, normalize_url
from ddgsearch.vqd import acquire_vqd

FEED_URL = "https://links.duckduckgo.com/d.js"

# The feed grows its page size as it goes; these are not a uniform stride.
FEED_OFFSETS = ("0", "20", "70", "120")

_SAFESEARCH_PARAMS: dict[str, dict[str, str]] = {
    "off": {"ex": "-2"},
    "moderate": {"ex": "-1", "p": "", "sp": "0"},
    "on": {"p": "1", "sp": "0"},
}

_PAGE_LAYOUT_RE = re.compile(r"DDG\.pageLayout\.load\('d',\s*(\[.*?\])\s*\);", re.DOTALL)


def sentinel_url(keywords: str) -> str:
    """Self-referential link the engine emits when it has no better match."""
    return f"http://www.google.com/search?q={keywords}"


def build_api_payload(keywords: str, options: SearchOptions, vqd: str) -> dict[str, str]:
    """Build the d.js query parameters, omitting absent fields."""
    payload = {
        "q": keywords,
        "kl": options.region,
        "l": options.region,
        "s": "0",
    }
    if options.timelimit != "none":
        payload["df"] = options.timelimit
    payload["vqd"] = vqd
    payload["o"] = "json"
    payload.update(_SAFESEARCH_PARAMS[options.safesearch])
    return payload


def parse_feed(text: str) -> list[dict[str, Any]] | None:
    """Extract result rows from a d.js body, or None if there are none."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        match = _PAGE_LAYOUT_RE.search(text)
        if not match:
            return None
        try:
            data = {"results": json.loads(match.group(1))}
        except json.JSONDecodeError:
            return None

    if not isinstance(data, dict):
        return None
    rows = data.get("results")
    if not isinstance(rows, list) or not rows:
        return None
    return [row for row in rows if isinstance(row, dict)]


async def search_api(
    *,
    fetcher: ResilientFetcher,
    keywords: str,
    options: SearchOptions,
) -> list[SearchResult]:
    """Search the structured feed and normalize results."""
    if not keywords:
        raise MissingKeywordsError("keywords is mandatory")

    vqd = await acquire_vqd(fetcher, keywords)
    if not vqd:
        raise TokenAcquisitionError(f"unable to acquire vqd for keywords={keywords!r}")

    payload = build_api_payload(keywords, options, vqd)
    sentinel = sentinel_url(keywords)
    seen: set[str] = set()
    results: list[SearchResult] = []

    for offset in FEED_OFFSETS:
        payload["s"] = offset
        response = await fetcher.fetch("GET", FEED_URL, params=payload)
        if response is None:
            break

        rows = parse_feed(response.text)
        if not rows:
            break

        found = False
        for row in rows:
            href = row.get("u") or ""
            if not href or href in seen or href == sentinel:
                continue
            seen.add(href)
            body = normalize_text(row.get("a"))
            if not body:
                continue
            found = True
            results.append(
                SearchResult(
                    title=normalize_text(row.get("t")),
                    href=normalize_url(href),
                    body=body,
                )
            )

        if not found:
            break

    return results
