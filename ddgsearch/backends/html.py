"""HTML backend: follows the next-page forms of html.duckduckgo.com."""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag
from loguru import logger

from ddgsearch.backends.api import sentinel_url
from ddgsearch.errors import MissingKeywordsError
from ddgsearch.fetcher import ResilientFetcher
from ddgsearch.models import SearchOptions, SearchResult

HTML_URL = "https://html.duckduckgo.com/html"
MAX_HTML_PAGES = 10

_SAFESEARCH_VALUES = {
    "on": "1",
    "moderate": "-1",
    "off": "-2",
}


def build_html_payload(keywords: str, options: SearchOptions) -> dict[str, str]:
    """Build the first-page form body, omitting absent fields."""
    payload = {
        "q": keywords,
        "kl": options.region,
        "p": _SAFESEARCH_VALUES[options.safesearch],
    }
    if options.timelimit != "none":
        payload["df"] = options.timelimit
    return payload


def next_page_payload(soup: BeautifulSoup) -> dict[str, str] | None:
    """Return the hidden fields of the next-page form, or None if there is none."""
    next_page = soup.select_one("div.nav-link")
    if next_page is None:
        return None
    return {
        field["name"]: field.get("value", "")
        for field in next_page.select("input[type='hidden']")
        if field.get("name")
    }


def _text(element: Tag | None) -> str:
    return element.get_text().strip() if element is not None else ""


async def search_html(
    *,
    fetcher: ResilientFetcher,
    keywords: str,
    options: SearchOptions,
    page_delay: float = 0.75,
) -> list[SearchResult]:
    """Search the HTML frontend and collect results across pages."""
    if not keywords:
        raise MissingKeywordsError("keywords is mandatory")

    payload: dict[str, str] = build_html_payload(keywords, options)
    sentinel = sentinel_url(keywords)
    seen: set[str] = set()
    results: list[SearchResult] = []

    for _ in range(MAX_HTML_PAGES):
        response = await fetcher.fetch("POST", HTML_URL, data=payload)
        if response is None or not response.text:
            break

        soup = BeautifulSoup(response.text, "html.parser")
        if soup.select_one("div.no-results") is not None:
            logger.warning("search_html keywords={}: no results", keywords)
            return []

        found = False
        for block in soup.select("div.results_links"):
            link = block.select_one("a.result__a")
            if link is None:
                continue
            href = link.get("href") or ""
            if not href or href in seen or href == sentinel:
                continue
            seen.add(href)
            found = True
            results.append(
                SearchResult(
                    title=_text(link),
                    href=href,
                    body=_text(block.select_one("a.result__snippet")),
                )
            )

        next_payload = next_page_payload(soup)
        if next_payload is None or not found:
            break
        payload = next_payload
        await fetcher.sleep(page_delay)

    return results
