"""Session token (vqd) acquisition for the feed backend."""

from __future__ import annotations

from loguru import logger

from ddgsearch.fetcher import ResilientFetcher

TOKEN_URL = "https://duckduckgo.com"

# Tried in order; the first prefix found with a matching suffix wins.
VQD_PATTERNS: tuple[tuple[bytes, bytes], ...] = (
    (b'vqd="', b'"'),
    (b"vqd=", b"&"),
    (b"vqd='", b"'"),
)


def extract_vqd(content: bytes) -> str | None:
    """Find the vqd value in a raw response body."""
    for prefix, suffix in VQD_PATTERNS:
        start = content.find(prefix)
        if start == -1:
            continue
        start += len(prefix)
        end = content.find(suffix, start)
        if end == -1:
            continue
        return content[start:end].decode("utf-8", errors="replace")
    return None


async def acquire_vqd(fetcher: ResilientFetcher, keywords: str) -> str | None:
    """Request the landing page for ``keywords`` and pull its vqd token."""
    response = await fetcher.fetch("POST", TOKEN_URL, data={"q": keywords})
    vqd = extract_vqd(response.content) if response is not None else None
    if not vqd:
        logger.warning("acquire_vqd keywords={}: vqd not found", keywords)
        return None
    return vqd
