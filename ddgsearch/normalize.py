"""Text and URL normalization for result fields."""

from __future__ import annotations

import html
import re
from urllib.parse import unquote

_STRIP_TAGS_RE = re.compile(r"<.*?>", re.DOTALL)


def normalize_text(raw: str | None) -> str:
    """Strip markup tags and decode HTML entities."""
    if not raw:
        return ""
    return html.unescape(_STRIP_TAGS_RE.sub("", raw))


def normalize_url(raw: str | None) -> str:
    """Percent-decode a URL and replace spaces with '+'."""
    if not raw:
        return ""
    return unquote(raw).replace(" ", "+")
