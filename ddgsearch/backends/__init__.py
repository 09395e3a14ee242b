"""Search backends."""

from ddgsearch.backends.api import search_api
from ddgsearch.backends.html import search_html

__all__ = ["search_api", "search_html"]
