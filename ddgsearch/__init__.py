"""
ddgsearch - DuckDuckGo text search without an API key.
"""

from loguru import logger

from ddgsearch.client import DDGS
from ddgsearch.config import Config, load_config
from ddgsearch.errors import (
    BackendNotImplementedError,
    DDGSearchError,
    InvalidOptionError,
    MissingKeywordsError,
    RateLimitedError,
    TokenAcquisitionError,
    TransportError,
    UnknownBackendError,
)
from ddgsearch.models import SearchOptions, SearchResult
from ddgsearch.utils.logging import set_log_level

__version__ = "0.1.0"

# Silent unless the caller opts in with set_log_level().
logger.disable("ddgsearch")

__all__ = [
    "DDGS",
    "Config",
    "load_config",
    "SearchOptions",
    "SearchResult",
    "set_log_level",
    "DDGSearchError",
    "MissingKeywordsError",
    "TokenAcquisitionError",
    "UnknownBackendError",
    "BackendNotImplementedError",
    "InvalidOptionError",
    "TransportError",
    "RateLimitedError",
]
