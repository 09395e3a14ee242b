"""Errors raised by the search client."""


class DDGSearchError(Exception):
    """Base class for all search client errors."""


class MissingKeywordsError(DDGSearchError):
    """Raised when a search is requested with an empty query."""


class TokenAcquisitionError(DDGSearchError):
    """Raised when the vqd token for the feed backend cannot be obtained."""


class UnknownBackendError(DDGSearchError):
    """Raised for a backend name the client does not know."""


class BackendNotImplementedError(DDGSearchError):
    """Raised for a known backend that is not implemented."""


class InvalidOptionError(DDGSearchError):
    """Raised when a search option has an unsupported value."""


class TransportError(DDGSearchError):
    """Raised when every fetch attempt failed with a transport error."""


class RateLimitedError(TransportError):
    """Raised on a 418 hard block; never retried."""
