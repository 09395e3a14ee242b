"""Shared search models."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Literal, Mapping

from ddgsearch.errors import (
    BackendNotImplementedError,
    InvalidOptionError,
    UnknownBackendError,
)

SafeSearch = Literal["on", "moderate", "off"]
TimeLimit = Literal["d", "w", "m", "y", "none"]
Backend = Literal["api", "html", "lite"]

SAFESEARCH_VALUES = ("on", "moderate", "off")
IMPLEMENTED_BACKENDS = ("api", "html")
KNOWN_BACKENDS = ("api", "html", "lite")

_TIMELIMIT_ALIASES = {
    "d": "d",
    "day": "d",
    "w": "w",
    "week": "w",
    "m": "m",
    "month": "m",
    "y": "y",
    "year": "y",
    "none": "none",
}


@dataclass(slots=True)
class SearchResult:
    """Normalized search result item."""

    title: str
    href: str
    body: str = ""

    def to_dict(self) -> dict[str, str]:
        return {"title": self.title, "href": self.href, "body": self.body}


@dataclass(frozen=True, slots=True)
class SearchOptions:
    """Options for one text search, resolved once before dispatch."""

    region: str = "wt-wt"
    safesearch: SafeSearch = "moderate"
    timelimit: TimeLimit = "none"
    backend: Backend = "api"

    @classmethod
    def from_dict(
        cls,
        data: Mapping[str, Any] | None,
        defaults: "SearchOptions | None" = None,
    ) -> "SearchOptions":
        """Build options from a mapping, filling missing or None values from defaults."""
        base = defaults or cls()
        values = {k: v for k, v in (data or {}).items() if v is not None}
        unknown = set(values) - {"region", "safesearch", "timelimit", "backend"}
        if unknown:
            raise InvalidOptionError(f"unknown search options: {', '.join(sorted(unknown))}")
        return replace(base, **values).validated()

    def validated(self) -> "SearchOptions":
        """Check every field and return a copy with canonical values."""
        backend = str(self.backend).strip().lower()
        if backend not in KNOWN_BACKENDS:
            raise UnknownBackendError(f"unknown backend option: {self.backend}")
        if backend not in IMPLEMENTED_BACKENDS:
            raise BackendNotImplementedError(
                f"{backend} backend is not implemented, use one of {IMPLEMENTED_BACKENDS}"
            )

        safesearch = str(self.safesearch).strip().lower()
        if safesearch not in SAFESEARCH_VALUES:
            raise InvalidOptionError(f"safesearch must be one of {SAFESEARCH_VALUES}")

        timelimit = _TIMELIMIT_ALIASES.get(str(self.timelimit).strip().lower())
        if timelimit is None:
            raise InvalidOptionError(f"unknown timelimit: {self.timelimit}")

        region = (self.region or "").strip() or "wt-wt"
        return replace(
            self,
            region=region,
            safesearch=safesearch,
            timelimit=timelimit,
            backend=backend,
        )
