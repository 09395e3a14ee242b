"""Configuration schema using Pydantic."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Base(BaseModel):
    """Base model accepting both camelCase and snake_case keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class HttpConfig(Base):
    """Transport settings shared by every search call."""

    headers: dict[str, str] = Field(default_factory=dict)  # Empty = rotated browser headers
    timeout_ms: int = Field(default=10000, ge=1)
    max_attempts: int = Field(default=3, ge=1)
    retry_delay: float = Field(default=3.0, ge=0)
    page_delay: float = Field(default=0.75, ge=0)


class SearchDefaults(Base):
    """Defaults applied to search options the caller leaves out."""

    region: str = "wt-wt"
    safesearch: Literal["on", "moderate", "off"] = "moderate"
    timelimit: str = "none"
    backend: str = "api"


class LoggingConfig(Base):
    """Diagnostic logging. A level below zero silences the package."""

    level: int = -1


class Config(Base):
    """Root configuration for ddgsearch."""

    http: HttpConfig = Field(default_factory=HttpConfig)
    search: SearchDefaults = Field(default_factory=SearchDefaults)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
