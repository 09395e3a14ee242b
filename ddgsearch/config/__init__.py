"""Configuration module for ddgsearch."""

from ddgsearch.config.loader import get_config_path, load_config
from ddgsearch.config.schema import Config

__all__ = ["Config", "load_config", "get_config_path"]
