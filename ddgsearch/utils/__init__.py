"""Utility functions for ddgsearch."""

from ddgsearch.utils.logging import set_log_level

__all__ = ["set_log_level"]
