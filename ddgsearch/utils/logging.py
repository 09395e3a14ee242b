"""Log level control for the package's loguru output."""

from loguru import logger

_NAMESPACE = "ddgsearch"


def set_log_level(level: int) -> None:
    """Enable package logging for levels >= 0, silence it below zero."""
    if level < 0:
        logger.disable(_NAMESPACE)
    else:
        logger.enable(_NAMESPACE)
