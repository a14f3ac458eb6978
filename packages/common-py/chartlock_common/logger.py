"""
chartlock Logging

Thin wrapper around the standard ``logging`` module that accepts structured
keyword context and renders it as ``key=value`` pairs after the message.

Usage:
    from chartlock_common.logger import get_logger

    logger = get_logger(__name__)
    logger.info("Committed lock file", path="helmfile.lock", deps=3)
    # -> Committed lock file path=helmfile.lock deps=3
"""

import logging
import sys
from typing import Any, Optional

ROOT_LOGGER_NAME = "chartlock"

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def _format_context(context: dict) -> str:
    if not context:
        return ""
    return " " + " ".join(f"{key}={value}" for key, value in context.items())


class ChartlockLogger:
    """Logger accepting keyword context in addition to a message."""

    def __init__(self, name: str):
        if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
            name = f"{ROOT_LOGGER_NAME}.{name}"
        self._logger = logging.getLogger(name)

    @property
    def name(self) -> str:
        return self._logger.name

    def is_enabled_for(self, level: int) -> bool:
        return self._logger.isEnabledFor(level)

    def _log(self, level: int, message: str, exc_info: bool = False, **context: Any) -> None:
        if not self._logger.isEnabledFor(level):
            return
        extra = context.pop("extra", None)
        self._logger.log(
            level,
            message + _format_context(context),
            exc_info=exc_info,
            extra=extra,
            stacklevel=3,
        )

    def debug(self, message: str, **context: Any) -> None:
        self._log(logging.DEBUG, message, **context)

    def info(self, message: str, **context: Any) -> None:
        self._log(logging.INFO, message, **context)

    def warning(self, message: str, **context: Any) -> None:
        self._log(logging.WARNING, message, **context)

    def error(self, message: str, **context: Any) -> None:
        self._log(logging.ERROR, message, **context)

    def exception(self, message: str, **context: Any) -> None:
        self._log(logging.ERROR, message, exc_info=True, **context)


def get_logger(name: str) -> ChartlockLogger:
    """Return a chartlock logger nested under the ``chartlock`` root logger."""
    return ChartlockLogger(name)


def configure_logging(level: str = "info", stream: Optional[Any] = None) -> None:
    """
    Install a single stream handler on the chartlock root logger.

    Calling this more than once replaces the previous handler instead of
    stacking duplicates.

    Args:
        level: One of debug, info, warn, error
        stream: Output stream (defaults to stderr)
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)-7s %(name)s: %(message)s")
    )
    root.addHandler(handler)
    root.setLevel(_LEVELS.get(level.lower(), logging.INFO))
    root.propagate = False
