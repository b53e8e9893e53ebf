"""Concrete `DebugSink` implementations.

- `LoggingDebugSink`: forwards events to a stdlib `logging.Logger` at DEBUG.
- `NullDebugSink`: discards everything (quiet mode, library default).
"""

from __future__ import annotations

import logging
from typing import Any


class LoggingDebugSink:
    """Renders `msg key=value ...` lines on a logger."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger("netaddrs")

    def debug(self, msg: str, **fields: object) -> None:
        if not self._logger.isEnabledFor(logging.DEBUG):
            return
        if not fields:
            self._logger.debug("%s", msg)
            return
        rendered = " ".join(f"{key}={format_field(value)}" for key, value in fields.items())
        self._logger.debug("%s %s", msg, rendered)


class NullDebugSink:
    def debug(self, msg: str, **fields: object) -> None:
        return None


def format_field(value: Any) -> str:
    """Format a field value; sequences render as `[a b c]`."""

    if isinstance(value, (list, tuple)):
        return "[" + " ".join(str(item) for item in value) + "]"
    return str(value)
