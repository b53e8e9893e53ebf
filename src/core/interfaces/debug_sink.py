"""Debug sink consumed by the resolvers.

The core only emits informational events on the success path; failures are
raised, never logged.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class DebugSink(Protocol):
    """Anything with a `debug(msg, **fields)` method."""

    def debug(self, msg: str, **fields: object) -> None:
        """Record `msg` with structured key/value `fields`."""

        ...
