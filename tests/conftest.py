from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest


class RecordingSink:
    """DebugSink that keeps every event for assertions."""

    def __init__(self) -> None:
        self.events: list[tuple[str, dict[str, object]]] = []

    def debug(self, msg: str, **fields: object) -> None:
        self.events.append((msg, fields))


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def make_script(tmp_path: Path) -> Callable[..., Path]:
    """Write a /bin/sh script into tmp_path and return its path."""

    def _make(name: str, body: str, *, executable: bool = True) -> Path:
        path = tmp_path / name
        path.write_text("#!/bin/sh\n" + body.strip() + "\n", encoding="utf-8")
        path.chmod(0o755 if executable else 0o644)
        return path

    return _make
