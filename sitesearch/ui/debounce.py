"""Trailing-edge debounce for raw query input."""

from __future__ import annotations

import asyncio
from typing import Callable


class QueryDebouncer:
    """
    Coalesce bursts of raw input into a single committed value.

    Each ``push`` restarts the quiet window; only the latest value is committed
    once the window elapses with no further input. Must be used from inside a
    running event loop.
    """

    def __init__(self, on_commit: Callable[[str], None], wait_ms: int = 300):
        if wait_ms < 0:
            raise ValueError("wait_ms must be >= 0")
        self._on_commit = on_commit
        self._wait_s = wait_ms / 1000
        self._handle: asyncio.TimerHandle | None = None
        self._value: str | None = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def push(self, raw: str) -> None:
        self.cancel()
        loop = asyncio.get_running_loop()
        self._value = raw
        self._handle = loop.call_later(self._wait_s, self._fire)

    def flush(self) -> None:
        """Commit the pending value immediately, if any."""
        if self._handle is None:
            return
        self._handle.cancel()
        self._fire()

    def cancel(self) -> None:
        """Drop the pending value without committing it."""
        if self._handle is not None:
            self._handle.cancel()
        self._handle = None
        self._value = None

    def _fire(self) -> None:
        value = self._value or ""
        self._handle = None
        self._value = None
        self._on_commit(value)
