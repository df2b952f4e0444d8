from __future__ import annotations

from typing import Callable, Protocol


class TickerPort(Protocol):
    def start(self, interval: float, callback: Callable[[], None]) -> None:
        """Invoke callback every interval seconds, first call after one full interval."""

    def stop(self) -> None:
        """Stop invoking the callback. Safe to call more than once."""
