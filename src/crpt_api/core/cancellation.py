"""Cooperative cancellation for callers blocked on a permit.

A :class:`CancellationToken` is handed to ``PermitGate.acquire`` (or to
``DocumentSubmitter.submit``). Cancelling it from another thread wakes the
waiter, which then raises ``CancellationError`` without consuming a permit.
"""

from __future__ import annotations

import threading
from typing import Callable

from .domain.errors import CancellationError


class CancellationToken:
    """Thread-safe cancellation token.

    Examples:
        >>> token = CancellationToken()
        >>> # In a worker
        >>> gate.acquire(cancel_token=token)
        >>> # From another thread
        >>> token.cancel()
    """

    def __init__(self) -> None:
        self._is_cancelled = threading.Event()
        self._lock = threading.Lock()
        self._listeners: list[Callable[[], None]] = []

    def cancel(self) -> None:
        """Signal cancellation and notify registered listeners once."""
        with self._lock:
            if self._is_cancelled.is_set():
                return
            self._is_cancelled.set()
            listeners = list(self._listeners)
        for listener in listeners:
            listener()

    def is_cancelled(self) -> bool:
        return self._is_cancelled.is_set()

    def raise_if_cancelled(self) -> None:
        if self._is_cancelled.is_set():
            raise CancellationError("Operation was cancelled")

    def add_listener(self, listener: Callable[[], None]) -> Callable[[], None]:
        """Register ``listener`` to run on cancellation.

        If the token is already cancelled the listener runs immediately.
        Returns a callable that unregisters the listener.
        """
        with self._lock:
            already = self._is_cancelled.is_set()
            if not already:
                self._listeners.append(listener)
        if already:
            listener()

        def remove() -> None:
            with self._lock:
                try:
                    self._listeners.remove(listener)
                except ValueError:
                    pass

        return remove
