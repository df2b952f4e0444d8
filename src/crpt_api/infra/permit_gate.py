from __future__ import annotations

import logging
import math
import threading
from datetime import timedelta
from typing import Optional, Union

from ..core.cancellation import CancellationToken
from ..core.domain.errors import CancellationError, ConstructionError
from ..core.ports.permit_gate_port import PermitGatePort
from ..core.ports.ticker_port import TickerPort
from .ticker import ThreadTicker

logger = logging.getLogger(__name__)


class PermitGate(PermitGatePort):
    """Fixed-window permit gate.

    Holds up to ``capacity`` permits. Each successful :meth:`acquire` consumes
    one; :meth:`replenish` resets the count straight back to ``capacity``.
    Once :meth:`start_auto_replenish` is called, a ticker replenishes every
    ``interval`` seconds, the first time one full interval after start.

    ``available`` is guarded by a single condition variable. Replenish sets the
    count to ``capacity`` under that same lock; it never adds back a delta.

    :meth:`shutdown` stops the ticker only. Callers already blocked in
    :meth:`acquire` stay blocked until someone calls :meth:`replenish` or
    cancels their token.

    Example:
        # 10 requests per minute
        gate = PermitGate(capacity=10, interval=60.0)
        gate.start_auto_replenish()
        try:
            gate.acquire()
            ...
        finally:
            gate.shutdown()
    """

    def __init__(
        self,
        capacity: int,
        interval: Union[float, timedelta],
        *,
        ticker: Optional[TickerPort] = None,
    ) -> None:
        """Create a gate with every permit available.

        Args:
            capacity: Maximum number of permits per window (>= 1)
            interval: Window length, in seconds or as a timedelta (> 0, finite)
            ticker: Timer driving automatic replenishment. Defaults to a
                    background ThreadTicker; tests pass a manual one.

        Raises:
            ConstructionError: If capacity or interval is not positive, or interval is infinite.
        """
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise ConstructionError(f"capacity must be an integer, got {capacity!r}")
        if capacity <= 0:
            raise ConstructionError(f"capacity must be positive, got {capacity}")
        seconds = interval.total_seconds() if isinstance(interval, timedelta) else float(interval)
        if not math.isfinite(seconds) or seconds <= 0:
            raise ConstructionError(f"interval must be positive and finite, got {interval!r}")

        self._capacity = capacity
        self._interval = seconds
        self._available = capacity
        self._cond = threading.Condition(threading.Lock())

        self._ticker: TickerPort = ticker if ticker is not None else ThreadTicker()
        self._lifecycle_lock = threading.Lock()
        self._state = "created"

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def available(self) -> int:
        with self._cond:
            return self._available

    @property
    def running(self) -> bool:
        return self._state == "running"

    @property
    def state(self) -> str:
        """One of ``created``, ``running`` or ``shutdown``."""
        return self._state

    def acquire(self, cancel_token: Optional[CancellationToken] = None) -> None:
        """Block until a permit is available, then consume it.

        There is no built-in deadline. To give up waiting, cancel
        ``cancel_token`` from another thread; the wait then ends with
        CancellationError and no permit is consumed.

        Raises:
            CancellationError: If the token is cancelled before a permit is granted.
        """
        unregister = None
        if cancel_token is not None:
            unregister = cancel_token.add_listener(self._wake_waiters)
        try:
            with self._cond:
                while True:
                    if cancel_token is not None and cancel_token.is_cancelled():
                        raise CancellationError("Cancelled while waiting for a permit")
                    if self._available > 0:
                        self._available -= 1
                        logger.debug(f"Permit granted ({self._available}/{self._capacity} left)")
                        return
                    logger.debug("No permits available; waiting for replenish")
                    self._cond.wait()
        finally:
            if unregister is not None:
                unregister()

    def try_acquire(self) -> bool:
        """Consume a permit if one is available right now; never blocks."""
        with self._cond:
            if self._available > 0:
                self._available -= 1
                return True
            return False

    def replenish(self) -> None:
        """Reset ``available`` to ``capacity`` and wake every waiter."""
        with self._cond:
            consumed = self._capacity - self._available
            self._available = self._capacity
            self._cond.notify_all()
        logger.debug(f"Replenished gate to {self._capacity} permits ({consumed} were consumed)")

    def start_auto_replenish(self) -> None:
        """Start replenishing every ``interval`` seconds. No-op if already running.

        Raises:
            RuntimeError: If the gate has been shut down.
        """
        with self._lifecycle_lock:
            if self._state == "running":
                return
            if self._state == "shutdown":
                raise RuntimeError("PermitGate has been shut down")
            self._ticker.start(self._interval, self.replenish)
            self._state = "running"
        logger.info(f"Auto replenish started: {self._capacity} permits every {self._interval}s")

    def shutdown(self) -> None:
        """Stop automatic replenishment. Idempotent; blocked acquirers are not released."""
        with self._lifecycle_lock:
            if self._state == "shutdown":
                return
            was_running = self._state == "running"
            self._state = "shutdown"
        if was_running:
            self._ticker.stop()
            logger.info("Auto replenish stopped")

    def _wake_waiters(self) -> None:
        with self._cond:
            self._cond.notify_all()

    def __enter__(self) -> PermitGate:
        self.start_auto_replenish()
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.shutdown()
