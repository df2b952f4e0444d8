from __future__ import annotations

import logging
import threading
from typing import Callable, Optional

from ..core.ports.ticker_port import TickerPort

logger = logging.getLogger(__name__)


class ThreadTicker(TickerPort):
    """Runs a callback every ``interval`` seconds on a daemon thread.

    The first call happens one full interval after :meth:`start`. A ticker
    can be started once; :meth:`stop` ends it for good.
    """

    def __init__(self, name: str = "crpt-api-replenish", join_timeout: float = 1.0) -> None:
        self._name = name
        self._join_timeout = join_timeout
        self._stop = threading.Event()
        self._lock = threading.Lock()
        self._thread: Optional[threading.Thread] = None

    @property
    def alive(self) -> bool:
        thread = self._thread
        return thread is not None and thread.is_alive()

    def start(self, interval: float, callback: Callable[[], None]) -> None:
        with self._lock:
            if self._thread is not None:
                raise RuntimeError("Ticker already started")
            if self._stop.is_set():
                raise RuntimeError("Ticker has been stopped")
            self._thread = threading.Thread(
                target=self._run,
                args=(interval, callback),
                name=self._name,
                daemon=True,
            )
            thread = self._thread
        thread.start()

    def stop(self) -> None:
        self._stop.set()
        thread = self._thread
        # The callback itself may stop the ticker; never join our own thread.
        if thread is not None and thread is not threading.current_thread():
            thread.join(self._join_timeout)

    def _run(self, interval: float, callback: Callable[[], None]) -> None:
        logger.debug(f"Ticker {self._name} running every {interval}s")
        while not self._stop.wait(interval):
            try:
                callback()
            except Exception:
                logger.exception(f"Ticker {self._name} callback failed")
        logger.debug(f"Ticker {self._name} stopped")
