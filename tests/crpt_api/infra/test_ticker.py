from __future__ import annotations

import threading
import time

import pytest

from crpt_api.infra.ticker import ThreadTicker


def test_ticker_first_call_after_one_interval():
    calls: list[float] = []
    ticker = ThreadTicker()
    start = time.monotonic()
    ticker.start(0.2, lambda: calls.append(time.monotonic() - start))
    time.sleep(0.1)
    assert calls == []
    time.sleep(0.25)
    ticker.stop()
    assert len(calls) >= 1
    assert calls[0] >= 0.15


def test_ticker_stop_halts_callbacks():
    calls: list[int] = []
    ticker = ThreadTicker()
    ticker.start(0.05, lambda: calls.append(1))
    time.sleep(0.2)
    ticker.stop()
    assert not ticker.alive
    count = len(calls)
    time.sleep(0.15)
    assert len(calls) == count


def test_ticker_stop_is_idempotent_and_safe_before_start():
    ticker = ThreadTicker()
    ticker.stop()
    ticker.stop()
    assert not ticker.alive


def test_ticker_keeps_running_after_callback_error():
    calls: list[int] = []

    def flaky():
        calls.append(1)
        if len(calls) == 1:
            raise RuntimeError("boom")

    ticker = ThreadTicker()
    ticker.start(0.05, flaky)
    time.sleep(0.3)
    ticker.stop()
    assert len(calls) >= 2


def test_ticker_cannot_start_twice():
    ticker = ThreadTicker()
    ticker.start(10.0, lambda: None)
    try:
        with pytest.raises(RuntimeError):
            ticker.start(10.0, lambda: None)
    finally:
        ticker.stop()


def test_ticker_can_stop_itself_from_callback():
    ticker = ThreadTicker()
    fired = threading.Event()

    def once():
        ticker.stop()
        fired.set()

    ticker.start(0.05, once)
    assert fired.wait(2.0)
    time.sleep(0.05)
    assert not ticker.alive
