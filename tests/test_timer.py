import threading
import time

import pytest

from status_clock.timer import IntervalTimer


def test_interval_must_be_positive():
    with pytest.raises(ValueError):
        IntervalTimer(0, lambda: None)


def test_timer_ticks_until_cancelled():
    ticked = threading.Event()
    calls = []

    def _tick():
        calls.append(1)
        if len(calls) >= 2:
            ticked.set()

    timer = IntervalTimer(0.01, _tick)
    timer.start()
    try:
        assert ticked.wait(2)
        assert timer.is_running
    finally:
        timer.cancel(timeout=1)

    assert not timer.is_running
    count = len(calls)
    time.sleep(0.05)
    assert len(calls) == count


def test_failing_callback_keeps_timer_alive():
    recovered = threading.Event()
    calls = []

    def _tick():
        calls.append(1)
        if len(calls) == 1:
            raise RuntimeError("first tick fails")
        recovered.set()

    timer = IntervalTimer(0.01, _tick)
    timer.start()
    try:
        assert recovered.wait(2)
    finally:
        timer.dispose()

    assert not timer.is_running
