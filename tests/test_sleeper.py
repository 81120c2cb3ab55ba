import threading
import time
from datetime import datetime, timedelta

import pytest

from wbutil.sleeper import SleeperThread


def test_loop_runs_repeatedly_until_stopped():
    calls = []
    reached = threading.Event()
    thread = SleeperThread()

    def work():
        calls.append(1)
        if len(calls) >= 3:
            reached.set()
        thread.sleep_for(0.01)

    thread.start(work)
    assert reached.wait(5)
    thread.stop()
    assert thread.join(5)
    assert thread.is_running() is False
    assert len(calls) >= 3


def test_stop_interrupts_long_sleep():
    results = []
    started = threading.Event()
    thread = SleeperThread()

    def work():
        started.set()
        results.append(thread.sleep_for(60))

    thread.start(work)
    assert started.wait(5)
    begin = time.monotonic()
    thread.stop()
    assert thread.join(5)
    assert time.monotonic() - begin < 5
    assert results[0] is True


def test_wake_up_interrupts_sleep_and_loop_continues():
    results = []
    started = threading.Event()
    thread = SleeperThread()

    def work():
        started.set()
        results.append(thread.sleep_for(60))

    thread.start(work)
    assert started.wait(5)
    thread.wake_up()
    deadline = time.monotonic() + 5
    while not results and time.monotonic() < deadline:
        time.sleep(0.01)
    assert results[:1] == [True]
    assert thread.is_running() is True
    thread.stop()
    assert thread.join(5)


def test_sleep_for_times_out():
    thread = SleeperThread()
    assert thread.sleep_for(0.01) is False


def test_sleep_after_wake_up_returns_immediately():
    thread = SleeperThread()
    thread.wake_up()
    assert thread.sleep_for(5) is True


def test_sleep_after_stop_returns_immediately():
    thread = SleeperThread()
    thread.stop()
    assert thread.is_running() is False
    assert thread.sleep_for(5) is True


def test_sleep_until_past_deadline():
    thread = SleeperThread()
    assert thread.sleep_until(time.time() - 1) is False


def test_sleep_until_datetime_deadline():
    thread = SleeperThread()
    begin = time.monotonic()
    assert thread.sleep_until(datetime.now() + timedelta(milliseconds=20)) is False
    assert time.monotonic() - begin >= 0.01


def test_start_twice_raises():
    thread = SleeperThread(lambda: thread.sleep_for(60))
    with pytest.raises(RuntimeError):
        thread.start(lambda: None)
    thread.stop()
    assert thread.join(5)


def test_join_without_thread():
    assert SleeperThread().join(0) is True


def test_context_manager_stops_thread():
    with SleeperThread() as thread:
        thread.start(lambda: thread.sleep_for(60))
    assert thread.is_running() is False
    assert thread.join(0) is True