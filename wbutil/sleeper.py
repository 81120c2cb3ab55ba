"""A worker thread that runs a function in a loop and can be woken or stopped."""

from __future__ import annotations

import threading
import time
from datetime import datetime
from typing import Callable, Optional, Union


class SleeperThread:
    """Runs ``func`` repeatedly in a background thread until stopped.

    The function typically calls :meth:`sleep_for` or :meth:`sleep_until`
    between iterations; :meth:`wake_up` and :meth:`stop` interrupt such a sleep.
    """

    def __init__(self, func: Optional[Callable[[], None]] = None) -> None:
        self._cond = threading.Condition()
        self._do_run = True
        self._signal = False
        self._thread: Optional[threading.Thread] = None
        if func is not None:
            self.start(func)

    def start(self, func: Callable[[], None]) -> "SleeperThread":
        """Start the worker loop. A thread can be started only once."""
        if self._thread is not None:
            raise RuntimeError("thread already started")
        self._thread = threading.Thread(target=self._run, args=(func,), daemon=True)
        self._thread.start()
        return self

    def _run(self, func: Callable[[], None]) -> None:
        while self._do_run:
            with self._cond:
                self._signal = False
            func()

    def is_running(self) -> bool:
        return self._do_run

    def _woken(self) -> bool:
        return self._signal or not self._do_run

    def sleep_for(self, seconds: float) -> bool:
        """Sleep up to ``seconds``; return True if woken or stopped, False on timeout."""
        with self._cond:
            return self._cond.wait_for(self._woken, timeout=max(seconds, 0.0))

    def sleep_until(self, deadline: Union[float, datetime]) -> bool:
        """Sleep until ``deadline`` (epoch seconds or datetime); see :meth:`sleep_for`."""
        if isinstance(deadline, datetime):
            deadline = deadline.timestamp()
        return self.sleep_for(deadline - time.time())

    def wake_up(self) -> None:
        with self._cond:
            self._signal = True
            self._cond.notify_all()

    def stop(self) -> None:
        """Ask the loop to end and wake any sleep in progress."""
        with self._cond:
            self._signal = True
            self._do_run = False
            self._cond.notify_all()

    def join(self, timeout: Optional[float] = None) -> bool:
        """Wait for the worker to finish; return True if it is no longer alive."""
        if self._thread is None:
            return True
        self._thread.join(timeout)
        return not self._thread.is_alive()

    def __enter__(self) -> "SleeperThread":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()
        self.join()