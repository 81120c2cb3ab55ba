"""A signal that can be emitted from any thread and is handled on its owner's thread."""

from __future__ import annotations

import threading
from collections import deque
from typing import Any, Callable, Optional


class SafeSignal:
    """Thread-safe signal.

    Emitting from the thread that created the signal calls the slots at once.
    Emitting from any other thread queues the arguments and calls ``notify``;
    the owner thread then runs :meth:`dispatch_pending` to deliver them in order.
    """

    def __init__(self, notify: Optional[Callable[[], None]] = None) -> None:
        self._slots: list[Callable[..., Any]] = []
        self._queue: deque[tuple[Any, ...]] = deque()
        self._lock = threading.Lock()
        self._notify = notify
        self._main_tid = threading.get_ident()

    def connect(self, slot: Callable[..., Any]) -> Callable[[], None]:
        """Add a slot; return a function that disconnects it."""
        self._slots.append(slot)

        def disconnect() -> None:
            if slot in self._slots:
                self._slots.remove(slot)

        return disconnect

    def _deliver(self, args: tuple[Any, ...]) -> None:
        for slot in list(self._slots):
            slot(*args)

    def emit(self, *args: Any) -> None:
        if threading.get_ident() == self._main_tid:
            # Events from the owner thread skip the queue and are handled synchronously.
            self._deliver(args)
            return
        with self._lock:
            self._queue.append(args)
        if self._notify is not None:
            self._notify()

    def __call__(self, *args: Any) -> None:
        self.emit(*args)

    def dispatch_pending(self) -> int:
        """Deliver every queued event; return how many were delivered."""
        delivered = 0
        while True:
            with self._lock:
                if not self._queue:
                    return delivered
                args = self._queue.popleft()
            self._deliver(args)
            delivered += 1