"""Watching the kernel rfkill control device for radio block changes."""

from __future__ import annotations

import logging
import os
import struct
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable

logger = logging.getLogger(__name__)

DEFAULT_PATH = "/dev/rfkill"
EVENT_SIZE_V1 = 8

_EVENT = struct.Struct("=IBBBB")


class RfkillType(IntEnum):
    """Radio technologies known to rfkill."""

    ALL = 0
    WLAN = 1
    BLUETOOTH = 2
    UWB = 3
    WIMAX = 4
    WWAN = 5
    GPS = 6
    FM = 7
    NFC = 8


class RfkillOp(IntEnum):
    """Operations reported in rfkill events."""

    ADD = 0
    DEL = 1
    CHANGE = 2
    CHANGE_ALL = 3


@dataclass(frozen=True)
class RfkillEvent:
    """One event read from the rfkill control device."""

    idx: int
    type: int
    op: int
    soft: bool
    hard: bool

    @classmethod
    def from_bytes(cls, data: bytes) -> "RfkillEvent":
        """Decode an event; bytes beyond the first version of the record are ignored."""
        if len(data) < EVENT_SIZE_V1:
            raise ValueError(f"Wrong size of RFKILL event: {len(data)} < {EVENT_SIZE_V1}")
        idx, kind, op, soft, hard = _EVENT.unpack_from(data)
        return cls(idx=idx, type=kind, op=op, soft=bool(soft), hard=bool(hard))

    @property
    def blocked(self) -> bool:
        return self.soft or self.hard


class Rfkill:
    """Tracks whether radios of one type are blocked.

    The owner polls :meth:`fileno` and calls :meth:`handle_readable` when the
    device is readable. Callbacks get each matching add or change event.
    """

    def __init__(self, rfkill_type: RfkillType, path: str = DEFAULT_PATH) -> None:
        self._type = RfkillType(rfkill_type)
        self._state = False
        self._callbacks: list[Callable[[RfkillEvent], None]] = []
        try:
            self._fd = os.open(path, os.O_RDONLY | os.O_NONBLOCK)
        except OSError as exc:
            logger.error("Can't open RFKILL control device: %s", exc)
            raise

    @property
    def state(self) -> bool:
        """True if the last matching event reported a soft or hard block."""
        return self._state

    def connect(self, callback: Callable[[RfkillEvent], None]) -> None:
        self._callbacks.append(callback)

    def handle_readable(self) -> bool:
        """Read one event. Return False when the device should no longer be watched."""
        if self._fd < 0:
            return False
        try:
            data = os.read(self._fd, EVENT_SIZE_V1)
        except BlockingIOError:
            return True
        except OSError as exc:
            logger.error("Reading of RFKILL events failed: %s", exc)
            return False

        if len(data) < EVENT_SIZE_V1:
            logger.error("Wrong size of RFKILL event: %d < %d", len(data), EVENT_SIZE_V1)
            return True

        event = RfkillEvent.from_bytes(data)
        if event.type == self._type and event.op in (RfkillOp.ADD, RfkillOp.CHANGE):
            self._state = event.blocked
            for callback in list(self._callbacks):
                callback(event)
        return True

    def fileno(self) -> int:
        return self._fd

    def close(self) -> None:
        if self._fd >= 0:
            os.close(self._fd)
            self._fd = -1

    def __enter__(self) -> "Rfkill":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()