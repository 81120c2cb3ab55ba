"""Message framing and type codes of the i3/sway IPC protocol."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum
from typing import Union

IPC_MAGIC = b"i3-ipc"
_HEADER_TAIL = struct.Struct("=II")
IPC_HEADER_SIZE = len(IPC_MAGIC) + _HEADER_TAIL.size


class IpcCommandType(IntEnum):
    """Message and event types; events have the highest bit set."""

    IPC_COMMAND = 0
    IPC_GET_WORKSPACES = 1
    IPC_SUBSCRIBE = 2
    IPC_GET_OUTPUTS = 3
    IPC_GET_TREE = 4
    IPC_GET_MARKS = 5
    IPC_GET_BAR_CONFIG = 6
    IPC_GET_VERSION = 7
    IPC_GET_BINDING_MODES = 8
    IPC_GET_CONFIG = 9
    IPC_SEND_TICK = 10

    IPC_GET_INPUTS = 100
    IPC_GET_SEATS = 101

    IPC_EVENT_WORKSPACE = (1 << 31) | 0
    IPC_EVENT_OUTPUT = (1 << 31) | 1
    IPC_EVENT_MODE = (1 << 31) | 2
    IPC_EVENT_WINDOW = (1 << 31) | 3
    IPC_EVENT_BARCONFIG_UPDATE = (1 << 31) | 4
    IPC_EVENT_BINDING = (1 << 31) | 5
    IPC_EVENT_SHUTDOWN = (1 << 31) | 6
    IPC_EVENT_TICK = (1 << 31) | 7

    IPC_EVENT_BAR_STATE_UPDATE = (1 << 31) | 20
    IPC_EVENT_INPUT = (1 << 31) | 21


@dataclass(frozen=True)
class IpcResponse:
    """A message received from the compositor."""

    size: int
    type: int
    payload: str


def event_mask(event: int) -> int:
    """Return the subscription bit for an event type."""
    return 1 << (event & 0x7F)


def encode_message(msg_type: int, payload: Union[str, bytes] = "") -> bytes:
    """Frame a message: magic, payload length, type, payload."""
    body = payload.encode("utf-8") if isinstance(payload, str) else bytes(payload)
    return IPC_MAGIC + _HEADER_TAIL.pack(len(body), int(msg_type)) + body


def decode_header(data: bytes) -> tuple[int, int]:
    """Parse a message header and return ``(payload_size, msg_type)``."""
    if len(data) < IPC_HEADER_SIZE:
        raise ValueError(f"IPC header too short: {len(data)} < {IPC_HEADER_SIZE}")
    if data[: len(IPC_MAGIC)] != IPC_MAGIC:
        raise ValueError("Invalid IPC magic")
    return _HEADER_TAIL.unpack_from(data, len(IPC_MAGIC))