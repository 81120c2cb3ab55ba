import os
import struct

import pytest

from wbutil.rfkill import EVENT_SIZE_V1, Rfkill, RfkillEvent, RfkillOp, RfkillType


def _pack(idx, kind, op, soft, hard):
    return struct.pack("=IBBBB", idx, kind, op, soft, hard)


@pytest.fixture
def fifo(tmp_path):
    path = tmp_path / "rfkill"
    os.mkfifo(path)
    return str(path)


@pytest.fixture
def device(fifo):
    rf = Rfkill(RfkillType.WLAN, fifo)
    writer = os.open(fifo, os.O_WRONLY | os.O_NONBLOCK)
    yield rf, writer
    os.close(writer)
    rf.close()


def test_from_bytes_decodes_fields():
    event = RfkillEvent.from_bytes(_pack(7, RfkillType.BLUETOOTH, RfkillOp.CHANGE, 1, 0))
    assert event == RfkillEvent(idx=7, type=RfkillType.BLUETOOTH, op=RfkillOp.CHANGE,
                                soft=True, hard=False)
    assert event.blocked is True


def test_from_bytes_ignores_extra_bytes():
    data = _pack(3, RfkillType.WLAN, RfkillOp.ADD, 0, 1) + b"\x05"
    assert RfkillEvent.from_bytes(data) == RfkillEvent.from_bytes(data[:EVENT_SIZE_V1])


def test_from_bytes_rejects_short_data():
    with pytest.raises(ValueError):
        RfkillEvent.from_bytes(b"\x00" * (EVENT_SIZE_V1 - 1))


def test_missing_device_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        Rfkill(RfkillType.WLAN, str(tmp_path / "absent"))


def test_matching_event_updates_state_and_notifies(device):
    rf, writer = device
    seen = []
    rf.connect(seen.append)
    os.write(writer, _pack(1, RfkillType.WLAN, RfkillOp.ADD, 1, 0))
    assert rf.handle_readable() is True
    assert rf.state is True
    assert [e.idx for e in seen] == [1]

    os.write(writer, _pack(1, RfkillType.WLAN, RfkillOp.CHANGE, 0, 0))
    assert rf.handle_readable() is True
    assert rf.state is False
    assert len(seen) == 2


def test_hard_block_counts_as_blocked(device):
    rf, writer = device
    os.write(writer, _pack(2, RfkillType.WLAN, RfkillOp.CHANGE, 0, 1))
    rf.handle_readable()
    assert rf.state is True


def test_other_type_and_delete_are_ignored(device):
    rf, writer = device
    seen = []
    rf.connect(seen.append)
    os.write(writer, _pack(1, RfkillType.BLUETOOTH, RfkillOp.ADD, 1, 1))
    assert rf.handle_readable() is True
    os.write(writer, _pack(1, RfkillType.WLAN, RfkillOp.DEL, 1, 1))
    assert rf.handle_readable() is True
    assert rf.state is False
    assert seen == []


def test_short_read_keeps_watching(device):
    rf, writer = device
    os.write(writer, b"\x01\x02\x03")
    assert rf.handle_readable() is True
    assert rf.state is False


def test_no_data_keeps_watching(device):
    rf, _ = device
    assert rf.handle_readable() is True
    assert rf.state is False


def test_closed_device_stops_watching(fifo):
    rf = Rfkill(RfkillType.WLAN, fifo)
    assert rf.fileno() >= 0
    rf.close()
    assert rf.fileno() == -1
    assert rf.handle_readable() is False