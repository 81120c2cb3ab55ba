import threading
import time

from wbutil.safe_signal import SafeSignal


def _pump(signal, ready, done, timeout=5.0):
    total = 0
    deadline = time.monotonic() + timeout
    while not done() and time.monotonic() < deadline:
        ready.wait(0.1)
        ready.clear()
        total += signal.dispatch_pending()
    return total


def test_basic_functionality():
    num_events = 100
    state = {"count": 0, "last": 0}
    errors = []
    main_tid = threading.get_ident()
    ready = threading.Event()
    signal = SafeSignal(notify=ready.set)

    def slot(val, text):
        if threading.get_ident() != main_tid:
            errors.append("wrong thread")
        if not isinstance(val, int) or not isinstance(text, str):
            errors.append("wrong types")
        if val != state["last"] + 1:
            errors.append(f"out of order: {val}")
        state["last"] = val
        state["count"] += 1

    signal.connect(slot)

    signal.emit(1, "test")
    assert state["count"] == 1

    def produce():
        for i in range(2, num_events + 1):
            signal.emit(i, "test")

    producer = threading.Thread(target=produce)
    producer.start()
    dispatched = _pump(signal, ready, lambda: state["count"] >= num_events)
    producer.join()
    assert dispatched == num_events - 1
    assert signal.dispatch_pending() == 0
    assert state["count"] == num_events
    assert state["last"] == num_events
    assert errors == []


class _Payload:
    def __init__(self, value):
        self.value = value


def test_objects_are_passed_without_copies():
    num_events = 3
    sent = []
    received = []
    ready = threading.Event()
    signal = SafeSignal(notify=ready.set)
    signal.connect(received.append)

    first = _Payload(1)
    sent.append(first)
    signal.emit(first)
    assert len(received) == 1

    def produce():
        for i in range(2, num_events + 1):
            obj = _Payload(i)
            sent.append(obj)
            signal.emit(obj)

    producer = threading.Thread(target=produce)
    producer.start()
    dispatched = _pump(signal, ready, lambda: len(received) >= num_events)
    producer.join()
    assert dispatched == num_events - 1
    assert len(received) == num_events
    assert all(a is b for a, b in zip(sent, received))
    assert [p.value for p in received] == [1, 2, 3]


def test_other_thread_events_wait_for_dispatch():
    received = []
    signal = SafeSignal()
    signal.connect(received.append)
    producer = threading.Thread(target=lambda: signal.emit("x"))
    producer.start()
    producer.join()
    assert received == []
    assert signal.dispatch_pending() == 1
    assert received == ["x"]
    assert signal.dispatch_pending() == 0


def test_call_emits_to_all_slots_in_order():
    calls = []
    signal = SafeSignal()
    signal.connect(lambda v: calls.append(("a", v)))
    signal.connect(lambda v: calls.append(("b", v)))
    signal(7)
    assert calls == [("a", 7), ("b", 7)]


def test_disconnect_removes_slot():
    calls = []
    signal = SafeSignal()
    disconnect = signal.connect(calls.append)
    signal.emit(1)
    disconnect()
    signal.emit(2)
    assert calls == [1]