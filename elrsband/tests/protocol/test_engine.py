from __future__ import annotations

from collections import deque

from elrsband.protocol.core.defs import FieldType
from elrsband.protocol.engine import MonitorEngine
from elrsband.runtime.state import PacketState
from elrsband.runtime.timings import PollTimings


class FakeClock:
    def __init__(self, t: int = 0):
        self.t = t

    def now(self) -> int:
        return self.t

    def advance(self, dt: int) -> None:
        self.t += dt


def _selection(name: bytes, options: bytes, index: int) -> bytes:
    return (
        b"\x00" + bytes((FieldType.TEXT_SELECTION,)) + name + b"\x00"
        + options + b"\x00" + bytes((index, 0, 0, 0)) + b"\x00"
    )


def _folder(name: bytes) -> bytes:
    return b"\x00" + bytes((FieldType.FOLDER,)) + name + b"\x00"


class FakeModule:
    """
    Link that answers requests like a TX module would, one tick later.

    table maps field id -> field data; unknown ids answer as folders.
    """

    def __init__(self, *, count: int, table: dict, name: bytes = b"TX"):
        self.count = count
        self.table = table
        self.name = name
        self.silent = False
        self.pushed = []
        self.inbound = deque()

    def push(self, command, payload):
        payload = bytes(payload)
        self.pushed.append((command, payload))
        if self.silent:
            return True
        if command == 0x28:
            self.inbound.append(
                (0x29, bytes((0xEA, 0xEE)) + self.name + b"\x00" + b"ELRS" + b"\x00" * 8 + bytes((self.count, 0)))
            )
        elif command == 0x2C:
            field_id = payload[2]
            data = self.table.get(field_id, _folder(b"Misc"))
            self.inbound.append((0x2B, bytes((0xEA, 0xEE, field_id, 0)) + data))
        return True

    def pop(self):
        return self.inbound.popleft() if self.inbound else None


TABLE = {
    12: _selection(b"Packet Rate", b"50Hz;150Hz;250Hz", 2),
    14: _selection(b"Telem Ratio", b"Std;Off;1:128", 0),
}


def _run(engine, clock, ticks, step=5):
    for _ in range(ticks):
        clock.advance(step)
        engine.tick(True)


def test_no_link_reports_no_crsf_and_never_pushes():
    clock = FakeClock()
    engine = MonitorEngine.create(None, clock)

    assert engine.tick(True) is None
    assert engine.process_inbound() == 0
    assert engine.status().state == PacketState.NO_CRSF


def test_first_tick_polls_device_info():
    clock = FakeClock(100)
    link = FakeModule(count=40, table=TABLE)
    engine = MonitorEngine.create(link, clock)

    assert engine.tick(True) == "device_info"
    assert link.pushed == [(0x28, b"\x00\xea")]
    assert engine.status().state == PacketState.WAITING


def test_tick_without_requests_only_drains():
    clock = FakeClock()
    link = FakeModule(count=40, table=TABLE)
    engine = MonitorEngine.create(link, clock)
    link.inbound.append((0x29, bytes((0xEA, 0xEE)) + b"TX\x00ELRS" + b"\x00" * 8 + bytes((40, 0))))

    assert engine.tick(False) is None
    assert link.pushed == []
    assert engine.state.fields_count == 40
    assert engine.status().state == PacketState.SCANNING


def test_discovers_packet_rate_then_goes_stale():
    clock = FakeClock()
    link = FakeModule(count=40, table=TABLE)
    engine = MonitorEngine.create(link, clock)

    _run(engine, clock, ticks=200)

    info = engine.status()
    assert info.state == PacketState.READY
    assert info.module == "TX"
    assert info.label == "250 Hz"
    assert info.raw == "250Hz"
    assert info.field_name == "Packet Rate"
    assert info.tele_label == "Std"
    assert info.tele_stale is False
    assert engine.state.field("target").field_id == 12
    assert engine.state.field("telemetry").field_id == 14

    # module goes quiet: values age out
    link.silent = True
    _run(engine, clock, ticks=80)

    info = engine.status()
    assert info.state == PacketState.STALE
    assert info.stale is True
    assert info.label == "250 Hz"
    assert info.tele_stale is True


def test_at_most_one_param_request_in_flight():
    clock = FakeClock()
    link = FakeModule(count=40, table=TABLE)
    link.silent = True
    engine = MonitorEngine.create(link, clock)
    engine.state.fields_count = 40

    for _ in range(30):
        clock.advance(5)
        engine.tick(True)

    # one request at t=5; the rest wait for the 200-tick timeout
    assert [c for c, _ in link.pushed] == [0x2C]


def test_timings_are_exposed():
    t = PollTimings(stale_after=10)
    engine = MonitorEngine(None, FakeClock(), timings=t)
    assert engine.timings is t
