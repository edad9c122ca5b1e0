from __future__ import annotations

import pytest

from elrsband.protocol._internal.pending_request import PendingRequest
from elrsband.runtime.timings import PollTimings


def test_defaults():
    t = PollTimings()
    assert (t.request_timeout, t.scan_spacing, t.rescan_delay) == (200, 15, 500)
    assert (t.refresh_interval, t.stale_after, t.device_poll_interval) == (120, 350, 120)


def test_negative_value_rejected():
    with pytest.raises(ValueError):
        PollTimings(stale_after=-1)


@pytest.mark.parametrize("bad", [1.5, "10", True])
def test_non_int_rejected(bad):
    with pytest.raises(TypeError):
        PollTimings(scan_spacing=bad)


def test_pending_request_expiry_and_advance():
    p = PendingRequest(field_id=3, started_at=10)
    assert p.mid_sequence is False
    assert p.expired(210, 200) is False
    assert p.expired(211, 200) is True

    assert p.advance(150) == 1
    assert p.mid_sequence is True
    assert p.age(160) == 10
    assert p.expired(211, 200) is False

    p.append(b"ab")
    p.append(b"c")
    assert bytes(p.buffer) == b"abc"
