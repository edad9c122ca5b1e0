from __future__ import annotations

import pytest

from elrsband.model.classifier import looks_like_packet_rate, looks_like_telemetry_ratio


@pytest.mark.parametrize(
    "name,options",
    [
        ("Packet Rate", []),
        ("PKT RATE", None),
        ("Mode", ["50Hz", "150Hz"]),
        ("Mode", ["F1000", "D500 Pkt"]),
        ("x", ["Packet 1"]),
    ],
)
def test_packet_rate_positive(name, options):
    assert looks_like_packet_rate(name, options) is True


@pytest.mark.parametrize(
    "name,options",
    [
        ("TX Power", ["10mW", "25mW"]),
        (None, []),
        ("", [None, ""]),
    ],
)
def test_packet_rate_negative(name, options):
    assert looks_like_packet_rate(name, options) is False


@pytest.mark.parametrize(
    "name,options",
    [
        ("Telem Ratio", []),
        ("Telemetry Ratio", []),
        ("Telem", []),
        ("Mode", ["Std", "Off"]),
        ("Mode", ["1:128", "1:64"]),
        ("Mode", ["No Tele"]),
        ("Mode", ["Race Ratio"]),
    ],
)
def test_telemetry_ratio_positive(name, options):
    assert looks_like_telemetry_ratio(name, options) is True


def test_telemetry_ratio_negative():
    assert looks_like_telemetry_ratio("Packet Rate", ["50Hz", "150Hz", "250Hz"]) is False
    assert looks_like_telemetry_ratio(None, None) is False


def test_classifiers_are_deterministic():
    args = ("Packet Rate", ["50Hz", "150Hz"])
    assert [looks_like_packet_rate(*args) for _ in range(3)] == [True, True, True]
