from __future__ import annotations

import pytest

from elrsband.protocol.core.codec import (
    byte_at,
    byte_to_display_char,
    normalize_frame,
    read_delimited_options,
    read_terminated_string,
    read_uint_be,
)


@pytest.mark.parametrize(
    "byte,expected",
    [
        (0x41, "A"),
        (0x20, " "),
        (0x7E, "~"),
        (0xC0, "^"),
        (0xC1, "v"),
        (0x1F, "?"),
        (0x7F, "?"),
        (0xFF, "?"),
    ],
)
def test_byte_to_display_char(byte, expected):
    assert byte_to_display_char(byte) == expected


def test_byte_at_out_of_range_is_zero():
    assert byte_at(b"\x05", 0) == 5
    assert byte_at(b"\x05", 1) == 0
    assert byte_at(b"\x05", -1) == 0


def test_read_terminated_string_skips_nul():
    text, pos = read_terminated_string(b"\x00\x00AB\x00\x07", 2)
    assert text == "AB"
    assert pos == 5


def test_read_terminated_string_without_terminator_stops_at_end():
    text, pos = read_terminated_string(b"xyz", 0)
    assert text == "xyz"
    assert pos == 3


def test_read_terminated_string_maps_arrow_glyphs():
    text, _ = read_terminated_string(bytes([0xC0, ord("A"), 0xC1, 0]), 0)
    assert text == "^Av"


def test_read_delimited_options_splits_on_semicolon():
    opts, pos = read_delimited_options(b"50Hz;150Hz;250Hz\x00\x02", 0)
    assert opts == ["50Hz", "150Hz", "250Hz"]
    assert pos == 17


def test_read_delimited_options_keeps_empty_entries():
    opts, _ = read_delimited_options(b";a;\x00", 0)
    assert opts == ["", "a", ""]


def test_read_delimited_options_empty_input_yields_one_empty_option():
    opts, pos = read_delimited_options(b"", 0)
    assert opts == [""]
    assert pos == 0


def test_read_uint_be_pads_missing_bytes_with_zero():
    assert read_uint_be(b"ELRS", 0, 4) == 0x454C5253
    assert read_uint_be(b"\x01\x02", 0, 4) == 0x01020000


@pytest.mark.parametrize(
    "data,expected",
    [
        (b"\x01\x02", b"\x01\x02"),
        (bytearray(b"\x03"), b"\x03"),
        (memoryview(b"\x04\x05"), b"\x04\x05"),
        ([0xEA, 0xEE], b"\xea\xee"),
        ((1, 2, 3), b"\x01\x02\x03"),
        ("\xea\xee", b"\xea\xee"),
        (None, b""),
        (42, b""),
        (["x"], b""),
    ],
)
def test_normalize_frame(data, expected):
    assert normalize_frame(data) == expected
