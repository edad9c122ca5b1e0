from __future__ import annotations

from elrsband.protocol.core.crc import crc8_dvb_s2


def test_crc8_check_value():
    # standard CRC-8/DVB-S2 check input
    assert crc8_dvb_s2(b"123456789") == 0xBC


def test_crc8_empty_is_zero():
    assert crc8_dvb_s2(b"") == 0


def test_crc8_single_bit():
    assert crc8_dvb_s2(b"\x01") == 0xD5


def test_crc8_appended_crc_yields_zero():
    body = b"\x2c\xee\xef\x0c\x00"
    assert crc8_dvb_s2(body + bytes((crc8_dvb_s2(body),))) == 0
