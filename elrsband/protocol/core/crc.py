from .defs import CRC8_POLY


def crc8_dvb_s2(buf: bytes, poly: int = CRC8_POLY) -> int:
    crc = 0
    for b in buf:
        crc ^= b & 0xFF
        for _ in range(8):
            crc = ((crc << 1) ^ poly) & 0xFF if (crc & 0x80) else ((crc << 1) & 0xFF)
    return crc
