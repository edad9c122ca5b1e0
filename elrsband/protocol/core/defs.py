# elrsband/protocol/core/defs.py
from __future__ import annotations

from enum import IntEnum

# ---------------- Addresses ----------------
ADDR_BROADCAST = 0x00
ADDR_FLIGHT_CONTROLLER = 0xC8
ADDR_RADIO_HANDSET = 0xEA
ADDR_TX_MODULE = 0xEE
ADDR_ELRS_LUA = 0xEF

DEVICE_ID = ADDR_TX_MODULE
HANDSET_ELRS = ADDR_ELRS_LUA
HANDSET_FALLBACK = ADDR_RADIO_HANDSET

# Serial number reported by ExpressLRS firmware ("ELRS")
ELRS_SERIAL_MAGIC = 0x454C5253

# ---------------- Frame types ----------------
CMD_DEVICE_INFO_REQ = 0x28
RESP_DEVICE_INFO = 0x29
RESP_PARAM_ENTRY = 0x2B
CMD_PARAM_CHUNK_REQ = 0x2C

DEVICE_INFO_REQ_PAYLOAD = bytes((ADDR_BROADCAST, ADDR_RADIO_HANDSET))

# ---------------- Framing ----------------
CRC8_POLY = 0xD5
MAX_FRAME_LEN = 64          # address + length + (type + payload + crc)
MIN_LENGTH_FIELD = 2        # type + crc
MAX_LENGTH_FIELD = MAX_FRAME_LEN - 2
MAX_PAYLOAD = MAX_LENGTH_FIELD - 2

# ---------------- Payload layout ----------------
# Device info: [dest][origin][name\0][serial:4][hw:4][sw:4][fields_count][version]
DEVICE_INFO_ORIGIN = 1
DEVICE_INFO_NAME = 2
DEVICE_INFO_COUNT_AFTER_NAME = 12

# Parameter entry: [dest][origin][field_id][chunks_remaining][field data...]
PARAM_ENTRY_ORIGIN = 1
PARAM_ENTRY_FIELD_ID = 2
PARAM_ENTRY_CHUNKS_REMAINING = 3
PARAM_ENTRY_DATA = 4

# Field data: [parent][type|hidden][name\0][type specific...]
FIELD_TYPE_MASK = 0x7F
FIELD_HIDDEN_BIT = 0x80
# Text selection trailer after options: [value][min][max][default][unit\0]
SELECT_UNIT_AFTER_OPTIONS = 4


class FieldType(IntEnum):
    UINT8 = 0
    INT8 = 1
    UINT16 = 2
    INT16 = 3
    UINT32 = 4
    INT32 = 5
    FLOAT = 8
    TEXT_SELECTION = 9
    STRING = 10
    FOLDER = 11
    INFO = 12
    COMMAND = 13
    OUT_OF_RANGE = 127
