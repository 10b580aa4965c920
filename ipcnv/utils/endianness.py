"""ipcnv - IPv4 address / 32-bit integer conversion tool."""
from __future__ import annotations

import struct
from enum import Enum
from functools import lru_cache

# 0x0100 in native order: leading 0x01 on big-endian hosts, 0x00 on little-endian.
_PROBE_VALUE = 0x0100


class ByteOrder(str, Enum):
    BIG = "big"
    LITTLE = "little"


class EndiannessError(RuntimeError):
    pass


def detect_byte_order(layout: bytes | None = None) -> ByteOrder:
    """Classify a native-order dump of the probe value.

    ``layout`` defaults to the host's own encoding of the probe.
    """
    if layout is None:
        layout = struct.pack("=H", _PROBE_VALUE)
    if layout[:1] == b"\x01":
        return ByteOrder.BIG
    if layout[:1] == b"\x00":
        return ByteOrder.LITTLE
    raise EndiannessError("can not check endianness")


@lru_cache()
def get_host_byte_order() -> ByteOrder:
    return detect_byte_order()
