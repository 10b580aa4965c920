"""ipcnv - IPv4 address / 32-bit integer conversion tool."""
from __future__ import annotations

from enum import Enum, IntEnum

from ..utils.endianness import ByteOrder, get_host_byte_order
from ..utils.ip_tools import format_ipv4, parse_decimal, parse_ipv4

UINT32_MAX = 0xFFFFFFFF
INT32_MIN = -0x80000000
INT32_MAX = 0x7FFFFFFF


class ConversionError(ValueError):
    pass


class Signedness(str, Enum):
    SIGNED = "int32"
    UNSIGNED = "uint32"

    @property
    def minimum(self) -> int:
        return INT32_MIN if self is Signedness.SIGNED else 0

    @property
    def maximum(self) -> int:
        return INT32_MAX if self is Signedness.SIGNED else UINT32_MAX

    def decode(self, pattern: int) -> int:
        """Read a 32-bit pattern as this kind of integer."""
        if self is Signedness.SIGNED and pattern > INT32_MAX:
            return pattern - (UINT32_MAX + 1)
        return pattern


class Mode(IntEnum):
    IPV4_TO_INT32 = 0
    INT32_TO_IPV4 = 1
    IPV4_TO_UINT32 = 2
    UINT32_TO_IPV4 = 3

    @property
    def signedness(self) -> Signedness:
        if self in (Mode.IPV4_TO_INT32, Mode.INT32_TO_IPV4):
            return Signedness.SIGNED
        return Signedness.UNSIGNED

    @property
    def from_address(self) -> bool:
        return self in (Mode.IPV4_TO_INT32, Mode.IPV4_TO_UINT32)


def _compose(octets: bytes, byte_order: ByteOrder) -> int:
    pattern = 0
    for index, octet in enumerate(octets):
        shift = 8 * index if byte_order is ByteOrder.LITTLE else 8 * (3 - index)
        pattern |= (octet & 0xFF) << shift
    return pattern


def _decompose(number: int) -> bytes:
    return bytes((number >> shift) & 0xFF for shift in (24, 16, 8, 0))


def address_to_integer(value: str, signedness: Signedness, byte_order: ByteOrder | None = None) -> str:
    """Encode a dotted-decimal IPv4 address as a base-10 32-bit integer.

    The network-order bytes are reversed on little-endian hosts before being
    composed in host order, so ``1.2.3.4`` gives 16909060 on any machine.
    """
    try:
        octets = parse_ipv4(value)
    except ValueError as exc:
        raise ConversionError(str(exc)) from exc
    order = byte_order or get_host_byte_order()
    if order is ByteOrder.LITTLE:
        octets = octets[::-1]
    return str(signedness.decode(_compose(octets, order)))


def integer_to_address(value: str, signedness: Signedness) -> str:
    """Decode a base-10 32-bit integer into a dotted-decimal IPv4 address."""
    try:
        number = parse_decimal(
            value,
            signedness.minimum,
            signedness.maximum,
            allow_sign=signedness is Signedness.SIGNED,
        )
    except ValueError as exc:
        raise ConversionError(str(exc)) from exc
    return format_ipv4(_decompose(number))


def convert(value: str, mode: Mode, byte_order: ByteOrder | None = None) -> str:
    if mode.from_address:
        return address_to_integer(value, mode.signedness, byte_order)
    return integer_to_address(value, mode.signedness)
