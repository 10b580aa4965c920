"""ipcnv - IPv4 address / 32-bit integer conversion tool."""
from __future__ import annotations

import ipaddress
import re

_SIGNED_DECIMAL = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_DECIMAL = re.compile(r"[0-9]+")


def parse_ipv4(value: str) -> bytes:
    """Return the 4 address bytes of ``value`` in network order."""
    try:
        return ipaddress.IPv4Address(value).packed
    except ValueError as exc:
        raise ValueError("invalid ipv4 address") from exc


def format_ipv4(octets: bytes) -> str:
    return str(ipaddress.IPv4Address(octets))


def is_decimal(value: str, allow_sign: bool = True) -> bool:
    pattern = _SIGNED_DECIMAL if allow_sign else _UNSIGNED_DECIMAL
    return pattern.fullmatch(value) is not None


def parse_decimal(value: str, minimum: int, maximum: int, allow_sign: bool = True) -> int:
    if not is_decimal(value, allow_sign):
        raise ValueError(f'parsing "{value}": invalid syntax')
    number = int(value)
    if number < minimum or number > maximum:
        raise ValueError(f'parsing "{value}": value out of range')
    return number
