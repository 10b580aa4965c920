"""ipcnv - IPv4 address / 32-bit integer conversion tool."""
import pytest

from ipcnv.utils.ip_tools import format_ipv4, parse_decimal, parse_ipv4


def test_parse_ipv4_network_order():
    assert parse_ipv4("1.2.3.4") == b"\x01\x02\x03\x04"


@pytest.mark.parametrize(
    "value",
    ["not.an.ip", "999.1.1.1", "1.2.3", "1.2.3.4.5", "::1", "::ffff:1.2.3.4", " 1.2.3.4", "10.0.0.0/8", ""],
)
def test_parse_ipv4_rejects(value):
    with pytest.raises(ValueError, match="invalid ipv4 address"):
        parse_ipv4(value)


def test_format_ipv4():
    assert format_ipv4(bytes([192, 0, 2, 10])) == "192.0.2.10"


def test_parse_decimal_accepts_sign():
    assert parse_decimal("-42", -100, 100) == -42
    assert parse_decimal("+42", -100, 100) == 42


@pytest.mark.parametrize("value", ["abc", "", "1_000", " 12", "12 ", "0x10", "1.5"])
def test_parse_decimal_invalid_syntax(value):
    with pytest.raises(ValueError, match="invalid syntax"):
        parse_decimal(value, 0, 10_000)


def test_parse_decimal_unsigned_rejects_sign():
    with pytest.raises(ValueError, match="invalid syntax"):
        parse_decimal("+1", 0, 10, allow_sign=False)


def test_parse_decimal_out_of_range():
    with pytest.raises(ValueError) as excinfo:
        parse_decimal("11", 0, 10)
    assert str(excinfo.value) == 'parsing "11": value out of range'
