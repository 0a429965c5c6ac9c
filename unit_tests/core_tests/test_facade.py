import pytest

from ipconv import (
    FormatError, Notation, RangeError, convert, convert_all,
    binary_to_decimal, binary_to_dotted_decimal, binary_to_hex, binary_to_octal,
    decimal_to_binary, dotted_decimal_to_binary, hex_to_binary, octal_to_binary,
)

FLAT = "11000000101010000000000100000001"
GROUPED = "11000000.10101000.00000001.00000001"


def test_end_to_end_example():
    binary = dotted_decimal_to_binary("192.168.1.1", grouped=True)
    assert binary == GROUPED
    assert binary_to_hex(binary) == "c0.a8.01.01"
    assert binary_to_decimal(binary) == "3232235777"
    assert binary_to_octal(binary) == "300.250.001.001"
    assert binary_to_dotted_decimal(binary) == "192.168.1.1"


def test_to_binary_operations_default_to_flat():
    assert dotted_decimal_to_binary("192.168.1.1") == FLAT
    assert hex_to_binary("C0.A8.01.01") == FLAT
    assert decimal_to_binary("3232235777") == FLAT
    assert octal_to_binary("300.250.001.001") == FLAT


def test_to_binary_operations_grouped():
    assert hex_to_binary("c0.a8.1.1", grouped=True) == GROUPED
    assert decimal_to_binary("3232235777", grouped=True) == GROUPED
    assert octal_to_binary("300.250.1.1", grouped=True) == GROUPED


def test_boundaries():
    assert dotted_decimal_to_binary("0.0.0.0") == "0" * 32
    ones = dotted_decimal_to_binary("255.255.255.255")
    assert ones == "1" * 32
    assert binary_to_decimal(ones) == "4294967295"
    assert binary_to_dotted_decimal(decimal_to_binary("0")) == "0.0.0.0"


def test_cross_notation_chain_returns_original():
    for dotted in ["0.0.0.0", "255.255.255.255", "192.168.1.1", "10.20.30.40", "172.16.254.3"]:
        hex_form = binary_to_hex(dotted_decimal_to_binary(dotted))
        assert binary_to_dotted_decimal(hex_to_binary(hex_form)) == dotted


def test_errors_propagate_unchanged():
    with pytest.raises(RangeError):
        dotted_decimal_to_binary("256.0.0.1")
    with pytest.raises(FormatError):
        dotted_decimal_to_binary("1.2.3")
    with pytest.raises(FormatError):
        binary_to_hex("1" * 31)
    with pytest.raises(FormatError):
        binary_to_octal("1" * 33)
    with pytest.raises(RangeError):
        decimal_to_binary("4294967296")


def test_convert_generic():
    assert convert("c0.a8.01.01", Notation.DOTTED_HEX, Notation.DOTTED_OCTAL) == "300.250.001.001"
    assert convert("3232235777", Notation.DECIMAL, Notation.DOTTED_DECIMAL) == "192.168.1.1"


def test_convert_all_renders_every_notation():
    results = convert_all("192.168.1.1", Notation.DOTTED_DECIMAL)
    assert results == {
        Notation.DOTTED_DECIMAL: "192.168.1.1",
        Notation.BINARY: FLAT,
        Notation.DOTTED_HEX: "c0.a8.01.01",
        Notation.DOTTED_OCTAL: "300.250.001.001",
        Notation.DECIMAL: "3232235777",
    }


def test_convert_all_is_independent_of_source():
    expected = convert_all("192.168.1.1", Notation.DOTTED_DECIMAL)
    assert convert_all(GROUPED, Notation.BINARY) == expected
    assert convert_all("C0.A8.01.01", Notation.DOTTED_HEX) == expected
    assert convert_all("300.250.1.1", Notation.DOTTED_OCTAL) == expected
    assert convert_all("3232235777", Notation.DECIMAL) == expected
