# ipconv/codecs.py
# 各记法的编解码器：点分十进制 / 二进制 / 十六进制 / 八进制 / 整数
#
# Every codec converts through OctetQuad. Parsers reject on the first bad field and
# never return a partial address.

import logging
import re
from enum import Enum
from typing import Dict, List, NamedTuple, Optional

from .errors import ConversionError, FormatError, RangeError
from .octets import ADDRESS_MAX, OCTET_MAX, OctetQuad

logger = logging.getLogger(__name__)

_DECIMAL_DIGITS = re.compile(r"[0-9]+")
_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")
_OCTAL_DIGITS = re.compile(r"[0-7]+")
_BINARY_FLAT = re.compile(r"[01]{32}")
_BINARY_GROUP = re.compile(r"[01]{8}")

# most significant digits an octet can have per base: 255, 0xff, 0o377
_OCTET_DIGITS = {10: 3, 16: 2, 8: 3}
# 4294967295
_ADDRESS_DIGITS = 10


class Notation(Enum):
    DOTTED_DECIMAL = ("dotted", "dotted-decimal")
    BINARY = ("binary", "binary")
    DOTTED_HEX = ("hex", "dotted-hexadecimal")
    DOTTED_OCTAL = ("octal", "dotted-octal")
    DECIMAL = ("decimal", "decimal-integer")

    def __init__(self, key: str, label: str):
        self.key = key
        self.label = label

    @classmethod
    def from_key(cls, key: str) -> "Notation":
        """Look a notation up by its short command-line name (case-insensitive)."""
        wanted = key.strip().lower()
        for notation in cls:
            if notation.key == wanted:
                return notation
        valid = " | ".join(n.key for n in cls)
        raise ValueError(f"Unknown notation {key!r}. Valid: {valid}")


def _split_dotted(text: str, notation: Notation) -> List[str]:
    fields = text.split(".")
    if len(fields) != 4:
        raise FormatError(f"expected 4 dot-separated fields, got {len(fields)}", notation)
    return fields


def _parse_dotted(text: str, notation: Notation, digits: re.Pattern, base: int,
                  max_width: Optional[int] = None) -> OctetQuad:
    octets = []
    for position, field in enumerate(_split_dotted(text, notation), start=1):
        if not field:
            raise FormatError("empty field", notation, position)
        if not digits.fullmatch(field):
            raise FormatError(f"invalid base-{base} numeral {field!r}", notation, position)
        significant = field.lstrip("0") or "0"
        if len(significant) > _OCTET_DIGITS[base]:
            raise RangeError("octet out of [0,255]", notation, position)
        value = int(significant, base)
        if value > OCTET_MAX:
            raise RangeError("octet out of [0,255]", notation, position)
        if max_width is not None and len(field) > max_width:
            raise FormatError(f"expected at most {max_width} digits, got {field!r}", notation, position)
        octets.append(value)
    return OctetQuad(*octets)


class DottedDecimalCodec:
    """192.168.1.1"""
    notation = Notation.DOTTED_DECIMAL

    @staticmethod
    def parse(text: str) -> OctetQuad:
        return _parse_dotted(text, Notation.DOTTED_DECIMAL, _DECIMAL_DIGITS, 10)

    @staticmethod
    def format(quad: OctetQuad) -> str:
        return ".".join(str(octet) for octet in quad)


class BinaryCodec:
    """
    Flat 32-digit form ``11000000101010000000000100000001`` or the octet-grouped display
    form ``11000000.10101000.00000001.00000001``. Formatting always produces the flat form;
    use group_binary() for display.
    """
    notation = Notation.BINARY

    @staticmethod
    def parse(text: str) -> OctetQuad:
        if "." in text:
            groups = _split_dotted(text, Notation.BINARY)
            for position, group in enumerate(groups, start=1):
                if not _BINARY_GROUP.fullmatch(group):
                    raise FormatError(f"expected 8 binary digits, got {group!r}", Notation.BINARY, position)
            flat = "".join(groups)
        else:
            flat = text
            if not _BINARY_FLAT.fullmatch(flat):
                if len(flat) != 32:
                    raise FormatError(f"expected 32 binary digits, got {len(flat)} characters", Notation.BINARY)
                raise FormatError("only '0' and '1' are allowed", Notation.BINARY)
        return OctetQuad(*(int(flat[i:i + 8], 2) for i in range(0, 32, 8)))

    @staticmethod
    def format(quad: OctetQuad) -> str:
        return quad.to_binary_flat()


class DottedHexCodec:
    """c0.a8.01.01 (input is case-insensitive, output is lowercase and zero-padded)"""
    notation = Notation.DOTTED_HEX

    @staticmethod
    def parse(text: str) -> OctetQuad:
        return _parse_dotted(text, Notation.DOTTED_HEX, _HEX_DIGITS, 16, max_width=2)

    @staticmethod
    def format(quad: OctetQuad) -> str:
        return ".".join(f"{octet:02x}" for octet in quad)


class DottedOctalCodec:
    """300.250.001.001 (output is zero-padded to 3 digits)"""
    notation = Notation.DOTTED_OCTAL

    @staticmethod
    def parse(text: str) -> OctetQuad:
        return _parse_dotted(text, Notation.DOTTED_OCTAL, _OCTAL_DIGITS, 8)

    @staticmethod
    def format(quad: OctetQuad) -> str:
        return ".".join(f"{octet:03o}" for octet in quad)


class DecimalCodec:
    """3232235777"""
    notation = Notation.DECIMAL

    @staticmethod
    def parse(text: str) -> OctetQuad:
        if not text:
            raise FormatError("empty value", Notation.DECIMAL)
        if not _DECIMAL_DIGITS.fullmatch(text):
            raise FormatError(f"not a non-negative integer literal: {text!r}", Notation.DECIMAL)
        significant = text.lstrip("0") or "0"
        if len(significant) > _ADDRESS_DIGITS:
            raise RangeError("value out of [0,4294967295]", Notation.DECIMAL)
        value = int(significant)
        if value > ADDRESS_MAX:
            raise RangeError("value out of [0,4294967295]", Notation.DECIMAL)
        return OctetQuad.from_int(value)

    @staticmethod
    def format(quad: OctetQuad) -> str:
        return str(quad.to_int())


CODECS: Dict[Notation, type] = {
    Notation.DOTTED_DECIMAL: DottedDecimalCodec,
    Notation.BINARY: BinaryCodec,
    Notation.DOTTED_HEX: DottedHexCodec,
    Notation.DOTTED_OCTAL: DottedOctalCodec,
    Notation.DECIMAL: DecimalCodec,
}


def get_codec(notation: Notation):
    return CODECS[notation]


def group_binary(flat: str) -> str:
    """Insert a dot every 8 characters: the display form of a flat binary string."""
    return ".".join(flat[i:i + 8] for i in range(0, len(flat), 8))


class ParseResult(NamedTuple):
    """Tagged parse outcome: ``ok`` is True with ``value`` set, or False with ``error`` set."""
    ok: bool
    value: Optional[OctetQuad] = None
    error: Optional[ConversionError] = None


def parse(text: str, notation: Notation) -> OctetQuad:
    quad = get_codec(notation).parse(text)
    logger.debug("parsed %s %r -> %s", notation.key, text, quad.octets)
    return quad


def try_parse(text: str, notation: Notation) -> ParseResult:
    try:
        return ParseResult(True, value=parse(text, notation))
    except ConversionError as e:
        logger.debug("rejected %s %r: %s", notation.key, text, e)
        return ParseResult(False, error=e)


def render(quad: OctetQuad, notation: Notation) -> str:
    return get_codec(notation).format(quad)
