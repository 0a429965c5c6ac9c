# ipconv/__init__.py
# package exports for the conversion core
from .errors import ConversionError, FormatError, RangeError
from .octets import OctetQuad, from_parts, from_decimal_integer, to_binary_flat, to_decimal_integer
from .codecs import (
    Notation, ParseResult, CODECS, get_codec, group_binary, parse, render, try_parse,
    DottedDecimalCodec, BinaryCodec, DottedHexCodec, DottedOctalCodec, DecimalCodec,
)
from .facade import (
    convert, convert_all,
    dotted_decimal_to_binary, hex_to_binary, decimal_to_binary, octal_to_binary,
    binary_to_hex, binary_to_decimal, binary_to_octal, binary_to_dotted_decimal,
)

import logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ConversionError", "FormatError", "RangeError",
    "OctetQuad", "from_parts", "from_decimal_integer", "to_binary_flat", "to_decimal_integer",
    "Notation", "ParseResult", "CODECS", "get_codec", "group_binary", "parse", "render", "try_parse",
    "DottedDecimalCodec", "BinaryCodec", "DottedHexCodec", "DottedOctalCodec", "DecimalCodec",
    "convert", "convert_all",
    "dotted_decimal_to_binary", "hex_to_binary", "decimal_to_binary", "octal_to_binary",
    "binary_to_hex", "binary_to_decimal", "binary_to_octal", "binary_to_dotted_decimal",
]
