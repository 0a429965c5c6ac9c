# ipconv/facade.py
# 对外转换接口：每个操作都只是 "目标.format(源.parse(输入))"

from typing import Dict

from .codecs import Notation, group_binary, parse, render


def convert(text: str, source: Notation, target: Notation) -> str:
    return render(parse(text, source), target)


def convert_all(text: str, source: Notation) -> Dict[Notation, str]:
    """Parse once and render the address in every notation, the source included."""
    quad = parse(text, source)
    return {notation: render(quad, notation) for notation in Notation}


def _to_binary(text: str, source: Notation, grouped: bool) -> str:
    flat = convert(text, source, Notation.BINARY)
    return group_binary(flat) if grouped else flat


def dotted_decimal_to_binary(text: str, grouped: bool = False) -> str:
    return _to_binary(text, Notation.DOTTED_DECIMAL, grouped)


def hex_to_binary(text: str, grouped: bool = False) -> str:
    return _to_binary(text, Notation.DOTTED_HEX, grouped)


def decimal_to_binary(text: str, grouped: bool = False) -> str:
    return _to_binary(text, Notation.DECIMAL, grouped)


def octal_to_binary(text: str, grouped: bool = False) -> str:
    return _to_binary(text, Notation.DOTTED_OCTAL, grouped)


def binary_to_hex(text: str) -> str:
    return convert(text, Notation.BINARY, Notation.DOTTED_HEX)


def binary_to_decimal(text: str) -> str:
    return convert(text, Notation.BINARY, Notation.DECIMAL)


def binary_to_octal(text: str) -> str:
    return convert(text, Notation.BINARY, Notation.DOTTED_OCTAL)


def binary_to_dotted_decimal(text: str) -> str:
    return convert(text, Notation.BINARY, Notation.DOTTED_DECIMAL)
