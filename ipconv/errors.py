# ipconv/errors.py
# 转换错误类型：格式错误 / 范围错误

from typing import Optional


class ConversionError(ValueError):
    """Base class for every failure raised while parsing an address notation."""

    def __init__(self, message: str, notation=None, field: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.notation = notation
        # 1-based index of the offending dotted field, None when the whole value is at fault
        self.field = field

    def __str__(self):
        prefix = f"{self.notation.label}: " if self.notation is not None else ""
        if self.field is not None:
            return f"{prefix}field {self.field}: {self.message}"
        return f"{prefix}{self.message}"


class FormatError(ConversionError):
    """Input does not have the lexical shape of its notation."""


class RangeError(ConversionError):
    """Input is well-formed but a field or the whole value is out of range."""
