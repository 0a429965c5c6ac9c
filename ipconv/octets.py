# ipconv/octets.py
# 八位组模型：所有记法之间转换的唯一中间表示

from dataclasses import dataclass
from typing import Iterator, Tuple

from .errors import RangeError

OCTET_MAX = 0xFF
ADDRESS_MAX = 0xFFFFFFFF


def _check_octet(value, position: int) -> int:
    # bool is an int subclass but True/False are never octets
    if isinstance(value, bool) or not isinstance(value, int):
        raise RangeError(f"octet must be an integer, got {type(value).__name__}", field=position)
    if not 0 <= value <= OCTET_MAX:
        raise RangeError("octet out of [0,255]", field=position)
    return value


@dataclass(frozen=True)
class OctetQuad:
    """
    An IPv4 address as four unsigned 8-bit values, most significant first.

        >>> OctetQuad(192, 168, 1, 1).to_int()
        3232235777
        >>> OctetQuad.from_int(3232235777)
        OctetQuad(a=192, b=168, c=1, d=1)
    """
    a: int
    b: int
    c: int
    d: int

    def __post_init__(self):
        for position, value in enumerate(self.octets, start=1):
            _check_octet(value, position)

    @property
    def octets(self) -> Tuple[int, int, int, int]:
        return (self.a, self.b, self.c, self.d)

    def __iter__(self) -> Iterator[int]:
        return iter(self.octets)

    @classmethod
    def from_parts(cls, a: int, b: int, c: int, d: int) -> "OctetQuad":
        return cls(a, b, c, d)

    @classmethod
    def from_int(cls, value: int) -> "OctetQuad":
        if isinstance(value, bool) or not isinstance(value, int):
            raise RangeError(f"address must be an integer, got {type(value).__name__}")
        if not 0 <= value <= ADDRESS_MAX:
            raise RangeError("address out of [0,4294967295]")
        return cls((value >> 24) & 0xFF, (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)

    def to_int(self) -> int:
        return (self.a << 24) | (self.b << 16) | (self.c << 8) | self.d

    def to_binary_flat(self) -> str:
        return "".join(f"{octet:08b}" for octet in self.octets)


# module level aliases used by the codecs and the facade
def from_parts(a: int, b: int, c: int, d: int) -> OctetQuad:
    return OctetQuad.from_parts(a, b, c, d)


def from_decimal_integer(value: int) -> OctetQuad:
    return OctetQuad.from_int(value)


def to_binary_flat(quad: OctetQuad) -> str:
    return quad.to_binary_flat()


def to_decimal_integer(quad: OctetQuad) -> int:
    return quad.to_int()
