from __future__ import annotations

import logging
import operator
from dataclasses import dataclass
from itertools import dropwhile
from typing import Iterable, Tuple

from twoadic.bits import Bit

from .shape import Shape
from .stream import BitStream
from .width import I32, IntegerWidth

logger = logging.getLogger(__name__)

# Tail bits shown by str() after the prefix and delimiter
DEFAULT_PREVIEW_TAIL = 4


def _coerce_bit(b) -> Bit:
    if isinstance(b, Bit):
        return b
    if isinstance(b, int) and not isinstance(b, bool):
        return Bit.from_int(b)
    raise ValueError(f"prefix entries must be bits, got {b!r}")


@dataclass(frozen=True)
class TwoAdic:
    """
    Eventually-constant 2-adic integer as a tagged value.

    shape: which of the four cases this is (see Shape)
    prefix: bits before the delimiter, least significant first; always
        empty for MINUS_ONE and ZERO

    Equality is structural (shape and prefix). The delimiter fixes where the
    constant tail begins, so two well-formed values with different payloads
    never denote the same bit stream.
    """

    shape: Shape
    prefix: Tuple[Bit, ...] = ()

    def __post_init__(self):
        if not isinstance(self.shape, Shape):
            raise ValueError(f"unknown shape {self.shape!r}")
        prefix = tuple(_coerce_bit(b) for b in self.prefix)
        if prefix and not self.shape.has_prefix:
            raise ValueError(f"{self.shape.name} carries no prefix")
        object.__setattr__(self, "prefix", prefix)

    # Builders -----------------------------------------------------------

    @classmethod
    def negative_tail(cls, prefix: Iterable[Bit] = ()) -> "TwoAdic":
        return cls(Shape.NEGATIVE_TAIL, tuple(prefix))

    @classmethod
    def minus_one(cls) -> "TwoAdic":
        return cls(Shape.MINUS_ONE)

    @classmethod
    def zero(cls) -> "TwoAdic":
        return cls(Shape.ZERO)

    @classmethod
    def positive_tail(cls, prefix: Iterable[Bit] = ()) -> "TwoAdic":
        return cls(Shape.POSITIVE_TAIL, tuple(prefix))

    @classmethod
    def from_int(cls, value: int, width: IntegerWidth = I32) -> "TwoAdic":
        """
        Build the value denoted by a fixed-width signed integer.

        The two's-complement pattern is read most significant first: the
        sign-extension run is stripped, the first differing bit becomes the
        implicit delimiter, and what remains (reversed) is the prefix.
        """
        if isinstance(value, bool):
            raise TypeError("bool is not a fixed-width integer")
        value = operator.index(value)
        if not width.contains(value):
            raise ValueError(
                f"{value} is outside the {width.bits}-bit signed range "
                f"[{width.min_value}, {width.max_value}]"
            )
        if value == -1:
            result = cls.minus_one()
        elif value == 0:
            result = cls.zero()
        else:
            shape = Shape.NEGATIVE_TAIL if value < 0 else Shape.POSITIVE_TAIL
            sign = shape.tail
            rest = tuple(dropwhile(lambda b: b == sign, width.pattern(value)))[1:]
            result = cls(shape, tuple(reversed(rest)))
        logger.debug("from_int(%d, bits=%d) -> %r", value, width.bits, result)
        return result

    # Views and operations -----------------------------------------------

    def bits(self) -> BitStream:
        return BitStream(self)

    def __invert__(self) -> "TwoAdic":
        return TwoAdic(~self.shape, tuple(~b for b in self.prefix))

    def __lt__(self, other):
        if not isinstance(other, TwoAdic):
            return NotImplemented
        return compare(self, other) < 0

    def __le__(self, other):
        if not isinstance(other, TwoAdic):
            return NotImplemented
        return compare(self, other) <= 0

    def __gt__(self, other):
        if not isinstance(other, TwoAdic):
            return NotImplemented
        return compare(self, other) > 0

    def __ge__(self, other):
        if not isinstance(other, TwoAdic):
            return NotImplemented
        return compare(self, other) >= 0

    def __str__(self) -> str:
        shown = len(self.prefix) + (self.shape.delimiter is not None) + DEFAULT_PREVIEW_TAIL
        return self.bits().format(shown)


def compare(a: TwoAdic, b: TwoAdic) -> int:
    """
    Three-way comparison: -1, 0 or 1 as a is below, equal to or above b.

    Different shapes order by Shape. Within a prefixed shape both streams are
    cut to the same window (longest prefix, delimiter, first tail bit, with
    the shorter one padded by its own tail) and compared most significant
    first. Padding with the tail bit leaves the denoted value unchanged.
    """
    if not isinstance(a, TwoAdic) or not isinstance(b, TwoAdic):
        raise TypeError(f"cannot compare {type(a).__name__} with {type(b).__name__}")
    if a.shape != b.shape:
        return -1 if a.shape < b.shape else 1
    if not a.shape.has_prefix:
        return 0
    window = max(len(a.prefix), len(b.prefix)) + 2
    lhs = a.bits().take(window)[::-1]
    rhs = b.bits().take(window)[::-1]
    return (lhs > rhs) - (lhs < rhs)


def complement(value: TwoAdic) -> TwoAdic:
    """Flip every bit of the stream; the shape flips along with the prefix."""
    return ~value


def from_i32(value: int) -> TwoAdic:
    return TwoAdic.from_int(value, I32)
