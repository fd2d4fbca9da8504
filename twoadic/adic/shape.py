from __future__ import annotations

from enum import IntEnum
from typing import Optional

from twoadic.bits import Bit


class Shape(IntEnum):
    """
    The four structural cases of an eventually-constant 2-adic value.

    Declaration order is the cross-shape order: every value <= -2 sorts
    below -1, which sorts below 0, which sorts below every value >= 1.
    """

    NEGATIVE_TAIL = 0  # prefix, then 0, then 1 forever
    MINUS_ONE = 1  # 1 forever
    ZERO = 2  # 0 forever
    POSITIVE_TAIL = 3  # prefix, then 1, then 0 forever

    @property
    def has_prefix(self) -> bool:
        return self in (Shape.NEGATIVE_TAIL, Shape.POSITIVE_TAIL)

    @property
    def delimiter(self) -> Optional[Bit]:
        if self is Shape.NEGATIVE_TAIL:
            return Bit.ZERO
        if self is Shape.POSITIVE_TAIL:
            return Bit.ONE
        return None

    @property
    def tail(self) -> Bit:
        if self in (Shape.NEGATIVE_TAIL, Shape.MINUS_ONE):
            return Bit.ONE
        return Bit.ZERO

    def __invert__(self) -> "Shape":
        return Shape(3 - self.value)
