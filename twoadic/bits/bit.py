from __future__ import annotations

from enum import IntEnum


class Bit(IntEnum):
    """
    A single binary digit.

    ZERO < ONE follows from the integer values; `~bit` is the complement
    rather than the integer bitwise-not.
    """

    ZERO = 0
    ONE = 1

    @classmethod
    def from_int(cls, digit: int) -> "Bit":
        if digit == 0:
            return cls.ZERO
        if digit == 1:
            return cls.ONE
        raise ValueError(f"bit digit must be 0 or 1, got {digit!r}")

    def __invert__(self) -> "Bit":
        return Bit.ONE if self is Bit.ZERO else Bit.ZERO

    def __repr__(self) -> str:
        return f"Bit.{self.name}"

    def __str__(self) -> str:
        return str(int(self))


def complement(bit: Bit) -> Bit:
    """Swap ZERO and ONE."""
    return ~bit
