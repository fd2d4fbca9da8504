from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from twoadic.bits import Bit


@dataclass(frozen=True)
class IntegerWidth:
    """
    Signed two's-complement integer type of a fixed bit width.

    bits: number of bits, including the sign bit
    """

    bits: int = 32

    def __post_init__(self):
        if isinstance(self.bits, bool) or not isinstance(self.bits, int):
            raise ValueError("width bits must be an integer")
        if self.bits <= 0:
            raise ValueError("width bits must be positive")

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1))

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1

    def contains(self, value: int) -> bool:
        return self.min_value <= value <= self.max_value

    def pattern(self, value: int) -> Tuple[Bit, ...]:
        """Two's-complement bits of value, most significant first."""
        if not self.contains(value):
            raise ValueError(
                f"{value} is outside the {self.bits}-bit signed range "
                f"[{self.min_value}, {self.max_value}]"
            )
        # Arithmetic shift sign-extends negative values
        return tuple(Bit((value >> i) & 1) for i in reversed(range(self.bits)))


I8 = IntegerWidth(8)
I16 = IntegerWidth(16)
I32 = IntegerWidth(32)
I64 = IntegerWidth(64)
