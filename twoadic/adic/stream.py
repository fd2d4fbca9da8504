from __future__ import annotations

from itertools import islice
from typing import TYPE_CHECKING, Iterator, Tuple

from twoadic.bits import Bit

if TYPE_CHECKING:  # pragma: no cover
    from .two_adic import TwoAdic


class BitStream:
    """
    Lazy, infinite view of a value's bits, least significant first.

    The stream holds the source value and nothing else. Each call to iter()
    starts again from bit 0, so the same stream can be read any number of
    times; nothing infinite is ever materialized.
    """

    def __init__(self, value: "TwoAdic"):
        self.value = value

    @property
    def tail(self) -> Bit:
        """The bit repeated forever once prefix and delimiter are exhausted."""
        return self.value.shape.tail

    def __iter__(self) -> Iterator[Bit]:
        shape = self.value.shape
        yield from self.value.prefix
        if shape.delimiter is not None:
            yield shape.delimiter
        tail = shape.tail
        while True:
            yield tail

    def bit_at(self, index: int) -> Bit:
        if index < 0:
            raise ValueError("bit index must be non-negative")
        prefix = self.value.prefix
        if index < len(prefix):
            return prefix[index]
        delimiter = self.value.shape.delimiter
        if index == len(prefix) and delimiter is not None:
            return delimiter
        return self.tail

    def __getitem__(self, index: int) -> Bit:
        return self.bit_at(index)

    def take(self, n: int) -> Tuple[Bit, ...]:
        if n < 0:
            raise ValueError("cannot take a negative number of bits")
        return tuple(islice(self, n))

    def format(self, n: int) -> str:
        """First n bits as a 0/1 string, LSB on the left, with a trailing ellipsis."""
        return "".join(str(b) for b in self.take(n)) + "..."

    def __repr__(self) -> str:
        return f"BitStream({self.value!r})"


def bits(value: "TwoAdic") -> BitStream:
    return BitStream(value)
