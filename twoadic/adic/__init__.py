from .shape import Shape
from .stream import BitStream, bits
from .two_adic import (
    DEFAULT_PREVIEW_TAIL,
    TwoAdic,
    compare,
    complement,
    from_i32,
)
from .width import (
    I8,
    I16,
    I32,
    I64,
    IntegerWidth,
)

__all__ = [
    "Shape",
    "BitStream",
    "bits",
    "DEFAULT_PREVIEW_TAIL",
    "TwoAdic",
    "compare",
    "complement",
    "from_i32",
    "IntegerWidth",
    "I8",
    "I16",
    "I32",
    "I64",
]
