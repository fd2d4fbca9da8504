from .bit import (
    Bit,
    complement,
)

__all__ = [
    "Bit",
    "complement",
]
