from .tensor_bits import bit_matrix, values_from_tensor

__all__ = [
    "bit_matrix",
    "values_from_tensor",
]
