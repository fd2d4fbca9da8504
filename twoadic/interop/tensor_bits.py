from __future__ import annotations

from typing import Iterable, List

from twoadic.adic import I32, IntegerWidth, TwoAdic


try:
    import torch
    from torch import Tensor
except Exception:  # pragma: no cover - torch optional
    torch = None
    Tensor = None  # type: ignore


def bit_matrix(values: Iterable[TwoAdic], n: int, as_tensor: bool = False):
    """
    First n stream bits of each value, one row per value.

    Returns a list of lists of 0/1 ints, or a [len(values), n] uint8 tensor
    when as_tensor is set (requires PyTorch).
    """
    if n < 0:
        raise ValueError("n must be non-negative")
    rows = [[int(b) for b in v.bits().take(n)] for v in values]
    if not as_tensor:
        return rows
    if torch is None:
        raise RuntimeError("PyTorch not available")
    if not rows:
        return torch.zeros((0, n), dtype=torch.uint8)
    return torch.tensor(rows, dtype=torch.uint8)


def values_from_tensor(t: Tensor, width: IntegerWidth = I32) -> List[TwoAdic]:
    """Build one TwoAdic per element of a 1-D integer tensor."""
    if torch is None:
        raise RuntimeError("PyTorch not available")
    if not isinstance(t, torch.Tensor):
        raise TypeError("expected a torch.Tensor")
    if t.dim() != 1:
        raise ValueError("expected a 1-D tensor")
    if t.dtype.is_floating_point or t.dtype.is_complex or t.dtype == torch.bool:
        raise ValueError("expected an integer tensor")
    return [TwoAdic.from_int(v, width) for v in t.tolist()]
