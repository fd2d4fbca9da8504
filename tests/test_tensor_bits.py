import pytest

from twoadic.adic import I8, from_i32
from twoadic.interop import bit_matrix, values_from_tensor


def test_bit_matrix_python():
    rows = bit_matrix([from_i32(-8), from_i32(0), from_i32(7)], 5)
    assert rows == [[0, 0, 0, 1, 1], [0, 0, 0, 0, 0], [1, 1, 1, 0, 0]]
    assert bit_matrix([], 4) == []
    with pytest.raises(ValueError):
        bit_matrix([from_i32(1)], -1)


def test_bit_matrix_tensor_if_torch():
    try:
        import torch
    except Exception:
        pytest.skip("torch not available")

    values = [from_i32(v) for v in range(I8.min_value, I8.max_value + 1)]
    m = bit_matrix(values, 8, as_tensor=True)
    assert m.shape == (256, 8)
    assert m.dtype == torch.uint8
    # Reassemble the unsigned byte from LSB-first bits
    weights = torch.tensor([1 << i for i in range(8)], dtype=torch.int64)
    unsigned = (m.to(torch.int64) * weights).sum(dim=-1)
    expected = torch.tensor([v & 0xFF for v in range(-128, 128)], dtype=torch.int64)
    assert torch.equal(unsigned, expected)
    assert bit_matrix([], 3, as_tensor=True).shape == (0, 3)


def test_values_from_tensor_if_torch():
    try:
        import torch
    except Exception:
        pytest.skip("torch not available")

    t = torch.tensor([-8, -1, 0, 7], dtype=torch.int32)
    assert values_from_tensor(t) == [from_i32(-8), from_i32(-1), from_i32(0), from_i32(7)]
    with pytest.raises(ValueError):
        values_from_tensor(torch.zeros(2, 2, dtype=torch.int32))
    with pytest.raises(ValueError):
        values_from_tensor(torch.tensor([1.5]))
    with pytest.raises(ValueError):
        values_from_tensor(torch.tensor([200]), I8)
