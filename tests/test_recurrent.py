import numpy as np
import pytest

from tensorops.operator import DimensionError
from tensorops.recurrent import (
    SequenceProcessDirection,
    extract_matrices,
    ones_tensor,
    zero_tensor,
)


def test_extract_weight_matrices_round_trip():
    m = np.arange(1 * 6 * 2, dtype=np.float32).reshape(1, 6, 2)
    matrices = extract_matrices(m, 3, 3, 2)
    assert len(matrices) == 3
    assert all(x.shape == (2, 2) for x in matrices)
    np.testing.assert_array_equal(np.concatenate(matrices, axis=0), m[0])


def test_extract_bias_matrices_round_trip():
    b = np.arange(8, dtype=np.float32).reshape(1, 8)
    matrices = extract_matrices(b, 2, 2, 4)
    assert [x.shape for x in matrices] == [(4,), (4,)]
    np.testing.assert_array_equal(np.concatenate(matrices), b[0])


def test_extract_matrices_out_of_range():
    m = np.zeros((1, 4, 3), dtype=np.float32)
    with pytest.raises(DimensionError):
        extract_matrices(m, 3, 3, 2)


def test_extract_matrices_too_many_dimensions():
    m = np.zeros((1, 4), dtype=np.float32)
    with pytest.raises(DimensionError):
        extract_matrices(m, 1, 3, 4)


def test_zero_tensor():
    t = zero_tensor(2, 3)
    assert t.shape == (2, 3)
    assert t.dtype == np.float32
    assert not t.any()


def test_ones_tensor():
    source = np.zeros((3, 1, 2), dtype=np.float64)
    t = ones_tensor(source)
    assert t.shape == source.shape
    assert t.dtype == np.float32
    assert (t == 1).all()


def test_direction_from_string():
    assert SequenceProcessDirection("forward") is SequenceProcessDirection.FORWARD
    assert SequenceProcessDirection.BIDIRECTIONAL == "bidirectional"
    with pytest.raises(ValueError):
        SequenceProcessDirection("sideways")