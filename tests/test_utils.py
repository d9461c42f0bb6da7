import numpy as np
import pytest

from tensorops.operator import CastError, InvalidShapeError
from tensorops.utils import (
    all_in_range,
    any_to_int_list,
    arange,
    full,
    get_value_as_tensor_type,
    has_duplicates,
    if_scalar_to_list,
    int64_to_bool,
    n_elements,
    offset_if_negative,
    offset_tensor_if_negative,
    ones,
    pairwise_assign,
    zeros,
)


@pytest.mark.parametrize("value, expected", [(1, True), (2, True), (0, False)])
def test_int64_to_bool(value, expected):
    assert int64_to_bool(value) is expected


@pytest.mark.parametrize(
    "values, low, high, expected",
    [
        ([1, 2, 3], 0, 4, True),
        ([1, 2, 3], 1, 4, True),
        ([1, 2, 3], 1, 3, True),
        ([1, 2, 3, 7], 0, 4, False),
        ([-3, 1, 2, 3], 0, 4, False),
    ],
)
def test_all_in_range(values, low, high, expected):
    assert all_in_range(values, low, high) is expected


@pytest.mark.parametrize(
    "values, expected",
    [([1, 2, 3], False), ([1, 3], False), ([1, 3, 3], True), ([1, 3, -3], False)],
)
def test_has_duplicates(values, expected):
    assert has_duplicates(values) is expected


OFFSET_CASES = [
    ([1, 2, 3], 2, [1, 2, 3]),
    ([1, 2, 3, -1], 2, [1, 2, 3, 1]),
    ([0, 1], 3, [0, 1]),
    ([-2, 2], 3, [1, 2]),
]


@pytest.mark.parametrize("values, offset, expected", OFFSET_CASES)
def test_offset_if_negative(values, offset, expected):
    assert offset_if_negative(values, offset) == expected


@pytest.mark.parametrize("values, offset, expected", OFFSET_CASES)
def test_offset_tensor_if_negative(values, offset, expected):
    t = np.array(values)
    offset_tensor_if_negative(t, offset)
    assert t.tolist() == expected


@pytest.mark.parametrize("dtype", [np.int8, np.int16, np.int32, np.int64])
def test_any_to_int_list(dtype):
    assert any_to_int_list(np.array([1, 2, 3], dtype=dtype)) == [1, 2, 3]


def test_any_to_int_list_fails_on_string():
    with pytest.raises(CastError):
        any_to_int_list("some string")


def test_any_to_int_list_fails_on_float_array():
    with pytest.raises(CastError):
        any_to_int_list(np.array([1.0, 2.0], dtype=np.float32))


@pytest.mark.parametrize(
    "dtype, expected",
    [
        (np.int8, np.int8(1)),
        (np.int16, np.int16(1)),
        (np.int32, np.int32(1)),
        (np.int64, np.int64(1)),
        (np.float32, np.float32(1)),
        (np.float64, np.float64(1)),
    ],
)
def test_get_value_as_tensor_type(dtype, expected):
    value = get_value_as_tensor_type(1.0, dtype)
    assert value == expected
    assert type(value) is type(expected)


def test_get_value_as_tensor_type_bool():
    assert get_value_as_tensor_type(1.0, np.bool_) is True


def test_get_value_as_tensor_type_complex_fails():
    with pytest.raises(CastError):
        get_value_as_tensor_type(1.0, np.complex64)


@pytest.mark.parametrize(
    "dtype",
    [np.int8, np.int16, np.int32, np.int64, np.float32, np.float64, np.complex64, np.complex128],
)
def test_if_scalar_to_list_numpy(dtype):
    result = if_scalar_to_list(dtype(1))
    assert isinstance(result, np.ndarray)
    assert result.dtype == np.dtype(dtype)
    assert result.tolist() == [1]


def test_if_scalar_to_list_int():
    assert if_scalar_to_list(1) == [1]


def test_if_scalar_to_list_uint8_unchanged():
    result = if_scalar_to_list(np.uint8(1))
    assert result == np.uint8(1)
    assert type(result) is np.uint8


def test_zeros():
    assert zeros(2).tolist() == [0, 0]
    assert zeros(4).tolist() == [0, 0, 0, 0]
    assert zeros(4).dtype == np.float32


def test_full():
    assert full(2, 1.0).tolist() == [1.0, 1.0]
    np.testing.assert_array_equal(full(3, 3.1), np.array([3.1, 3.1, 3.1], dtype=np.float32))


def test_ones():
    assert ones(2).tolist() == [1.0, 1.0]
    assert ones(5).tolist() == [1, 1, 1, 1, 1]


def test_arange():
    np.testing.assert_array_equal(arange(2, 1), np.array([0, 1], dtype=np.float32))
    np.testing.assert_array_equal(
        arange(4, 0.2), np.array([0, 0.2, 0.4, 0.6], dtype=np.float32)
    )


def test_n_elements():
    assert n_elements(2, 1) == 2
    assert n_elements(2, 3) == 6
    assert n_elements(2, 5, 3, 2) == 60


@pytest.mark.parametrize(
    "target, source",
    [
        (
            np.array([1, 2, 3, 4], dtype=np.float32).reshape(2, 2),
            np.array([1, 1, 1, 1], dtype=np.float32).reshape(2, 2),
        ),
        (
            np.array([1, 2, 3], dtype=np.float32).reshape(3, 1),
            np.array([2.5, 2.1, 0.0], dtype=np.float32).reshape(3, 1),
        ),
    ],
)
def test_pairwise_assign(target, source):
    pairwise_assign(target, source)
    np.testing.assert_array_equal(target, source)


def test_pairwise_assign_shape_mismatch():
    target = np.array([1, 2, 3, 4], dtype=np.float32).reshape(2, 2)
    source = np.array([1, 1], dtype=np.float32).reshape(1, 2)
    with pytest.raises(InvalidShapeError):
        pairwise_assign(target, source)