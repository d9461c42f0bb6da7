"""Small helpers shared by the operators."""

from __future__ import annotations

import math
import numbers
from typing import Any, Iterable, Sequence

import numpy as np

from tensorops.operator import CastError, InvalidShapeError

_SCALAR_WRAP_TYPES = frozenset(
    np.dtype(t)
    for t in (
        np.int8,
        np.int16,
        np.int32,
        np.int64,
        np.float32,
        np.float64,
        np.complex64,
        np.complex128,
    )
)


def int64_to_bool(value: int) -> bool:
    """Return True unless the value is zero."""
    return value != 0


def all_in_range(values: Iterable[int], low: int, high: int) -> bool:
    """Check that every value lies in the inclusive range low..high."""
    return all(low <= v <= high for v in values)


def has_duplicates(values: Sequence[int]) -> bool:
    """Check a sorted sequence for adjacent equal entries."""
    return any(a == b for a, b in zip(values, values[1:]))


def offset_if_negative(values: Iterable[int], offset: int) -> list[int]:
    """Return the values with offset added to each negative one."""
    return [v + offset if v < 0 else v for v in values]


def offset_tensor_if_negative(t: np.ndarray, offset: int) -> np.ndarray:
    """Add offset to every negative element of t in place and return t."""
    t[t < 0] += offset
    return t


def _is_int(value: Any) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(
        value, (bool, np.bool_)
    )


def any_to_int_list(value: Any) -> list[int]:
    """Convert a signed-integer array or sequence of ints to a list of ints."""
    if isinstance(value, np.ndarray):
        if value.dtype.kind != "i":
            raise CastError()
        return [int(v) for v in value.ravel()]
    if isinstance(value, (list, tuple)) and all(_is_int(v) for v in value):
        return [int(v) for v in value]
    raise CastError()


def get_value_as_tensor_type(value: float, dtype: Any) -> Any:
    """Convert a float to a scalar of the given dtype."""
    try:
        dt = np.dtype(dtype)
    except TypeError as exc:
        raise CastError() from exc
    if dt == np.bool_:
        return value > 0.0
    if dt in (np.dtype(np.int8), np.dtype(np.int16), np.dtype(np.int32), np.dtype(np.int64)):
        return dt.type(int(value))
    if dt in (np.dtype(np.float32), np.dtype(np.float64)):
        return dt.type(value)
    raise CastError()


def if_scalar_to_list(value: Any) -> Any:
    """Wrap a numeric scalar in a one-element sequence; return anything else as is."""
    if isinstance(value, np.ndarray):
        if value.ndim == 0 and value.dtype in _SCALAR_WRAP_TYPES:
            return value.reshape(1)
        return value
    if isinstance(value, np.generic):
        if value.dtype in _SCALAR_WRAP_TYPES:
            return np.array([value], dtype=value.dtype)
        return value
    if isinstance(value, (bool, np.bool_)):
        return value
    if isinstance(value, (int, float, complex)):
        return [value]
    return value


def zeros(size: int) -> np.ndarray:
    """A float32 array of zeros."""
    return np.zeros(size, dtype=np.float32)


def full(size: int, value: float) -> np.ndarray:
    """A float32 array filled with value."""
    return np.full(size, value, dtype=np.float32)


def ones(size: int) -> np.ndarray:
    """A float32 array of ones."""
    return np.ones(size, dtype=np.float32)


def arange(size: int, step: float) -> np.ndarray:
    """A float32 array holding i * step for i in 0..size-1."""
    return np.arange(size, dtype=np.float32) * np.float32(step)


def n_elements(*args: int) -> int:
    """The number of elements of a tensor with the given shape."""
    return math.prod(args)


def pairwise_assign(target: np.ndarray, source: np.ndarray) -> None:
    """Copy source into target element by element; the shapes must match."""
    if target.shape != source.shape:
        raise InvalidShapeError()
    target[...] = source