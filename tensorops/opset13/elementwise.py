"""Element-wise operators: trigonometric, activation and binary operators."""

from __future__ import annotations

from typing import Callable, Optional

import numpy as np

from tensorops.operator import (
    FLOAT_TYPES,
    InvalidInputError,
    InvalidInputTypeError,
    Operator,
)

_NUMERIC_BINARY_TYPES = tuple(
    np.dtype(t)
    for t in (np.uint32, np.uint64, np.int32, np.int64, np.float32, np.float64)
)
_BOOL_TYPES = (np.dtype(np.bool_),)


def _apply_float(
    op: Operator, x: np.ndarray, fn: Callable[[np.ndarray], np.ndarray]
) -> np.ndarray:
    """Apply fn in double precision and return the result in the dtype of x."""
    x = np.asarray(x)
    if x.dtype not in FLOAT_TYPES:
        raise InvalidInputTypeError(0, x.dtype.name, op)
    return np.asarray(fn(x.astype(np.float64))).astype(x.dtype)


def _apply_binary(
    op: Operator,
    a: np.ndarray,
    b: np.ndarray,
    fn: Callable[[np.ndarray, np.ndarray], np.ndarray],
) -> np.ndarray:
    """Apply fn to a and b with multidirectional broadcasting."""
    a, b = np.asarray(a), np.asarray(b)
    try:
        np.broadcast_shapes(a.shape, b.shape)
    except ValueError as exc:
        raise InvalidInputError(
            f"shapes {a.shape} and {b.shape} cannot be broadcast together", op
        ) from exc
    return np.ascontiguousarray(fn(a, b))


def _sigmoid(x: np.ndarray) -> np.ndarray:
    return 1.0 / (1.0 + np.exp(-x))


class Sigmoid(Operator):
    """The sigmoid activation, 1 / (1 + exp(-x))."""

    name = "sigmoid operator"
    input_type_constraints = (FLOAT_TYPES,)

    def apply(self, inputs: list[Optional[np.ndarray]]) -> list[np.ndarray]:
        return [_apply_float(self, inputs[0], _sigmoid)]


class Sin(Operator):
    """The element-wise sine."""

    name = "sin operator"
    input_type_constraints = (FLOAT_TYPES,)

    def apply(self, inputs: list[Optional[np.ndarray]]) -> list[np.ndarray]:
        return [_apply_float(self, inputs[0], np.sin)]


class Sinh(Operator):
    """The element-wise hyperbolic sine."""

    name = "sinh operator"
    input_type_constraints = (FLOAT_TYPES,)

    def apply(self, inputs: list[Optional[np.ndarray]]) -> list[np.ndarray]:
        return [_apply_float(self, inputs[0], np.sinh)]


class Tan(Operator):
    """The element-wise tangent."""

    name = "tan operator"
    input_type_constraints = (FLOAT_TYPES,)

    def apply(self, inputs: list[Optional[np.ndarray]]) -> list[np.ndarray]:
        return [_apply_float(self, inputs[0], np.tan)]


class Tanh(Operator):
    """The element-wise hyperbolic tangent."""

    name = "tanh operator"
    input_type_constraints = (FLOAT_TYPES,)

    def apply(self, inputs: list[Optional[np.ndarray]]) -> list[np.ndarray]:
        return [_apply_float(self, inputs[0], np.tanh)]


class Sub(Operator):
    """Element-wise subtraction with multidirectional broadcasting."""

    name = "sub operator"
    min_inputs = 2
    max_inputs = 2
    input_type_constraints = (_NUMERIC_BINARY_TYPES, _NUMERIC_BINARY_TYPES)

    def apply(self, inputs: list[Optional[np.ndarray]]) -> list[np.ndarray]:
        return [_apply_binary(self, inputs[0], inputs[1], np.subtract)]


class Xor(Operator):
    """Element-wise logical xor with multidirectional broadcasting."""

    name = "xor operator"
    min_inputs = 2
    max_inputs = 2
    input_type_constraints = (_BOOL_TYPES, _BOOL_TYPES)

    def apply(self, inputs: list[Optional[np.ndarray]]) -> list[np.ndarray]:
        return [_apply_binary(self, inputs[0], inputs[1], np.logical_xor)]