"""Operator base class, operator errors and input validation."""

from __future__ import annotations

import abc
from dataclasses import dataclass, field
from typing import Any, Iterable, Optional, Sequence

import numpy as np

ALL_TYPES: tuple[np.dtype, ...] = tuple(
    np.dtype(t)
    for t in (
        np.uint8,
        np.uint16,
        np.uint32,
        np.uint64,
        np.int8,
        np.int16,
        np.int32,
        np.int64,
        np.float32,
        np.float64,
        np.complex64,
        np.complex128,
        np.str_,
        np.bool_,
    )
)

FLOAT_TYPES: tuple[np.dtype, ...] = (np.dtype(np.float32), np.dtype(np.float64))


class OperatorError(Exception):
    """Base class for every error raised by an operator."""


class InvalidInputCountError(OperatorError):
    def __init__(self, count: int, op: "Operator") -> None:
        self.count = count
        self.op = op
        super().__init__(
            f"{op} expects {op.min_inputs} input tensors, got {count}"
        )


class InvalidOptionalInputCountError(OperatorError):
    def __init__(self, count: int, op: "Operator") -> None:
        self.count = count
        self.op = op
        super().__init__(
            f"{op} expects between {op.min_inputs} and {op.max_inputs} "
            f"input tensors, got {count}"
        )


class InvalidInputTypeError(OperatorError, TypeError):
    def __init__(self, index: int, dtype_name: str, op: "Operator") -> None:
        self.index = index
        self.dtype_name = dtype_name
        self.op = op
        super().__init__(
            f"input {index} for {op} does not allow dtype {dtype_name}"
        )


class InvalidInputError(OperatorError):
    def __init__(self, reason: str, op: "Operator") -> None:
        self.reason = reason
        self.op = op
        super().__init__(f"invalid input tensor for {op}: {reason}")


class InvalidAttributeError(OperatorError):
    def __init__(self, name: str, op: "Operator") -> None:
        self.name = name
        self.op = op
        super().__init__(f"invalid attribute {name} for {op}")


class InvalidAttributeCountError(OperatorError):
    def __init__(self, expected: int, actual: int, op: "Operator") -> None:
        self.expected = expected
        self.actual = actual
        self.op = op
        super().__init__(
            f"{op} expects {expected} attributes, got {actual}"
        )


class UnsupportedAttributeError(OperatorError):
    def __init__(self, name: str, op: "Operator") -> None:
        self.name = name
        self.op = op
        super().__init__(f"unsupported attribute {name} for {op}")


class UnsupportedInputError(OperatorError):
    def __init__(self, name: str, op: "Operator") -> None:
        self.name = name
        self.op = op
        super().__init__(f"unsupported input {name} for {op}")


class UnsupportedOpsetVersionError(OperatorError):
    def __init__(self, version: Optional[int] = None) -> None:
        self.version = version
        suffix = "" if version is None else f": {version}"
        super().__init__(f"unsupported opset version{suffix}")


class AxisOutOfRangeError(OperatorError):
    def __init__(self, low: int, high: int, axis: int) -> None:
        self.low = low
        self.high = high
        self.axis = axis
        super().__init__(
            f"axis argument must be in the range {low} <= x < {high}, was {axis}"
        )


class DimensionError(OperatorError):
    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"dimension error: {reason}")


class BroadcastError(OperatorError):
    def __init__(self, shape_a: Sequence[int], shape_b: Sequence[int]) -> None:
        self.shape_a = tuple(shape_a)
        self.shape_b = tuple(shape_b)
        super().__init__(
            f"could not unidirectionally broadcast shape {self.shape_b} "
            f"to shape {self.shape_a}"
        )


class CastError(OperatorError, TypeError):
    def __init__(self) -> None:
        super().__init__("could not cast value")


class InvalidShapeError(OperatorError):
    def __init__(self) -> None:
        super().__init__("invalid shape")


@dataclass
class Attribute:
    """A named attribute of a graph node."""

    name: str
    f: float = 0.0
    i: int = 0
    s: str = ""
    floats: list[float] = field(default_factory=list)
    ints: list[int] = field(default_factory=list)
    strings: list[str] = field(default_factory=list)


@dataclass
class Node:
    """A graph node carrying the attributes an operator is configured with."""

    attributes: list[Attribute] = field(default_factory=list)
    op_type: str = ""
    name: str = ""


class Operator(abc.ABC):
    """An operator that maps a list of input tensors to output tensors."""

    name = "operator"
    min_inputs = 1
    max_inputs = 1
    input_type_constraints: Sequence[Iterable[Any]] = (ALL_TYPES,)

    def init(self, node: Optional[Node]) -> None:
        """Configure the operator from a node; the default takes no attributes."""
        return None

    @abc.abstractmethod
    def apply(self, inputs: list[Optional[np.ndarray]]) -> list[np.ndarray]:
        """Compute the outputs for the given inputs."""

    def validate_inputs(
        self, inputs: Sequence[Optional[np.ndarray]]
    ) -> list[Optional[np.ndarray]]:
        """Check the inputs and pad the optional ones with None."""
        return validate_inputs(self, inputs)

    def __str__(self) -> str:
        return self.name


def _normalize_dtype(dtype: Any) -> np.dtype:
    dt = np.dtype(dtype)
    if dt.kind == "U":
        return np.dtype(np.str_)
    return dt


def validate_inputs(
    op: Operator, inputs: Sequence[Optional[np.ndarray]]
) -> list[Optional[np.ndarray]]:
    """Check the number and dtypes of inputs, padding missing optional ones with None."""
    pad_length = _check_n_inputs(op, inputs)
    padded = pad_inputs(inputs, pad_length)
    _check_input_types(op, padded)
    return padded


def _check_n_inputs(op: Operator, inputs: Sequence[Optional[np.ndarray]]) -> int:
    n_inputs = len(inputs)
    low, high = op.min_inputs, op.max_inputs
    if low == high:
        if n_inputs != low:
            raise InvalidInputCountError(n_inputs, op)
        return low
    if not low <= n_inputs <= high:
        raise InvalidOptionalInputCountError(n_inputs, op)
    return high


def pad_inputs(
    inputs: Sequence[Optional[np.ndarray]], length: int
) -> list[Optional[np.ndarray]]:
    """Return the inputs as a list padded with None up to the given length."""
    padded = list(inputs)
    padded.extend([None] * (length - len(padded)))
    return padded


def _check_input_types(op: Operator, inputs: Sequence[Optional[np.ndarray]]) -> None:
    for index, (tensor, allowed) in enumerate(
        zip(inputs, op.input_type_constraints)
    ):
        if tensor is None:
            continue
        allowed_set = {_normalize_dtype(d) for d in allowed}
        dtype = np.asarray(tensor).dtype
        if _normalize_dtype(dtype) not in allowed_set:
            raise InvalidInputTypeError(index, dtype.name, op)