"""Operators that change or report the shape of a tensor."""

from __future__ import annotations

import math
from typing import Iterable, Optional, Sequence

import numpy as np

from tensorops.operator import (
    ALL_TYPES,
    AxisOutOfRangeError,
    DimensionError,
    InvalidAttributeCountError,
    InvalidAttributeError,
    InvalidInputError,
    Node,
    Operator,
)
from tensorops.utils import (
    all_in_range,
    any_to_int_list,
    has_duplicates,
    if_scalar_to_list,
    offset_if_negative,
)

_INT64_TYPES = (np.dtype(np.int64),)


def _reshaped_copy(t: np.ndarray, shape: Sequence[int]) -> np.ndarray:
    """Return a copy of t with the given shape."""
    try:
        return np.array(t, copy=True).reshape(tuple(shape))
    except ValueError as exc:
        raise DimensionError(str(exc)) from exc


def process_shape(new_shape: Sequence[int], current_shape: Sequence[int]) -> list[int]:
    """Resolve the 0 and -1 entries of a requested shape against the current shape.

    A 0 copies the size of the same dimension of the current shape; a single -1
    takes whatever size is left over.
    """
    shape = list(new_shape)
    current = list(current_shape)

    for i, size in enumerate(shape):
        if size == 0:
            if i >= len(current):
                raise DimensionError("could not infer dim size")
            shape[i] = current[i]

    if -1 in shape:
        index = shape.index(-1)
        remaining = math.prod(current)
        for j, size in enumerate(shape):
            if j == index:
                continue
            if size == -1:
                raise DimensionError("at most one -1 dim size is allowed")
            if size == 0:
                raise DimensionError("could not infer dim size next to a dim of size 0")
            remaining //= size
        shape[index] = remaining

    return shape


def dims_to_squeeze_from_tensor(t: np.ndarray, n_dims: int) -> list[int]:
    """The axes to squeeze held in t, with negative axes counted from the end."""
    return offset_if_negative(any_to_int_list(np.asarray(t)), n_dims)


def dims_to_squeeze_from_shape(shape: Sequence[int]) -> list[int]:
    """The axes of the shape that have size 1."""
    return [i for i, size in enumerate(shape) if size == 1]


def keep_dim(dim: int, dims_to_squeeze: Iterable[int]) -> bool:
    """Whether a dimension survives the squeeze."""
    return dim not in dims_to_squeeze


def squeezed_shape(current_shape: Sequence[int], dims_to_squeeze: Sequence[int]) -> list[int]:
    """The shape left after removing the given dimensions."""
    return [size for i, size in enumerate(current_shape) if keep_dim(i, dims_to_squeeze)]


def insert_ones(original: Sequence[int], indices: Sequence[int]) -> list[int]:
    """Insert dimensions of size 1 at the given sorted, distinct positions."""
    sizes = iter(original)
    wanted = set(indices)
    return [
        1 if i in wanted else next(sizes)
        for i in range(len(original) + len(indices))
    ]


class Reshape(Operator):
    """Gives the data tensor a new shape taken from the second input."""

    name = "reshape operator"
    min_inputs = 2
    max_inputs = 2
    input_type_constraints = (ALL_TYPES, _INT64_TYPES)

    def apply(self, inputs: list[Optional[np.ndarray]]) -> list[np.ndarray]:
        data = np.asarray(inputs[0])
        requested = any_to_int_list(if_scalar_to_list(np.asarray(inputs[1])))
        new_shape = process_shape(requested, data.shape)
        return [_reshaped_copy(data, new_shape)]


class Shape(Operator):
    """Returns the shape of its input as a 1D int64 tensor."""

    name = "shape operator"
    input_type_constraints = (ALL_TYPES,)

    def apply(self, inputs: list[Optional[np.ndarray]]) -> list[np.ndarray]:
        return [np.array(np.shape(inputs[0]), dtype=np.int64)]


class Squeeze(Operator):
    """Removes dimensions of size 1, or the dimensions named by the second input."""

    name = "squeeze operator"
    min_inputs = 1
    max_inputs = 2
    input_type_constraints = (ALL_TYPES, _INT64_TYPES)

    def apply(self, inputs: list[Optional[np.ndarray]]) -> list[np.ndarray]:
        data = np.asarray(inputs[0])
        axes = inputs[1] if len(inputs) > 1 else None
        if axes is None:
            dims = dims_to_squeeze_from_shape(data.shape)
        else:
            dims = dims_to_squeeze_from_tensor(axes, data.ndim)
        return [_reshaped_copy(data, squeezed_shape(data.shape, dims))]


class Unsqueeze(Operator):
    """Inserts dimensions of size 1 at the axes given by the second input."""

    name = "unsqueeze operator"
    min_inputs = 2
    max_inputs = 2
    input_type_constraints = (ALL_TYPES, _INT64_TYPES)

    def apply(self, inputs: list[Optional[np.ndarray]]) -> list[np.ndarray]:
        data = np.asarray(inputs[0])
        axes = any_to_int_list(np.asarray(inputs[1]))
        output_rank = data.ndim + len(axes)

        if not all_in_range(axes, -output_rank, output_rank - 1):
            bad = next(a for a in axes if not -output_rank <= a <= output_rank - 1)
            raise AxisOutOfRangeError(-output_rank, output_rank, bad)

        axes = sorted(offset_if_negative(axes, output_rank))
        if has_duplicates(axes):
            raise InvalidInputError("axes cannot have duplicate entries after offset", self)

        return [_reshaped_copy(data, insert_ones(data.shape, axes))]


class Transpose(Operator):
    """Permutes the axes of a tensor; without a permutation the axes are reversed."""

    name = "transpose operator"
    input_type_constraints = (ALL_TYPES,)

    def __init__(self, perm: Optional[Sequence[int]] = None) -> None:
        self.perm = None if perm is None else [int(p) for p in perm]

    def init(self, node: Optional[Node]) -> None:
        """Read the single perm attribute."""
        attributes = node.attributes if node is not None else []
        if len(attributes) != 1:
            raise InvalidAttributeCountError(1, len(attributes), self)
        attr = attributes[0]
        if attr.name != "perm":
            raise InvalidAttributeError(attr.name, self)
        self.perm = [int(v) for v in attr.ints]

    def apply(self, inputs: list[Optional[np.ndarray]]) -> list[np.ndarray]:
        data = np.asarray(inputs[0])
        try:
            out = np.transpose(data, self.perm or None)
        except ValueError as exc:
            raise DimensionError(str(exc)) from exc
        return [np.ascontiguousarray(out)]