"""The softmax operator."""

from __future__ import annotations

from typing import Optional

import numpy as np

from tensorops.operator import (
    FLOAT_TYPES,
    AxisOutOfRangeError,
    InvalidAttributeCountError,
    Node,
    Operator,
)


class Softmax(Operator):
    """Softmax along one axis; the axis defaults to -1."""

    name = "softmax operator"
    input_type_constraints = (FLOAT_TYPES,)

    def __init__(self, axis: int = -1) -> None:
        self.axis = axis

    def init(self, node: Optional[Node]) -> None:
        """Take the axis from the node's single attribute, if it has one."""
        attributes = node.attributes if node is not None else []
        if len(attributes) > 1:
            raise InvalidAttributeCountError(1, len(attributes), self)
        if attributes:
            self.axis = int(attributes[0].i)

    def apply(self, inputs: list[Optional[np.ndarray]]) -> list[np.ndarray]:
        x = np.asarray(inputs[0])
        n_dims = x.ndim
        if not -n_dims <= self.axis < n_dims:
            raise AxisOutOfRangeError(-n_dims, n_dims, self.axis)
        axis = self.axis + n_dims if self.axis < 0 else self.axis

        values = x.astype(np.float64)
        exps = np.exp(values - values.max(axis=axis, keepdims=True))
        out = exps / exps.sum(axis=axis, keepdims=True)
        return [out.astype(x.dtype)]