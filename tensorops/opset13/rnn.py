"""The recurrent neural network (RNN) operator."""

from __future__ import annotations

from typing import Callable, Optional, Sequence

import numpy as np

from tensorops.operator import (
    FLOAT_TYPES,
    DimensionError,
    InvalidAttributeError,
    Node,
    Operator,
    OperatorError,
    UnsupportedAttributeError,
    UnsupportedInputError,
    pad_inputs,
)
from tensorops.recurrent import (
    ACTIVATION_ALPHA_ATTR,
    ACTIVATION_BETA_ATTR,
    ACTIVATIONS_ATTR,
    CLIP_ATTR,
    DIRECTION_ATTR,
    HIDDEN_SIZE_ATTR,
    SequenceProcessDirection,
    extract_matrices,
    zero_tensor,
)

MIN_RNN_INPUTS = 3
MAX_RNN_INPUTS = 6

Activation = Callable[[np.ndarray], np.ndarray]


def _tanh(x: np.ndarray) -> np.ndarray:
    return np.tanh(x)


def _sigmoid(x: np.ndarray) -> np.ndarray:
    return 1.0 / (1.0 + np.exp(-x))


def _relu(x: np.ndarray) -> np.ndarray:
    return np.maximum(x, 0)


_ACTIVATIONS: dict[str, Activation] = {
    "tanh": _tanh,
    "sigmoid": _sigmoid,
    "relu": _relu,
}


def get_activation(name: str) -> Activation:
    """Return the activation function with the given name, ignoring case."""
    try:
        return _ACTIVATIONS[name.lower()]
    except KeyError:
        raise OperatorError(f"unknown activation function: {name}") from None


class RNN(Operator):
    """A simple forward RNN: Ht = f(Xt*Wi^T + Ht-1*Ri^T + Wbi + Rbi)."""

    name = "rnn operator"
    min_inputs = MIN_RNN_INPUTS
    max_inputs = MAX_RNN_INPUTS
    input_type_constraints = (
        FLOAT_TYPES,
        FLOAT_TYPES,
        FLOAT_TYPES,
        FLOAT_TYPES,
        (np.dtype(np.int32),),
        FLOAT_TYPES,
    )

    def __init__(
        self,
        activation_alpha: Optional[Sequence[float]] = None,
        activation_beta: Optional[Sequence[float]] = None,
        activations: Optional[Sequence[str]] = None,
        direction: SequenceProcessDirection = SequenceProcessDirection.FORWARD,
        hidden_size: int = 0,
    ) -> None:
        self.activation_alpha = list(activation_alpha or [])
        self.activation_beta = list(activation_beta or [])
        self.activations = list(activations) if activations else ["tanh"]
        self.direction = SequenceProcessDirection(direction)
        self.hidden_size = hidden_size

    def init(self, node: Optional[Node]) -> None:
        """Read the RNN attributes from the node."""
        attributes = node.attributes if node is not None else []
        for attr in attributes:
            if attr.name == ACTIVATION_ALPHA_ATTR:
                self.activation_alpha = list(attr.floats)
            elif attr.name == ACTIVATION_BETA_ATTR:
                self.activation_beta = list(attr.floats)
            elif attr.name == ACTIVATIONS_ATTR:
                self.activations = [str(a) for a in attr.strings]
            elif attr.name == CLIP_ATTR:
                raise UnsupportedAttributeError(attr.name, self)
            elif attr.name == DIRECTION_ATTR:
                if attr.s != SequenceProcessDirection.FORWARD.value:
                    raise UnsupportedAttributeError(attr.name, self)
                self.direction = SequenceProcessDirection.FORWARD
            elif attr.name == HIDDEN_SIZE_ATTR:
                self.hidden_size = int(attr.i)
            else:
                raise InvalidAttributeError(attr.name, self)

    def apply(self, inputs: list[Optional[np.ndarray]]) -> list[np.ndarray]:
        x_in, w_in, r_in, b_in, seq_lens, h_in = pad_inputs(inputs, MAX_RNN_INPUTS)
        if seq_lens is not None:
            raise UnsupportedInputError("sequence lens", self)

        x = np.asarray(x_in)
        if x.ndim != 3:
            raise DimensionError(f"input X must have 3 dimensions, got {x.ndim}")
        seq_length, batch_size = x.shape[0], x.shape[1]
        if seq_length < 1:
            raise DimensionError("input X has an empty sequence")
        hidden = self.hidden_size

        wi = self._weights(np.asarray(w_in))
        ri = self._weights(np.asarray(r_in))

        b = zero_tensor(1, 2 * hidden) if b_in is None else np.asarray(b_in)
        wbi, rbi = (m.reshape(hidden) for m in extract_matrices(b, 2, 2, hidden))

        h = zero_tensor(1, batch_size, hidden) if h_in is None else np.asarray(h_in)
        h = h.reshape(h.shape[1:])

        activation = get_activation(self.activations[0])

        outputs = []
        try:
            for xt in x:
                h = activation(xt @ wi.T + wbi + h @ ri.T + rbi)
                outputs.append(h)
        except ValueError as exc:
            raise DimensionError(str(exc)) from exc

        y = np.stack(outputs).reshape(seq_length, 1, batch_size, hidden)
        yh = np.array(h, copy=True).reshape(1, batch_size, hidden)
        return [y, yh]

    def _weights(self, w: np.ndarray) -> np.ndarray:
        """The single weight matrix of shape (hidden_size, ...) held in w."""
        (matrix,) = extract_matrices(w, 1, 3, self.hidden_size)
        return matrix.reshape(self.hidden_size, -1)