"""Helpers for the recurrent operators."""

from __future__ import annotations

import enum

import numpy as np

from tensorops.operator import DimensionError
from tensorops.utils import ones, zeros

ACTIVATION_ALPHA_ATTR = "activation_alpha"
ACTIVATION_BETA_ATTR = "activation_beta"
ACTIVATIONS_ATTR = "activations"
CLIP_ATTR = "clip"
DIRECTION_ATTR = "direction"
HIDDEN_SIZE_ATTR = "hidden_size"


class SequenceProcessDirection(str, enum.Enum):
    """The direction in which a sequential input is processed."""

    FORWARD = "forward"
    REVERSE = "reverse"
    BIDIRECTIONAL = "bidirectional"


def extract_matrices(
    m: np.ndarray, n_matrices: int, n_dimensions: int, hidden_size: int
) -> list[np.ndarray]:
    """Split m, of shape (num_directions, n_matrices * hidden_size, ...), into matrices.

    The direction axis is dropped from each result, as is the hidden axis
    when hidden_size is 1.
    """
    if n_dimensions < 2 or n_dimensions > m.ndim:
        raise DimensionError(
            f"cannot slice a tensor of rank {m.ndim} over {n_dimensions} dimensions"
        )
    if m.shape[0] < 1:
        raise DimensionError("tensor has no direction to extract from")
    matrices = []
    for i in range(n_matrices):
        start, end = i * hidden_size, (i + 1) * hidden_size
        if end > m.shape[1]:
            raise DimensionError(
                f"slice {start}:{end} out of range for dimension of size {m.shape[1]}"
            )
        piece = m[0, start:end]
        if hidden_size == 1:
            piece = piece.reshape(piece.shape[1:])
        matrices.append(piece)
    return matrices


def zero_tensor(*args: int) -> np.ndarray:
    """A float32 tensor of zeros with the given shape."""
    return zeros(int(np.prod(args, dtype=np.int64))).reshape(args)


def ones_tensor(t: np.ndarray) -> np.ndarray:
    """A float32 tensor of ones with the shape of t."""
    return ones(t.size).reshape(t.shape)