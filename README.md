# tensorops

A small collection of ONNX opset 13 operators that work on numpy arrays.
Each operator checks its inputs against the ONNX input count and dtype
rules, then computes its outputs.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Usage

Operators are plain classes. Create one, validate its inputs (which also
pads missing optional inputs with `None`), then call `apply`, which returns
a list of output arrays:

```python
import numpy as np
from tensorops.opset13.shape_ops import Reshape

reshape = Reshape()
data = np.arange(6, dtype=np.float32).reshape(2, 3)
shape = np.array([1, -1], dtype=np.int64)

inputs = reshape.validate_inputs([data, shape])
(out,) = reshape.apply(inputs)
print(out.shape)  # (1, 6)
```

Operators with attributes are set up from a `Node` holding `Attribute`
values before `apply` is called:

```python
from tensorops.operator import Attribute, Node
from tensorops.opset13.shape_ops import Transpose

transpose = Transpose()
transpose.init(Node(attributes=[Attribute(name="perm", ints=[1, 0])]))
(out,) = transpose.apply([np.arange(6, dtype=np.float32).reshape(3, 2)])
print(out.shape)  # (2, 3)
```

Attributes can also be passed to the constructor, for example
`Softmax(axis=1)` or `RNN(hidden_size=4, activations=["sigmoid"])`.

## Operators

- `tensorops.opset13.shape_ops`: `Reshape`, `Shape`, `Squeeze`,
  `Unsqueeze`, `Transpose`, plus the shape helpers `process_shape`,
  `dims_to_squeeze_from_tensor`, `dims_to_squeeze_from_shape`,
  `squeezed_shape`, `keep_dim` and `insert_ones`.
- `tensorops.opset13.elementwise`: `Sigmoid`, `Sin`, `Sinh`, `Tan`, `Tanh`
  (float32 and float64 inputs), `Sub` (numeric inputs) and `Xor` (bool
  inputs); the binary operators broadcast both ways.
- `tensorops.opset13.softmax`: `Softmax` along one axis, by default -1.
- `tensorops.opset13.rnn`: `RNN`, forward direction only. It returns the
  full output sequence `Y` of shape `(seq_length, 1, batch_size,
  hidden_size)` and the last hidden state of shape `(1, batch_size,
  hidden_size)`. Missing bias and initial hidden state default to zeros.
  `get_activation` returns the `tanh`, `sigmoid` or `relu` function by name.
  The `clip` attribute, directions other than `forward` and the
  sequence-lengths input are rejected.

## Errors

Every error derives from `OperatorError` in `tensorops.operator`. Input
validation raises `InvalidInputCountError`,
`InvalidOptionalInputCountError` or `InvalidInputTypeError`. Bad attributes
raise `InvalidAttributeError`, `InvalidAttributeCountError` or
`UnsupportedAttributeError`. Shape problems raise `DimensionError`, an axis
out of range raises `AxisOutOfRangeError`, and duplicate unsqueeze axes
raise `InvalidInputError`.

## Helpers

- `tensorops.operator`: the `Operator` base class, `validate_inputs`,
  `pad_inputs`, the `Node` and `Attribute` containers and the error classes.
- `tensorops.recurrent`: `SequenceProcessDirection`, `extract_matrices`,
  `zero_tensor` and `ones_tensor`.
- `tensorops.utils`: small list and array utilities such as
  `all_in_range`, `has_duplicates`, `offset_if_negative`,
  `any_to_int_list`, `if_scalar_to_list`, `arange` and `pairwise_assign`.

## What this package does not do

It does not load or run ONNX models or graphs, and it has no registry that
looks operators up by name or opset version: operators are created
directly from their classes. There is no Slice or Scaler operator and no
separate unidirectional broadcasting helper.