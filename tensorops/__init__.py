"""ONNX opset 13 operators on numpy arrays, with input validation and helpers."""

__version__ = "0.1.0"