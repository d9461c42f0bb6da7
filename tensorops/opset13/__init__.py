"""Opset 13 operators: shape, element-wise, softmax and RNN."""