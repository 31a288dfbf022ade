import numpy as np
import numba
from enum import IntEnum

class NodeType(IntEnum):
  IDENTITY = 0
  CONSTANT = 1
  UNARY_OP = 2
  BINARY_OP = 3

class OpType(IntEnum):
  # Unary ops
  POW = 0
  SQRT = 1
  LOG = 2
  EXP = 3
  SIN = 4
  # Binary ops
  ADD = 5
  DIV = 6

@numba.vectorize(['float64(float64, int64)'], cache=True)
def repeated_product(value, count):
  # Empty product for count <= 0, no reciprocal for negative counts
  result = 1.0
  for _ in range(count):
    result *= value
  return result

def evaluate_identity(x):
  return np.float64(x)

def evaluate_constant(value):
  return np.float64(value)

def evaluate_power(value, exponent):
  with np.errstate(all='ignore'):
    return np.float64(repeated_product(value, exponent))

def evaluate_unary_op(value, op_type):
  with np.errstate(all='ignore'):
    if op_type == OpType.SQRT:
      return np.sqrt(np.float64(value))
    elif op_type == OpType.LOG:
      return np.log(np.float64(value))
    elif op_type == OpType.EXP:
      return np.exp(np.float64(value))
    elif op_type == OpType.SIN:
      return np.sin(np.float64(value))
  raise ValueError(f"Unsupported unary operation: {op_type!r}")

def evaluate_binary_op(left_val, right_val, op_type):
  with np.errstate(all='ignore'):
    if op_type == OpType.ADD:
      return np.add(np.float64(left_val), np.float64(right_val))
    elif op_type == OpType.DIV:
      return np.divide(np.float64(left_val), np.float64(right_val))
  raise ValueError(f"Unsupported binary operation: {op_type!r}")

def chain(outer, inner_derivative):
  """Multiply an outer derivative by the inner one, IEEE semantics."""
  with np.errstate(all='ignore'):
    return np.multiply(np.float64(outer), np.float64(inner_derivative))

def power_derivative(value, exponent, value_derivative):
  with np.errstate(all='ignore'):
    return np.float64(exponent) * repeated_product(value, exponent - 1) * np.float64(value_derivative)

def sin_derivative(value, value_derivative):
  with np.errstate(all='ignore'):
    return np.cos(np.float64(value)) * np.float64(value_derivative)

def sqrt_derivative(root_value, value_derivative):
  with np.errstate(all='ignore'):
    return np.float64(value_derivative) / (2.0 * np.float64(root_value))

def log_derivative(value, value_derivative):
  with np.errstate(all='ignore'):
    return np.float64(value_derivative) / np.float64(value)

def quotient_derivative(left_val, left_der, right_val, right_der):
  with np.errstate(all='ignore'):
    left_val, left_der = np.float64(left_val), np.float64(left_der)
    right_val, right_der = np.float64(right_val), np.float64(right_der)
    return (left_der * right_val - left_val * right_der) / (right_val * right_val)
