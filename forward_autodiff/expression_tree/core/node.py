import numpy as np
from abc import ABC, abstractmethod
from typing import Tuple
from .operators import (
  NodeType, OpType,
  evaluate_identity, evaluate_constant, evaluate_power,
  evaluate_unary_op, evaluate_binary_op,
  chain, power_derivative, sin_derivative, sqrt_derivative, log_derivative, quotient_derivative
)


class Node(ABC):
  """Base node class: an immutable sub-function of one real variable"""

  __slots__ = ()

  node_type: NodeType

  def __setattr__(self, name, value):
    raise AttributeError(f"{type(self).__name__} is immutable, cannot set '{name}'")

  def __delattr__(self, name):
    raise AttributeError(f"{type(self).__name__} is immutable, cannot delete '{name}'")

  def _init_field(self, name, value):
    object.__setattr__(self, name, value)

  @abstractmethod
  def evaluate(self, x: float) -> np.float64:
    pass

  @abstractmethod
  def derivative(self, x: float) -> np.float64:
    pass

  def children(self) -> Tuple['Node', ...]:
    return ()

  def size(self) -> int:
    """Node count"""
    return 1 + sum(child.size() for child in self.children())


class IdentityNode(Node):
  __slots__ = ()

  node_type = NodeType.IDENTITY

  def evaluate(self, x: float) -> np.float64:
    return evaluate_identity(x)

  def derivative(self, x: float) -> np.float64:
    return np.float64(1.0)


class ConstantNode(Node):
  __slots__ = ('value',)

  node_type = NodeType.CONSTANT

  def __init__(self, value: float):
    self._init_field('value', float(value))

  def evaluate(self, x: float) -> np.float64:
    return evaluate_constant(self.value)

  def derivative(self, x: float) -> np.float64:
    return np.float64(0.0)


class UnaryOpNode(Node):
  """Node wrapping exactly one child"""

  __slots__ = ('operand',)

  node_type = NodeType.UNARY_OP
  op_type: OpType

  def __init__(self, operand: Node):
    self._init_field('operand', operand)

  def children(self) -> Tuple[Node, ...]:
    return (self.operand,)


class PowerNode(UnaryOpNode):
  """
  Integer power by repeated multiplication.

  Exponents <= 0 run an empty product: evaluate gives 1 and the derivative
  is n * 1 * g'. That is correct for n == 0 only; negative exponents do not
  compute a reciprocal. The exponent must fit in a signed 64-bit integer,
  larger values raise OverflowError on evaluation.
  """

  __slots__ = ('exponent',)

  op_type = OpType.POW

  def __init__(self, operand: Node, exponent: int):
    super().__init__(operand)
    self._init_field('exponent', int(exponent))

  def evaluate(self, x: float) -> np.float64:
    return evaluate_power(self.operand.evaluate(x), self.exponent)

  def derivative(self, x: float) -> np.float64:
    return power_derivative(self.operand.evaluate(x), self.exponent, self.operand.derivative(x))


class SqrtNode(UnaryOpNode):
  __slots__ = ()

  op_type = OpType.SQRT

  def evaluate(self, x: float) -> np.float64:
    return evaluate_unary_op(self.operand.evaluate(x), self.op_type)

  def derivative(self, x: float) -> np.float64:
    return sqrt_derivative(self.evaluate(x), self.operand.derivative(x))


class LogNode(UnaryOpNode):
  __slots__ = ()

  op_type = OpType.LOG

  def evaluate(self, x: float) -> np.float64:
    return evaluate_unary_op(self.operand.evaluate(x), self.op_type)

  def derivative(self, x: float) -> np.float64:
    return log_derivative(self.operand.evaluate(x), self.operand.derivative(x))


class ExpNode(UnaryOpNode):
  __slots__ = ()

  op_type = OpType.EXP

  def evaluate(self, x: float) -> np.float64:
    return evaluate_unary_op(self.operand.evaluate(x), self.op_type)

  def derivative(self, x: float) -> np.float64:
    return chain(self.evaluate(x), self.operand.derivative(x))


class SinNode(UnaryOpNode):
  __slots__ = ()

  op_type = OpType.SIN

  def evaluate(self, x: float) -> np.float64:
    return evaluate_unary_op(self.operand.evaluate(x), self.op_type)

  def derivative(self, x: float) -> np.float64:
    return sin_derivative(self.operand.evaluate(x), self.operand.derivative(x))


class BinaryOpNode(Node):
  """Node wrapping a left and a right child, order matters"""

  __slots__ = ('left', 'right')

  node_type = NodeType.BINARY_OP
  op_type: OpType

  def __init__(self, left: Node, right: Node):
    self._init_field('left', left)
    self._init_field('right', right)

  def children(self) -> Tuple[Node, ...]:
    return (self.left, self.right)

  def evaluate(self, x: float) -> np.float64:
    return evaluate_binary_op(self.left.evaluate(x), self.right.evaluate(x), self.op_type)


class AddNode(BinaryOpNode):
  __slots__ = ()

  op_type = OpType.ADD

  def derivative(self, x: float) -> np.float64:
    return evaluate_binary_op(self.left.derivative(x), self.right.derivative(x), OpType.ADD)


class DivideNode(BinaryOpNode):
  __slots__ = ()

  op_type = OpType.DIV

  def derivative(self, x: float) -> np.float64:
    return quotient_derivative(
      self.left.evaluate(x), self.left.derivative(x),
      self.right.evaluate(x), self.right.derivative(x)
    )
