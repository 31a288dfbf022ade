import numpy as np
from typing import Iterable
from .core.node import Node
import sympy as sp


class Expression:
  """Expression class: a root node plus sample-wise evaluation helpers"""

  __slots__ = ('root',)

  def __init__(self, root: Node):
    if not isinstance(root, Node):
      raise TypeError(f"Expression root must be a Node, got {type(root).__name__}")
    self.root = root

  def evaluate(self, x: float) -> np.float64:
    return self.root.evaluate(x)

  def derivative(self, x: float) -> np.float64:
    return self.root.derivative(x)

  def evaluate_samples(self, xs: Iterable[float]) -> np.ndarray:
    """Forward value at every sample point"""
    points = np.asarray(xs, dtype=np.float64).ravel()
    return np.fromiter((self.root.evaluate(x) for x in points), dtype=np.float64, count=points.size)

  def derivative_samples(self, xs: Iterable[float]) -> np.ndarray:
    """Derivative at every sample point"""
    points = np.asarray(xs, dtype=np.float64).ravel()
    return np.fromiter((self.root.derivative(x) for x in points), dtype=np.float64, count=points.size)

  def size(self) -> int:
    """Node count"""
    return self.root.size()

  def depth(self) -> int:
    from .utils.tree_utils import calculate_tree_depth
    return calculate_tree_depth(self.root)

  def to_sympy(self, symbol: sp.Symbol = sp.Symbol('x')) -> sp.Expr:
    from .utils.sympy_utils import to_sympy
    return to_sympy(self.root, symbol)
