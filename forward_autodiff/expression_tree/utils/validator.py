import numpy as np
import sympy as sp
from dataclasses import dataclass
from typing import Callable, Iterable
from ..core.node import Node
from .sympy_utils import to_sympy
from ...logging_system import log_debug, log_warning


@dataclass
class DerivativeCheck:
  """Forward-mode derivatives compared against a sympy reference"""
  points: np.ndarray
  forward: np.ndarray
  reference: np.ndarray
  max_abs_error: float
  passed: bool


class ExpressionValidator:

  @staticmethod
  def reference_derivative(node: Node) -> Callable[[np.ndarray], np.ndarray]:
    """Numpy function of x computing the sympy derivative of the tree"""
    x = sp.Symbol('x')
    derivative = sp.diff(to_sympy(node, x), x)
    func = sp.lambdify(x, derivative, modules='numpy')

    def wrapper(points: np.ndarray) -> np.ndarray:
      with np.errstate(all='ignore'):
        values = np.asarray(func(points), dtype=np.float64)
      # Constant derivatives lambdify to scalars
      return np.broadcast_to(values, points.shape).copy()

    return wrapper

  @staticmethod
  def check_derivative(node: Node, points: Iterable[float],
                       rtol: float = 1e-6, atol: float = 1e-9) -> DerivativeCheck:
    """
    Compare node.derivative against the sympy reference at every point.

    Points where either side is non-finite agree only if both are.
    """
    xs = np.asarray(points, dtype=np.float64).ravel()
    forward = np.fromiter((node.derivative(x) for x in xs), dtype=np.float64, count=xs.size)
    reference = ExpressionValidator.reference_derivative(node)(xs)

    finite = np.isfinite(forward) & np.isfinite(reference)
    both_non_finite = ~np.isfinite(forward) & ~np.isfinite(reference)
    close = np.isclose(forward, reference, rtol=rtol, atol=atol)
    agree = (finite & close) | both_non_finite

    if np.any(finite):
      max_abs_error = float(np.max(np.abs(forward[finite] - reference[finite])))
    else:
      max_abs_error = 0.0

    passed = bool(np.all(agree))
    if passed:
      log_debug(f"Derivative check passed at {xs.size} points (max abs error {max_abs_error:.3g})")
    else:
      bad = xs[~agree]
      log_warning(f"Derivative check failed at {bad.size}/{xs.size} points, first at x={bad[0]:g}")

    return DerivativeCheck(
      points=xs,
      forward=forward,
      reference=reference,
      max_abs_error=max_abs_error,
      passed=passed
    )
