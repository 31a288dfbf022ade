import sympy as sp
from ..core.node import (
  Node, IdentityNode, ConstantNode, PowerNode, SqrtNode, LogNode,
  ExpNode, SinNode, AddNode, DivideNode
)


def to_sympy(node: Node, symbol: sp.Symbol = sp.Symbol('x')) -> sp.Expr:
  """
  Convert a tree to a sympy expression in `symbol`.

  Used as an independent reference for derivatives. PowerNode follows the
  repeated-multiplication semantics: exponents <= 0 convert to 1, so the
  reference derivative of a negative power is 0 while forward mode gives
  n * g'.
  """
  if isinstance(node, IdentityNode):
    return symbol
  elif isinstance(node, ConstantNode):
    return sp.Float(node.value)
  elif isinstance(node, PowerNode):
    if node.exponent <= 0:
      return sp.Integer(1)
    return sp.Pow(to_sympy(node.operand, symbol), node.exponent)
  elif isinstance(node, SqrtNode):
    return sp.sqrt(to_sympy(node.operand, symbol))
  elif isinstance(node, LogNode):
    return sp.log(to_sympy(node.operand, symbol))
  elif isinstance(node, ExpNode):
    return sp.exp(to_sympy(node.operand, symbol))
  elif isinstance(node, SinNode):
    return sp.sin(to_sympy(node.operand, symbol))
  elif isinstance(node, AddNode):
    return sp.Add(to_sympy(node.left, symbol), to_sympy(node.right, symbol))
  elif isinstance(node, DivideNode):
    return sp.Mul(to_sympy(node.left, symbol), sp.Pow(to_sympy(node.right, symbol), -1))
  raise TypeError(f"to_sympy reached unexpected node type: {type(node).__name__}")
