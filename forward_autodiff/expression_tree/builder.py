"""
Expression Builder

One constructor per node kind. Children must already be built; nothing is
validated here (see utils.validate_tree_structure for an opt-in check).
"""

from .core.node import (
  Node, IdentityNode, ConstantNode, PowerNode, SqrtNode, LogNode,
  ExpNode, SinNode, AddNode, DivideNode
)


def identity() -> Node:
  return IdentityNode()


def constant(value: float) -> Node:
  return ConstantNode(value)


def power(child: Node, exponent: int) -> Node:
  """child ** exponent, meaningful for 0 <= exponent < 2**63 only (see PowerNode)"""
  return PowerNode(child, exponent)


def sqrt(child: Node) -> Node:
  return SqrtNode(child)


def log(child: Node) -> Node:
  return LogNode(child)


def exp(child: Node) -> Node:
  return ExpNode(child)


def sin(child: Node) -> Node:
  return SinNode(child)


def add(left: Node, right: Node) -> Node:
  return AddNode(left, right)


def divide(numerator: Node, denominator: Node) -> Node:
  return DivideNode(numerator, denominator)
