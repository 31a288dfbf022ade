"""Core expression tree components."""

from .node import (
    Node, IdentityNode, ConstantNode, UnaryOpNode, BinaryOpNode,
    PowerNode, SqrtNode, LogNode, ExpNode, SinNode, AddNode, DivideNode
)
from .operators import (
    NodeType, OpType,
    repeated_product, evaluate_unary_op, evaluate_binary_op
)

__all__ = [
    'Node', 'IdentityNode', 'ConstantNode', 'UnaryOpNode', 'BinaryOpNode',
    'PowerNode', 'SqrtNode', 'LogNode', 'ExpNode', 'SinNode', 'AddNode', 'DivideNode',
    'NodeType', 'OpType',
    'repeated_product', 'evaluate_unary_op', 'evaluate_binary_op'
]
