"""Expression Tree Module

Expression nodes with forward evaluation and chain-rule derivatives.
"""

from .expression import Expression
from .core.node import (
    Node,
    IdentityNode,
    ConstantNode,
    UnaryOpNode,
    BinaryOpNode,
    PowerNode,
    SqrtNode,
    LogNode,
    ExpNode,
    SinNode,
    AddNode,
    DivideNode
)
from .core.operators import (
    NodeType,
    OpType
)
from . import builder
from .utils import (
    to_sympy, get_all_nodes, calculate_tree_depth, find_nodes_by_type,
    validate_tree_structure, ExpressionValidator, DerivativeCheck
)

__all__ = [
    "Expression",
    "Node", "IdentityNode", "ConstantNode", "UnaryOpNode", "BinaryOpNode",
    "PowerNode", "SqrtNode", "LogNode", "ExpNode", "SinNode", "AddNode", "DivideNode",
    "NodeType", "OpType",
    "builder",
    "to_sympy", "get_all_nodes", "calculate_tree_depth", "find_nodes_by_type",
    "validate_tree_structure", "ExpressionValidator", "DerivativeCheck"
]
