"""Forward-Mode Autodiff Package

Expression trees that evaluate a function of one real variable and its
derivative through per-node chain-rule rules.
"""

from .logging_system import LogLevel, configure_logging, get_logger, set_log_level
from .expression_tree import (
  Expression, Node, IdentityNode, ConstantNode, UnaryOpNode, BinaryOpNode,
  PowerNode, SqrtNode, LogNode, ExpNode, SinNode, AddNode, DivideNode,
  NodeType, OpType, ExpressionValidator, DerivativeCheck,
  get_all_nodes, calculate_tree_depth, find_nodes_by_type, validate_tree_structure, to_sympy
)
from .expression_tree.builder import (
  identity, constant, power, sqrt, log, exp, sin, add, divide
)
from .sampling import SamplingConfig, SampleTable, sample_points
from .driver import build_demo_expression, tabulate, render_table

__version__ = "0.1.0"
__all__ = [
  "LogLevel", "configure_logging", "get_logger", "set_log_level",
  "Expression", "Node", "IdentityNode", "ConstantNode", "UnaryOpNode", "BinaryOpNode",
  "PowerNode", "SqrtNode", "LogNode", "ExpNode", "SinNode", "AddNode", "DivideNode",
  "NodeType", "OpType", "ExpressionValidator", "DerivativeCheck",
  "get_all_nodes", "calculate_tree_depth", "find_nodes_by_type", "validate_tree_structure", "to_sympy",
  "identity", "constant", "power", "sqrt", "log", "exp", "sin", "add", "divide",
  "SamplingConfig", "SampleTable", "sample_points",
  "build_demo_expression", "tabulate", "render_table"
]
