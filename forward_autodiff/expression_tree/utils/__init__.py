"""Utilities for expression trees."""

from .sympy_utils import to_sympy
from .tree_utils import (
    get_all_nodes, calculate_tree_depth, find_nodes_by_type,
    validate_tree_structure
)
from .validator import ExpressionValidator, DerivativeCheck

__all__ = [
    'to_sympy',
    'get_all_nodes', 'calculate_tree_depth', 'find_nodes_by_type',
    'validate_tree_structure',
    'ExpressionValidator', 'DerivativeCheck'
]
