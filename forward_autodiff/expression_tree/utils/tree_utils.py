"""
Tree Utility Functions

Traversal and structural checks for expression trees. Nothing here
evaluates a node; these helpers only walk the children.
"""

from collections import deque
from typing import List, Type, TypeVar

from ..core.node import Node, UnaryOpNode, BinaryOpNode, PowerNode, ConstantNode, IdentityNode

T = TypeVar('T', bound=Node)


def get_all_nodes(node: Node, traversal_order: str = 'breadth_first') -> List[Node]:
    """
    Get all nodes in the tree using specified traversal order.

    Args:
        node: Root node of the tree
        traversal_order: 'breadth_first' (default) or 'depth_first'

    Returns:
        List of all nodes in the tree
    """
    if traversal_order == 'breadth_first':
        return _breadth_first_traversal(node)
    elif traversal_order == 'depth_first':
        return _depth_first_traversal(node)
    else:
        raise ValueError(f"Invalid traversal_order: {traversal_order}")


def _breadth_first_traversal(node: Node) -> List[Node]:
    """Breadth-first traversal (iterative)"""
    nodes_to_visit = deque([node])
    all_nodes = []

    while nodes_to_visit:
        current_node = nodes_to_visit.popleft()
        all_nodes.append(current_node)
        nodes_to_visit.extend(current_node.children())

    return all_nodes


def _depth_first_traversal(node: Node) -> List[Node]:
    """Depth-first pre-order traversal, left child before right"""
    stack = [node]
    all_nodes = []

    while stack:
        current_node = stack.pop()
        all_nodes.append(current_node)
        stack.extend(reversed(current_node.children()))

    return all_nodes


def calculate_tree_depth(node: Node) -> int:
    """
    Calculate the maximum depth of the tree.

    Args:
        node: Root node of the tree

    Returns:
        Maximum depth (leaf nodes have depth 1)
    """
    children = node.children()
    if not children:
        return 1
    return 1 + max(calculate_tree_depth(child) for child in children)


def find_nodes_by_type(node: Node, node_type: Type[T]) -> List[T]:
    """Find all nodes of a specific class in the tree (breadth-first order)"""
    return [n for n in get_all_nodes(node) if isinstance(n, node_type)]


def validate_tree_structure(node: Node) -> bool:
    """
    Validate that the tree is well-formed.

    Every composite must hold Node children and no node object may be
    reachable twice (children are exclusively owned by one parent).

    Args:
        node: Root node of the tree

    Returns:
        True if tree structure is valid, False otherwise
    """
    if not isinstance(node, Node):
        return False

    seen = set()
    stack = [node]
    while stack:
        current = stack.pop()
        if id(current) in seen:
            return False
        seen.add(id(current))

        if isinstance(current, BinaryOpNode):
            if not hasattr(current, 'left') or not hasattr(current, 'right'):
                return False
        elif isinstance(current, PowerNode):
            if not hasattr(current, 'operand') or not isinstance(current.exponent, int):
                return False
        elif isinstance(current, UnaryOpNode):
            if not hasattr(current, 'operand'):
                return False
        elif isinstance(current, ConstantNode):
            if not hasattr(current, 'value'):
                return False
        elif not isinstance(current, IdentityNode):
            # Unknown node type
            return False

        for child in current.children():
            if not isinstance(child, Node):
                return False
            stack.append(child)

    return True
