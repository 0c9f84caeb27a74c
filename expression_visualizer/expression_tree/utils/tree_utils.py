"""
Tree Utility Functions

Traversal, analysis and text rendering helpers for expression trees.
Every walk here is iterative, so trees deeper than the interpreter's
recursion limit render and traverse like any other.
"""

from typing import List, Optional, Tuple, cast

from ..core.node import Node, OperandNode, OperatorNode
from ..core.operators import is_operator

BRANCH = "├── "
LAST_BRANCH = "└── "
PIPE = "│   "
SPACE = "    "
NULL_MARKER = "null"


def render_tree(root: Optional[Node]) -> str:
    """
    Render the tree as indented text with box-drawing connectors.

    The root is drawn as the last child of an empty prefix. An operator
    that is missing one child gets an explicit ``null`` line in its place.

    Args:
        root: Root node of the tree, or None

    Returns:
        Multi-line string ("" for an empty tree)
    """
    if root is None:
        return ""

    lines: List[str] = []
    # (node or None for a missing child, prefix, is_left)
    stack: List[Tuple[Optional[Node], str, bool]] = [(root, "", False)]

    while stack:
        node, prefix, is_left = stack.pop()
        connector = BRANCH if is_left else LAST_BRANCH
        if node is None:
            lines.append(prefix + connector + NULL_MARKER)
            continue

        lines.append(prefix + connector + node.value)

        left, right = node.left, node.right
        if left is None and right is None:
            continue

        child_prefix = prefix + (PIPE if is_left else SPACE)
        stack.append((right, child_prefix, False))
        stack.append((left, child_prefix, True))

    return "\n".join(lines)


def get_all_nodes(node: Optional[Node], traversal_order: str = 'breadth_first') -> List[Node]:
    """
    Get all nodes in the tree using specified traversal order.

    Args:
        node: Root node of the tree
        traversal_order: 'breadth_first' (default), 'depth_first' (preorder)
            or 'postorder'

    Returns:
        List of all nodes in the tree
    """
    if node is None:
        return []
    if traversal_order == 'breadth_first':
        return _breadth_first_traversal(node)
    elif traversal_order == 'depth_first':
        return _depth_first_traversal(node)
    elif traversal_order == 'postorder':
        return _postorder_traversal(node)
    else:
        raise ValueError(f"Invalid traversal_order: {traversal_order}")


def _children(node: Node) -> List[Node]:
    return [child for child in (node.left, node.right) if child is not None]


def _breadth_first_traversal(node: Node) -> List[Node]:
    """Breadth-first traversal (iterative, non-recursive)"""
    nodes_to_visit = [node]
    all_nodes = []

    while nodes_to_visit:
        current_node = nodes_to_visit.pop(0)  # FIFO for breadth-first
        all_nodes.append(current_node)
        nodes_to_visit.extend(_children(current_node))

    return all_nodes


def _depth_first_traversal(node: Node) -> List[Node]:
    """Depth-first preorder traversal (iterative, non-recursive)"""
    nodes_to_visit = [node]
    all_nodes = []

    while nodes_to_visit:
        current_node = nodes_to_visit.pop()  # LIFO for depth-first
        all_nodes.append(current_node)
        nodes_to_visit.extend(reversed(_children(current_node)))

    return all_nodes


def _postorder_traversal(node: Node) -> List[Node]:
    # reversed (node, right, left) preorder is (left, right, node) postorder
    nodes_to_visit = [node]
    all_nodes = []

    while nodes_to_visit:
        current_node = nodes_to_visit.pop()
        all_nodes.append(current_node)
        nodes_to_visit.extend(_children(current_node))

    all_nodes.reverse()
    return all_nodes


def postorder_values(node: Optional[Node]) -> List[str]:
    """Node payloads in postorder; equal lists mean equal tree shapes."""
    return [n.value for n in get_all_nodes(node, 'postorder')]


def calculate_tree_depth(node: Optional[Node]) -> int:
    """
    Calculate the maximum depth of the tree.

    Args:
        node: Root node of the tree

    Returns:
        Maximum depth (leaf nodes have depth 1, an empty tree 0)
    """
    if node is None:
        return 0

    max_depth = 0
    nodes_to_visit = [(node, 1)]
    while nodes_to_visit:
        current_node, depth = nodes_to_visit.pop()
        max_depth = max(max_depth, depth)
        nodes_to_visit.extend((child, depth + 1) for child in _children(current_node))
    return max_depth


def find_nodes_by_type(node: Optional[Node], node_type: type) -> List[Node]:
    """Find all nodes of a specific type, in breadth-first order."""
    return [n for n in get_all_nodes(node) if isinstance(n, node_type)]


def find_nodes_by_operator(node: Optional[Node], operator: str) -> List[Node]:
    """Find all operator nodes carrying the given symbol."""
    return [n for n in get_all_nodes(node) if isinstance(n, OperatorNode) and n.operator == operator]


def validate_tree_structure(node: Optional[Node]) -> bool:
    """
    Check the shape invariant: a node is an operator iff its value is one of
    the five operator symbols, operators have exactly two children and
    operands have none.

    Args:
        node: Root node of the tree (None is a valid empty tree)

    Returns:
        True if tree structure is valid, False otherwise
    """
    if node is None:
        return True

    for current_node in get_all_nodes(node):
        if isinstance(current_node, OperatorNode):
            if not is_operator(current_node.operator):
                return False
            if current_node.left is None or current_node.right is None:
                return False
        elif isinstance(current_node, OperandNode):
            if is_operator(current_node.value):
                return False
        else:
            # Unknown node type
            return False

    return True


# Convenience functions for common operations
def get_operands(node: Optional[Node]) -> List[OperandNode]:
    """Get all operand (leaf) nodes in the tree."""
    return cast(List[OperandNode], find_nodes_by_type(node, OperandNode))


def get_operators(node: Optional[Node]) -> List[OperatorNode]:
    """Get all operator nodes in the tree."""
    return cast(List[OperatorNode], find_nodes_by_type(node, OperatorNode))
