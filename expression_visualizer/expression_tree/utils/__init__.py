"""Utilities for expression trees."""

from .sympy_utils import SymPyBridge
from .tree_utils import (
    render_tree, get_all_nodes, postorder_values, calculate_tree_depth,
    find_nodes_by_type, find_nodes_by_operator,
    validate_tree_structure, get_operands, get_operators
)

__all__ = [
    'SymPyBridge',
    'render_tree', 'get_all_nodes', 'postorder_values', 'calculate_tree_depth',
    'find_nodes_by_type', 'find_nodes_by_operator',
    'validate_tree_structure', 'get_operands', 'get_operators'
]
