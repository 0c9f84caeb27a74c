"""Tests for the tree printer and structural helpers."""

import pytest

from expression_visualizer import Expression, OperandNode, OperatorNode, render_tree
from expression_visualizer.expression_tree.utils import (
  get_all_nodes, calculate_tree_depth, find_nodes_by_operator, get_operands,
  get_operators, validate_tree_structure, postorder_values, SymPyBridge
)


def test_render_reference_tree():
  root = Expression.from_infix("(3+5)*(2-8)").root
  assert render_tree(root) == "\n".join([
    "└── *",
    "    ├── +",
    "    │   ├── 3",
    "    │   └── 5",
    "    └── -",
    "        ├── 2",
    "        └── 8",
  ])


def test_render_single_leaf_and_empty_tree():
  assert render_tree(OperandNode("42")) == "└── 42"
  assert render_tree(None) == ""


def test_render_marks_missing_children():
  lopsided = OperatorNode("+", OperandNode("1"), None)
  assert render_tree(lopsided) == "└── +\n    ├── 1\n    └── null"

  lopsided = OperatorNode("*", None, OperandNode("2"))
  assert render_tree(lopsided) == "└── *\n    ├── null\n    └── 2"


def test_missing_child_breaks_structure_invariant():
  assert not validate_tree_structure(OperatorNode("+", OperandNode("1"), None))
  assert not validate_tree_structure(OperandNode("+"))
  assert validate_tree_structure(None)
  assert validate_tree_structure(Expression.from_infix("1+2*3").root)


def test_traversal_orders():
  root = Expression.from_infix("1+2*3").root
  assert [n.value for n in get_all_nodes(root)] == ["+", "1", "*", "2", "3"]
  assert [n.value for n in get_all_nodes(root, 'depth_first')] == ["+", "1", "*", "2", "3"]
  assert postorder_values(root) == ["1", "2", "3", "*", "+"]
  assert get_all_nodes(None) == []
  with pytest.raises(ValueError):
    get_all_nodes(root, 'sideways')


def test_depth_and_queries():
  root = Expression.from_infix("((15/(7-(1+1)))*3)-(2+(1+1))").root
  assert calculate_tree_depth(root) == 6
  assert calculate_tree_depth(None) == 0
  assert len(find_nodes_by_operator(root, "+")) == 3
  assert [n.value for n in get_operands(root)][:2] == ["3", "2"]
  assert len(get_operators(root)) + len(get_operands(root)) == root.size()


def test_sympy_bridge_latex_and_simplify():
  root = Expression.from_infix("(3+5)*(2-8)").root
  bridge = SymPyBridge()
  assert bridge.latex_representation(root)
  summary = bridge.simplify_expression(root)
  assert summary['strategy_used'] == 'nsimplify'
  assert summary['value'] == pytest.approx(-48.0)
