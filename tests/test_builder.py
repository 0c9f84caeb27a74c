"""Tests for postfix to tree construction."""

import pytest

from expression_visualizer import (
  ParserConfig, MalformedExpressionError, OperandNode, OperatorNode
)
from expression_visualizer.expression_tree import construct_tree, infix_to_postfix
from expression_visualizer.expression_tree.utils import postorder_values, validate_tree_structure


def test_empty_postfix_gives_no_tree():
  assert construct_tree("") is None
  assert construct_tree("  \t ") is None


def test_single_token_gives_one_leaf():
  root = construct_tree("42")
  assert isinstance(root, OperandNode)
  assert root.value == "42"
  assert root.left is None and root.right is None
  assert not root.is_operator()


def test_first_pop_becomes_right_child():
  root = construct_tree("8 2 -")
  assert isinstance(root, OperatorNode)
  assert root.value == "-"
  assert root.left.value == "8"
  assert root.right.value == "2"


def test_reference_tree_shape():
  root = construct_tree("3 5 + 2 8 - *")
  assert root.value == "*"
  assert (root.left.value, root.left.left.value, root.left.right.value) == ("+", "3", "5")
  assert (root.right.value, root.right.left.value, root.right.right.value) == ("-", "2", "8")
  assert root.size() == 7
  assert validate_tree_structure(root)


def test_tree_round_trips_to_postfix():
  postfix = "15 7 1 1 + - / 3 * 2 1 1 + + -"
  assert construct_tree(postfix).to_postfix() == postfix


def test_operator_alone_is_malformed():
  with pytest.raises(MalformedExpressionError) as excinfo:
    construct_tree("+")
  assert excinfo.value.token == "+"
  assert excinfo.value.position == 0


def test_operator_with_one_operand_is_malformed():
  with pytest.raises(MalformedExpressionError):
    construct_tree("3 +")


def test_malformed_infix_surfaces_from_builder():
  with pytest.raises(MalformedExpressionError):
    construct_tree(infix_to_postfix("3+"))


def test_leftover_operands_keep_last_subtree_by_default():
  root = construct_tree("3 4")
  assert root.value == "4"


def test_leftover_operands_rejected_in_strict_mode():
  with pytest.raises(MalformedExpressionError, match="2 subtrees"):
    construct_tree("3 4", ParserConfig(strict=True))


def test_rebuilding_the_same_string_gives_the_same_shape():
  infix = "((15/(7-(1+1)))*3)-(2+(1+1))"
  first = construct_tree(infix_to_postfix(infix))
  second = construct_tree(infix_to_postfix(infix))
  assert first is not second
  assert postorder_values(first) == postorder_values(second)
  assert first == second
  assert hash(first) == hash(second)


def test_parenthesized_string_rebuilds_an_equal_tree():
  root = construct_tree(infix_to_postfix("2^3^2-10/4*3"))
  assert construct_tree(infix_to_postfix(root.to_string())) == root


def test_copy_is_deep_and_equal():
  root = construct_tree("1 2 + 3 *")
  clone = root.copy()
  assert clone == root
  assert clone.left is not root.left
