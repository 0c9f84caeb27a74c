"""Tests for the infix to postfix converter."""

import pytest

from expression_visualizer import ParserConfig, ExpressionSyntaxError
from expression_visualizer.expression_tree import tokenize, infix_to_postfix, TokenKind

STRICT = ParserConfig(strict=True)


@pytest.mark.parametrize("infix, postfix", [
  ("(3+5)*(2-8)", "3 5 + 2 8 - *"),
  ("2^3+5*4", "2 3 ^ 5 4 * +"),
  ("10+20*30/2", "10 20 30 * 2 / +"),
  ("((15/(7-(1+1)))*3)-(2+(1+1))", "15 7 1 1 + - / 3 * 2 1 1 + + -"),
  ("42", "42"),
])
def test_reference_conversions(infix, postfix):
  assert infix_to_postfix(infix) == postfix


def test_whitespace_is_ignored_and_numbers_keep_their_digits():
  assert infix_to_postfix("  12.5 +\t0.25 * 100 ") == "12.5 0.25 100 * +"


def test_same_precedence_is_left_associative():
  assert infix_to_postfix("100-20-30") == "100 20 - 30 -"
  assert infix_to_postfix("64/4/2") == "64 4 / 2 /"


def test_power_is_left_associative():
  assert infix_to_postfix("2^3^2") == "2 3 ^ 2 ^"


def test_empty_input_gives_empty_postfix():
  assert infix_to_postfix("") == ""
  assert infix_to_postfix("   ") == ""


def test_tokenize_reports_kinds_and_positions():
  tokens = list(tokenize("(12 + 3.5)"))
  assert [(t.kind, t.text, t.position) for t in tokens] == [
    (TokenKind.OPEN, "(", 0),
    (TokenKind.NUMBER, "12", 1),
    (TokenKind.OPERATOR, "+", 4),
    (TokenKind.NUMBER, "3.5", 6),
    (TokenKind.CLOSE, ")", 9),
  ]


def test_number_run_swallows_every_decimal_point():
  assert [t.text for t in tokenize("1.2.3")] == ["1.2.3"]


def test_leading_decimal_point_is_an_operator_token():
  assert [t.kind for t in tokenize(".5")] == [TokenKind.OPERATOR, TokenKind.NUMBER]


class TestPermissiveBrackets:

  def test_unmatched_open_bracket_is_dropped(self):
    assert infix_to_postfix("(1+2") == "1 2 +"
    assert infix_to_postfix("((1+2)") == "1 2 +"

  def test_unmatched_close_bracket_is_a_no_op(self):
    assert infix_to_postfix(")1+2") == "1 2 +"

  def test_close_bracket_flushes_pending_operators(self):
    assert infix_to_postfix("1+2)*3") == "1 2 + 3 *"

  def test_unknown_characters_are_treated_as_operators(self):
    assert infix_to_postfix("2a") == "2 a"
    assert infix_to_postfix("a+1") == "1 + a"


class TestStrictMode:

  def test_valid_input_matches_permissive_output(self):
    assert infix_to_postfix("(3+5)*(2-8)", STRICT) == infix_to_postfix("(3+5)*(2-8)")

  def test_unmatched_open_bracket(self):
    with pytest.raises(ExpressionSyntaxError) as excinfo:
      infix_to_postfix("(1+2", STRICT)
    assert excinfo.value.position == 0

  def test_unmatched_close_bracket(self):
    with pytest.raises(ExpressionSyntaxError) as excinfo:
      infix_to_postfix("1+2)", STRICT)
    assert excinfo.value.position == 3

  def test_unknown_character(self):
    with pytest.raises(ExpressionSyntaxError, match="'a'"):
      infix_to_postfix("2a", STRICT)

  def test_syntax_error_is_a_value_error(self):
    with pytest.raises(ValueError):
      infix_to_postfix("1,2", STRICT)
