"""Postfix to expression tree construction."""

from typing import List, Optional

from .core.node import Node, OperandNode, OperatorNode
from .core.operators import is_operator
from ..config import ParserConfig, DEFAULT_PARSER_CONFIG
from ..exceptions import MalformedExpressionError
from ..logging_system import log_debug, log_warning


def construct_tree(postfix: str, config: Optional[ParserConfig] = None) -> Optional[Node]:
  """Build a binary expression tree from whitespace-separated postfix tokens.

  Operators pop their right operand first, then their left one.

  Returns:
      The root node, or None when the input holds no tokens

  Raises:
      MalformedExpressionError: an operator finds fewer than two operands,
          or (strict mode) more than one subtree is left at the end
  """
  config = config or DEFAULT_PARSER_CONFIG
  stack: List[Node] = []

  for index, token in enumerate(postfix.split()):
    if is_operator(token):
      if len(stack) < 2:
        raise MalformedExpressionError(
          f"Operator {token!r} at token {index} has {len(stack)} operand(s), needs 2",
          token=token, position=index)
      right = stack.pop()
      left = stack.pop()
      stack.append(OperatorNode(token, left, right))
    else:
      stack.append(OperandNode(token))

  if not stack:
    return None

  if len(stack) > 1:
    if config.strict:
      raise MalformedExpressionError(
        f"Postfix {postfix!r} leaves {len(stack)} subtrees, expected 1")
    log_warning(f"Postfix {postfix!r} leaves {len(stack)} subtrees; keeping the last one")

  root = stack[-1]
  log_debug(f"Built tree from {len(postfix.split())} postfix token(s)")
  return root
