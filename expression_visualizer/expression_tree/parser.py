"""
Infix to postfix conversion (shunting-yard).

The scan is intentionally permissive: any character that is not a digit,
a bracket or whitespace is treated as an operator, a ')' without a matching
'(' is a no-op and unmatched '(' are dropped at the end. ParserConfig(strict=True)
turns each of those cases into an ExpressionSyntaxError.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional

from .core.operators import OPEN_BRACKET, CLOSE_BRACKET, OPERATORS, precedence
from ..config import ParserConfig, DEFAULT_PARSER_CONFIG
from ..exceptions import ExpressionSyntaxError
from ..logging_system import log_debug, log_warning


class TokenKind(Enum):
  NUMBER = "number"
  OPERATOR = "operator"
  OPEN = "open"
  CLOSE = "close"


@dataclass(frozen=True)
class Token:
  kind: TokenKind
  text: str
  position: int  # index of the first character in the source string


def _is_number_char(char: str) -> bool:
  return char.isdigit() or char == '.'


def tokenize(infix: str) -> Iterator[Token]:
  """Split an infix string into tokens, skipping whitespace.

  A number starts at a digit and runs over every following digit or '.',
  so "1.2.3" is a single (unparsable) token and ".5" starts with an operator.
  """
  i = 0
  n = len(infix)
  while i < n:
    char = infix[i]
    if char.isspace():
      i += 1
      continue

    if char.isdigit():
      start = i
      while i < n and _is_number_char(infix[i]):
        i += 1
      yield Token(TokenKind.NUMBER, infix[start:i], start)
      continue

    if char == OPEN_BRACKET:
      yield Token(TokenKind.OPEN, char, i)
    elif char == CLOSE_BRACKET:
      yield Token(TokenKind.CLOSE, char, i)
    else:
      yield Token(TokenKind.OPERATOR, char, i)
    i += 1


def infix_to_postfix(infix: str, config: Optional[ParserConfig] = None) -> str:
  """Convert an infix expression to a space-separated postfix string.

  Args:
      infix: expression over non-negative numbers, + - * / ^ and brackets
      config: parser options; permissive when omitted

  Returns:
      Postfix tokens separated by exactly one space ("" for empty input)

  Raises:
      ExpressionSyntaxError: in strict mode only
  """
  config = config or DEFAULT_PARSER_CONFIG
  output: List[str] = []
  stack: List[Token] = []

  for token in tokenize(infix):
    if token.kind == TokenKind.NUMBER:
      output.append(token.text)

    elif token.kind == TokenKind.OPEN:
      stack.append(token)

    elif token.kind == TokenKind.CLOSE:
      while stack and stack[-1].kind != TokenKind.OPEN:
        output.append(stack.pop().text)
      if stack:
        stack.pop()
      elif config.strict:
        raise ExpressionSyntaxError(
          f"Unmatched ')' at position {token.position}", position=token.position)
      else:
        log_warning(f"Ignoring unmatched ')' at position {token.position}")

    else:
      if token.text not in OPERATORS:
        if config.strict:
          raise ExpressionSyntaxError(
            f"Unexpected character {token.text!r} at position {token.position}",
            position=token.position)
        log_debug(f"Treating {token.text!r} at position {token.position} as an operator")
      incoming = precedence(token.text)
      while (stack and stack[-1].kind == TokenKind.OPERATOR and
             precedence(stack[-1].text) >= incoming):
        output.append(stack.pop().text)
      stack.append(token)

  while stack:
    token = stack.pop()
    if token.kind == TokenKind.OPEN:
      if config.strict:
        raise ExpressionSyntaxError(
          f"Unmatched '(' at position {token.position}", position=token.position)
      log_warning(f"Dropping unmatched '(' at position {token.position}")
      continue
    output.append(token.text)

  postfix = " ".join(output)
  log_debug(f"infix {infix!r} -> postfix {postfix!r}")
  return postfix
