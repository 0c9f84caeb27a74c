import re

import numpy as np
from enum import IntEnum

from ...exceptions import NumericParseError


class NodeType(IntEnum):
  OPERAND = 0
  OPERATOR = 1

class OpType(IntEnum):
  ADD = 0
  SUB = 1
  MUL = 2
  DIV = 3
  POW = 4

# Mapping dictionaries
BINARY_OP_MAP = {'+': OpType.ADD, '-': OpType.SUB, '*': OpType.MUL, '/': OpType.DIV, '^': OpType.POW}
OPERATORS = frozenset(BINARY_OP_MAP)

# Strictly increasing, no associativity distinction ('^' ends up left-associative)
PRECEDENCE = {'+': 1, '-': 1, '*': 2, '/': 2, '^': 3}
UNKNOWN_PRECEDENCE = -1

OPEN_BRACKET = '('
CLOSE_BRACKET = ')'

DECIMAL_PATTERN = re.compile(r'[0-9]+(?:\.[0-9]*)?|\.[0-9]+')


def is_operator(symbol: str) -> bool:
  return symbol in OPERATORS


def precedence(symbol: str) -> int:
  """Precedence used by the shunting-yard scan; unrecognized symbols rank lowest."""
  return PRECEDENCE.get(symbol, UNKNOWN_PRECEDENCE)


def parse_operand(text: str) -> float:
  """Parse a leaf payload as a float.

  Only plain ASCII decimals are numbers: digits with an optional '.' and
  fraction ("12", "1.5", "3.", ".5"). Spellings float() would also take,
  such as "nan", "inf", "1_000" or non-ASCII digits, are rejected.

  Raises:
      NumericParseError: if the text is not a decimal number
  """
  if not isinstance(text, str) or DECIMAL_PATTERN.fullmatch(text) is None:
    raise NumericParseError(text)
  return float(text)


def evaluate_binary_op(left_val: float, right_val: float, operator: str) -> float:
  """Apply a binary operator with IEEE-754 float64 semantics.

  Division by zero and invalid powers produce inf/nan instead of raising,
  the same way they do for numpy arrays.
  """
  return evaluate_binary_op_fast(left_val, right_val, BINARY_OP_MAP[operator])


def evaluate_binary_op_fast(left_val: float, right_val: float, op_type: OpType) -> float:
  left = np.float64(left_val)
  right = np.float64(right_val)
  with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
    if op_type == OpType.ADD:
      result = left + right
    elif op_type == OpType.SUB:
      result = left - right
    elif op_type == OpType.MUL:
      result = left * right
    elif op_type == OpType.DIV:
      result = np.divide(left, right)
    elif op_type == OpType.POW:
      result = np.power(left, right)
    else:
      raise ValueError(f"Unsupported operator type: {op_type!r}")
  return float(result)
