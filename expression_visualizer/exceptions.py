"""
Error taxonomy for expression processing.

Every fault raised by the parser, the tree builder or the evaluator derives
from ExpressionError, so callers can catch one type and leave their previous
state untouched. Arithmetic edge values (division by zero, invalid powers)
are not errors: they propagate as inf/nan.
"""

from typing import Optional


class ExpressionError(Exception):
    """Base class for all expression processing failures."""


class MalformedExpressionError(ExpressionError, ValueError):
    """An operator has fewer than two operands, or operands are left over."""

    def __init__(self, message: str, token: Optional[str] = None, position: Optional[int] = None):
        super().__init__(message)
        self.token = token
        self.position = position


class NumericParseError(ExpressionError, ValueError):
    """A leaf token cannot be parsed as a floating-point number."""

    def __init__(self, token: str):
        super().__init__(f"Cannot parse {token!r} as a number")
        self.token = token


class ExpressionSyntaxError(ExpressionError, ValueError):
    """Raised by the strict converter for unbalanced brackets or unknown characters."""

    def __init__(self, message: str, position: Optional[int] = None):
        super().__init__(message)
        self.position = position
