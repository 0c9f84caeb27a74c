from dataclasses import dataclass
from typing import Iterator, Optional

import sympy as sp

from .core.node import Node
from .parser import infix_to_postfix
from .builder import construct_tree
from .traversal import evaluate_tree, iter_events, trace_evaluation, EvaluationTrace
from .events import TraversalEvent
from .utils.tree_utils import render_tree, calculate_tree_depth
from ..config import ParserConfig
from ..logging_system import log_stage


class Expression:
  """Infix expression together with its postfix form and tree"""

  __slots__ = ('infix', 'postfix', 'root', '_value_cache')

  def __init__(self, root: Optional[Node], infix: Optional[str] = None, postfix: Optional[str] = None):
    self.root = root
    self.postfix = postfix if postfix is not None else (root.to_postfix() if root is not None else "")
    self.infix = infix if infix is not None else self.to_string()
    self._value_cache: Optional[float] = None

  @classmethod
  def from_infix(cls, infix: str, config: Optional[ParserConfig] = None) -> 'Expression':
    """Run the converter and the tree builder on an infix string.

    Raises:
        MalformedExpressionError: the expression has an operator without two operands
        ExpressionSyntaxError: strict mode rejected the input
    """
    infix = infix.strip()
    postfix = infix_to_postfix(infix, config)
    log_stage("Postfix Expression", postfix)
    root = construct_tree(postfix, config)
    return cls(root, infix=infix, postfix=postfix)

  @classmethod
  def from_postfix(cls, postfix: str, config: Optional[ParserConfig] = None) -> 'Expression':
    root = construct_tree(postfix, config)
    return cls(root, postfix=" ".join(postfix.split()))

  def is_empty(self) -> bool:
    return self.root is None

  def evaluate(self) -> float:
    if self._value_cache is None:
      self._value_cache = evaluate_tree(self.root)
    return self._value_cache

  def iter_events(self) -> Iterator[TraversalEvent]:
    return iter_events(self.root)

  def trace(self) -> EvaluationTrace:
    return trace_evaluation(self.root)

  def render(self) -> str:
    return render_tree(self.root)

  def to_string(self) -> str:
    return self.root.to_string() if self.root is not None else ""

  def to_sympy(self) -> sp.Expr:
    return self.root.to_sympy() if self.root is not None else sp.Float(0)

  def size(self) -> int:
    return self.root.size() if self.root is not None else 0

  def depth(self) -> int:
    return calculate_tree_depth(self.root)

  def __hash__(self) -> int:
    return hash(self.root)

  def __eq__(self, other) -> bool:
    if not isinstance(other, Expression):
      return False
    return self.root == other.root

  def __repr__(self) -> str:
    return f"Expression({self.infix!r}, postfix={self.postfix!r})"


@dataclass
class ExpressionReport:
  """Everything the results log shows for one processed expression"""
  infix: str
  postfix: str
  tree: str
  result: float

  def format(self) -> str:
    return (f"Infix Expression: {self.infix}\n"
            f"Postfix Expression: {self.postfix}\n\n"
            f"Expression Tree Structure:\n{self.tree}\n\n"
            f"Result: {self.result}")


def process_expression(infix: str, config: Optional[ParserConfig] = None) -> ExpressionReport:
  """Convert, build, render and evaluate in one call."""
  expression = Expression.from_infix(infix, config)
  return ExpressionReport(
    infix=expression.infix,
    postfix=expression.postfix,
    tree=expression.render(),
    result=expression.evaluate()
  )
