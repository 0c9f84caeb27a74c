"""
Postorder evaluation and event emission.

Both the plain evaluator and the stepwise event emitter are built on one
postorder fold, so they cannot disagree about the value of a tree.
"""

from dataclasses import dataclass, field
from typing import Callable, Generator, Iterator, List, Optional, Tuple, TypeVar

from .core.node import Node, OperandNode
from .core.operators import evaluate_binary_op
from .events import TraversalEvent, VisitEvent, ResolvedEvent, ComputedEvent, format_events, INDENT

T = TypeVar('T')

EMPTY_TREE_VALUE = 0.0


def postorder_fold(node: Node,
                   on_operand: Callable[[Node], T],
                   on_operator: Callable[[Node, T, T], T],
                   depth: int = 0) -> Generator[TraversalEvent, None, T]:
  """Walk a tree depth-first, children before parent, folding values upward.

  Yields a VisitEvent on entry to every node, then a ResolvedEvent for a leaf
  or, once both children are done, a ComputedEvent for an operator. The
  folded value of ``node`` is the generator's return value.

  The walk keeps its own stack of pending nodes and finished values, so the
  depth of the tree is not limited by the interpreter's recursion limit.

  Args:
      node: subtree root (must not be None)
      on_operand: maps a leaf to its value
      on_operator: combines an operator node with its left and right values
      depth: number of ancestors above ``node``
  """
  values: List[T] = []
  # (node, depth, children_done)
  pending: List[Tuple[Node, int, bool]] = [(node, depth, False)]

  while pending:
    current, level, children_done = pending.pop()

    if children_done:
      right_value = values.pop()
      left_value = values.pop()
      result = on_operator(current, left_value, right_value)
      yield ComputedEvent(current, level, left_value, right_value, result)
      values.append(result)
      continue

    yield VisitEvent(current, level)

    if isinstance(current, OperandNode):
      value = on_operand(current)
      yield ResolvedEvent(current, level, value)
      values.append(value)
    else:
      pending.append((current, level, True))
      pending.append((current.right, level + 1, False))
      pending.append((current.left, level + 1, False))

  return values.pop()


def _resolve_operand(node: OperandNode) -> float:
  return node.numeric_value()


def _apply_operator(node: Node, left_value: float, right_value: float) -> float:
  return evaluate_binary_op(left_value, right_value, node.value)


def _float_fold(root: Node) -> Generator[TraversalEvent, None, float]:
  return postorder_fold(root, _resolve_operand, _apply_operator)


def evaluate_tree(root: Optional[Node]) -> float:
  """Evaluate a tree; an empty tree evaluates to 0.0.

  Raises:
      NumericParseError: a leaf is not a number
  """
  if root is None:
    return EMPTY_TREE_VALUE

  walk = _float_fold(root)
  while True:
    try:
      next(walk)
    except StopIteration as stop:
      return stop.value


def iter_events(root: Optional[Node]) -> Iterator[TraversalEvent]:
  """Lazily yield the postorder event sequence of a tree.

  The consumer may stop iterating at any point; nothing already yielded is
  affected. An empty tree yields nothing.
  """
  if root is None:
    return
  yield from _float_fold(root)


@dataclass
class EvaluationTrace:
  """Complete event sequence of one evaluation plus its final value."""
  events: List[TraversalEvent] = field(default_factory=list)
  result: float = EMPTY_TREE_VALUE

  def __len__(self) -> int:
    return len(self.events)

  def __iter__(self):
    return iter(self.events)

  def format(self, indent: str = INDENT) -> str:
    return format_events(self.events, indent)


def trace_evaluation(root: Optional[Node]) -> EvaluationTrace:
  """Run the stepwise evaluation to completion and collect every event."""
  trace = EvaluationTrace()
  if root is None:
    return trace

  walk = _float_fold(root)
  while True:
    try:
      trace.events.append(next(walk))
    except StopIteration as stop:
      trace.result = stop.value
      return trace
