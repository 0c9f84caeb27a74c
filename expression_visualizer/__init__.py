"""Expression Visualizer Package

Infix expressions to binary expression trees, with evaluation, text
rendering and a stepwise postorder evaluation trace.
"""

from .exceptions import (
  ExpressionError, MalformedExpressionError, NumericParseError, ExpressionSyntaxError
)
from .config import ParserConfig, AnimationConfig, EXAMPLE_EXPRESSIONS
from .expression_tree import (
  Expression, ExpressionReport, process_expression,
  Node, OperandNode, OperatorNode,
  tokenize, infix_to_postfix, construct_tree,
  evaluate_tree, iter_events, trace_evaluation, EvaluationTrace,
  VisitEvent, ResolvedEvent, ComputedEvent, format_events,
  render_tree, SymPyBridge
)
from .animation import StepAnimator, stream_events
from .logging_system import LogLevel, configure_logging, get_logger

__version__ = "0.1.0"
__all__ = [
  "ExpressionError", "MalformedExpressionError", "NumericParseError", "ExpressionSyntaxError",
  "ParserConfig", "AnimationConfig", "EXAMPLE_EXPRESSIONS",
  "Expression", "ExpressionReport", "process_expression",
  "Node", "OperandNode", "OperatorNode",
  "tokenize", "infix_to_postfix", "construct_tree",
  "evaluate_tree", "iter_events", "trace_evaluation", "EvaluationTrace",
  "VisitEvent", "ResolvedEvent", "ComputedEvent", "format_events",
  "render_tree", "SymPyBridge",
  "StepAnimator", "stream_events",
  "LogLevel", "configure_logging", "get_logger"
]
