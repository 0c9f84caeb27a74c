"""Expression Tree Module

Infix parsing, tree construction, evaluation and stepwise tracing.
"""

from .expression import Expression, ExpressionReport, process_expression
from .core.node import Node, OperandNode, OperatorNode
from .core.operators import (
    NodeType,
    OpType,
    BINARY_OP_MAP,
    OPERATORS,
    PRECEDENCE,
    evaluate_binary_op,
    evaluate_binary_op_fast
)
from .parser import Token, TokenKind, tokenize, infix_to_postfix
from .builder import construct_tree
from .events import VisitEvent, ResolvedEvent, ComputedEvent, TraversalEvent, format_events
from .traversal import postorder_fold, evaluate_tree, iter_events, trace_evaluation, EvaluationTrace
from .utils import SymPyBridge, render_tree, postorder_values, validate_tree_structure

__all__ = [
    "Expression", "ExpressionReport", "process_expression",
    "Node", "OperandNode", "OperatorNode",
    "NodeType", "OpType", "BINARY_OP_MAP", "OPERATORS", "PRECEDENCE",
    "evaluate_binary_op", "evaluate_binary_op_fast",
    "Token", "TokenKind", "tokenize", "infix_to_postfix",
    "construct_tree",
    "VisitEvent", "ResolvedEvent", "ComputedEvent", "TraversalEvent", "format_events",
    "postorder_fold", "evaluate_tree", "iter_events", "trace_evaluation", "EvaluationTrace",
    "SymPyBridge", "render_tree", "postorder_values", "validate_tree_structure"
]
