"""Core expression tree components."""

from .node import Node, OperandNode, OperatorNode
from .operators import (
    NodeType, OpType, BINARY_OP_MAP, OPERATORS, PRECEDENCE,
    is_operator, precedence, parse_operand,
    evaluate_binary_op, evaluate_binary_op_fast
)

__all__ = [
    'Node', 'OperandNode', 'OperatorNode',
    'NodeType', 'OpType', 'BINARY_OP_MAP', 'OPERATORS', 'PRECEDENCE',
    'is_operator', 'precedence', 'parse_operand',
    'evaluate_binary_op', 'evaluate_binary_op_fast'
]
