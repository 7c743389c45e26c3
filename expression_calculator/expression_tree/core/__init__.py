"""Core expression tree components."""

from .node import Node, NumberNode, VariableNode, OperationNode
from .operators import (
    NodeType, OpType, BINARY_OP_MAP, UNARY_OP_MAP, COMMAND_OP_MAP, OPERATOR_MAP,
    FOLDABLE_OPS, resolve_operator, check_arity,
    evaluate_binary_op, evaluate_unary_op, apply_operator
)

__all__ = [
    'Node', 'NumberNode', 'VariableNode', 'OperationNode',
    'NodeType', 'OpType', 'BINARY_OP_MAP', 'UNARY_OP_MAP', 'COMMAND_OP_MAP', 'OPERATOR_MAP',
    'FOLDABLE_OPS', 'resolve_operator', 'check_arity',
    'evaluate_binary_op', 'evaluate_unary_op', 'apply_operator'
]
