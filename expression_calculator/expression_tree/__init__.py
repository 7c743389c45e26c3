"""Expression Tree Module

Node types, operator table and tree utilities for the calculator.
"""

from .core.node import Node, NumberNode, VariableNode, OperationNode
from .core.operators import (
    NodeType,
    OpType,
    BINARY_OP_MAP,
    UNARY_OP_MAP,
    COMMAND_OP_MAP,
    OPERATOR_MAP,
    FOLDABLE_OPS,
    apply_operator,
    evaluate_binary_op,
    evaluate_unary_op
)
from .utils import ExpressionSimplifier, ExpressionValidator

__all__ = [
    "Node", "NumberNode", "VariableNode", "OperationNode",
    "NodeType", "OpType",
    "BINARY_OP_MAP", "UNARY_OP_MAP", "COMMAND_OP_MAP", "OPERATOR_MAP", "FOLDABLE_OPS",
    "apply_operator", "evaluate_binary_op", "evaluate_unary_op",
    "ExpressionSimplifier", "ExpressionValidator"
]
