import numpy as np
import numba
from enum import IntEnum
from typing import Dict, Sequence

from ...errors import ArityMismatch, UnknownOperator


class NodeType(IntEnum):
  NUMBER = 0
  VARIABLE = 1
  OPERATION = 2


class OpType(IntEnum):
  # Binary ops
  ADD = 0
  SUB = 1
  MUL = 2
  DIV = 3
  POW = 4
  # Unary ops
  NEGATE = 5
  SIN = 6
  COS = 7
  # Commands, never evaluated numerically
  PLOT = 8
  TO_DOUBLE = 9
  SIMPLIFY = 10

  @property
  def symbol(self) -> str:
    return OP_SYMBOLS[self]

  @property
  def arity(self) -> int:
    return OP_ARITY[self]

  @property
  def is_arithmetic(self) -> bool:
    return self in BINARY_OPS or self in UNARY_OPS


# Mapping dictionaries
BINARY_OP_MAP = {'+': OpType.ADD, '-': OpType.SUB, '*': OpType.MUL, '/': OpType.DIV, '^': OpType.POW}
UNARY_OP_MAP = {'negate': OpType.NEGATE, 'sin': OpType.SIN, 'cos': OpType.COS}
COMMAND_OP_MAP = {'plot': OpType.PLOT, 'toDouble': OpType.TO_DOUBLE, 'simplify': OpType.SIMPLIFY}

OPERATOR_MAP: Dict[str, OpType] = {**BINARY_OP_MAP, **UNARY_OP_MAP, **COMMAND_OP_MAP}
OP_SYMBOLS: Dict[OpType, str] = {op: symbol for symbol, op in OPERATOR_MAP.items()}

BINARY_OPS = frozenset(BINARY_OP_MAP.values())
UNARY_OPS = frozenset(UNARY_OP_MAP.values())

OP_ARITY: Dict[OpType, int] = {
  **{op: 2 for op in BINARY_OPS},
  **{op: 1 for op in UNARY_OPS},
  OpType.PLOT: 5,
  OpType.TO_DOUBLE: 1,
  OpType.SIMPLIFY: 1,
}

# Only these ever constant-fold; / ^ negate sin cos stay symbolic even on numbers
FOLDABLE_OPS = frozenset({OpType.ADD, OpType.SUB, OpType.MUL})


def resolve_operator(name) -> OpType:
  """Map an operator symbol (or an OpType) to its OpType, failing UnknownOperator"""
  if isinstance(name, OpType):
    return name
  try:
    return OPERATOR_MAP[name]
  except (KeyError, TypeError):
    raise UnknownOperator(str(name)) from None


def check_arity(op_type: OpType, n_children: int):
  if n_children != op_type.arity:
    raise ArityMismatch(op_type.symbol, op_type.arity, n_children)


@numba.njit(cache=True, error_model='numpy')
def evaluate_binary_op(left_val, right_val, op_type):
  if op_type == OpType.ADD:
    return left_val + right_val
  elif op_type == OpType.SUB:
    return left_val - right_val
  elif op_type == OpType.MUL:
    return left_val * right_val
  elif op_type == OpType.DIV:
    return left_val / right_val
  elif op_type == OpType.POW:
    return np.power(left_val, right_val)
  return np.nan


@numba.njit(cache=True, error_model='numpy')
def evaluate_unary_op(operand_val, op_type):
  if op_type == OpType.NEGATE:
    return -operand_val
  elif op_type == OpType.SIN:
    return np.sin(operand_val)
  elif op_type == OpType.COS:
    return np.cos(operand_val)
  return np.nan


def apply_operator(op_type: OpType, operands: Sequence[float]) -> float:
  """Combine already-evaluated operands with an arithmetic operator.

  Follows IEEE double semantics: division by zero gives inf or nan instead of raising.
  Commands such as ``plot`` have no numeric value and fail UnknownOperator.
  """
  if op_type in BINARY_OPS:
    return float(evaluate_binary_op(float(operands[0]), float(operands[1]), op_type))
  if op_type in UNARY_OPS:
    return float(evaluate_unary_op(float(operands[0]), op_type))
  raise UnknownOperator(op_type.symbol)
