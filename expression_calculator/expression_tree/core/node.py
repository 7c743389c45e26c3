import math
import sympy as sp
from abc import ABC, abstractmethod
from typing import Optional, Tuple

from .operators import NodeType, OpType, BINARY_OPS, resolve_operator, check_arity
from ...errors import UnknownOperator

SYMPY_BINARY = {
  OpType.ADD: lambda a, b: sp.Add(a, b),
  OpType.SUB: lambda a, b: sp.Add(a, sp.Mul(-1, b)),
  OpType.MUL: lambda a, b: sp.Mul(a, b),
  OpType.DIV: lambda a, b: sp.Mul(a, sp.Pow(b, -1)),
  OpType.POW: lambda a, b: sp.Pow(a, b),
}

SYMPY_UNARY = {
  OpType.NEGATE: lambda a: -a,
  OpType.SIN: sp.sin,
  OpType.COS: sp.cos,
}


def format_number(value: float) -> str:
  if math.isfinite(value) and value.is_integer():
    return str(int(value))
  return repr(value)


class Node(ABC):
  """Base node class with cached size and structural hash.

  Nodes are immutable once built, so a node may be shared between several trees and
  the environment's bindings without copying.
  """

  __slots__ = ('_hash_cache', '_size_cache')

  node_type: NodeType

  def __init__(self):
    self._hash_cache: Optional[int] = None
    self._size_cache: Optional[int] = None

  @property
  def is_number(self) -> bool:
    return self.node_type == NodeType.NUMBER

  @property
  def is_variable(self) -> bool:
    return self.node_type == NodeType.VARIABLE

  @property
  def is_operation(self) -> bool:
    return self.node_type == NodeType.OPERATION

  @property
  def numeric_value(self) -> float:
    raise TypeError(f"{type(self).__name__} has no numeric value")

  @property
  def name(self) -> str:
    raise TypeError(f"{type(self).__name__} has no name")

  @property
  def children(self) -> Tuple['Node', ...]:
    raise TypeError(f"{type(self).__name__} has no children")

  @abstractmethod
  def to_string(self) -> str:
    pass

  @abstractmethod
  def copy(self) -> 'Node':
    pass

  @abstractmethod
  def to_sympy(self) -> sp.Expr:
    pass

  def size(self) -> int:
    """Node count"""
    if self._size_cache is None:
      self._size_cache = self._compute_size()
    return self._size_cache

  @abstractmethod
  def _compute_size(self) -> int:
    pass

  @abstractmethod
  def _key(self) -> tuple:
    pass

  def __hash__(self) -> int:
    if self._hash_cache is None:
      self._hash_cache = hash((self.node_type, self._key()))
    return self._hash_cache

  def __eq__(self, other) -> bool:
    if self is other:
      return True
    if not isinstance(other, Node) or other.node_type != self.node_type:
      return False
    return self._key() == other._key()

  def __repr__(self) -> str:
    return f"{type(self).__name__}({self.to_string()})"


class NumberNode(Node):
  __slots__ = ('value',)

  node_type = NodeType.NUMBER

  def __init__(self, value: float):
    super().__init__()
    self.value = float(value)

  @property
  def numeric_value(self) -> float:
    return self.value

  def to_string(self) -> str:
    return format_number(self.value)

  def copy(self) -> 'NumberNode':
    return NumberNode(self.value)

  def to_sympy(self):
    if math.isfinite(self.value) and self.value.is_integer():
      return sp.Integer(int(self.value))
    return sp.Float(self.value)

  def _compute_size(self) -> int:
    return 1

  def _key(self) -> tuple:
    return (self.value,)


class VariableNode(Node):
  __slots__ = ('_name',)

  node_type = NodeType.VARIABLE

  def __init__(self, name: str):
    super().__init__()
    self._name = name

  @property
  def name(self) -> str:
    return self._name

  def to_string(self) -> str:
    return self._name

  def copy(self) -> 'VariableNode':
    return VariableNode(self._name)

  def to_sympy(self):
    return sp.Symbol(self._name)

  def _compute_size(self) -> int:
    return 1

  def _key(self) -> tuple:
    return (self._name,)


class OperationNode(Node):
  """An operator applied to exactly ``operator.arity`` children.

  The operator is resolved and the child count checked here, once, so evaluation
  never meets an unknown operator name or a short operand list.
  """

  __slots__ = ('operator', '_children')

  node_type = NodeType.OPERATION

  def __init__(self, operator, *children: Node):
    super().__init__()
    self.operator: OpType = resolve_operator(operator)
    check_arity(self.operator, len(children))
    self._children: Tuple[Node, ...] = tuple(children)

  @property
  def name(self) -> str:
    return self.operator.symbol

  @property
  def children(self) -> Tuple[Node, ...]:
    return self._children

  def with_children(self, children) -> 'OperationNode':
    """Same operator over new children; returns self when every child is unchanged"""
    children = tuple(children)
    if len(children) == len(self._children) and all(
        new is old for new, old in zip(children, self._children)):
      return self
    return OperationNode(self.operator, *children)

  def to_string(self) -> str:
    if self.operator in BINARY_OPS:
      left, right = self._children
      return f"({left.to_string()} {self.operator.symbol} {right.to_string()})"
    operands = ", ".join(child.to_string() for child in self._children)
    return f"{self.operator.symbol}({operands})"

  def copy(self) -> 'OperationNode':
    return OperationNode(self.operator, *(child.copy() for child in self._children))

  def to_sympy(self):
    operands = [child.to_sympy() for child in self._children]
    if self.operator in SYMPY_BINARY:
      return SYMPY_BINARY[self.operator](*operands)
    if self.operator in SYMPY_UNARY:
      return SYMPY_UNARY[self.operator](*operands)
    raise UnknownOperator(self.operator.symbol)

  def _compute_size(self) -> int:
    return 1 + sum(child.size() for child in self._children)

  def _key(self) -> tuple:
    return (self.operator, self._children)
