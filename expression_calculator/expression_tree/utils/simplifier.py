from typing import Mapping

from ..core.node import Node, NumberNode, VariableNode, OperationNode
from ..core.operators import FOLDABLE_OPS, apply_operator


class ExpressionSimplifier:
  """Substitutes bound variables and folds constant ``+``, ``-`` and ``*`` operations.

  ``/``, ``^``, ``negate``, ``sin`` and ``cos`` are never folded, even when every
  operand is a number; they keep their symbolic form. Trees are rebuilt bottom-up,
  input nodes are never modified.
  """

  @staticmethod
  def simplify_expression(variables: Mapping[str, Node], node: Node,
                          copy_on_substitute: bool = False) -> Node:
    if isinstance(node, NumberNode):
      return node

    if isinstance(node, VariableNode):
      if node.name in variables:
        bound = variables.get(node.name)
        return bound.copy() if copy_on_substitute else bound
      return node

    if isinstance(node, OperationNode):
      return ExpressionSimplifier._simplify_operation(variables, node, copy_on_substitute)

    raise TypeError(f"Cannot simplify {type(node).__name__}")

  @staticmethod
  def _simplify_operation(variables, node: OperationNode, copy_on_substitute: bool) -> Node:
    children = [
      ExpressionSimplifier.simplify_expression(variables, child, copy_on_substitute)
      for child in node.children
    ]

    if node.operator in FOLDABLE_OPS and all(child.is_number for child in children):
      return NumberNode(apply_operator(node.operator, [child.numeric_value for child in children]))

    return node.with_children(children)
