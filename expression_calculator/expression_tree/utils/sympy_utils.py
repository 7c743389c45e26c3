import sympy as sp
from typing import Mapping, Optional

from ..core.node import Node
from ...errors import UnknownOperator


def to_sympy_expression(node: Node, variables: Optional[Mapping[str, Node]] = None) -> sp.Expr:
  """Convert a tree to SymPy, optionally substituting bound variables recursively"""
  expr = node.to_sympy()
  if not variables:
    return expr

  # Substitute until no bound symbol remains; bounded by the number of bindings so a
  # cyclic chain stops instead of looping
  for _ in range(len(variables) + 1):
    bound_symbols = {sym: variables[sym.name].to_sympy()
                     for sym in expr.free_symbols if sym.name in variables}
    if not bound_symbols:
      break
    expr = expr.xreplace(bound_symbols)
  return expr


def latex_representation(node: Node, variables: Optional[Mapping[str, Node]] = None) -> str:
  """LaTeX rendering of the tree, falling back to its infix string for commands"""
  try:
    return sp.latex(to_sympy_expression(node, variables))
  except UnknownOperator:
    return node.to_string()
