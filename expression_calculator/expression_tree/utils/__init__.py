"""Utilities for expression trees."""

from .simplifier import ExpressionSimplifier
from .sympy_utils import to_sympy_expression, latex_representation
from .validator import ExpressionValidator
from .tree_utils import get_variables, get_free_variables

__all__ = [
    'ExpressionSimplifier', 'to_sympy_expression', 'latex_representation',
    'ExpressionValidator', 'get_variables', 'get_free_variables'
]
