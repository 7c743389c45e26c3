from typing import Mapping, Tuple

from .errors import CyclicBinding, UndefinedVariable, UnknownOperator
from .expression_tree import Node, NumberNode, VariableNode, OperationNode, apply_operator


def evaluate(variables: Mapping[str, Node], node: Node, resolving: Tuple[str, ...] = ()) -> float:
    """
    Reduce a tree to a float.

    Variables are looked up in ``variables`` and their bound trees evaluated in turn, so
    chains such as ``a -> b -> 3`` resolve. ``resolving`` holds the names whose bound
    trees are being evaluated on the current path; meeting one of them again is a cycle.

    Raises:
        UndefinedVariable: a variable has no binding
        CyclicBinding: a variable's binding refers back to itself
        UnknownOperator: a command such as ``plot`` appears inside the tree
    """
    if isinstance(node, NumberNode):
        return node.value

    if isinstance(node, VariableNode):
        name = node.name
        if name not in variables:
            raise UndefinedVariable(name)
        if name in resolving:
            raise CyclicBinding(resolving[resolving.index(name):] + (name,))
        return evaluate(variables, variables.get(name), resolving + (name,))

    if isinstance(node, OperationNode):
        if not node.operator.is_arithmetic:
            raise UnknownOperator(node.operator.symbol)
        operands = [evaluate(variables, child, resolving) for child in node.children]
        return apply_operator(node.operator, operands)

    raise TypeError(f"Cannot evaluate {type(node).__name__}")

