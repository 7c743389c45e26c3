"""
Tree Utility Functions

Variable collection used by the calculator facade.
"""

from typing import List

from ..core.node import Node, VariableNode
from ..core.operators import OpType


def _pre_order(node: Node) -> List[Node]:
    """Pre-order traversal with an explicit stack"""
    stack = [node]
    all_nodes = []

    while stack:
        current_node = stack.pop()
        all_nodes.append(current_node)
        if current_node.is_operation:
            stack.extend(reversed(current_node.children))

    return all_nodes


def get_variables(node: Node) -> List[str]:
    """Names referenced by Variable nodes, in first-seen pre-order, without duplicates"""
    seen = {}
    for current_node in _pre_order(node):
        if isinstance(current_node, VariableNode):
            seen.setdefault(current_node.name, None)
    return list(seen)


def get_free_variables(node: Node) -> List[str]:
    """
    Variable names the tree reads from the environment.

    The swept variable of a ``plot`` node is bound by the sweep itself, so it is free
    only where it appears in the bounds or the step, never through the plotted
    expression or the variable slot.
    """
    if node.is_operation and node.operator == OpType.PLOT:
        expression, variable, var_min, var_max, step = node.children
        swept = variable.name if variable.is_variable else None
        names = [name for name in get_variables(expression) if name != swept]
        for bound in (var_min, var_max, step):
            names.extend(get_free_variables(bound))
        return list(dict.fromkeys(names))

    if node.is_operation:
        names = []
        for child in node.children:
            names.extend(get_free_variables(child))
        return list(dict.fromkeys(names))

    return get_variables(node)
