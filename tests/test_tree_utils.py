import pytest

from expression_calculator import (
    ExpressionValidator, NumberNode, OperationNode, PlotVariableInvalid, UnknownOperator,
    VariableNode
)
from expression_calculator.expression_tree.utils import get_free_variables, get_variables


def op(name, *children):
    return OperationNode(name, *children)


def test_variables_in_first_seen_order():
    # (x + 2) * sin(y + x)
    tree = op("*", op("+", VariableNode("x"), NumberNode(2)),
              op("sin", op("+", VariableNode("y"), VariableNode("x"))))
    assert get_variables(tree) == ["x", "y"]
    assert get_variables(NumberNode(1)) == []


def test_free_variables_skip_swept_variable():
    node = op("plot", op("*", VariableNode("a"), VariableNode("t")), VariableNode("t"),
              NumberNode(0), VariableNode("t_max"), VariableNode("dt"))
    assert get_free_variables(node) == ["a", "t_max", "dt"]


def test_swept_variable_is_free_when_used_in_a_bound():
    node = op("plot", VariableNode("t"), VariableNode("t"),
              NumberNode(0), VariableNode("t"), NumberNode(1))
    assert get_free_variables(node) == ["t"]


def test_plot_node_check_accepts_variable_slot():
    node = op("plot", VariableNode("x"), VariableNode("x"), NumberNode(0), NumberNode(1), NumberNode(1))
    ExpressionValidator.check_plot_node(node)


def test_plot_node_check_rejects_non_variable_slot():
    node = op("plot", VariableNode("x"), NumberNode(3), NumberNode(0), NumberNode(1), NumberNode(1))
    with pytest.raises(PlotVariableInvalid):
        ExpressionValidator.check_plot_node(node)


def test_plot_node_check_rejects_other_operators():
    with pytest.raises(UnknownOperator):
        ExpressionValidator.check_plot_node(op("+", NumberNode(1), NumberNode(2)))
