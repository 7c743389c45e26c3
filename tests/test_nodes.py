import pytest
import sympy as sp

from expression_calculator import (
    ArityMismatch, NumberNode, OperationNode, OpType, UnknownOperator, VariableNode
)


def test_node_predicates_and_accessors():
    number = NumberNode(2.5)
    variable = VariableNode("x")
    operation = OperationNode("+", number, variable)

    assert number.is_number and not number.is_variable and not number.is_operation
    assert variable.is_variable and variable.name == "x"
    assert operation.is_operation and operation.name == "+"
    assert operation.operator == OpType.ADD
    assert number.numeric_value == 2.5
    assert operation.children == (number, variable)


def test_accessors_invalid_for_wrong_shape():
    with pytest.raises(TypeError):
        VariableNode("x").numeric_value
    with pytest.raises(TypeError):
        NumberNode(1).name
    with pytest.raises(TypeError):
        NumberNode(1).children


def test_operator_arity_is_checked_at_construction():
    with pytest.raises(ArityMismatch) as excinfo:
        OperationNode("+", NumberNode(1))
    assert excinfo.value.expected == 2
    assert excinfo.value.actual == 1

    with pytest.raises(ArityMismatch):
        OperationNode("sin", NumberNode(1), NumberNode(2))
    with pytest.raises(ArityMismatch):
        OperationNode("plot", VariableNode("x"), VariableNode("x"))


def test_unknown_operator_rejected_at_construction():
    with pytest.raises(UnknownOperator) as excinfo:
        OperationNode("tan", NumberNode(1))
    assert excinfo.value.name == "tan"


def test_operator_table():
    assert OpType.POW.symbol == "^"
    assert OpType.NEGATE.arity == 1
    assert OpType.PLOT.arity == 5
    assert OpType.DIV.is_arithmetic
    assert not OpType.PLOT.is_arithmetic


def test_to_string():
    expr = OperationNode("*", NumberNode(3), OperationNode("sin", VariableNode("x")))
    assert expr.to_string() == "(3 * sin(x))"
    assert NumberNode(2.5).to_string() == "2.5"
    assert OperationNode("negate", NumberNode(1)).to_string() == "negate(1)"


def test_structural_equality_and_hash():
    a = OperationNode("+", NumberNode(1), VariableNode("x"))
    b = OperationNode("+", NumberNode(1.0), VariableNode("x"))
    c = OperationNode("-", NumberNode(1), VariableNode("x"))
    assert a == b
    assert hash(a) == hash(b)
    assert a != c
    assert NumberNode(1) != VariableNode("1")
    assert len({a, b, c}) == 2


def test_copy_is_deep_and_equal():
    original = OperationNode("+", NumberNode(1), OperationNode("cos", VariableNode("y")))
    clone = original.copy()
    assert clone == original
    assert clone is not original
    assert clone.children[1] is not original.children[1]


def test_size_counts_nodes():
    expr = OperationNode("+", NumberNode(1), OperationNode("cos", VariableNode("y")))
    assert expr.size() == 4


def test_with_children_returns_self_when_unchanged():
    left, right = NumberNode(1), VariableNode("x")
    expr = OperationNode("/", left, right)
    assert expr.with_children([left, right]) is expr
    rebuilt = expr.with_children([NumberNode(2), right])
    assert rebuilt is not expr
    assert rebuilt.children[0] == NumberNode(2)
    assert expr.children[0] is left


def test_to_sympy():
    x = sp.Symbol("x")
    expr = OperationNode("-", OperationNode("^", VariableNode("x"), NumberNode(2)),
                         OperationNode("negate", NumberNode(0.5)))
    assert expr.to_sympy() == x**2 + sp.Float(0.5)

    with pytest.raises(UnknownOperator):
        OperationNode("toDouble", NumberNode(1)).to_sympy()
