import pytest

from expression_calculator import (
    ArrayDictionary, CalculatorConfig, ExpressionSimplifier, NumberNode, OperationNode,
    VariableNode, simplify
)


def op(name, *children):
    return OperationNode(name, *children)


def run(node, variables=None, **kwargs):
    return ExpressionSimplifier.simplify_expression(
        variables if variables is not None else ArrayDictionary(), node, **kwargs)


def test_addition_of_numbers_folds():
    assert run(op("+", NumberNode(2), NumberNode(3))) == NumberNode(5)


def test_subtraction_and_multiplication_fold():
    assert run(op("-", NumberNode(2), NumberNode(3))) == NumberNode(-1)
    assert run(op("*", NumberNode(2), NumberNode(3))) == NumberNode(6)


def test_nested_folding_is_bottom_up():
    expr = op("*", op("+", NumberNode(1), NumberNode(2)), op("-", NumberNode(5), NumberNode(1)))
    assert run(expr) == NumberNode(12)


@pytest.mark.parametrize("expr", [
    op("/", NumberNode(4), NumberNode(2)),
    op("^", NumberNode(2), NumberNode(3)),
    op("negate", NumberNode(3)),
    op("sin", NumberNode(0)),
    op("cos", NumberNode(0)),
])
def test_non_foldable_operators_stay_symbolic(expr):
    result = run(expr)
    assert result.is_operation
    assert result.operator == expr.operator
    assert result == expr


def test_division_keeps_folded_operands():
    expr = op("/", op("+", NumberNode(1), NumberNode(1)), NumberNode(4))
    result = run(expr)
    assert result.name == "/"
    assert result.children == (NumberNode(2), NumberNode(4))


def test_bound_variable_is_substituted_then_folded():
    variables = ArrayDictionary(x=NumberNode(4))
    assert run(op("+", VariableNode("x"), NumberNode(1)), variables) == NumberNode(5)


def test_unbound_variable_is_kept():
    expr = op("+", VariableNode("y"), op("+", NumberNode(1), NumberNode(2)))
    result = run(expr)
    assert result == op("+", VariableNode("y"), NumberNode(3))


def test_input_tree_is_not_modified():
    inner = op("+", NumberNode(1), NumberNode(2))
    expr = op("*", VariableNode("y"), inner)
    run(expr)
    assert expr.children[1] is inner
    assert inner.children == (NumberNode(1), NumberNode(2))


def test_untouched_operation_is_returned_as_is():
    expr = op("sin", VariableNode("t"))
    assert run(expr) is expr


def test_bound_node_is_shared_by_default():
    bound = op("sin", VariableNode("t"))
    variables = ArrayDictionary(x=bound)
    assert run(VariableNode("x"), variables) is bound


def test_bound_node_is_copied_when_requested():
    bound = op("sin", VariableNode("t"))
    variables = ArrayDictionary(x=bound)
    result = run(VariableNode("x"), variables, copy_on_substitute=True)
    assert result == bound
    assert result is not bound


def test_bound_node_is_not_simplified_further():
    bound = op("+", NumberNode(1), NumberNode(1))
    variables = ArrayDictionary(x=bound)
    assert run(VariableNode("x"), variables) is bound


def test_simplify_entry_point_uses_first_operand(env):
    env.bind("a", NumberNode(3))
    result = simplify(env, op("simplify", op("*", VariableNode("a"), VariableNode("b"))))
    assert result == op("*", NumberNode(3), VariableNode("b"))


def test_simplify_entry_point_honours_copy_config(env):
    bound = op("cos", VariableNode("t"))
    env.bind("a", bound)
    config = CalculatorConfig(copy_on_substitute=True)
    result = simplify(env, op("simplify", VariableNode("a")), config=config)
    assert result == bound and result is not bound
