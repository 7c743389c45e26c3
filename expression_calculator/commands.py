"""
Entry points for the three calculator commands.

Each takes the environment and the command's own node: ``to_double`` and ``simplify``
work on the node's single operand, ``plot`` on the five operands of a ``plot`` node.
"""

from typing import Callable, Dict

from .config import CalculatorConfig
from .environment import Environment
from .evaluator import evaluate
from .expression_tree import Node, NumberNode, OperationNode, OpType
from .expression_tree.utils import ExpressionSimplifier
from .logging_system import CalculatorLogger
from .plotter import sweep

PLOT_TITLE = ""
PLOT_X_LABEL = "x"
PLOT_Y_LABEL = "y"


def to_double(env: Environment, node: OperationNode, config: CalculatorConfig = None,
              logger: CalculatorLogger = None) -> NumberNode:
    return NumberNode(evaluate(env.variables, node.children[0]))


def simplify(env: Environment, node: OperationNode, config: CalculatorConfig = None,
             logger: CalculatorLogger = None) -> Node:
    copy_on_substitute = config.copy_on_substitute if config is not None else False
    return ExpressionSimplifier.simplify_expression(env.variables, node.children[0],
                                                    copy_on_substitute)


def plot(env: Environment, node: OperationNode, config: CalculatorConfig = None,
         logger: CalculatorLogger = None) -> Node:
    """Sweep, hand the samples to the sink once, and return the unevaluated expression"""
    config = config or CalculatorConfig()
    xs, ys = sweep(env, node, sweep_mode=config.sweep_mode,
                   max_samples=config.max_plot_samples, logger=logger)
    env.sink.render(PLOT_TITLE, PLOT_X_LABEL, PLOT_Y_LABEL, xs, ys)
    return node.children[0]


COMMANDS: Dict[OpType, Callable[..., Node]] = {
    OpType.TO_DOUBLE: to_double,
    OpType.SIMPLIFY: simplify,
    OpType.PLOT: plot,
}
