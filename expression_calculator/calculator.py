"""
Calculator facade: owns an environment, a configuration and the logger, and routes
command nodes to their implementation.
"""

from typing import List, Optional, Union

from .commands import COMMANDS
from .config import CalculatorConfig
from .datastructures import ArrayDictionary
from .environment import Environment
from .errors import EvaluationError, UnknownOperator
from .expression_tree import Node, NumberNode, VariableNode, OperationNode, OpType
from .expression_tree.utils import get_free_variables, latex_representation
from .logging_system import get_logger, set_log_level
from .sinks import SamplingSink

NodeLike = Union[Node, float, int, str]


def as_node(value: NodeLike) -> Node:
    """Numbers become Number nodes and strings Variable nodes; nodes pass through"""
    if isinstance(value, Node):
        return value
    if isinstance(value, str):
        return VariableNode(value)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return NumberNode(value)
    raise TypeError(f"Cannot build a tree node from {type(value).__name__}")


class ExpressionCalculator:
    """Evaluates, simplifies and plots expression trees against shared bindings"""

    def __init__(self,
                 variables: Optional[ArrayDictionary] = None,
                 sink: Optional[SamplingSink] = None,
                 config: Optional[CalculatorConfig] = None,
                 **config_overrides):
        config = config or CalculatorConfig()
        self.config = config.with_overrides(**config_overrides) if config_overrides else config
        self.env = Environment(variables, sink)
        if self.config.log_level is not None:
            set_log_level(self.config.log_level)
        self.logger = get_logger()

    @property
    def variables(self) -> ArrayDictionary:
        return self.env.variables

    def define(self, name: str, value: NodeLike) -> Node:
        node = as_node(value)
        self.env.bind(name, node)
        self.logger.info(f"{name} := {node.to_string()}")
        return node

    def undefine(self, name: str) -> Node:
        return self.env.unbind(name)

    def execute(self, node: OperationNode) -> Node:
        """Run a ``toDouble``, ``simplify`` or ``plot`` node"""
        if not isinstance(node, OperationNode) or node.operator not in COMMANDS:
            raise UnknownOperator(node.name if isinstance(node, OperationNode) else node.to_string())

        command = COMMANDS[node.operator]
        try:
            result = command(self.env, node, config=self.config, logger=self.logger)
        except EvaluationError as e:
            self.logger.error(f"{node.name} failed: {e}")
            raise
        self.logger.info(f"{node.to_string()} -> {result.to_string()}")
        return result

    def to_double(self, expression: NodeLike) -> float:
        return self.execute(OperationNode(OpType.TO_DOUBLE, as_node(expression))).numeric_value

    def simplify(self, expression: NodeLike) -> Node:
        return self.execute(OperationNode(OpType.SIMPLIFY, as_node(expression)))

    def plot(self, expression: NodeLike, variable: Union[str, VariableNode],
             var_min: NodeLike, var_max: NodeLike, step: NodeLike) -> Node:
        return self.execute(OperationNode(OpType.PLOT, as_node(expression), as_node(variable),
                                          as_node(var_min), as_node(var_max), as_node(step)))

    def undefined_variables(self, node: Node) -> List[str]:
        """Names the tree would need that have no binding yet"""
        return [name for name in get_free_variables(node) if not self.env.is_bound(name)]

    def latex(self, node: Node, substitute: bool = False) -> str:
        """LaTeX for the tree; with ``substitute`` bound variables are replaced by their trees"""
        return latex_representation(node, self.variables if substitute else None)
