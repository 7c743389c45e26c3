# Python

"""Expression Calculator Package

Evaluation, constant folding and plot sweeps over arithmetic expression trees.
"""

from .calculator import ExpressionCalculator, as_node
from .commands import to_double, simplify, plot, COMMANDS
from .config import CalculatorConfig
from .datastructures import ArrayDictionary, GrowableArray
from .environment import Environment
from .errors import (
  EvaluationError, UndefinedVariable, UnknownOperator, ArityMismatch, CyclicBinding,
  PlotRangeInvalid, PlotVariableAlreadyBound, PlotStepNonPositive, PlotVariableInvalid,
  PlotSweepUnbounded, NoSuchKey
)
from .evaluator import evaluate
from .expression_tree import (
  Node, NumberNode, VariableNode, OperationNode, NodeType, OpType,
  ExpressionSimplifier, ExpressionValidator
)
from .logging_system import LogLevel, configure_logging, get_logger, set_log_level
from .plotter import sweep, sweep_points
from .sinks import SamplingSink, RecordingSink, MatplotlibSink, RenderedPlot

__version__ = "0.1.0"
__all__ = [
  "ExpressionCalculator", "as_node",
  "to_double", "simplify", "plot", "COMMANDS",
  "CalculatorConfig",
  "ArrayDictionary", "GrowableArray",
  "Environment",
  "EvaluationError", "UndefinedVariable", "UnknownOperator", "ArityMismatch", "CyclicBinding",
  "PlotRangeInvalid", "PlotVariableAlreadyBound", "PlotStepNonPositive", "PlotVariableInvalid",
  "PlotSweepUnbounded", "NoSuchKey",
  "evaluate",
  "Node", "NumberNode", "VariableNode", "OperationNode", "NodeType", "OpType",
  "ExpressionSimplifier", "ExpressionValidator",
  "LogLevel", "configure_logging", "get_logger", "set_log_level",
  "sweep", "sweep_points",
  "SamplingSink", "RecordingSink", "MatplotlibSink", "RenderedPlot"
]
