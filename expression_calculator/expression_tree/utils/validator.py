from ..core.node import OperationNode
from ..core.operators import OpType
from ...errors import PlotVariableInvalid, UnknownOperator


class ExpressionValidator:

  @staticmethod
  def check_plot_node(node: OperationNode):
    """A plot node must name its swept variable with a Variable node"""
    if node.operator != OpType.PLOT:
      raise UnknownOperator(node.operator.symbol)
    variable = node.children[1]
    if not variable.is_variable:
      raise PlotVariableInvalid(variable.to_string())
