import sys
import os
# Add the project root to Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from datetime import datetime

from expression_calculator import (
  ExpressionCalculator, LogLevel, MatplotlibSink, NumberNode, OperationNode, VariableNode,
  configure_logging
)


def quadratic():
  """a^2 + c*a + a"""
  a = VariableNode('a')
  return OperationNode('+',
                       OperationNode('+', OperationNode('^', a, NumberNode(2)),
                                     OperationNode('*', VariableNode('c'), a)),
                       a)


def main():
  configure_logging(LogLevel.DETAILED)

  timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
  output_dir = os.path.join("..", f"{timestamp}_plots")
  if not os.path.exists(output_dir):
    os.makedirs(output_dir)
  print(f"\nSaving plots to directory: {output_dir}")

  calc = ExpressionCalculator(sink=MatplotlibSink(os.path.join(output_dir, "plot_{index}.png")),
                              log_level=LogLevel.DETAILED)

  calc.define('c', 4)
  calc.define('step', 0.01)

  expr = quadratic()
  print(f"Expression: {expr.to_string()}")
  print(f"Simplified: {calc.simplify(expr).to_string()}")
  print(f"LaTeX:      {calc.latex(expr)}")

  calc.define('a', 2)
  print(f"Value at a=2: {calc.to_double(expr)}")
  calc.undefine('a')

  calc.plot(OperationNode('*', NumberNode(3), VariableNode('x')), 'x', 2, 5, 0.5)
  calc.plot(expr, 'a', -10, 10, VariableNode('step'))

  for path in calc.env.sink.saved_paths:
    print(f"Saved: {path}")


if __name__ == "__main__":
  main()
