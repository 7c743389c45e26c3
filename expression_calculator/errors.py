"""
Error taxonomy for the expression calculator.

Every failure aborts the top-level call that raised it; nothing is retried and no
partial result is returned.
"""

from typing import Optional


class EvaluationError(Exception):
    """Base class for everything the engine raises while evaluating a tree"""


class UndefinedVariable(EvaluationError):
    def __init__(self, name: str):
        super().__init__(f"Undefined variable: {name}")
        self.name = name


class UnknownOperator(EvaluationError):
    def __init__(self, name: str):
        super().__init__(f"Unknown operation: {name}")
        self.name = name


class ArityMismatch(EvaluationError):
    def __init__(self, name: str, expected: int, actual: int):
        super().__init__(f"Operator '{name}' takes {expected} operand(s), got {actual}")
        self.name = name
        self.expected = expected
        self.actual = actual


class CyclicBinding(EvaluationError):
    def __init__(self, chain):
        self.chain = tuple(chain)
        super().__init__(f"Cyclic variable binding: {' -> '.join(self.chain)}")


class PlotRangeInvalid(EvaluationError):
    def __init__(self, var_min: float, var_max: float):
        super().__init__(f"Minimum {var_min} is greater than maximum {var_max}")
        self.var_min = var_min
        self.var_max = var_max


class PlotVariableAlreadyBound(EvaluationError):
    def __init__(self, name: str):
        super().__init__(f"Variable already defined: {name}")
        self.name = name


class PlotStepNonPositive(EvaluationError):
    def __init__(self, step: float):
        super().__init__(f"Increment is zero or negative: {step}")
        self.step = step


class PlotVariableInvalid(EvaluationError):
    def __init__(self, node_repr: str):
        super().__init__(f"Plot variable must be a variable name, got {node_repr}")
        self.node_repr = node_repr


class PlotSweepUnbounded(EvaluationError):
    def __init__(self, reason: str, n_samples: Optional[int] = None):
        super().__init__(reason)
        self.n_samples = n_samples


class NoSuchKey(KeyError):
    """Raised by the bindings container on get/remove of an absent key"""

    def __init__(self, key):
        super().__init__(key)
        self.key = key
