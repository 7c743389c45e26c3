import math
import sys
from typing import Iterator, Optional, Tuple

import numpy as np

from .datastructures import GrowableArray
from .environment import Environment
from .errors import (
    PlotRangeInvalid, PlotStepNonPositive, PlotSweepUnbounded, PlotVariableAlreadyBound
)
from .evaluator import evaluate
from .expression_tree import NumberNode, OperationNode
from .expression_tree.utils import ExpressionValidator
from .logging_system import CalculatorLogger, LogLevel, get_logger

# A grid point this many ulps away from the upper bound is taken to land on it
GRID_END_ULPS = 8


def _lands_on(x: float, var_min: float, var_max: float) -> bool:
    scale = max(abs(var_min), abs(var_max))
    return math.isclose(x, var_max, rel_tol=0.0,
                        abs_tol=GRID_END_ULPS * sys.float_info.epsilon * scale)


def count_steps(var_min: float, var_max: float, step: float) -> Tuple[int, bool]:
    """
    Number of whole steps from var_min that stay within var_max.

    Returns:
        (n_steps, ends_on_max): ends_on_max is True when grid point ``n_steps`` is
        var_max up to rounding, in which case var_max itself is sampled there
    """
    ratio = (var_max - var_min) / step
    if not math.isfinite(ratio):
        raise PlotSweepUnbounded(f"Step {step} is too small to cover [{var_min}, {var_max}]")
    n_steps = math.floor(ratio)
    if _lands_on(var_min + (n_steps + 1) * step, var_min, var_max):
        return n_steps + 1, True
    return n_steps, _lands_on(var_min + n_steps * step, var_min, var_max)


def sweep_points(var_min: float, var_max: float, step: float, sweep_mode: str = 'count',
                 max_samples: int = 1_000_000) -> Iterator[float]:
    """
    Yield the x values of a sweep over [var_min, var_max].

    'count' mode yields ``var_min + k * step`` for a step count fixed up front; the last
    grid point is replaced by ``var_max`` only when it lands on it up to rounding.
    'accumulate' mode adds ``step`` to a running float while it stays ``<= var_max``,
    so rounding drift decides whether the upper bound is reached.
    """
    n_steps, ends_on_max = count_steps(var_min, var_max, step)
    n_samples = n_steps + 1
    if n_samples > max_samples:
        raise PlotSweepUnbounded(
            f"Sweep needs {n_samples} samples, limit is {max_samples}", n_samples)

    if sweep_mode == 'count':
        for k in range(n_steps):
            yield var_min + k * step
        yield var_max if ends_on_max else var_min + n_steps * step
    elif sweep_mode == 'accumulate':
        x = var_min
        produced = 0
        while x <= var_max:
            yield x
            produced += 1
            if x + step == x:
                raise PlotSweepUnbounded(f"Step {step} does not advance past {x}")
            if produced > max_samples:
                raise PlotSweepUnbounded(
                    f"Sweep exceeded {max_samples} samples", produced)
            x += step
    else:
        raise ValueError(f"Invalid sweep_mode: {sweep_mode}")


def sweep(env: Environment, node: OperationNode, sweep_mode: str = 'count',
          max_samples: int = 1_000_000,
          logger: Optional[CalculatorLogger] = None) -> Tuple[np.ndarray, np.ndarray]:
    """
    Sample a ``plot`` node's expression across its variable's range.

    The bounds and the step are evaluated against the current bindings. The swept
    variable is bound to each x value only while the expression is evaluated at that
    point, so it is unbound again when this returns or raises.

    Returns:
        (xs, ys) as float64 arrays of equal length
    """
    logger = logger or get_logger()
    ExpressionValidator.check_plot_node(node)
    expression, variable, min_node, max_node, step_node = node.children
    name = variable.name
    variables = env.variables

    var_min = evaluate(variables, min_node)
    var_max = evaluate(variables, max_node)
    step = evaluate(variables, step_node)

    if var_min > var_max:
        raise PlotRangeInvalid(var_min, var_max)
    if env.is_bound(name):
        raise PlotVariableAlreadyBound(name)
    if step <= 0:
        raise PlotStepNonPositive(step)
    if not (math.isfinite(var_min) and math.isfinite(var_max) and math.isfinite(step)):
        raise PlotSweepUnbounded(f"Sweep bounds must be finite, got [{var_min}, {var_max}] step {step}")

    verbose = logger.is_enabled_for(LogLevel.VERBOSE)
    xs = GrowableArray()
    ys = GrowableArray()
    for x in sweep_points(var_min, var_max, step, sweep_mode, max_samples):
        with env.temporary_binding(name, NumberNode(x)):
            y = evaluate(variables, expression)
        xs.append(x)
        ys.append(y)
        if verbose:
            logger.debug(f"{name}={x:g} -> {y:g}")

    logger.sweep(name, var_min, var_max, step, len(xs))
    return xs.to_numpy(), ys.to_numpy()
