from dataclasses import dataclass, replace
from typing import Optional

from .logging_system import LogLevel

SWEEP_MODES = ('count', 'accumulate')


@dataclass(frozen=True)
class CalculatorConfig:
    """Tunables for the calculator.

    sweep_mode: ``'count'`` samples ``min + k * step`` for a precomputed number of
        steps; ``'accumulate'`` adds ``step`` to a running float and inherits its
        rounding drift at the upper boundary.
    max_plot_samples: a sweep needing more samples than this fails instead of running.
    copy_on_substitute: simplify copies bound nodes instead of sharing them.
    log_level: level for the process-wide logger; None leaves it as it is. The logger
        is shared, so setting it here affects every calculator in the process.
    """
    sweep_mode: str = 'count'
    max_plot_samples: int = 1_000_000
    copy_on_substitute: bool = False
    log_level: Optional[LogLevel] = None

    def __post_init__(self):
        if self.sweep_mode not in SWEEP_MODES:
            raise ValueError(f"Invalid sweep_mode '{self.sweep_mode}'. Choose from {SWEEP_MODES}.")
        if self.max_plot_samples < 1:
            raise ValueError("max_plot_samples must be a positive integer.")
        if self.log_level is not None and not isinstance(self.log_level, LogLevel):
            raise ValueError(f"log_level must be a LogLevel, got {self.log_level!r}")

    def with_overrides(self, **overrides) -> 'CalculatorConfig':
        return replace(self, **overrides)
