"""
Logging System for the Expression Calculator

A single process-wide logger with coarse verbosity levels, so library code can report
sweeps and command routing without each caller configuring ``logging`` handlers.
"""

import logging
import sys
from datetime import datetime
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """Verbosity levels for the calculator"""
    SILENT = 0      # Nothing, not even failures
    MINIMAL = 1     # Failures and warnings only
    MODERATE = 2    # One line per command
    DETAILED = 3    # Sweep summaries
    VERBOSE = 4     # Everything, including per-sample debug output


class CalculatorLogger:
    """
    Centralized logger with level-aware helpers
    """

    def __init__(self, log_level: LogLevel = LogLevel.MINIMAL,
                 log_to_file: bool = False, log_file_path: Optional[str] = None):
        self.log_level = log_level
        self.log_to_file = log_to_file

        self.logger = logging.getLogger('expression_calculator')
        self.logger.setLevel(logging.DEBUG)
        self.logger.handlers.clear()
        self.logger.propagate = False

        formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        )

        if self.log_level != LogLevel.SILENT:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

        if log_to_file:
            if log_file_path is None:
                log_file_path = f"expression_calculator_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
            file_handler = logging.FileHandler(log_file_path)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

    def _should_log(self, required_level: LogLevel) -> bool:
        return self.log_level.value >= required_level.value

    def is_enabled_for(self, level: LogLevel) -> bool:
        """Lets hot loops skip building messages that would be dropped"""
        return self._should_log(level)

    def error(self, message: str):
        """Failures - shown unless silent"""
        if self.log_level != LogLevel.SILENT:
            self.logger.error(message)

    def warning(self, message: str):
        if self._should_log(LogLevel.MINIMAL):
            self.logger.warning(message)

    def info(self, message: str, required_level: LogLevel = LogLevel.MODERATE):
        if self._should_log(required_level):
            self.logger.info(message)

    def sweep(self, variable: str, var_min: float, var_max: float, step: float, n_samples: int):
        """Summary line for one plot sweep"""
        if not self._should_log(LogLevel.DETAILED):
            return
        self.logger.info(f"Sweep {variable} from {var_min:g} to {var_max:g} "
                         f"step {step:g}: {n_samples} samples")

    def debug(self, message: str):
        if self._should_log(LogLevel.VERBOSE):
            self.logger.debug(message)


_global_logger: Optional[CalculatorLogger] = None


def get_logger() -> CalculatorLogger:
    """Get or create the global logger instance"""
    global _global_logger
    if _global_logger is None:
        _global_logger = CalculatorLogger()
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global logging level"""
    global _global_logger
    if _global_logger is None:
        _global_logger = CalculatorLogger(log_level=level)
    else:
        _global_logger.log_level = level


def configure_logging(log_level: LogLevel = LogLevel.MINIMAL,
                      log_to_file: bool = False,
                      log_file_path: Optional[str] = None) -> CalculatorLogger:
    """Configure the global logging system"""
    global _global_logger
    _global_logger = CalculatorLogger(
        log_level=log_level,
        log_to_file=log_to_file,
        log_file_path=log_file_path
    )
    return _global_logger

