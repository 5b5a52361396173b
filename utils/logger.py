# utils/logger.py
# This file is part of Veritas - A Propositional Logic Calculator
#
# Logging utility for the calculator with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional, Sequence


class LogLevel(Enum):
    """Log levels for the calculator."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class CalculatorLogger:
    """Centralized logger for the calculator with clean, structured output."""

    def __init__(self, name: str = "veritas", level: LogLevel = LogLevel.INFO):
        """Initialize the calculator logger.

        Args:
            name: Logger name (typically module name)
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(CalculatorFormatter())

        self.logger.addHandler(console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    # Core logging methods
    def debug(self, message: str, **kwargs):
        """Log debug message (detailed internal state)."""
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message (general progress)."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message (unexpected but recoverable)."""
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message (serious problems)."""
        self.logger.error(message, **kwargs)

    # Specialized methods for calculator events
    def formula_loaded(self, raw: str, normalized: str):
        """Log a formula entering the pipeline."""
        if raw.strip() == normalized:
            self.info(f"Formula: {normalized}")
        else:
            self.info(f"Formula: {raw.strip()}  =>  {normalized}")

    def tautology_verdict(self, formula: str, variables: Sequence[str], is_tautology: bool):
        """Log the outcome of a tautology check."""
        self.info(f"Variables: {', '.join(variables)}")
        if is_tautology:
            self.info(f"✅ {formula} is a tautology")
        else:
            self.info(f"❌ {formula} is not a tautology")

    def table_built(self, formula: str, columns: int, rows: int):
        """Log truth table construction."""
        self.debug(f"Truth table for {formula}: {columns} columns x {rows} rows")


class CalculatorFormatter(logging.Formatter):
    """Custom formatter for calculator logging with clean output."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[CalculatorLogger] = None


def get_logger(name: str = "veritas") -> CalculatorLogger:
    """Get or create the global calculator logger instance.

    Args:
        name: Logger name (default: "veritas")

    Returns:
        CalculatorLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = CalculatorLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    get_logger().set_level(level)


def configure_logging(verbose: bool = False, debug: bool = False):
    """Configure logging based on command line flags.

    Args:
        verbose: Enable verbose (INFO) output
        debug: Enable debug output (overrides verbose)
    """
    if debug:
        set_log_level(LogLevel.DEBUG)
    elif verbose:
        set_log_level(LogLevel.INFO)
    else:
        set_log_level(LogLevel.WARNING)
