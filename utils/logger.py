# utils/logger.py
# This file is part of Lattice - A Boolean Algebra Simplifier
#
# Logging utility for expression simplification with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """Log levels for the simplification engine."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class LatticeLogger:
    """Centralized logger for the simplifier with structured output."""

    def __init__(self, name: str = "lattice", level: LogLevel = LogLevel.INFO):
        """Initialize the simplifier logger.

        Args:
            name: Logger name
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(LatticeFormatter())

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

    # Specialized methods for simplification events
    def simplification_start(self, expression: str, normalized: Optional[str] = None):
        """Log the start of a simplification request."""
        self.info("=== Simplifying ===")
        self.info(f"Expression: {expression}")
        if normalized and normalized != expression:
            self.info(f"Normalized input: {normalized}")

    def law_applied(self, law_name: str, before: str, after: str):
        """Log a single law application."""
        self.debug(f"    ✏️  {law_name}: {before} → {after}")

    def pass_complete(self, iteration: int, expression: str, rewrites: int):
        """Log the end of one bottom-up rewrite pass."""
        self.debug(f"  Pass {iteration}: {rewrites} rewrite(s) → {expression}")

    def fixpoint_reached(self, iteration: int, expression: str):
        """Log convergence."""
        self.debug(f"  ✅ Fixpoint reached after {iteration} pass(es): {expression}")

    def non_convergence(self, max_iterations: int, expression: str):
        """Log exhaustion of the iteration cap."""
        self.warning(
            f"⚠️  No fixpoint after {max_iterations} passes; "
            f"returning best effort: {expression}"
        )

    def simplification_summary(self, result: str, steps: int, converged: bool):
        """Log the final simplified expression."""
        status = "fully simplified" if converged else "not fully simplified"
        self.info(f"\n>>> RESULT: {result} ({steps} step(s), {status}) <<<")

    def validation_result(self, success: bool, message: str = ""):
        """Log verification results."""
        if success:
            self.debug(f"✅ {message}" if message else "✅ Verification successful")
        else:
            self.error(f"❌ {message}" if message else "❌ Verification failed")


class LatticeFormatter(logging.Formatter):
    """Custom formatter for simplifier logging with clean output."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[LatticeLogger] = None


def get_logger(name: str = "lattice") -> LatticeLogger:
    """Get or create the global simplifier logger instance.

    Args:
        name: Logger name (default: "lattice")

    Returns:
        LatticeLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = LatticeLogger(name)
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
