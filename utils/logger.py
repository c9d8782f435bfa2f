# utils/logger.py
# This file is part of Veritas - A Propositional Sentence Evaluator
#
# Logging utility for sentence analysis with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """Log levels for sentence analysis."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class VeritasLogger:
    """Centralized logger for sentence analysis with structured output."""

    def __init__(self, name: str = "veritas", level: LogLevel = LogLevel.INFO):
        """Initialize the Veritas logger.

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
        console_handler.setFormatter(VeritasFormatter())

        self.logger.addHandler(console_handler)
        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    def is_debug_enabled(self) -> bool:
        """Whether DEBUG records would be emitted."""
        return self.logger.isEnabledFor(logging.DEBUG)

    # Core logging methods
    def debug(self, message: str, **kwargs):
        """Log debug message (detailed internal state)."""
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message (general progress)."""
        self.logger.info(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message (serious problems)."""
        self.logger.error(message, **kwargs)

    # Specialized methods for analysis events
    def analysis_start(self, sentence: str, variables: str, assignment_count: int):
        """Log the start of an exhaustive enumeration."""
        self.debug(f"=== Analyzing: {sentence} ===")
        self.debug(f"Variables: {variables or '(none)'} → {assignment_count} assignment(s)")

    def assignment_result(self, index: int, assignment: str, result: bool):
        """Log the outcome of a single assignment."""
        self.debug(f"    #{index} {assignment} → {'T' if result else 'F'}")

    def verdict_summary(self, sentence: str, verdict: str):
        """Log the folded verdict for a sentence."""
        self.debug(f"🔍 {sentence}: {verdict}")

    def entailment_start(self, premise: str, conclusion: str, variables: str):
        """Log the start of an entailment check."""
        self.debug(f"=== Checking {premise} ⊨ {conclusion} over {variables or '(none)'} ===")

    def countermodel_found(self, assignment: str):
        """Log the assignment that breaks an entailment."""
        self.debug(f"    💥 Countermodel: {assignment}")


class VeritasFormatter(logging.Formatter):
    """Custom formatter for Veritas logging with clean output."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[VeritasLogger] = None


def get_logger(name: str = "veritas") -> VeritasLogger:
    """Get or create the global Veritas logger instance.

    Args:
        name: Logger name (default: "veritas")

    Returns:
        VeritasLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = VeritasLogger(name)
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
