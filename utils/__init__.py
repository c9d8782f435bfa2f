# utils/__init__.py
# This file is part of Veritas - A Propositional Sentence Evaluator
#
# Utility module exports

from .logger import (
    LogLevel,
    VeritasLogger,
    get_logger,
    set_log_level,
    configure_logging,
)

__all__ = [
    "LogLevel",
    "VeritasLogger",
    "get_logger",
    "set_log_level",
    "configure_logging",
]
