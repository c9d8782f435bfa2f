# syntax/exceptions.py
# This file is part of Veritas - A Propositional Sentence Evaluator
#
# Custom exceptions for sentence parsing and substitution

"""Domain-specific exceptions for propositional sentence processing.

All errors raised while reading a sentence or binding its variables derive
from SentenceError so callers can catch the whole family at once, while
still being able to distinguish malformed input from an incomplete
assignment.
"""

from typing import Optional


class SentenceError(RuntimeError):
    """Base class for every error raised by the expression model."""

    pass


class MalformedExpression(SentenceError):
    """Raised when a sentence is not well formed.

    Covers empty sentences, unbalanced grouping delimiters, missing operands
    and adjacent variables. The offending character index is kept in
    ``position`` (the sentence length for an unexpected end of input).

    Attributes:
        position: Index of the offending character, or None if unknown
    """

    def __init__(self, message: str, position: Optional[int] = None):
        super().__init__(message)
        self.position = position


class UnsupportedSymbol(MalformedExpression):
    """Raised when a sentence uses a character reserved for future operators.

    Attributes:
        symbol: The reserved character
        position: Index of the reserved character
    """

    def __init__(self, symbol: str, position: int):
        super().__init__(
            f"Unsupported symbol '{symbol}' at position {position}", position
        )
        self.symbol = symbol


class UnboundVariable(SentenceError):
    """Raised when a variable has no truth value in the given assignment.

    Attributes:
        name: The variable symbol left unbound
    """

    def __init__(self, name: str):
        super().__init__(f"Variable '{name}' is not bound by the assignment")
        self.name = name
