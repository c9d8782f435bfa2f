# semantics/exceptions.py
# This file is part of Veritas - A Propositional Sentence Evaluator
#
# Exceptions raised while enumerating truth assignments

"""Exception hierarchy for semantic analysis."""


class SemanticError(RuntimeError):
    """Base class for errors raised by the semantic evaluator."""

    pass


class EnumerationLimitExceeded(SemanticError):
    """Raised when a sentence has more variables than the caller allows.

    Enumeration visits 2^n assignments, so callers that need bounded latency
    pass a variable cap and get this error instead of a long run.

    Attributes:
        variable_count: Number of distinct variables to enumerate
        limit: The cap that was exceeded
    """

    def __init__(self, variable_count: int, limit: int):
        super().__init__(
            f"{variable_count} variables exceed the enumeration limit of {limit} "
            f"({2 ** variable_count} assignments)"
        )
        self.variable_count = variable_count
        self.limit = limit
