# core/__init__.py
# This file is part of Veritas - A Propositional Sentence Evaluator
#
# Core module public API

"""Public query interface for propositional sentences.

Primary Components:
    LogicalExpression: A parsed sentence answering validity, satisfiability,
        contingency, entailment and equivalence queries

Example:
    >>> from core import LogicalExpression
    >>> expr = LogicalExpression("(A|B)|~(A|B)")
    >>> expr.analyze().valid
    True
    >>> expr.equivalent("A|B|~A|B")
    True
"""

from .expression import LogicalExpression

__all__ = ["LogicalExpression"]

__version__ = "1.0.0"
__description__ = "Public query interface for propositional sentences"
