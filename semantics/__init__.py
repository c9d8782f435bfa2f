# semantics/__init__.py
# This file is part of Veritas - A Propositional Sentence Evaluator
#
# Truth-value evaluation and brute-force semantic analysis

"""Semantic evaluation of propositional sentences.

This package provides:
  • evaluate / evaluate_under: truth value of a sentence under one assignment
  • analyze: validity, satisfiability and contingency over all assignments
  • entails / equivalent / find_countermodel: relations between two sentences
  • truth_table: every assignment with the value it produces
  • SemanticVerdict, Classification, TruthTableRow: result types
  • EnumerationLimitExceeded: raised when a variable cap is exceeded
"""

from .analysis import analyze, entails, equivalent, find_countermodel, truth_table
from .enumeration import assignments
from .evaluator import Evaluator, evaluate, evaluate_under
from .exceptions import EnumerationLimitExceeded, SemanticError
from .verdict import Classification, SemanticVerdict, TruthTableRow

__all__ = [
    "analyze",
    "entails",
    "equivalent",
    "find_countermodel",
    "truth_table",
    "assignments",
    "Evaluator",
    "evaluate",
    "evaluate_under",
    "Classification",
    "SemanticVerdict",
    "TruthTableRow",
    "SemanticError",
    "EnumerationLimitExceeded",
]
