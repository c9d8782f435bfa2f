# semantics/verdict.py
# This file is part of Veritas - A Propositional Sentence Evaluator
#
# Semantic verdicts folded from an exhaustive truth-assignment enumeration

"""Result types of semantic analysis."""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import Mapping


class Classification(Enum):
    """Three-way semantic classification of a sentence.

    Every sentence falls into exactly one class: true under every
    assignment, true under some and false under others, or true under none.

    Values:
        VALID: True under every assignment (tautology)
        CONTINGENT: Satisfiable but not valid
        UNSATISFIABLE: False under every assignment (contradiction)
    """

    VALID = auto()
    CONTINGENT = auto()
    UNSATISFIABLE = auto()

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class SemanticVerdict:
    """Validity, satisfiability and contingency of one sentence.

    Attributes:
        valid: True under every assignment
        satisfiable: True under at least one assignment
        contingent: Satisfiable and not valid
    """

    valid: bool = True
    satisfiable: bool = False
    contingent: bool = False

    @property
    def classification(self) -> Classification:
        if self.valid:
            return Classification.VALID
        if self.satisfiable:
            return Classification.CONTINGENT
        return Classification.UNSATISFIABLE

    def __str__(self) -> str:
        return (
            f"valid={self.valid}, satisfiable={self.satisfiable}, "
            f"contingent={self.contingent}"
        )


@dataclass(frozen=True)
class TruthTableRow:
    """One row of a truth table.

    Attributes:
        assignment: Truth value of each variable, in enumeration order
        value: Truth value of the sentence under the assignment
    """

    assignment: Mapping[str, bool]
    value: bool
