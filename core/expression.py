# core/expression.py
# This file is part of Veritas - A Propositional Sentence Evaluator
#
# LogicalExpression: public query interface over one propositional sentence

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Iterator, Optional, Tuple, Union

from syntax import parse, variables as sentence_variables
from syntax.ast_nodes import Expr
from semantics import (
    SemanticVerdict,
    TruthTableRow,
    analyze,
    entails,
    equivalent,
    find_countermodel,
    truth_table,
)
from utils.logger import get_logger


@dataclass
class LogicalExpression:
    """A propositional sentence with its semantic queries.

    The sentence is parsed and validated on construction. Validity,
    satisfiability and contingency are only known once ``analyze()`` has
    enumerated every assignment; until then the queries return the
    placeholders valid=True, satisfiable=False, contingent=False.

    Attributes:
        sentence: Original sentence text
        max_variables: Optional cap on variables for every enumeration
        tree: Parsed expression tree
        variables: Distinct variables in first-occurrence order
        verdict: Most recent analysis result (placeholder before analysis)
        analyzed: Whether ``analyze()`` has run
    """

    sentence: str
    max_variables: Optional[int] = None
    tree: Expr = field(init=False)
    variables: Tuple[str, ...] = field(init=False)
    verdict: SemanticVerdict = field(init=False, default_factory=SemanticVerdict)
    analyzed: bool = field(init=False, default=False)

    def __post_init__(self):
        """Parse the sentence and extract its variables."""
        logger = get_logger()
        logger.debug(f"Initializing expression for sentence: {self.sentence}")

        self.tree = parse(self.sentence)
        self.variables = sentence_variables(self.tree)

        logger.debug(f"Expression has {len(self.variables)} variable(s)")

    def analyze(self) -> SemanticVerdict:
        """Enumerate every assignment and record the verdict.

        Returns:
            The new SemanticVerdict

        Raises:
            EnumerationLimitExceeded: More variables than ``max_variables``
        """
        self.verdict = analyze(self.tree, self.max_variables)
        self.analyzed = True
        return self.verdict

    def valid(self) -> bool:
        """True under every assignment (placeholder True before analysis)."""
        return self.verdict.valid

    def satisfiable(self) -> bool:
        """True under at least one assignment (placeholder False before analysis)."""
        return self.verdict.satisfiable

    def contingent(self) -> bool:
        """Satisfiable but not valid (placeholder False before analysis)."""
        return self.verdict.contingent

    def entails(self, other: Union[LogicalExpression, str]) -> bool:
        """Whether every assignment satisfying this sentence satisfies ``other``."""
        return entails(self.tree, self._tree_of(other), self.max_variables)

    def equivalent(self, other: Union[LogicalExpression, str]) -> bool:
        """Whether this sentence and ``other`` entail each other."""
        return equivalent(self.tree, self._tree_of(other), self.max_variables)

    def countermodel(self, other: Union[LogicalExpression, str]) -> Optional[Dict[str, bool]]:
        """First assignment making this sentence true and ``other`` false, if any."""
        return find_countermodel(self.tree, self._tree_of(other), self.max_variables)

    def truth_table(self) -> Iterator[TruthTableRow]:
        """Every assignment over this sentence's variables with its value."""
        return truth_table(self.tree, self.max_variables)

    @staticmethod
    def _tree_of(other: Union[LogicalExpression, str]) -> Expr:
        if isinstance(other, LogicalExpression):
            return other.tree
        return parse(other)

    def __str__(self) -> str:
        return self.sentence
