# semantics/analysis.py
# This file is part of Veritas - A Propositional Sentence Evaluator
#
# Brute-force semantic properties: validity, satisfiability, entailment

"""Brute-force semantic analysis of propositional sentences.

Every question answered here is settled by trying all 2^n truth assignments
over the variables involved. This is the simplest correct procedure and the
reference semantics of the package; its cost doubles with each extra
variable, so callers that need bounded latency pass ``max_variables``.

Core Functions:
    analyze: Validity, satisfiability and contingency of one sentence
    find_countermodel: First assignment making one sentence true and another
        false
    entails: Whether one sentence entails another
    equivalent: Whether two sentences entail each other
    truth_table: Every assignment with the value it gives a sentence

Each function takes raw sentence text or an already parsed tree. Text is
parsed on entry, so malformed sentences fail before any enumeration starts.
"""

from __future__ import annotations
from typing import Dict, Iterator, Optional, Tuple, Union

from syntax import parse, substitute, variables
from syntax.ast_nodes import Expr
from utils.logger import get_logger

from .enumeration import (
    assignment_count,
    assignment_for,
    check_limit,
    format_assignment,
)
from .evaluator import evaluate
from .verdict import SemanticVerdict, TruthTableRow


Sentence = Union[str, Expr]


def _as_tree(sentence: Sentence) -> Expr:
    if isinstance(sentence, Expr):
        return sentence
    return parse(sentence)


def _union_variables(*trees: Expr) -> Tuple[str, ...]:
    """Variables of several trees, earlier trees first, each listed once."""
    combined: Dict[str, None] = {}
    for tree in trees:
        for name in variables(tree):
            combined.setdefault(name, None)
    return tuple(combined)


def analyze(sentence: Sentence, max_variables: Optional[int] = None) -> SemanticVerdict:
    """Decide validity, satisfiability and contingency of a sentence.

    Runs exactly 2^n evaluations with no early exit. ``valid`` starts true
    and is cleared by the first false result; ``satisfiable`` starts false
    and is set by the first true result; ``contingent`` is recomputed after
    every step. A sentence without variables is evaluated once, so its
    validity equals its satisfiability and it is never contingent.

    Args:
        sentence: Raw sentence text or parsed expression tree
        max_variables: Optional cap on the number of variables

    Returns:
        The folded SemanticVerdict

    Raises:
        MalformedExpression: Raw text is not well formed
        EnumerationLimitExceeded: More variables than ``max_variables``
    """
    logger = get_logger()
    tree = _as_tree(sentence)
    names = variables(tree)
    check_limit(len(names), max_variables)

    total = assignment_count(len(names))
    trace = logger.is_debug_enabled()
    if trace:
        logger.analysis_start(str(tree), " ".join(names), total)

    valid = True
    satisfiable = False
    contingent = False

    for index in range(total):
        assignment = assignment_for(index, names)
        result = evaluate(substitute(tree, assignment))

        if result:
            satisfiable = True
        else:
            valid = False

        contingent = satisfiable and not valid

        if trace:
            logger.assignment_result(index, format_assignment(assignment), result)

    verdict = SemanticVerdict(valid=valid, satisfiable=satisfiable, contingent=contingent)
    logger.verdict_summary(str(tree), str(verdict))
    return verdict


def find_countermodel(
    premise: Sentence,
    conclusion: Sentence,
    max_variables: Optional[int] = None,
) -> Optional[Dict[str, bool]]:
    """Find an assignment under which ``premise`` holds and ``conclusion`` fails.

    Assignments range over the union of both variable sets, so a variable
    occurring in only one sentence is still varied. Enumeration stops at the
    first countermodel.

    Args:
        premise: Sentence that must be true in the countermodel
        conclusion: Sentence that must be false in the countermodel
        max_variables: Optional cap on the size of the combined variable set

    Returns:
        The first countermodel in enumeration order, or None if the premise
        entails the conclusion

    Raises:
        MalformedExpression: Raw text is not well formed
        EnumerationLimitExceeded: More variables than ``max_variables``
    """
    logger = get_logger()
    premise_tree = _as_tree(premise)
    conclusion_tree = _as_tree(conclusion)
    names = _union_variables(premise_tree, conclusion_tree)
    check_limit(len(names), max_variables)

    logger.entailment_start(str(premise_tree), str(conclusion_tree), " ".join(names))

    for index in range(assignment_count(len(names))):
        assignment = assignment_for(index, names)
        if evaluate(substitute(premise_tree, assignment)) and not evaluate(
            substitute(conclusion_tree, assignment)
        ):
            logger.countermodel_found(format_assignment(assignment))
            return assignment

    return None


def entails(
    premise: Sentence,
    conclusion: Sentence,
    max_variables: Optional[int] = None,
) -> bool:
    """Whether every assignment satisfying ``premise`` also satisfies ``conclusion``."""
    return find_countermodel(premise, conclusion, max_variables) is None


def equivalent(
    first: Sentence,
    second: Sentence,
    max_variables: Optional[int] = None,
) -> bool:
    """Whether two sentences entail each other."""
    first_tree = _as_tree(first)
    second_tree = _as_tree(second)
    return entails(first_tree, second_tree, max_variables) and entails(
        second_tree, first_tree, max_variables
    )


def truth_table(
    sentence: Sentence, max_variables: Optional[int] = None
) -> Iterator[TruthTableRow]:
    """Yield one row per assignment, in enumeration order.

    The sentence is parsed and the variable cap checked before the first row
    is produced.
    """
    tree = _as_tree(sentence)
    names = variables(tree)
    check_limit(len(names), max_variables)
    return _rows(tree, names)


def _rows(tree: Expr, names: Tuple[str, ...]) -> Iterator[TruthTableRow]:
    for index in range(assignment_count(len(names))):
        assignment = assignment_for(index, names)
        yield TruthTableRow(assignment, evaluate(substitute(tree, assignment)))
