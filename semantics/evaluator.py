# semantics/evaluator.py
# This file is part of Veritas - A Propositional Sentence Evaluator
#
# Truth-value evaluation of substituted expression trees

"""Truth-value evaluation of substituted sentences.

A substituted sentence is an expression tree whose leaves are all ``Const``
nodes. Evaluation walks it bottom up: negation flips its operand, conjunction
and disjunction combine theirs. Precedence and grouping were already settled
by the parser, so the tree shape alone decides the result.
"""

from __future__ import annotations

from syntax import ast_nodes as ast
from syntax.exceptions import UnboundVariable
from syntax.substitution import Assignment, substitute


class Evaluator(ast.Visitor):
    """Computes the truth value of a fully substituted tree."""

    def visit_var(self, n: ast.Var) -> bool:
        # Substitution must run first; a bare variable has no value
        raise UnboundVariable(n.name)

    def visit_const(self, n: ast.Const) -> bool:
        return n.value

    def visit_not(self, n: ast.Not, operand: bool) -> bool:
        return not operand

    def visit_and(self, n: ast.And, left: bool, right: bool) -> bool:
        return left and right

    def visit_or(self, n: ast.Or, left: bool, right: bool) -> bool:
        return left or right


def evaluate(substituted: ast.Expr) -> bool:
    """Evaluate a substituted sentence.

    Args:
        substituted: Expression tree containing only constants and
            connectives

    Returns:
        Truth value of the sentence

    Raises:
        UnboundVariable: The tree still contains a variable
    """
    return ast.walk(substituted, Evaluator())


def evaluate_under(sentence, assignment: Assignment) -> bool:
    """Substitute an assignment into a sentence and evaluate the result.

    Args:
        sentence: Raw sentence text or parsed expression tree
        assignment: Truth value for every variable of the sentence

    Returns:
        Truth value of the sentence under the assignment

    Raises:
        UnboundVariable: The assignment does not cover every variable
    """
    return evaluate(substitute(sentence, assignment))
