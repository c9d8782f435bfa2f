# syntax/substitution.py
# This file is part of Veritas - A Propositional Sentence Evaluator
#
# Variable extraction and truth-value substitution over expression trees

"""Variable extraction and substitution for propositional sentences.

Both operations are pure: they read a sentence (raw text or a parsed tree)
and return new values without touching their input. Substitution always
starts from the tree it is given, so a tree can be bound to any number of
assignments one after another without carrying state between them.
"""

from __future__ import annotations
from typing import Dict, List, Mapping, Tuple, Union

from . import ast_nodes as ast
from .exceptions import UnboundVariable
from .lexer import SentenceLexer
from utils.logger import get_logger


Assignment = Mapping[str, bool]


class VariableCollector(ast.Visitor):
    """Collects distinct variables in first-occurrence order.

    Leaves are reached left to right, which matches the order of the
    characters in the source sentence.
    """

    def __init__(self):
        self._seen: Dict[str, None] = {}

    def collect(self, root: ast.Expr) -> Tuple[str, ...]:
        self._seen.clear()
        ast.walk(root, self)
        return tuple(self._seen)

    def visit_var(self, n: ast.Var):
        self._seen.setdefault(n.name, None)

    def visit_const(self, n: ast.Const):
        pass

    def visit_not(self, n: ast.Not, operand):
        pass

    def visit_and(self, n: ast.And, left, right):
        pass

    def visit_or(self, n: ast.Or, left, right):
        pass


class Substituter(ast.Visitor):
    """Builds a copy of a tree with every variable replaced by a constant.

    Attributes:
        assignment: Truth value for each variable symbol
    """

    def __init__(self, assignment: Assignment):
        self.assignment = assignment

    def substitute(self, root: ast.Expr) -> ast.Expr:
        return ast.walk(root, self)

    def visit_var(self, n: ast.Var) -> ast.Const:
        try:
            return ast.Const(bool(self.assignment[n.name]))
        except KeyError:
            raise UnboundVariable(n.name) from None

    def visit_const(self, n: ast.Const) -> ast.Const:
        return n

    def visit_not(self, n: ast.Not, operand: ast.Expr) -> ast.Not:
        return ast.Not(operand)

    def visit_and(self, n: ast.And, left: ast.Expr, right: ast.Expr) -> ast.And:
        return ast.And(left, right)

    def visit_or(self, n: ast.Or, left: ast.Expr, right: ast.Expr) -> ast.Or:
        return ast.Or(left, right)


def variables(sentence: Union[str, ast.Expr]) -> Tuple[str, ...]:
    """Return the distinct variables of a sentence in first-occurrence order.

    Raw text is scanned once by the lexer, which classifies every character
    as an operator, a delimiter or a variable; no grammar check is made. A
    parsed tree is walked left to right instead.

    Args:
        sentence: Raw sentence text or parsed expression tree

    Returns:
        Tuple of variable symbols, each appearing once

    Raises:
        UnsupportedSymbol: Raw text contains a reserved character
    """
    if isinstance(sentence, ast.Expr):
        return VariableCollector().collect(sentence)

    seen: List[str] = []
    for token in SentenceLexer().tokenize(sentence):
        if token.type == "VAR" and token.value not in seen:
            seen.append(token.value)

    get_logger().debug(f"Variables of '{sentence}': {seen}")
    return tuple(seen)


def substitute(sentence: Union[str, ast.Expr], assignment: Assignment) -> ast.Expr:
    """Bind every variable of a sentence to its truth value.

    Args:
        sentence: Raw sentence text or parsed expression tree
        assignment: Truth value for each variable symbol; extra entries are
            ignored

    Returns:
        Fresh tree of the same shape containing only constants and
        connectives

    Raises:
        UnboundVariable: A variable of the sentence is missing from the
            assignment
        MalformedExpression: Raw text is not well formed
    """
    if not isinstance(sentence, ast.Expr):
        from . import parse

        sentence = parse(sentence)

    return Substituter(assignment).substitute(sentence)
