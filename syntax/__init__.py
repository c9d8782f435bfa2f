# syntax/__init__.py
# This file is part of Veritas - A Propositional Sentence Evaluator
#
# Sentence parsing, variable extraction and substitution

"""Expression model for propositional sentences.

Sentences are strings over single-character variables joined by ``~`` (not),
``&`` (and), ``|`` (or) and grouped with parentheses. This package turns such
a string into an immutable expression tree that can be bound to many truth
assignments in turn.

Core Functions:
    parse: Converts a sentence into an expression tree
    variables: Lists the distinct variables of a sentence in order
    substitute: Binds every variable of a sentence to a truth value

Errors:
    MalformedExpression: Empty or ill-formed sentence, with position
    UnsupportedSymbol: Character reserved for a future operator
    UnboundVariable: Assignment does not cover a variable

Example:
    >>> from syntax import parse, substitute
    >>> tree = parse("~(A&B)")
    >>> str(substitute(tree, {"A": True, "B": False}))
    '~(T&F)'
"""

from .exceptions import (
    SentenceError,
    MalformedExpression,
    UnsupportedSymbol,
    UnboundVariable,
)
from .grammar import SentenceParser
from .substitution import Assignment, variables, substitute
from utils.logger import get_logger


def parse(source: str):
    """Parse a propositional sentence into an expression tree.

    A fresh parser instance is used for every call, so parsing keeps no
    state between sentences.

    Args:
        source: Sentence text

    Returns:
        Root node of the expression tree

    Raises:
        MalformedExpression: The sentence is empty or not well formed
        UnsupportedSymbol: The sentence uses a reserved character

    Example:
        >>> parse("A|B&C")
        Or(left=Var(name='A'), right=And(left=Var(name='B'), right=Var(name='C')))
    """
    logger = get_logger()
    logger.debug(f"Parsing sentence: {source}")

    parser = SentenceParser()

    try:
        result = parser.parse(source)
        logger.debug(
            f"Sentence parsed successfully into tree with type: {type(result).__name__}"
        )
        return result

    except SentenceError:
        logger.debug("SentenceError encountered during parsing")
        raise

    except Exception as exc:
        logger.debug(f"Unexpected parsing error: {type(exc).__name__}: {exc}")
        raise MalformedExpression(str(exc)) from exc


__all__ = [
    "parse",
    "variables",
    "substitute",
    "Assignment",
    "SentenceError",
    "MalformedExpression",
    "UnsupportedSymbol",
    "UnboundVariable",
]
