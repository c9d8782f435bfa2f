# syntax/ast_nodes.py
# This file is part of Veritas - A Propositional Sentence Evaluator
#
# Expression tree node classes for propositional sentences

"""Expression tree nodes for parsed propositional sentences.

A sentence is parsed once into an immutable, hashable tree. Variables stay
symbolic (``Var``) until an assignment binds them, at which point a fresh
tree with ``Const`` leaves takes their place. The original tree is never
modified.

Node Types:
    Var: Single-character propositional variable
    Const: Truth-value literal produced by substitution
    Not, And, Or: Boolean connectives

All nodes support the visitor design pattern. Traversal is driven by
``walk``, which visits children before their parent and hands each visitor
method the results already computed for the node's operands.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, List, Protocol, Tuple

from .lexer import (
    AND_SYMBOL,
    FALSE_LITERAL,
    NOT_SYMBOL,
    OR_SYMBOL,
    TRUE_LITERAL,
)


class Visitor(Protocol):
    """Interface for expression tree visitors.

    Concrete visitors implement one visit method per node type. Connective
    methods receive the results of their operands, left before right.
    """

    def visit_var(self, n: Var): ...

    def visit_const(self, n: Const): ...

    def visit_not(self, n: Not, operand): ...

    def visit_and(self, n: And, left, right): ...

    def visit_or(self, n: Or, left, right): ...


@dataclass(frozen=True, slots=True)
class Expr:
    """Base class for all expression tree nodes.

    Subclasses implement ``accept`` for visitor dispatch and ``children``
    to expose their operands.
    """

    def children(self) -> Tuple[Expr, ...]:
        """Direct operands of this node, left to right."""
        return ()

    def accept(self, v: Visitor, *operands):
        """Dispatch to the appropriate visitor method.

        Args:
            v: Visitor instance to process this node
            *operands: Visitor results for ``children()``, in order

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    def __str__(self) -> str:
        return walk(self, _Renderer())


@dataclass(frozen=True, slots=True)
class Var(Expr):
    """Propositional variable.

    Attributes:
        name: The single-character variable symbol
    """

    name: str

    def accept(self, v: Visitor, *operands):
        return v.visit_var(self)


@dataclass(frozen=True, slots=True)
class Const(Expr):
    """Truth-value literal standing in for a bound variable.

    Renders as ``T`` or ``F``, the canonical literal tokens of a
    substituted sentence.

    Attributes:
        value: The truth value
    """

    value: bool

    def accept(self, v: Visitor, *operands):
        return v.visit_const(self)


@dataclass(frozen=True, slots=True)
class Not(Expr):
    """Logical negation.

    Attributes:
        operand: The expression being negated
    """

    operand: Expr

    def children(self) -> Tuple[Expr, ...]:
        return (self.operand,)

    def accept(self, v: Visitor, *operands):
        return v.visit_not(self, *operands)


@dataclass(frozen=True, slots=True)
class And(Expr):
    """Logical conjunction, true when both operands are true.

    Attributes:
        left: Left operand of the conjunction
        right: Right operand of the conjunction
    """

    left: Expr
    right: Expr

    def children(self) -> Tuple[Expr, ...]:
        return (self.left, self.right)

    def accept(self, v: Visitor, *operands):
        return v.visit_and(self, *operands)


@dataclass(frozen=True, slots=True)
class Or(Expr):
    """Logical disjunction, true when at least one operand is true.

    Attributes:
        left: Left operand of the disjunction
        right: Right operand of the disjunction
    """

    left: Expr
    right: Expr

    def children(self) -> Tuple[Expr, ...]:
        return (self.left, self.right)

    def accept(self, v: Visitor, *operands):
        return v.visit_or(self, *operands)


def walk(root: Expr, v: Visitor) -> Any:
    """Visit every node of a tree in post-order and return the root's result.

    Uses an explicit stack, so the depth of the tree is not bounded by the
    interpreter's recursion limit. Leaves are visited left to right.

    Args:
        root: Root node of the tree
        v: Visitor applied to every node

    Returns:
        Whatever the visitor returns for ``root``
    """
    results: List[Any] = []
    stack: List[Tuple[Expr, bool]] = [(root, False)]
    while stack:
        node, expanded = stack.pop()
        operands = node.children()
        if not operands or expanded:
            count = len(operands)
            values = results[len(results) - count:]
            del results[len(results) - count:]
            results.append(node.accept(v, *values))
        else:
            stack.append((node, True))
            # Reversed so the left operand is popped first
            for child in reversed(operands):
                stack.append((child, False))
    return results[0]


class _Renderer:
    """Renders a tree in sentence syntax with fully parenthesized connectives."""

    def visit_var(self, n: Var) -> str:
        return n.name

    def visit_const(self, n: Const) -> str:
        return TRUE_LITERAL if n.value else FALSE_LITERAL

    def visit_not(self, n: Not, operand: str) -> str:
        return f"{NOT_SYMBOL}{operand}"

    def visit_and(self, n: And, left: str, right: str) -> str:
        return f"({left}{AND_SYMBOL}{right})"

    def visit_or(self, n: Or, left: str, right: str) -> str:
        return f"({left}{OR_SYMBOL}{right})"
