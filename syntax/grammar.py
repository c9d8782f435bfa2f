# syntax/grammar.py
# This file is part of Veritas - A Propositional Sentence Evaluator
#
# LALR(1) grammar and parser for propositional sentences using SLY

"""Propositional sentence grammar implemented with the SLY parser generator.

The parser turns the lexer's token stream into an expression tree in a
single pass. Grouping delimiters are matched properly by the grammar, so a
sentence such as ``(A)&(B)`` is a conjunction of two groups rather than one
group spanning the whole sentence.

Operator Precedence (lowest to highest):
- OR ('|')
- AND ('&')
- NOT ('~')
- grouping with '(' and ')'

Binary operators group to the right: the leftmost top-level operator is the
split point, so ``A|B|C`` parses as ``A|(B|C)``.
"""

from sly import Parser
from .lexer import SentenceLexer
from .ast_nodes import Expr, Var, Not, And, Or
from .exceptions import MalformedExpression, SentenceError
from utils.logger import get_logger


class SentenceParser(Parser):
    """SLY-based LALR(1) parser for propositional sentences.

    Attributes:
        tokens: Token types from SentenceLexer
        precedence: Operator precedence and associativity rules
    """

    tokens = SentenceLexer.tokens

    precedence = (
        ("right", "OR"),
        ("right", "AND"),
        ("right", "NOT"),
    )

    def __init__(self):
        self._text = ""

    @_("expr")
    def start(self, p) -> Expr:
        """Start rule: a complete sentence is a single expression."""
        return p.expr

    @_("NOT expr")
    def expr(self, p) -> Expr:
        """Negation operator."""
        return Not(p.expr)

    @_("expr AND expr")
    def expr(self, p) -> Expr:
        """Conjunction operator."""
        return And(p.expr0, p.expr1)

    @_("expr OR expr")
    def expr(self, p) -> Expr:
        """Disjunction operator."""
        return Or(p.expr0, p.expr1)

    @_("LPAREN expr RPAREN")
    def expr(self, p) -> Expr:
        """Parenthesized expression for grouping."""
        return p.expr

    @_("VAR")
    def expr(self, p) -> Expr:
        """Single-character propositional variable."""
        return Var(p.VAR)

    def parse(self, text: str) -> Expr:
        """Parse sentence text into an expression tree.

        Args:
            text: Propositional sentence to parse

        Returns:
            Root node of the expression tree

        Raises:
            MalformedExpression: The sentence is empty or not well formed
            UnsupportedSymbol: The sentence uses a reserved character
        """
        logger = get_logger()
        logger.debug(f"Parsing sentence: {text}")

        if text.strip() == "":
            raise MalformedExpression("Input sentence is empty.", 0)

        self._text = text

        try:
            ast_result = super().parse(SentenceLexer().tokenize(text))

            if ast_result is None:
                raise MalformedExpression(
                    "Failed to parse sentence (syntax error).", None
                )

            logger.debug(
                f"Successfully parsed sentence into {type(ast_result).__name__}"
            )
            return ast_result

        except SentenceError:
            logger.debug("Parse error encountered")
            raise
        except Exception as e:
            logger.debug(f"Unexpected parsing error: {e}")
            raise MalformedExpression(f"Parse failed: {e}") from e

    def error(self, token):
        """Handle syntax errors during parsing.

        Called by SLY when a token does not fit any grammar rule. Reports the
        character index of the offending token, or the sentence length when
        the sentence ends too early.

        Args:
            token: Problematic token or None at end of input

        Raises:
            MalformedExpression: Always
        """
        if token:
            raise MalformedExpression(
                f"Syntax error near '{token.value}' "
                f"(type: {token.type}) at position {token.index}",
                token.index,
            )

        position = len(self._text.rstrip())
        raise MalformedExpression(
            f"Syntax error: Unexpected end of sentence at position {position}",
            position,
        )
