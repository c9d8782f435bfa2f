# syntax/lexer.py
# This file is part of Veritas - A Propositional Sentence Evaluator
#
# Lexical analyzer for propositional sentences using SLY

"""Lexical analyzer for propositional sentence strings.

Sentences are written over single-character variables. Five characters are
operators or delimiters; every other non-whitespace character is a variable,
so ``A``, ``p``, ``T`` and ``7`` are all variables. A handful of characters
are reserved for connectives that may be added later and are rejected
outright.

Supported Tokens:
- Operators: ~ (NOT), & (AND), | (OR)
- Delimiters: ( and )
- Variables: any other single character
- Whitespace: ignored during tokenization
"""

from sly import Lexer
from utils.logger import get_logger
from .exceptions import MalformedExpression, UnsupportedSymbol


NOT_SYMBOL = "~"
AND_SYMBOL = "&"
OR_SYMBOL = "|"
OPEN_SYMBOL = "("
CLOSE_SYMBOL = ")"

OPERATOR_SYMBOLS = frozenset(
    {NOT_SYMBOL, AND_SYMBOL, OR_SYMBOL, OPEN_SYMBOL, CLOSE_SYMBOL}
)

# Implication, biconditional and exclusive-or candidates
RESERVED_SYMBOLS = frozenset({"!", "^", ">", "<", "="})

# Canonical literals used when rendering substituted sentences
TRUE_LITERAL = "T"
FALSE_LITERAL = "F"


class SentenceLexer(Lexer):
    """SLY-based lexer for propositional sentences.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
        VAR: Any single character that is not an operator, delimiter,
            reserved symbol or whitespace
    """

    tokens = {
        "VAR",
        "NOT",
        "AND",
        "OR",
        "LPAREN",
        "RPAREN",
    }

    ignore = " \t\r\n"

    NOT = r"~"
    AND = r"&"
    OR = r"\|"
    LPAREN = r"\("
    RPAREN = r"\)"

    VAR = r"[^~&|()!^<>=\s]"

    def error(self, t):
        """Handle characters that no token pattern accepts.

        Args:
            t: SLY token object containing error context

        Raises:
            UnsupportedSymbol: The character is reserved for a future operator
            MalformedExpression: Any other unmatched character
        """
        logger = get_logger()

        illegal_char = t.value[0]
        error_pos = self.index

        logger.debug(f"Illegal character '{illegal_char}' at position {error_pos}")

        self.index += 1

        if illegal_char in RESERVED_SYMBOLS:
            raise UnsupportedSymbol(illegal_char, error_pos)

        raise MalformedExpression(
            f"Illegal character '{illegal_char}' encountered at position {error_pos}",
            error_pos,
        )
