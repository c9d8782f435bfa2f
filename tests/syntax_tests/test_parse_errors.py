# tests/syntax_tests/test_parse_errors.py
# This file is part of Veritas - A Propositional Sentence Evaluator
#
# Test suite for sentence validation and error reporting

"""Test suite for malformed-sentence detection.

Malformed sentences are rejected when parsed, with the index of the
offending character, instead of producing an unspecified truth value.
"""

import pytest
from syntax import parse, MalformedExpression, SentenceError, UnsupportedSymbol
from utils.logger import get_logger


class TestSentenceParseErrors:
    """Test cases for malformed sentences."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    INVALID_SYNTAX_CASES = [
        # Delimiter errors
        ("(A", "Unclosed parenthesis"),
        ("A)", "Unopened parenthesis"),
        ("(A&B))", "Unbalanced right parenthesis"),
        ("((A)", "Unclosed nested parenthesis"),
        (")A(", "Reversed parentheses"),
        ("()", "Empty group"),
        # Operand errors
        ("A|", "Trailing operator"),
        ("&A", "Leading binary operator"),
        ("A||B", "Double operator"),
        ("A&|B", "Mixed double operator"),
        ("~", "Negation without operand"),
        ("A~B", "Infix negation"),
        ("(A|)&B", "Missing operand inside group"),
        # Adjacent variables
        ("AB", "Missing operator between variables"),
        ("A(B)", "Variable followed by group"),
        ("(A)(B)", "Adjacent groups"),
        # Empty input
        ("", "Empty input string"),
        ("   ", "Whitespace only input"),
        ("\t\n", "Whitespace only with tabs/newlines"),
    ]

    @pytest.mark.parametrize("invalid_input, description", INVALID_SYNTAX_CASES)
    def test_parse_error_handling(self, invalid_input, description):
        """Invalid sentences raise MalformedExpression with a message."""
        self.logger.debug(f"Testing parse error for: '{invalid_input}' ({description})")

        with pytest.raises(MalformedExpression) as exc_info:
            parse(invalid_input)

        assert len(str(exc_info.value)) > 0, "Error should have a non-empty message"

    POSITION_CASES = [
        ("", 0),
        ("AB", 1),
        ("A)", 1),
        ("&A", 0),
        ("A||B", 2),
        ("A(B)", 1),
        ("()", 1),
        ("(A", 2),
        ("A|", 2),
        ("A&  ", 2),
        ("~", 1),
    ]

    @pytest.mark.parametrize("invalid_input, position", POSITION_CASES)
    def test_error_position(self, invalid_input, position):
        """The error names the index of the offending character."""
        with pytest.raises(MalformedExpression) as exc_info:
            parse(invalid_input)

        assert exc_info.value.position == position

    def test_unexpected_end_message(self):
        """Sentences that stop early say so."""
        for invalid_input in ["(A", "A&", "~"]:
            with pytest.raises(MalformedExpression) as exc_info:
                parse(invalid_input)
            assert "unexpected end" in str(exc_info.value).lower()

    def test_empty_sentence_message(self):
        with pytest.raises(MalformedExpression, match="empty"):
            parse("")

    def test_reserved_symbol_through_parser(self):
        """Reserved characters surface as UnsupportedSymbol from parse."""
        with pytest.raises(UnsupportedSymbol) as exc_info:
            parse("A=>B")

        assert exc_info.value.symbol == "="
        assert exc_info.value.position == 1

    def test_errors_share_base_class(self):
        """Every parse failure can be caught as SentenceError."""
        for invalid_input in ["(A", "A!B", ""]:
            with pytest.raises(SentenceError):
                parse(invalid_input)

    def test_nested_parentheses_validation(self):
        """Balanced nesting parses, unbalanced nesting does not."""
        valid_nested = ["((A))", "(((A&B)))", "((A|B)&(C|D))", "~((A))"]
        invalid_nested = ["((A)", "(A))", "((A|B)&(C|D)", "(~)"]

        for sentence in valid_nested:
            assert parse(sentence) is not None

        for sentence in invalid_nested:
            with pytest.raises(MalformedExpression):
                parse(sentence)
