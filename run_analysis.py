#!/usr/bin/env python3
# run_analysis.py
# This file is part of Veritas - A Propositional Sentence Evaluator
#
# Command-line interface for sentence analysis with configurable logging levels

import sys
import argparse
from pathlib import Path
from typing import List, Optional

from core import LogicalExpression
from semantics import EnumerationLimitExceeded
from semantics.enumeration import format_assignment
from syntax import SentenceError
from utils.logger import configure_logging, get_logger


DEFAULT_MAX_VARIABLES = 20


def read_sentence_file(filepath: Path) -> str:
    """Read a sentence from file.

    Args:
        filepath: Path to the sentence file

    Returns:
        Sentence text with surrounding whitespace removed

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is empty or unreadable
    """
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            content = f.read().strip()
    except FileNotFoundError:
        raise FileNotFoundError(f"Sentence file not found: {filepath}")
    except OSError as e:
        raise ValueError(f"Error reading sentence file: {e}")

    if not content:
        raise ValueError("Sentence file is empty")

    return content


def print_verdict(expression: LogicalExpression) -> None:
    """Print the semantic properties of an analyzed expression."""
    print(f"Sentence: {expression.sentence}")
    print(f"Valid: {expression.valid()}")
    print(f"Satisfiable: {expression.satisfiable()}")
    print(f"Contingent: {expression.contingent()}")
    print(f"Classification: {expression.verdict.classification}")


def print_truth_table(expression: LogicalExpression) -> None:
    """Print one line per assignment followed by the sentence value."""
    header = " ".join(expression.variables)
    print(f"{header} | {expression.sentence}" if header else expression.sentence)
    for row in expression.truth_table():
        cells = " ".join("T" if value else "F" for value in row.assignment.values())
        result = "T" if row.value else "F"
        print(f"{cells} | {result}" if cells else result)


def print_relation(expression: LogicalExpression, other: str, relation: str) -> None:
    """Print whether ``expression`` entails or is equivalent to ``other``."""
    if relation == "entails":
        countermodel = expression.countermodel(other)
        print(f"Entails {other}: {countermodel is None}")
        if countermodel is not None:
            print(f"  Countermodel: {format_assignment(countermodel)}")
    else:
        print(f"Equivalent to {other}: {expression.equivalent(other)}")


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Veritas propositional sentence analyzer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_analysis.py "(A|B)|~(A|B)"
  python run_analysis.py "A&B" --entails "A"
  python run_analysis.py "~(A&B)" --equivalent "~A|~B" --truth-table
  python run_analysis.py -f sentence.txt --debug

Sentence syntax:
  ~ not, & and, | or, ( ) grouping; any other character is a variable.
        """,
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("sentence", nargs="?", help="Sentence to analyze")
    source.add_argument(
        "-f", "--file", type=Path, help="Path to a file containing the sentence"
    )

    parser.add_argument(
        "--entails", metavar="OTHER", help="Check whether the sentence entails OTHER"
    )

    parser.add_argument(
        "--equivalent",
        metavar="OTHER",
        help="Check whether the sentence is equivalent to OTHER",
    )

    parser.add_argument(
        "--truth-table", action="store_true", help="Print the full truth table"
    )

    parser.add_argument(
        "--max-variables",
        type=int,
        default=DEFAULT_MAX_VARIABLES,
        help=f"Refuse to enumerate more variables than this (default: {DEFAULT_MAX_VARIABLES})",
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --verbose)"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for sentence analysis.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, debug=args.debug)
    logger = get_logger()

    try:
        sentence = read_sentence_file(args.file) if args.file else args.sentence
        logger.info(f"📋 Sentence loaded: {sentence}")

        expression = LogicalExpression(sentence, max_variables=args.max_variables)
        logger.info(f"✅ Sentence is well-formed ({len(expression.variables)} variable(s))")

        expression.analyze()
        print_verdict(expression)

        if args.entails is not None:
            print_relation(expression, args.entails, "entails")

        if args.equivalent is not None:
            print_relation(expression, args.equivalent, "equivalent")

        if args.truth_table:
            print_truth_table(expression)

        return 0

    except SentenceError as e:
        logger.error(f"Sentence error: {e}")
        return 2

    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Sentence file error: {e}")
        return 3

    except EnumerationLimitExceeded as e:
        logger.error(f"Enumeration limit: {e}")
        return 4

    except KeyboardInterrupt:
        logger.error("Analysis interrupted by user")
        return 5


if __name__ == "__main__":
    sys.exit(main())
