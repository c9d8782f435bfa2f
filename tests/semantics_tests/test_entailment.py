# tests/semantics_tests/test_entailment.py
# This file is part of Veritas - A Propositional Sentence Evaluator
#
# Test suite for entailment and equivalence between sentences

import pytest
import semantics.analysis as analysis
from semantics import (
    EnumerationLimitExceeded,
    entails,
    equivalent,
    evaluate_under,
    find_countermodel,
)
from syntax import MalformedExpression, parse


class TestEntailment:
    """A entails B when every model of A is a model of B."""

    ENTAILMENT_CASES = [
        ("A&B", "A", True),
        ("A", "A&B", False),
        ("A", "A|B", True),
        ("A|B", "A", False),
        ("A&(A|B)", "A", True),
        ("(A|B)&~A", "B", True),
        ("A&~A", "B", True),  # a contradiction entails anything
        ("B", "A|~A", True),  # anything entails a tautology
        ("(A|B)|~(A|B)", "A&~A", False),
    ]

    @pytest.mark.parametrize("premise, conclusion, expected", ENTAILMENT_CASES)
    def test_entails(self, premise, conclusion, expected):
        assert entails(premise, conclusion) is expected

    def test_countermodel_is_first_in_enumeration_order(self):
        assert find_countermodel("A", "A&B") == {"A": True, "B": False}

    def test_countermodel_falsifies_conclusion(self):
        countermodel = find_countermodel("A|B", "A&C")

        assert countermodel is not None
        assert evaluate_under("A|B", countermodel) is True
        assert evaluate_under("A&C", countermodel) is False

    def test_no_countermodel_when_entailed(self):
        assert find_countermodel("A&B", "B") is None

    def test_union_variable_order(self):
        """Premise variables come first, then new conclusion variables."""
        countermodel = find_countermodel("B", "A&C")
        assert list(countermodel) == ["B", "A", "C"]

    def test_stops_at_first_countermodel(self, monkeypatch):
        calls = []
        original = analysis.evaluate

        def counting(tree):
            calls.append(tree)
            return original(tree)

        monkeypatch.setattr(analysis, "evaluate", counting)
        find_countermodel("A", "A&B")

        # index 0 falsifies the premise; index 1 is the countermodel
        assert len(calls) == 3

    def test_accepts_trees(self):
        assert entails(parse("A&B"), parse("B")) is True

    def test_malformed_premise(self):
        with pytest.raises(MalformedExpression):
            entails("A&", "A")

    def test_limit_counts_combined_variables(self):
        with pytest.raises(EnumerationLimitExceeded) as exc_info:
            entails("A&B", "C", max_variables=2)

        assert exc_info.value.variable_count == 3


class TestEquivalence:
    """Equivalence is mutual entailment."""

    EQUIVALENCE_CASES = [
        # De Morgan
        ("~(A&B)", "~A|~B", True),
        ("~(A|B)", "~A&~B", True),
        # Double negation
        ("~~A", "A", True),
        # Distribution
        ("A&(B|C)", "(A&B)|(A&C)", True),
        ("A|(B&C)", "(A|B)&(A|C)", True),
        # Tautologies over different variable sets
        ("A|B|~A|B", "(A|B)|~(A|B)", True),
        ("A|~A", "B|~B", True),
        ("(A|B)|~(A|B)", "~(~A&A)", True),
        # Non-equivalent pairs
        ("A", "B", False),
        ("A&B", "A", False),
        ("~(A&B)", "~A&~B", False),
        ("A|B&C", "(A|B)&C", False),
    ]

    @pytest.mark.parametrize("first, second, expected", EQUIVALENCE_CASES)
    def test_equivalent(self, first, second, expected):
        assert equivalent(first, second) is expected

    @pytest.mark.parametrize("first, second, expected", EQUIVALENCE_CASES)
    def test_symmetric(self, first, second, expected):
        assert equivalent(second, first) is expected

    @pytest.mark.parametrize("first, second, expected", EQUIVALENCE_CASES)
    def test_matches_mutual_entailment(self, first, second, expected):
        assert equivalent(first, second) == (
            entails(first, second) and entails(second, first)
        )
