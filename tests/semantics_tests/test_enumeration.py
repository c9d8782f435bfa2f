# tests/semantics_tests/test_enumeration.py
# This file is part of Veritas - A Propositional Sentence Evaluator
#
# Test suite for truth-assignment enumeration

import pytest
from semantics import EnumerationLimitExceeded, assignments
from semantics.enumeration import (
    assignment_count,
    assignment_for,
    check_limit,
    format_assignment,
)


class TestAssignmentEnumeration:
    """Enumeration order and size."""

    def test_no_variables_yields_one_empty_assignment(self):
        assert list(assignments([])) == [{}]

    def test_bit_order(self):
        """Variable j is true iff bit j of the index is set."""
        assert list(assignments(["A", "B"])) == [
            {"A": False, "B": False},
            {"A": True, "B": False},
            {"A": False, "B": True},
            {"A": True, "B": True},
        ]

    def test_assignment_for_index(self):
        assert assignment_for(5, ["A", "B", "C"]) == {"A": True, "B": False, "C": True}
        assert assignment_for(0, ["A", "B", "C"]) == {"A": False, "B": False, "C": False}
        assert assignment_for(7, ["A", "B", "C"]) == {"A": True, "B": True, "C": True}

    @pytest.mark.parametrize("count", [0, 1, 3, 5])
    def test_all_assignments_distinct(self, count):
        names = [chr(ord("A") + i) for i in range(count)]
        produced = [tuple(a.values()) for a in assignments(names)]

        assert len(produced) == assignment_count(count) == 2 ** count
        assert len(set(produced)) == len(produced)

    def test_assignments_are_fresh_dicts(self):
        first, second = list(assignments(["A"]))
        first["A"] = "changed"
        assert second == {"A": True}

    def test_check_limit(self):
        check_limit(3, None)
        check_limit(3, 3)

        with pytest.raises(EnumerationLimitExceeded) as exc_info:
            check_limit(4, 3)

        assert exc_info.value.variable_count == 4
        assert exc_info.value.limit == 3
        assert "16 assignments" in str(exc_info.value)

    def test_format_assignment(self):
        assert format_assignment({"A": True, "B": False}) == "A=T B=F"
        assert format_assignment({}) == "{}"
