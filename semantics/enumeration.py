# semantics/enumeration.py
# This file is part of Veritas - A Propositional Sentence Evaluator
#
# Exhaustive enumeration of truth assignments

"""Truth assignments over an ordered variable set.

Assignment number i makes the j-th variable true exactly when bit j of i is
set, so index 0 is all-false and the first variable toggles fastest.
"""

from __future__ import annotations
from typing import Dict, Iterator, Optional, Sequence

from .exceptions import EnumerationLimitExceeded


def assignment_count(variable_count: int) -> int:
    """Number of assignments over ``variable_count`` variables (2^n)."""
    return 1 << variable_count


def check_limit(variable_count: int, max_variables: Optional[int]) -> None:
    """Raise EnumerationLimitExceeded if the variable count is over the cap.

    Args:
        variable_count: Number of variables to enumerate
        max_variables: Cap on the variable count, or None for no cap
    """
    if max_variables is not None and variable_count > max_variables:
        raise EnumerationLimitExceeded(variable_count, max_variables)


def assignment_for(index: int, variables: Sequence[str]) -> Dict[str, bool]:
    """Build the assignment numbered ``index``.

    Variable j is true iff bit j of ``index`` is set, so index 0 makes every
    variable false and index 2^n - 1 makes every variable true.
    """
    return {name: bool(index >> j & 1) for j, name in enumerate(variables)}


def assignments(variables: Sequence[str]) -> Iterator[Dict[str, bool]]:
    """Yield all 2^n assignments over ``variables`` in index order.

    Each assignment is a fresh dict. With no variables exactly one empty
    assignment is produced.

    Args:
        variables: Variable symbols in enumeration order

    Yields:
        Mapping from each variable to its truth value
    """
    for index in range(assignment_count(len(variables))):
        yield assignment_for(index, variables)


def format_assignment(assignment: Dict[str, bool]) -> str:
    """Render an assignment as ``A=T B=F``."""
    if not assignment:
        return "{}"
    return " ".join(f"{name}={'T' if value else 'F'}" for name, value in assignment.items())
