"""Top-level explanation interface.

Expose `explain_deductions(deductions)` that turns a `Deductions` ledger into
numbered, human-readable lines, one per recorded deduction.
"""

from typing import List

from src.sudoku.ledger import Deductions


def explain_deductions(deductions: Deductions) -> List[str]:
    """
    Describe every deduction in discovery order.
    Raises InternalConsistencyError if a record cannot be classified.
    """
    if not isinstance(deductions, Deductions):
        raise TypeError("explain_deductions expects a Deductions ledger")

    return [
        f"{step}. {deduction.describe()}"
        for step, deduction in enumerate(deductions.iter(), start=1)
    ]


__all__ = ["explain_deductions"]
