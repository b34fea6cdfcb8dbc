"""Tabular views of a deduction ledger for explainers and UIs."""

import pandas as pd

from .ledger import Deductions


def deductions_frame(deductions: Deductions) -> pd.DataFrame:
    """One row per deduction, in discovery order."""
    rows = []
    for step, deduction in enumerate(deductions.iter(), start=1):
        conflicts = list(deduction.conflicts) if deduction.has_conflicts else []
        rows.append({
            "step": step,
            "variant": deduction.variant,
            "strategy": deduction.strategy().value,
            "num_conflicts": len(conflicts),
            "conflicts": ", ".join(str(c) for c in conflicts),
        })
    return pd.DataFrame(rows, columns=["step", "variant", "strategy", "num_conflicts", "conflicts"])


def deduced_frame(deductions: Deductions) -> pd.DataFrame:
    """Solved cells (1-based row/col) in the order they were proven."""
    rows = [
        {"row": c.cell.row() + 1, "col": c.cell.col() + 1, "digit": c.digit}
        for c in deductions.deduced_entries
    ]
    return pd.DataFrame(rows, columns=["row", "col", "digit"])


def strategy_counts(deductions: Deductions) -> pd.Series:
    """Number of deductions per strategy, most frequent first."""
    frame = deductions_frame(deductions)
    return frame["strategy"].value_counts()
