"""Append-only store of the deductions made during one solve run."""

from dataclasses import replace
from typing import Any, Dict, Iterable, Iterator, List, Optional

from .board import Candidate
from .deduction import CandidateSlice, Deduction
from src.utils.trace import get_tracer


class Deductions:
    """
    The sequence of deductions made to solve or partially solve a sudoku.

    Eliminated candidates of all records live in one flat buffer; each stored record
    keeps a `range` into it. Buffers only ever grow, so ranges already handed out stay
    valid and views returned by `get`/`iter` remain readable for the ledger's lifetime.
    """

    def __init__(self) -> None:
        self.deductions: List[Deduction[range]] = []
        self.deduced_entries: List[Candidate] = []
        self.eliminated_entries: List[Candidate] = []

    def add_deduction(self, deduction: Deduction[Iterable[Candidate]]) -> int:
        """
        Store `deduction`, moving its conflicts into the eliminated buffer.
        Returns the index of the new record.
        """
        if not isinstance(deduction, Deduction):
            raise TypeError(f"expected a Deduction, got {type(deduction).__name__}")

        conflicts = 0
        if deduction.has_conflicts:
            if isinstance(deduction.conflicts, range):
                raise TypeError("conflict ranges are issued by the ledger; pass the candidates instead")
            start = len(self.eliminated_entries)
            self.eliminated_entries.extend(deduction.conflicts)
            conflicts = len(self.eliminated_entries) - start
            deduction = replace(deduction, conflicts=range(start, len(self.eliminated_entries)))

        self.deductions.append(deduction)
        index = len(self.deductions) - 1
        get_tracer().log_deduction(variant=deduction.variant, index=index, conflicts=conflicts)
        return index

    def add_deduced(self, candidate: Candidate) -> None:
        """Log a candidate proven true."""
        self.deduced_entries.append(candidate)
        get_tracer().log_deduced(candidate, index=len(self.deduced_entries) - 1)

    def len(self) -> int:
        """Returns the number of deductions."""
        return len(self.deductions)

    def __len__(self) -> int:
        return len(self.deductions)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Deductions):
            return NotImplemented
        return (
            self.deductions == other.deductions
            and self.deduced_entries == other.deduced_entries
            and self.eliminated_entries == other.eliminated_entries
        )

    def get(self, index: int) -> Optional[Deduction[CandidateSlice]]:
        """Return the `index`th deduction, or None if there is none."""
        if not 0 <= index < len(self.deductions):
            return None
        return self.deductions[index].resolve(self.eliminated_entries)

    def iter(self) -> Iterator[Deduction[CandidateSlice]]:
        """Return a fresh iterator over the deductions in discovery order."""
        eliminated = self.eliminated_entries
        return (deduction.resolve(eliminated) for deduction in self.deductions)

    def __iter__(self) -> Iterator[Deduction[CandidateSlice]]:
        return self.iter()

    def summary(self) -> Dict[str, Any]:
        """Counts of records, entries and deductions per strategy."""
        strategy_counts: Dict[str, int] = {}
        for deduction in self.iter():
            name = deduction.strategy().value
            strategy_counts[name] = strategy_counts.get(name, 0) + 1

        return {
            'num_deductions': len(self.deductions),
            'num_deduced': len(self.deduced_entries),
            'num_eliminated': len(self.eliminated_entries),
            'strategy_counts': strategy_counts,
        }
