"""Sudoku deduction records, strategy classification, and the per-run deduction ledger."""

from .board import Candidate, Cell, House, HouseType, Line, MiniLine, Position
from .strategy import Strategy
from .deduction import (
    BasicFish,
    CandidateSlice,
    Deduction,
    HiddenSingles,
    InternalConsistencyError,
    LockedCandidates,
    NakedSingles,
    Reserved,
    Subsets,
)
from .ledger import Deductions

__all__ = [
    "Candidate",
    "Cell",
    "House",
    "HouseType",
    "Line",
    "MiniLine",
    "Position",
    "Strategy",
    "Deduction",
    "NakedSingles",
    "HiddenSingles",
    "LockedCandidates",
    "Subsets",
    "BasicFish",
    "Reserved",
    "CandidateSlice",
    "InternalConsistencyError",
    "Deductions",
]
