"""Tests for the top-level explanation interface."""

import pytest

from explain import explain_deductions
from src.sudoku.board import Candidate, HouseType, Line, Position
from src.sudoku.deduction import BasicFish, HiddenSingles, InternalConsistencyError, NakedSingles, Reserved
from src.sudoku.ledger import Deductions


def test_explain_numbers_each_deduction():
    ledger = Deductions()
    ledger.add_deduction(NakedSingles(Candidate.at(0, 0, 5)))
    ledger.add_deduction(HiddenSingles(Candidate.at(8, 8, 9), HouseType.COL))
    ledger.add_deduction(
        BasicFish(
            digit=7,
            lines=frozenset({Line.col(0), Line.col(3), Line.col(6)}),
            positions=frozenset({Position(1), Position(4), Position(8)}),
            conflicts=[Candidate.at(1, 5, 7)],
        )
    )

    lines = explain_deductions(ledger)
    assert lines == [
        "1. Naked Singles: r1c1 can only be 5",
        "2. Hidden Singles: 9 has only one place in its col, r9c9",
        "3. Swordfish: 7 in col 1, col 4, col 7 is confined to positions 2, 5, 9, removing r2c6#7",
    ]


def test_explain_rejects_reserved_records():
    ledger = Deductions()
    ledger.add_deduction(Reserved())
    with pytest.raises(InternalConsistencyError):
        explain_deductions(ledger)


def test_explain_requires_a_ledger():
    with pytest.raises(TypeError):
        explain_deductions([NakedSingles(Candidate.at(0, 0, 5))])
