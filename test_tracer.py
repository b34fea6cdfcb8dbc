"""Test to verify trace.py works and captures ledger appends."""

from pathlib import Path

from src.sudoku.board import Candidate, Line, MiniLine
from src.sudoku.deduction import LockedCandidates, NakedSingles
from src.sudoku.ledger import Deductions
from src.utils.trace import enable_tracing, get_tracer, reset_tracer


def test_tracer_captures_steps(tmp_path):
    """Every ledger append becomes one trace step; summary and CSV reflect them."""
    reset_tracer()
    tracer = get_tracer()

    ledger = Deductions()
    ledger.add_deduction(NakedSingles(Candidate.at(0, 0, 5)))
    ledger.add_deduced(Candidate.at(0, 0, 5))
    ledger.add_deduction(
        LockedCandidates(
            digit=5,
            miniline=MiniLine(Line.row(1), block=1),
            is_pointing=True,
            conflicts=[Candidate.at(1, 0, 5), Candidate.at(1, 7, 5)],
        )
    )

    summary = tracer.summary()
    assert summary['total_steps'] == 3
    assert summary['num_deductions'] == 2
    assert summary['num_eliminated'] == 2
    assert summary['action_counts'] == {'deduction': 2, 'deduced': 1}
    assert summary['variant_counts'] == {'NakedSingles': 1, 'LockedCandidates': 1}
    assert [s.step_number for s in tracer.steps] == [1, 2, 3]

    output_path = tmp_path / "traces" / "trace.csv"
    tracer.to_csv(output_path)
    assert output_path.exists(), f"CSV file should exist at {output_path}"

    content = output_path.read_text(encoding="utf-8").splitlines()
    assert content[0] == "timestamp,step_number,action_type,variant,candidate,index,conflicts"
    assert len(content) == 4
    assert "r1c1#5" in content[2]

    reset_tracer()


def test_disabled_tracer_records_nothing():
    reset_tracer()
    enable_tracing(False)

    ledger = Deductions()
    ledger.add_deduction(NakedSingles(Candidate.at(0, 0, 5)))
    assert ledger.len() == 1
    assert get_tracer().steps == []

    reset_tracer()


def test_empty_trace_is_not_written(tmp_path):
    reset_tracer()
    output_path = Path(tmp_path) / "empty.csv"
    get_tracer().to_csv(output_path)
    assert not output_path.exists()
