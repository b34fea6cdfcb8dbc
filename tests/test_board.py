"""Unit tests for the board entities deductions refer to."""

import pytest

from src.sudoku.board import Candidate, Cell, House, HouseType, Line, MiniLine, Position


def test_cell_coordinates_and_house_positions():
    cell = Cell.at(4, 7)
    assert cell.index == 43
    assert (cell.row(), cell.col(), cell.block()) == (4, 7, 5)
    assert cell.row_pos() == Position(7)
    assert cell.col_pos() == Position(4)
    assert cell.block_pos() == Position(4)


def test_house_projects_cell_by_kind():
    cell = Cell.at(5, 5)
    assert House.row(5).position_of(cell) == Position(5)
    assert House.col(5).position_of(cell) == Position(5)
    assert House.block(4).position_of(cell) == Position(8)
    assert House.block(4).categorize() is HouseType.BLOCK


def test_candidate_label_is_one_based():
    assert str(Candidate.at(0, 0, 5)) == "r1c1#5"
    assert str(Candidate.at(8, 2, 9)) == "r9c3#9"


def test_board_entities_reject_out_of_range_values():
    with pytest.raises(ValueError):
        Cell.at(9, 0)
    with pytest.raises(ValueError):
        Candidate.at(0, 0, 0)
    with pytest.raises(ValueError):
        Position(9)
    with pytest.raises(ValueError):
        House.row(-1)


def test_line_cannot_be_a_block():
    assert Line.row(3).kind is HouseType.ROW
    with pytest.raises(ValueError):
        Line.block(0)


def test_miniline_requires_intersecting_block():
    assert MiniLine(Line.row(4), block=3).block == 3
    assert MiniLine(Line.col(7), block=5).line == Line.col(7)
    with pytest.raises(ValueError):
        MiniLine(Line.row(4), block=0)
    with pytest.raises(ValueError):
        MiniLine(House.row(1), block=0)
