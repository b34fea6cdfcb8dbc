"""Board entities referenced by deductions: cells, candidates, houses, lines and positions."""

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Generic, TypeVar

SIZE = 9
BLOCK_SIZE = 3
N_CELLS = SIZE * SIZE

Digit = int
H = TypeVar("H")

# Bounded groups of digits, positions or lines (2-4 elements for subsets and fish).
Set = FrozenSet


class HouseType(Enum):
    ROW = "row"
    COL = "col"
    BLOCK = "block"


def _check_index(name: str, value: int, upper: int) -> None:
    if not 0 <= value < upper:
        raise ValueError(f"{name} must be in 0..{upper - 1}, got {value}")


@dataclass(frozen=True, order=True)
class Position(Generic[H]):
    """Index of a cell inside a house of kind `H` (0..8). Compared by index only."""

    index: int

    def __post_init__(self) -> None:
        _check_index("position", self.index, SIZE)


@dataclass(frozen=True, order=True)
class Cell:
    index: int

    def __post_init__(self) -> None:
        _check_index("cell", self.index, N_CELLS)

    @classmethod
    def at(cls, row: int, col: int) -> "Cell":
        _check_index("row", row, SIZE)
        _check_index("col", col, SIZE)
        return cls(row * SIZE + col)

    def row(self) -> int:
        return self.index // SIZE

    def col(self) -> int:
        return self.index % SIZE

    def block(self) -> int:
        return (self.row() // BLOCK_SIZE) * BLOCK_SIZE + self.col() // BLOCK_SIZE

    def row_pos(self) -> Position:
        return Position(self.col())

    def col_pos(self) -> Position:
        return Position(self.row())

    def block_pos(self) -> Position:
        return Position((self.row() % BLOCK_SIZE) * BLOCK_SIZE + self.col() % BLOCK_SIZE)

    def __str__(self) -> str:
        return f"r{self.row() + 1}c{self.col() + 1}"


@dataclass(frozen=True, order=True)
class Candidate:
    cell: Cell
    digit: Digit

    def __post_init__(self) -> None:
        if not 1 <= self.digit <= SIZE:
            raise ValueError(f"digit must be in 1..{SIZE}, got {self.digit}")

    @classmethod
    def at(cls, row: int, col: int, digit: Digit) -> "Candidate":
        return cls(Cell.at(row, col), digit)

    def __str__(self) -> str:
        return f"{self.cell}#{self.digit}"


@dataclass(frozen=True)
class House:
    """A row, column or block, identified by its kind and 0-based index."""

    kind: HouseType
    index: int

    def __post_init__(self) -> None:
        if not isinstance(self.kind, HouseType):
            raise ValueError(f"kind must be HouseType, got {type(self.kind)}")
        _check_index(self.kind.value, self.index, SIZE)

    @classmethod
    def row(cls, index: int) -> "House":
        return cls(HouseType.ROW, index)

    @classmethod
    def col(cls, index: int) -> "House":
        return cls(HouseType.COL, index)

    @classmethod
    def block(cls, index: int) -> "House":
        return cls(HouseType.BLOCK, index)

    def categorize(self) -> HouseType:
        return self.kind

    def position_of(self, cell: Cell) -> Position:
        """Project `cell` into the position numbering used by houses of this kind."""
        if self.kind is HouseType.ROW:
            return cell.row_pos()
        if self.kind is HouseType.COL:
            return cell.col_pos()
        return cell.block_pos()

    def __str__(self) -> str:
        return f"{self.kind.value} {self.index + 1}"


@dataclass(frozen=True)
class Line(House):
    """A row or a column."""

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.kind is HouseType.BLOCK:
            raise ValueError("a line must be a row or a column")


@dataclass(frozen=True)
class MiniLine:
    """The three cells shared by `block` and `line`."""

    line: Line
    block: int

    def __post_init__(self) -> None:
        if not isinstance(self.line, Line):
            raise ValueError(f"miniline needs a Line, got {type(self.line).__name__}")
        _check_index("block", self.block, SIZE)
        if self.line.kind is HouseType.ROW:
            band = self.block // BLOCK_SIZE
        else:
            band = self.block % BLOCK_SIZE
        if self.line.index // BLOCK_SIZE != band:
            raise ValueError(f"block {self.block} does not intersect {self.line}")

    def __str__(self) -> str:
        return f"{self.line} / block {self.block + 1}"
