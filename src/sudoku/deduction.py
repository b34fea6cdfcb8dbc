"""Deduction records: what a strategy proved, the candidates it eliminated, and which rule it was.

A record is generic over how its conflicts are held. Inside a `Deductions` ledger the
conflicts are a `range` into the ledger's eliminated-candidate buffer; records handed
out by the ledger carry a `CandidateSlice` view over that buffer instead.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, replace
from typing import Any, Dict, Generic, Iterable, Tuple, TypeVar

from .board import Candidate, Digit, House, HouseType, Line, MiniLine, Position, Set
from .strategy import Strategy

C = TypeVar("C")


class InternalConsistencyError(RuntimeError):
    """A stored deduction does not have the shape its producing strategy promised."""


class CandidateSlice(Sequence):
    """Read-only window onto a contiguous run of a candidate buffer. Nothing is copied."""

    __slots__ = ("_buffer", "_span")

    def __init__(self, buffer: Sequence, span: range):
        if span.step != 1 or span.start < 0 or span.stop < span.start or span.stop > len(buffer):
            raise InternalConsistencyError(
                f"conflict range [{span.start}, {span.stop}) does not fit a buffer of {len(buffer)} candidates"
            )
        self._buffer = buffer
        self._span = span

    def __len__(self) -> int:
        return len(self._span)

    def __getitem__(self, index):
        if isinstance(index, slice):
            sub = self._span[index]
            if sub.step != 1:
                return [self._buffer[i] for i in sub]
            if not sub:
                return CandidateSlice(self._buffer, range(self._span.start, self._span.start))
            return CandidateSlice(self._buffer, sub)
        return self._buffer[self._span[index]]

    def __iter__(self):
        for i in self._span:
            yield self._buffer[i]

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Sequence) or isinstance(other, (str, bytes)):
            return NotImplemented
        return len(self) == len(other) and all(a == b for a, b in zip(self, other))

    def __hash__(self) -> int:
        return hash(tuple(self))

    def __repr__(self) -> str:
        return f"CandidateSlice({list(self)!r})"


def _format_candidates(candidates: Iterable[Candidate]) -> str:
    return ", ".join(str(c) for c in candidates) or "nothing"


def _format_positions(positions: Iterable[Position]) -> str:
    return ", ".join(str(p.index + 1) for p in sorted(positions))


class Deduction(ABC, Generic[C]):
    """Result of a single, successful strategy application."""

    has_conflicts = False

    @property
    def variant(self) -> str:
        return type(self).__name__

    @abstractmethod
    def strategy(self) -> Strategy:
        """Return the rule that produced this deduction."""

    def resolve(self, eliminated: Sequence) -> "Deduction[CandidateSlice]":
        """Replace a stored conflict range with a view over `eliminated`."""
        return self

    @abstractmethod
    def describe(self) -> str:
        """One-sentence explanation of this deduction."""


class _ConflictsMixin:
    has_conflicts = True
    conflicts: Any

    def resolve(self, eliminated: Sequence) -> "Deduction[CandidateSlice]":
        if not isinstance(self.conflicts, range):
            return self
        return replace(self, conflicts=CandidateSlice(eliminated, self.conflicts))

    def _materialized_conflicts(self) -> Sequence:
        if isinstance(self.conflicts, range):
            raise TypeError(
                f"{type(self).__name__} holds an index range; resolve it against its ledger first"
            )
        return self.conflicts


@dataclass(frozen=True)
class NakedSingles(Deduction[C]):
    candidate: Candidate

    def strategy(self) -> Strategy:
        return Strategy.NAKED_SINGLES

    def describe(self) -> str:
        return f"{Strategy.NAKED_SINGLES.label}: {self.candidate.cell} can only be {self.candidate.digit}"


@dataclass(frozen=True)
class HiddenSingles(Deduction[C]):
    candidate: Candidate
    house_type: HouseType

    def strategy(self) -> Strategy:
        return Strategy.HIDDEN_SINGLES

    def describe(self) -> str:
        return (
            f"{Strategy.HIDDEN_SINGLES.label}: {self.candidate.digit} has only one place "
            f"in its {self.house_type.value}, {self.candidate.cell}"
        )


@dataclass(frozen=True)
class LockedCandidates(_ConflictsMixin, Deduction[C]):
    """
    `digit` is confined to `miniline` within its block or line.
    Pointing: the block confines the digit, so the rest of the line loses it.
    Claiming: the line confines the digit, so the rest of the block loses it.
    Both are classified as the same strategy.
    """

    digit: Digit
    miniline: MiniLine
    is_pointing: bool
    conflicts: C

    def strategy(self) -> Strategy:
        self._materialized_conflicts()
        return Strategy.LOCKED_CANDIDATES

    def describe(self) -> str:
        kind = "pointing" if self.is_pointing else "claiming"
        return (
            f"{Strategy.LOCKED_CANDIDATES.label} ({kind}): {self.digit} is locked in "
            f"{self.miniline}, removing {_format_candidates(self._materialized_conflicts())}"
        )


_SUBSET_STRATEGIES: Dict[Tuple[bool, int], Strategy] = {
    (False, 2): Strategy.NAKED_PAIRS,
    (False, 3): Strategy.NAKED_TRIPLES,
    (False, 4): Strategy.NAKED_QUADS,
    (True, 2): Strategy.HIDDEN_PAIRS,
    (True, 3): Strategy.HIDDEN_TRIPLES,
    (True, 4): Strategy.HIDDEN_QUADS,
}

_FISH_STRATEGIES: Dict[int, Strategy] = {
    2: Strategy.X_WING,
    3: Strategy.SWORDFISH,
    4: Strategy.JELLYFISH,
}


@dataclass(frozen=True)
class Subsets(_ConflictsMixin, Deduction[C]):
    """
    Naked or hidden subset of 2-4 cells inside `house`.

    Both kinds share this shape. A hidden subset removes other digits from its own
    cells, so its first conflict lies inside `positions`; a naked subset removes its
    digits from the rest of the house, outside `positions`.
    """

    house: House
    positions: Set[Position[House]]
    digits: Set[Digit]
    conflicts: C

    def is_hidden(self) -> bool:
        conflicts = self._materialized_conflicts()
        if not conflicts:
            raise InternalConsistencyError(f"subset in {self.house} recorded without conflicts")
        return self.house.position_of(conflicts[0].cell) in self.positions

    def strategy(self) -> Strategy:
        key = (self.is_hidden(), len(self.positions))
        try:
            return _SUBSET_STRATEGIES[key]
        except KeyError:
            raise InternalConsistencyError(
                f"subset in {self.house} has {len(self.positions)} positions, expected 2-4"
            ) from None

    def describe(self) -> str:
        digits = ", ".join(str(d) for d in sorted(self.digits))
        return (
            f"{self.strategy().label}: digits {digits} are locked in {self.house} "
            f"at positions {_format_positions(self.positions)}, "
            f"removing {_format_candidates(self._materialized_conflicts())}"
        )


@dataclass(frozen=True)
class BasicFish(_ConflictsMixin, Deduction[C]):
    """X-Wing, Swordfish or Jellyfish on `digit`: as many `lines` as `positions`."""

    digit: Digit
    lines: Set[Line]
    positions: Set[Position[Line]]
    conflicts: C

    def strategy(self) -> Strategy:
        self._materialized_conflicts()
        try:
            return _FISH_STRATEGIES[len(self.positions)]
        except KeyError:
            raise InternalConsistencyError(
                f"fish on digit {self.digit} has {len(self.positions)} positions, expected 2-4"
            ) from None

    def describe(self) -> str:
        lines = ", ".join(str(line) for line in sorted(self.lines, key=lambda l: (l.kind.value, l.index)))
        return (
            f"{self.strategy().label}: {self.digit} in {lines} is confined to positions "
            f"{_format_positions(self.positions)}, removing {_format_candidates(self._materialized_conflicts())}"
        )


@dataclass(frozen=True)
class Reserved(Deduction[C]):
    """Slot for strategy kinds not supported yet (e.g. singles chains)."""

    def strategy(self) -> Strategy:
        raise InternalConsistencyError("reserved deduction kind has no strategy")

    def describe(self) -> str:
        raise InternalConsistencyError("reserved deduction kind cannot be explained")
