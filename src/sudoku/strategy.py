"""Named solving rules a recorded deduction can be attributed to."""

import re
from enum import Enum


class Strategy(Enum):
    NAKED_SINGLES = "NakedSingles"
    HIDDEN_SINGLES = "HiddenSingles"
    LOCKED_CANDIDATES = "LockedCandidates"
    NAKED_PAIRS = "NakedPairs"
    NAKED_TRIPLES = "NakedTriples"
    NAKED_QUADS = "NakedQuads"
    HIDDEN_PAIRS = "HiddenPairs"
    HIDDEN_TRIPLES = "HiddenTriples"
    HIDDEN_QUADS = "HiddenQuads"
    X_WING = "XWing"
    SWORDFISH = "Swordfish"
    JELLYFISH = "Jellyfish"

    @property
    def label(self) -> str:
        """Human-readable name, e.g. 'Naked Pairs'."""
        if self is Strategy.X_WING:
            return "X-Wing"
        return re.sub(r"(?<!^)(?=[A-Z])", " ", self.value)
