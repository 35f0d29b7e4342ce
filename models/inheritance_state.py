"""Inheritance states for family quartets and founder trios.

A quartet state describes how the two children inherited from both founders.
A trio state describes one founder and the two children. Two trio states, one
per founder, combine into a cross-trios state, which is what founder-trio block
files carry.

Serialization scores:

    QuartetState     MIE=-1 PARTIAL=0 NON_IDENTICAL=1 PATERNAL=2
                     MATERNAL=3 IDENTICAL=4 NOT_INFORMATIVE=5
    TrioState        MIE=-1 UNKNOWN=0 NON_IDENTICAL=1 IDENTICAL=2
                     NOT_INFORMATIVE=10
    CrossTriosState  paternal + maternal * 3, UNKNOWN/NON_IDENTICAL/IDENTICAL only
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from models.errors import StateEncodingError


class QuartetState(Enum):
    """Inheritance state of a quartet with two founders and two children."""

    MIE = ("Mendelian Inheritance Error", -1)
    PARTIAL = ("partial", 0)
    NON_IDENTICAL = ("Non-Identical", 1)
    PATERNAL = ("Haploidentical Paternal", 2)
    MATERNAL = ("Haploidentical Maternal", 3)
    IDENTICAL = ("Identical", 4)
    NOT_INFORMATIVE = ("Not Informative", 5)

    def __init__(self, label: str, score: int):
        self.label = label
        self.score = score

    @classmethod
    def from_score(cls, score: int) -> QuartetState:
        """Decode a quartet bedgraph score.

        Raises:
            StateEncodingError: If the score does not encode a quartet state
        """
        for state in cls:
            if state.score == score:
                return state
        raise StateEncodingError(f"Invalid quartet state score: {score}")

    @classmethod
    def from_binary_state(cls, binary_state: str) -> QuartetState | None:
        """Decode an ISCA binary state. Unknown codes denote a partial block."""
        return _BINARY_STATES.get(binary_state.strip())

    def is_compatible_with(self, block_state: CrossTriosState) -> bool:
        return block_state.is_compatible_with(self)

    def __str__(self) -> str:
        return self.label


_BINARY_STATES = {
    "0000": QuartetState.IDENTICAL,
    "0001": QuartetState.PATERNAL,
    "0010": QuartetState.MATERNAL,
    "0011": QuartetState.NON_IDENTICAL,
}


class TrioState(Enum):
    """Inheritance state of a trio made of one founder and the two children."""

    MIE = ("Mendelian Inheritance Error", -1)
    UNKNOWN = ("partial", 0)
    NON_IDENTICAL = ("Non-Identical", 1)
    IDENTICAL = ("Identical", 2)
    NOT_INFORMATIVE = ("Not Informative", 10)

    def __init__(self, label: str, score: int):
        self.label = label
        self.score = score

    @classmethod
    def from_score(cls, score: int) -> TrioState:
        """Decode a trio score. Trio bedgraphs also write -2 for not informative.

        Raises:
            StateEncodingError: If the score does not encode a trio state
        """
        if score == -2:
            return cls.NOT_INFORMATIVE
        for state in cls:
            if state.score == score:
                return state
        raise StateEncodingError(f"Invalid trio state score: {score}")

    @property
    def is_known(self) -> bool:
        """True for the states that take part in the cross-trios score."""
        return self in _KNOWN_TRIO_STATES

    def __str__(self) -> str:
        return self.label


_KNOWN_TRIO_STATES = (TrioState.UNKNOWN, TrioState.NON_IDENTICAL, TrioState.IDENTICAL)

CROSS_TRIOS_SCORE_COUNT = len(_KNOWN_TRIO_STATES) ** 2


@dataclass(frozen=True)
class CrossTriosState:
    """Pair of trio states, one for each founder.

    Score table:

        score  paternal       maternal
        0      Unknown        Unknown
        1      Non-Identical  Unknown
        2      Identical      Unknown
        3      Unknown        Non-Identical
        4      Non-Identical  Non-Identical
        5      Identical      Non-Identical
        6      Unknown        Identical
        7      Non-Identical  Identical
        8      Identical      Identical
    """

    paternal: TrioState
    maternal: TrioState

    def encode(self) -> int:
        """Return the composite score of this state.

        Raises:
            StateEncodingError: If either trio state is MIE or not informative
        """
        if not (self.paternal.is_known and self.maternal.is_known):
            raise StateEncodingError(
                f"Cross-trios state '{self.label}' has no score: only unknown, "
                f"non-identical and identical trio states can be encoded"
            )
        return self.paternal.score + self.maternal.score * 3

    @property
    def score(self) -> int:
        return self.encode()

    @classmethod
    def decode(cls, score: int) -> CrossTriosState:
        """Inverse of :meth:`encode`.

        Raises:
            StateEncodingError: If the score is outside 0..8
        """
        if not 0 <= score < CROSS_TRIOS_SCORE_COUNT:
            raise StateEncodingError(f"Invalid cross-trios state score: {score}")
        return cls(
            TrioState.from_score(score % 3),
            TrioState.from_score(score // 3),
        )

    @property
    def label(self) -> str:
        return f"{self.paternal.label} Paternal, {self.maternal.label} Maternal"

    def is_compatible_with(self, quartet_state: QuartetState) -> bool:
        """True when ``quartet_state`` is consistent with both trio states."""
        paternal, maternal = self.paternal, self.maternal
        unknown = TrioState.UNKNOWN
        if paternal is unknown and maternal is unknown:
            return True

        identical = (TrioState.IDENTICAL, unknown)
        non_identical = (TrioState.NON_IDENTICAL, unknown)

        if quartet_state is QuartetState.IDENTICAL:
            return paternal in identical and maternal in identical
        if quartet_state is QuartetState.NON_IDENTICAL:
            return paternal in non_identical and maternal in non_identical
        if quartet_state is QuartetState.PATERNAL:
            return paternal in identical and maternal in non_identical
        if quartet_state is QuartetState.MATERNAL:
            return paternal in non_identical and maternal in identical
        if quartet_state is QuartetState.NOT_INFORMATIVE:
            return (
                paternal is TrioState.NOT_INFORMATIVE
                and maternal is TrioState.NOT_INFORMATIVE
            )
        if quartet_state is QuartetState.MIE:
            return paternal is TrioState.MIE or maternal is TrioState.MIE
        if quartet_state is QuartetState.PARTIAL:
            return paternal is unknown or maternal is unknown
        return False

    def __str__(self) -> str:
        return self.label
