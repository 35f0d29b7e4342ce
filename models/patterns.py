"""Quartet genotype patterns and their candidate inheritance states.

Patterns follow figure S2A of the supplementary methods of Roach et al.,
"Analysis of Genetic Inheritance in a Family Quartet by Whole-Genome
Sequencing". The most frequent allele among the founders is written "a"; on a
tie, the children decide. Founders come first, then children, separated by
";". A "/" joins an unordered pair, a "+" joins an ordered one (father left,
mother right). For example "aa+ab;aa/aa" means a homozygous "aa" father, a
heterozygous mother and two "aa" children.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterator, Mapping

from models.allele import Allele
from models.errors import UnknownPatternError
from models.family import CHILDREN, FOUNDERS, FamilyMember, Genotype
from models.inheritance_state import QuartetState

HOMOZYGOUS_A = "aa"
HETEROZYGOUS = "ab"
HOMOZYGOUS_B = "bb"

# children patterns that force a heterozygous founder pair to "aa/ab"
_FORCED_PARENT_CHILDREN = frozenset({"aa/bb", "ab/bb", "bb/bb"})


@dataclass(frozen=True)
class CandidateStates:
    """One or two inheritance states consistent with a genotype pattern."""

    primary: QuartetState
    secondary: QuartetState | None = None

    @property
    def states(self) -> tuple[QuartetState, ...]:
        if self.secondary is None:
            return (self.primary,)
        return (self.primary, self.secondary)

    def includes(self, state) -> bool:
        return self.primary is state or self.secondary is state

    def __iter__(self) -> Iterator[QuartetState]:
        return iter(self.states)

    def __len__(self) -> int:
        return 1 if self.secondary is None else 2

    def __contains__(self, state) -> bool:
        return self.includes(state)


_I = QuartetState.IDENTICAL
_N = QuartetState.NON_IDENTICAL
_P = QuartetState.PATERNAL
_M = QuartetState.MATERNAL
_NI = QuartetState.NOT_INFORMATIVE
_MIE = QuartetState.MIE

PATTERN_STATES: Mapping[str, CandidateStates] = MappingProxyType({
    # patterns consistent with one or two inheritance states
    "ab/ab;aa/aa": CandidateStates(_I),
    "ab+aa;aa/aa": CandidateStates(_I, _P),
    "aa+ab;aa/aa": CandidateStates(_I, _M),
    "ab+aa;ab/ab": CandidateStates(_I, _P),
    "aa+ab;ab/ab": CandidateStates(_I, _M),
    "ab/ab;aa/ab": CandidateStates(_P, _M),
    "ab/ab;ab/ab": CandidateStates(_I, _N),
    "aa+ab;aa/ab": CandidateStates(_N, _P),
    "ab+aa;aa/ab": CandidateStates(_N, _M),
    "ab/ab;aa/bb": CandidateStates(_N),
    # consistent with every state
    "aa/bb;ab/ab": CandidateStates(_NI),
    "aa/aa;aa/aa": CandidateStates(_NI),
    # novel allele in a child
    "aa/aa;aa/ab": CandidateStates(_MIE),
    "aa/aa;aa/bb": CandidateStates(_MIE),
    "aa/aa;ab/bb": CandidateStates(_MIE),
    "aa/aa;bb/bb": CandidateStates(_MIE),
    "aa/aa;ab/ab": CandidateStates(_MIE),
    # both alleles of a child would come from the same founder
    "aa/bb;aa/aa": CandidateStates(_MIE),
    "aa/bb;aa/ab": CandidateStates(_MIE),
    "aa/bb;aa/bb": CandidateStates(_MIE),
    "aa/ab;aa/bb": CandidateStates(_MIE),
    "aa/ab;ab/bb": CandidateStates(_MIE),
    "aa/ab;bb/bb": CandidateStates(_MIE),
})

FULLY_HETEROZYGOUS_PATTERN = "ab/ab;ab/ab"
THREE_QUARTER_HETEROZYGOUS_PATTERNS = frozenset(
    {"ab+aa;ab/ab", "aa+ab;ab/ab", "ab/ab;aa/ab"}
)


def classify_pattern(pattern: str) -> CandidateStates:
    """Return the candidate inheritance states of a genotype pattern.

    Raises:
        UnknownPatternError: If the pattern is not a canonical quartet pattern
    """
    try:
        return PATTERN_STATES[pattern]
    except KeyError:
        raise UnknownPatternError(pattern) from None


def most_frequent_allele(genotypes: Mapping[FamilyMember, Genotype]) -> Allele:
    """Allele written "a" in the pattern.

    Decided by the founders' four alleles; when they carry exactly two reference
    alleles, the children's four alleles are added and four or more reference
    alleles out of eight selects the reference.
    """
    ref_count = sum(genotypes[m].count(Allele.REFERENCE) for m in FOUNDERS)
    if ref_count <= 1:
        return Allele.ALTERNATIVE
    if ref_count >= 3:
        return Allele.REFERENCE
    ref_count += sum(genotypes[m].count(Allele.REFERENCE) for m in CHILDREN)
    if ref_count < 4:
        return Allele.ALTERNATIVE
    return Allele.REFERENCE


def member_pattern(genotype: Genotype, allele_a: Allele) -> str:
    copies = genotype.count(allele_a)
    if copies == 2:
        return HOMOZYGOUS_A
    if copies == 1:
        return HETEROZYGOUS
    return HOMOZYGOUS_B


def children_pattern(child1: str, child2: str) -> str:
    if child1 == HOMOZYGOUS_A:
        return f"{child1}/{child2}"
    if child1 == HOMOZYGOUS_B:
        return f"{child2}/{child1}"
    if child2 == HOMOZYGOUS_A:
        return f"{child2}/{child1}"
    if child2 == HOMOZYGOUS_B:
        return f"{child1}/{child2}"
    return "ab/ab"


def parents_pattern(father: str, mother: str, children: str) -> str:
    if father == mother:
        return f"{father}/{mother}"
    if father == HOMOZYGOUS_B:
        return f"{mother}/{father}"
    if mother == HOMOZYGOUS_B:
        return f"{father}/{mother}"
    if children in _FORCED_PARENT_CHILDREN:
        return "aa/ab"
    return f"{father}+{mother}"


def derive_pattern(genotypes: Mapping[FamilyMember, Genotype]) -> str:
    """Canonical quartet genotype pattern, e.g. ``"ab+aa;aa/ab"``."""
    allele_a = most_frequent_allele(genotypes)
    patterns = {
        member: member_pattern(genotypes[member], allele_a) for member in FamilyMember
    }
    children = children_pattern(
        patterns[FamilyMember.CHILD1], patterns[FamilyMember.CHILD2]
    )
    parents = parents_pattern(
        patterns[FamilyMember.FATHER], patterns[FamilyMember.MOTHER], children
    )
    return f"{parents};{children}"
