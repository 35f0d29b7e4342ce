from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from models.family import FamilyMember, Genotype
from models.inheritance_state import CrossTriosState, QuartetState
from models.patterns import CandidateStates, classify_pattern, derive_pattern


@dataclass(frozen=True)
class VariantSite:
    """Genotypes of a family quartet at one biallelic site.

    The genotype pattern and candidate states are derived once at construction;
    use :meth:`with_genotypes` to get a site with updated (e.g. phased)
    genotypes and a re-derived pattern.

    Raises:
        KeyError: If a family member has no genotype
        UnknownPatternError: If the genotypes do not form a canonical pattern
    """

    chromosome: str
    position: int
    reference: str
    alternative: str
    genotypes: Mapping[FamilyMember, Genotype]
    genotype_pattern: str = field(init=False)
    candidate_states: CandidateStates = field(init=False)

    def __post_init__(self):
        genotypes = MappingProxyType({m: self.genotypes[m] for m in FamilyMember})
        pattern = derive_pattern(genotypes)
        object.__setattr__(self, "genotypes", genotypes)
        object.__setattr__(self, "genotype_pattern", pattern)
        object.__setattr__(self, "candidate_states", classify_pattern(pattern))

    def genotype(self, member: FamilyMember) -> Genotype:
        return self.genotypes[member]

    def is_phased(self, member: FamilyMember) -> bool:
        return self.genotypes[member].phased

    def with_genotypes(self, **updates: Genotype) -> VariantSite:
        """Copy of this site with some members' genotypes replaced.

        Keyword names are member values, e.g. ``child1=Genotype(...)``.
        """
        genotypes = dict(self.genotypes)
        for name, genotype in updates.items():
            genotypes[FamilyMember(name)] = genotype
        return dataclasses.replace(self, genotypes=genotypes)

    @property
    def is_mie(self) -> bool:
        return self.candidate_states.includes(QuartetState.MIE)

    @property
    def is_not_informative(self) -> bool:
        return self.candidate_states.includes(QuartetState.NOT_INFORMATIVE)

    @property
    def is_indel(self) -> bool:
        return len(self.reference) != 1 or len(self.alternative) != 1

    def is_sce(self, block_state) -> bool:
        """True if this site contradicts ``block_state``.

        MIE and not informative sites are never SCE, and neither is any site
        against a partial block (``None`` or PARTIAL). Against a quartet state
        the site is SCE when no candidate equals it; against a cross-trios state
        when no candidate is compatible with it.
        """
        if block_state is None or block_state is QuartetState.PARTIAL:
            return False
        if self.is_mie or self.is_not_informative:
            return False
        if isinstance(block_state, CrossTriosState):
            return not any(
                block_state.is_compatible_with(state) for state in self.candidate_states
            )
        return not self.candidate_states.includes(block_state)

    def __repr__(self) -> str:
        return (
            f"<VariantSite({self.chromosome}:{self.position} "
            f"{self.reference}>{self.alternative}, {self.genotype_pattern})>"
        )
