from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from models.allele import Allele


class FamilyMember(Enum):
    """The four members of a family quartet, in VCF sample order."""

    FATHER = "father"
    MOTHER = "mother"
    CHILD1 = "child1"
    CHILD2 = "child2"


FOUNDERS = (FamilyMember.FATHER, FamilyMember.MOTHER)
CHILDREN = (FamilyMember.CHILD1, FamilyMember.CHILD2)


@dataclass(frozen=True)
class Genotype:
    """Two alleles of one family member at one site.

    Allele order is only meaningful when ``phased`` is True.
    """

    first: Allele
    second: Allele
    phased: bool = False

    @property
    def alleles(self) -> tuple[Allele, Allele]:
        return (self.first, self.second)

    def count(self, allele: Allele) -> int:
        """Number of copies of ``allele`` carried by this genotype."""
        return (self.first is allele) + (self.second is allele)

    @property
    def is_heterozygous(self) -> bool:
        return self.first is not self.second

    @classmethod
    def from_indices(cls, indices: tuple[int, int], phased: bool = False) -> Genotype:
        """Build a genotype from VCF allele indices such as ``(0, 1)``."""
        first, second = indices
        return cls(Allele.from_index(first), Allele.from_index(second), phased)

    def __str__(self) -> str:
        separator = "|" if self.phased else "/"
        return f"{self.first.index}{separator}{self.second.index}"
