from __future__ import annotations

from enum import Enum


class Allele(Enum):
    """Biallelic site allele, coded 0 (reference) and 1 (alternative) in VCF."""

    REFERENCE = "Reference Allele"
    ALTERNATIVE = "Alternative Allele"

    def opposite(self) -> Allele:
        if self is Allele.REFERENCE:
            return Allele.ALTERNATIVE
        return Allele.REFERENCE

    @classmethod
    def from_index(cls, index: int) -> Allele:
        """Map a VCF allele index to an Allele.

        Raises:
            ValueError: If the index is not 0 or 1
        """
        if index == 0:
            return cls.REFERENCE
        if index == 1:
            return cls.ALTERNATIVE
        raise ValueError(f"Allele index must be 0 or 1, got: {index}")

    @property
    def index(self) -> int:
        return 0 if self is Allele.REFERENCE else 1

    def __str__(self) -> str:
        return self.value
