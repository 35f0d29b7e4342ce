"""VCF-specific utility functions for the quartet record source.

This module provides helper functions for reading FORMAT fields of pysam
sample records and turning them into genotypes.
"""

import math
from typing import Any

from constants import FormatField
from models import Genotype
from parsers.errors import InvalidVCFFieldError, PartiallyCalledVariantError


def format_value(sample: Any, field: str, default: Any = None) -> Any:
    """Safely extract a scalar FORMAT field from a pysam sample record.

    Args:
        sample: Pysam sample object
        field: FORMAT field name to extract
        default: Default value if the field is missing, empty or NaN

    Returns:
        Field value or default

    Examples:
        >>> format_value(sample, "PQ")
        47.0
        >>> format_value(sample, "MISSING_FIELD", default=0)
        0
    """
    try:
        val = sample[field]
    except (KeyError, TypeError):
        return default
    if isinstance(val, tuple):
        val = val[0] if len(val) == 1 else default
    if val is None:
        return default
    if isinstance(val, float) and math.isnan(val):
        return default
    return val


def format_tuple(sample: Any, field: str) -> tuple | None:
    """Extract a multi-valued FORMAT field (GT, PL) as a tuple, or None if absent."""
    try:
        val = sample[field]
    except (KeyError, TypeError):
        return None
    if val is None:
        return None
    if not isinstance(val, tuple):
        return (val,)
    return val


def genotype_string(indices: tuple | None, phased: bool = False) -> str:
    """Render allele indices the way VCF writes them.

    Examples:
        >>> genotype_string((0, 1))
        '0/1'
        >>> genotype_string((None, 1), phased=True)
        '.|1'
    """
    if not indices:
        return "."
    separator = "|" if phased else "/"
    return separator.join("." if i is None else str(i) for i in indices)


def genotype_from_sample(sample: Any, phased: bool) -> Genotype:
    """Build a biallelic diploid Genotype from a pysam sample.

    Args:
        sample: Pysam sample object
        phased: Phased flag to store on the genotype

    Raises:
        PartiallyCalledVariantError: If an allele is missing
        InvalidVCFFieldError: If the call is not diploid or not 0/1 coded
    """
    indices = format_tuple(sample, FormatField.GT)
    gt = genotype_string(indices, getattr(sample, "phased", False))
    if indices is None or len(indices) != 2:
        raise InvalidVCFFieldError("Genotype must be diploid", "Genotype Field", gt)
    if any(i is None for i in indices):
        raise PartiallyCalledVariantError(gt)
    if any(i not in (0, 1) for i in indices):
        raise InvalidVCFFieldError(
            "Allele values must be 0 or 1", "Genotype Field", gt
        )
    return Genotype.from_indices(indices, phased)


def genotype_min_pl(sample: Any) -> int:
    """Smallest phred-scaled likelihood among the genotypes not called.

    This is the confidence that the called genotype is not one of the other
    two biallelic genotypes.

    Raises:
        InvalidVCFFieldError: If PL is missing or the genotype is not 0/1 coded
    """
    indices = format_tuple(sample, FormatField.GT)
    pl = format_tuple(sample, FormatField.PL)
    if pl is None or len(pl) < 3 or any(p is None for p in pl[:3]):
        raise InvalidVCFFieldError(
            "Genotype field has no usable PL subfield",
            "Genotype Field",
            genotype_string(indices),
        )
    ref_ref, ref_alt, alt_alt = (int(p) for p in pl[:3])
    alt_count = None
    if indices and len(indices) == 2 and all(i in (0, 1) for i in indices):
        alt_count = sum(indices)
    if alt_count == 0:
        return min(ref_alt, alt_alt)
    if alt_count == 1:
        return min(ref_ref, alt_alt)
    if alt_count == 2:
        return min(ref_ref, ref_alt)
    raise InvalidVCFFieldError("Invalid VCF field.", "Genotype Field", genotype_string(indices))


def is_member_phased(sample: Any, phasing_quality_threshold: float) -> bool:
    """True if the GT is phased and its PQ, when present, reaches the threshold."""
    pq = format_value(sample, FormatField.PQ)
    if pq is not None and float(pq) < phasing_quality_threshold:
        return False
    return bool(getattr(sample, "phased", False))
