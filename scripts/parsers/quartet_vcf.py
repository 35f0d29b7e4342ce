"""Read family quartet VCF records as variant sites.

Each record is decoded into a :class:`models.VariantSite` holding the father,
mother, child1 and child2 genotypes. Records that fail a filter or cannot be
decoded are reported through the exceptions of :mod:`parsers.errors` so that
callers can either skip them or copy them through unchanged.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

import pysam

from constants import PASS_FILTER, FilterName, InfoFlag
from models import FamilyMember, VariantSite
from models.errors import UnknownPatternError
from models.patterns import (
    FULLY_HETEROZYGOUS_PATTERN,
    THREE_QUARTER_HETEROZYGOUS_PATTERNS,
)
from parsers.errors import (
    FilteredVCFLineError,
    InvalidVCFLineError,
    PartiallyCalledVariantError,
    VCFRecordError,
)
from record_filters import RecordFilterConfig
from utils import format_site_key
from validators import validate_file_exists, validate_sample_names
from vcf_utils import genotype_from_sample, genotype_min_pl, is_member_phased

log = logging.getLogger(__name__)

MEMBERS = tuple(FamilyMember)


@dataclass
class RecordTally:
    """Outcome counts of a pass over a quartet VCF."""

    records: int = 0
    decoded: int = 0
    filtered: int = 0
    invalid: int = 0
    partially_called: int = 0
    indels: int = 0

    @property
    def rejected(self) -> int:
        return self.filtered + self.invalid + self.partially_called

    def count(self, error: VCFRecordError) -> None:
        if isinstance(error, FilteredVCFLineError):
            self.filtered += 1
        elif isinstance(error, PartiallyCalledVariantError):
            self.partially_called += 1
        else:
            self.invalid += 1


def check_filter_field(rec) -> None:
    """Raise FilteredVCFLineError unless the FILTER column is PASS."""
    filters = list(rec.filter.keys())
    if filters != [PASS_FILTER]:
        raise FilteredVCFLineError(FilterName.FILTER_FIELD, ";".join(filters) or ".")


def check_min_pl(samples: list, min_genotype_pl: int) -> None:
    """Raise FilteredVCFLineError if any member's PL confidence is too low."""
    pl_score = min(genotype_min_pl(sample) for sample in samples)
    if pl_score < min_genotype_pl:
        raise FilteredVCFLineError(FilterName.PL, str(pl_score))


def check_exclusions(site: VariantSite, config: RecordFilterConfig) -> None:
    """Raise FilteredVCFLineError for sites excluded by pattern."""
    if config.exclude_mie and site.is_mie:
        raise FilteredVCFLineError(FilterName.MIE, site.genotype_pattern)
    if (
        config.exclude_fully_heterozygous
        and site.genotype_pattern == FULLY_HETEROZYGOUS_PATTERN
    ):
        raise FilteredVCFLineError(FilterName.FULLY_HETEROZYGOUS, site.genotype_pattern)
    if (
        config.exclude_three_quarter_heterozygous
        and site.genotype_pattern in THREE_QUARTER_HETEROZYGOUS_PATTERNS
    ):
        raise FilteredVCFLineError(
            FilterName.THREE_QUARTER_HETEROZYGOUS, site.genotype_pattern
        )


def decode_record(
    rec, sample_names: list[str], config: RecordFilterConfig | None = None
) -> VariantSite:
    """Decode one pysam record into a variant site.

    Checks run in this order: FILTER column, genotype calls, genotype PL,
    pattern exclusions.

    Args:
        rec: pysam VariantRecord
        sample_names: Father, mother, child1 and child2 sample names
        config: Record filters, defaults when None

    Returns:
        The decoded VariantSite

    Raises:
        FilteredVCFLineError: If a filter rejects the record
        PartiallyCalledVariantError: If a member has a missing allele
        InvalidVCFFieldError: If a GT or PL field is unusable
        InvalidVCFLineError: If the record is not a biallelic quartet record
    """
    if config is None:
        config = RecordFilterConfig()

    if config.filter_field:
        check_filter_field(rec)

    if not rec.alts or len(rec.alts) != 1:
        raise InvalidVCFLineError(
            "Only biallelic records are supported", format_site_key(rec.chrom, rec.pos)
        )

    samples = [rec.samples[name] for name in sample_names]
    phasing_inconsistent = InfoFlag.PHASING_INCONSISTENT in rec.info
    genotypes = {}
    for member, sample in zip(MEMBERS, samples):
        phased = not phasing_inconsistent and is_member_phased(
            sample, config.phasing_quality_threshold
        )
        genotypes[member] = genotype_from_sample(sample, phased)

    if config.min_genotype_pl is not None:
        check_min_pl(samples, config.min_genotype_pl)

    try:
        site = VariantSite(
            chromosome=rec.chrom,
            position=rec.pos,
            reference=rec.ref,
            alternative=rec.alts[0],
            genotypes=genotypes,
        )
    except UnknownPatternError as e:
        raise InvalidVCFLineError(str(e), format_site_key(rec.chrom, rec.pos)) from e

    check_exclusions(site, config)
    return site


def read_quartet_sites(
    vcf,
    config: RecordFilterConfig | None = None,
    tally: RecordTally | None = None,
) -> Iterator[tuple[object, VariantSite | None]]:
    """Decode every record of an open quartet VCF.

    Yields ``(record, site)`` pairs in file order; ``site`` is None for records
    that were rejected, so callers can still copy those records through.

    Args:
        vcf: Open pysam.VariantFile
        config: Record filters, defaults when None
        tally: Counters updated in place while iterating

    Raises:
        ValidationError: If the family members cannot be found in the header
    """
    if config is None:
        config = RecordFilterConfig()
    if tally is None:
        tally = RecordTally()

    requested = list(config.samples) if config.samples is not None else None
    sample_names = validate_sample_names(
        list(vcf.header.samples), requested, "Quartet VCF"
    )
    log.info(
        "Family members: father=%s mother=%s child1=%s child2=%s", *sample_names
    )

    for rec in vcf:
        tally.records += 1
        try:
            site = decode_record(rec, sample_names, config)
        except VCFRecordError as e:
            tally.count(e)
            log.debug("Skipping %s: %s", format_site_key(rec.chrom, rec.pos), e)
            yield rec, None
            continue
        tally.decoded += 1
        if site.is_indel:
            tally.indels += 1
        yield rec, site


def load_quartet_sites(
    vcf_path: str | Path, config: RecordFilterConfig | None = None
) -> tuple[list[VariantSite], RecordTally]:
    """Read all decodable sites of a quartet VCF into memory.

    Raises:
        ValidationError: If the file is missing or lacks four samples
    """
    path = validate_file_exists(vcf_path, "Quartet VCF")
    tally = RecordTally()
    with pysam.VariantFile(str(path)) as vcf:
        sites = [
            site for _, site in read_quartet_sites(vcf, config, tally) if site is not None
        ]
    log.info(
        "Read %d records from %s: %d decoded, %d filtered, %d invalid, "
        "%d partially called",
        tally.records,
        path,
        tally.decoded,
        tally.filtered,
        tally.invalid,
        tally.partially_called,
    )
    return sites, tally
