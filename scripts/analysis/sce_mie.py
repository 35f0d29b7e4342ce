"""Mark MIE and SCE records of a quartet VCF with INFO flags.

A record is flagged MIE when its genotypes are a Mendelian inheritance error,
otherwise SCE when it contradicts the state of the block that contains it.
Every record is written out, flagged or not, in input order.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

import pysam

from constants import InfoFlag
from models import BlockIndex, VariantSite
from parsers.quartet_vcf import RecordTally, read_quartet_sites
from record_filters import RecordFilterConfig
from validators import validate_file_exists

log = logging.getLogger(__name__)


@dataclass
class MarkingSummary:
    records: int = 0
    mie: int = 0
    sce: int = 0
    undecoded: int = 0


def flag_site(site: VariantSite, index: BlockIndex) -> str | None:
    """INFO flag for ``site``: MIE first, then SCE against its block, else None."""
    if site.is_mie:
        return InfoFlag.MIE
    block = index.lookup_site(site)
    if block is not None and block.is_sce(site):
        return InfoFlag.SCE
    return None


def add_flag_headers(header) -> None:
    """Declare the MIE and SCE INFO flags in a pysam header if missing."""
    for flag, description in InfoFlag.DESCRIPTIONS.items():
        if flag not in header.info:
            header.add_line(
                f'##INFO=<ID={flag},Number=0,Type=Flag,Description="{description}">'
            )


def mark_vcf(
    vcf_path: str | Path,
    output_path: str | Path,
    index: BlockIndex,
    config: RecordFilterConfig | None = None,
) -> MarkingSummary:
    """Copy a quartet VCF, adding MIE/SCE INFO flags.

    Records that cannot be decoded are copied unchanged.

    Args:
        vcf_path: Input quartet VCF
        output_path: Output VCF (compressed when it ends in .gz)
        index: Blocks the SCE check is done against
        config: Record filters, defaults when None

    Returns:
        Counts of written, MIE, SCE and undecoded records

    Raises:
        ValidationError: If the VCF is missing or lacks four samples
    """
    path = validate_file_exists(vcf_path, "Quartet VCF")
    summary = MarkingSummary()
    tally = RecordTally()
    mode = "wz" if str(output_path).endswith(".gz") else "w"

    with pysam.VariantFile(str(path)) as vcf:
        add_flag_headers(vcf.header)
        with pysam.VariantFile(str(output_path), mode, header=vcf.header) as out:
            for rec, site in read_quartet_sites(vcf, config, tally):
                summary.records += 1
                if site is None:
                    summary.undecoded += 1
                else:
                    flag = flag_site(site, index)
                    if flag == InfoFlag.MIE:
                        summary.mie += 1
                    elif flag == InfoFlag.SCE:
                        summary.sce += 1
                    if flag is not None:
                        rec.info[flag] = True
                out.write(rec)

    log.info(
        "Wrote %d records to %s: %d MIE, %d SCE, %d copied undecoded",
        summary.records,
        output_path,
        summary.mie,
        summary.sce,
        summary.undecoded,
    )
    return summary
