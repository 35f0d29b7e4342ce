"""Count MIE, SCE and not informative sites per inheritance-state block.

Every decodable site of a quartet VCF is classified by the block that contains
it. Partially called records are counted as variants but cannot be classified.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import pysam

from analysis.excluded_regions import ExcludedRegions
from models import BlockIndex, BlockStatistics, GenomeWideStatistics
from parsers.quartet_vcf import RecordTally, read_quartet_sites
from record_filters import RecordFilterConfig
from validators import validate_file_exists

log = logging.getLogger(__name__)


@dataclass
class BlockStatsRun:
    """Result of streaming a quartet VCF through a block index."""

    tally: RecordTally = field(default_factory=RecordTally)
    variant_count: int = 0
    indel_count: int = 0
    partially_called_count: int = 0
    excluded_count: int = 0
    outside_blocks_count: int = 0
    block_statistics: list[BlockStatistics] = field(default_factory=list)
    genome_wide: GenomeWideStatistics | None = None

    @property
    def snp_count(self) -> int:
        return self.variant_count - self.indel_count - self.partially_called_count

    def summary(self) -> str:
        return (
            f"Variant #: {self.variant_count}, "
            f"Partially Called Variant #: {self.partially_called_count}, "
            f"SNP #: {self.snp_count}, Indel #: {self.indel_count}"
        )


def generate_block_stats(
    vcf_path: str | Path,
    index: BlockIndex,
    config: RecordFilterConfig | None = None,
    excluded_regions: ExcludedRegions | None = None,
) -> BlockStatsRun:
    """Classify every site of a quartet VCF into the blocks of ``index``.

    The index counters are updated in place, so ``index`` should be freshly
    loaded.

    Args:
        vcf_path: Path to the quartet VCF
        index: Block index the sites are counted in
        config: Record filters, defaults when None
        excluded_regions: Sites inside these regions are not counted

    Returns:
        Variant counts plus per-block and genome-wide statistics

    Raises:
        ValidationError: If the VCF is missing or lacks four samples
    """
    path = validate_file_exists(vcf_path, "Quartet VCF")
    run = BlockStatsRun()

    with pysam.VariantFile(str(path)) as vcf:
        for _, site in read_quartet_sites(vcf, config, run.tally):
            if site is None:
                continue
            if excluded_regions is not None and excluded_regions.contains_site(site):
                run.excluded_count += 1
                continue
            run.variant_count += 1
            if site.is_indel:
                run.indel_count += 1
            if index.lookup_site(site) is None:
                run.outside_blocks_count += 1
                continue
            index.classify(site)

    # partially called records still count as variants
    run.partially_called_count = run.tally.partially_called
    run.variant_count += run.partially_called_count

    run.block_statistics = index.block_statistics()
    run.genome_wide = index.genome_wide_statistics()
    log.info(run.summary())
    log.info(
        "%d sites in excluded regions, %d sites outside every block",
        run.excluded_count,
        run.outside_blocks_count,
    )
    return run
