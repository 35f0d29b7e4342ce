"""Genomic regions whose variants are left out of block statistics.

Typically the segmental duplications of the reference, where genotype calls
are unreliable. Regions are read from a BED or bedgraph file (only the first
three columns are used) or a bgzipped, tabix-indexed BED.
"""

import logging
from bisect import bisect_right
from pathlib import Path

import pysam

from models import VariantSite
from parsers.block_files import read_interval_table
from utils import parse_position
from validators import ValidationError, validate_file_exists

log = logging.getLogger(__name__)


def merge_regions(regions: list[tuple[int, int]]) -> list[tuple[int, int]]:
    """Sort closed intervals and merge the ones that overlap or touch."""
    merged: list[tuple[int, int]] = []
    for start, stop in sorted(regions):
        if merged and start <= merged[-1][1] + 1:
            merged[-1] = (merged[-1][0], max(merged[-1][1], stop))
        else:
            merged.append((start, stop))
    return merged


class ExcludedRegions:
    """Per-chromosome regions; a position is excluded when ``start <= pos <= stop``.

    Args:
        regions: Chromosome name to list of (start, stop) pairs, any order,
            overlaps allowed
    """

    def __init__(self, regions: dict[str, list[tuple[int, int]]] | None = None):
        self._regions = {
            chrom: merge_regions(intervals) for chrom, intervals in (regions or {}).items()
        }
        self._starts = {
            chrom: [start for start, _ in intervals]
            for chrom, intervals in self._regions.items()
        }

    @classmethod
    def from_file(cls, path: str | Path) -> "ExcludedRegions":
        """Load regions from a BED/bedgraph file, or a tabix-indexed ``.gz`` BED.

        Raises:
            ValidationError: If the file is missing or unreadable
        """
        path = validate_file_exists(path, "Excluded regions file")
        if path.suffix == ".gz":
            return cls._from_tabix(path)

        df = read_interval_table(path, 3, "Excluded regions file")
        regions: dict[str, list[tuple[int, int]]] = {}
        skipped = 0
        for row in df.itertuples(index=False, name=None):
            start = parse_position(row[1])
            stop = parse_position(row[2])
            if start is None or stop is None or stop < start:
                skipped += 1
                continue
            regions.setdefault(row[0].strip(), []).append((start, stop))
        if skipped:
            log.warning("Skipped %d malformed rows of %s", skipped, path.name)
        excluded = cls(regions)
        log.info("Loaded %d excluded regions from %s", len(excluded), path.name)
        return excluded

    @classmethod
    def _from_tabix(cls, path: Path) -> "ExcludedRegions":
        regions: dict[str, list[tuple[int, int]]] = {}
        try:
            with pysam.TabixFile(str(path)) as tbx:
                for contig in tbx.contigs:
                    for bed in tbx.fetch(contig, parser=pysam.asBed()):
                        regions.setdefault(contig, []).append((bed.start, bed.end))
        except (OSError, ValueError) as e:
            raise ValidationError(f"Could not read tabix file {path}: {e}") from e
        excluded = cls(regions)
        log.info("Loaded %d excluded regions from %s", len(excluded), path.name)
        return excluded

    def contains(self, chromosome: str, position: int) -> bool:
        starts = self._starts.get(chromosome)
        if not starts:
            return False
        i = bisect_right(starts, position) - 1
        return i >= 0 and position <= self._regions[chromosome][i][1]

    def contains_site(self, site: VariantSite) -> bool:
        return self.contains(site.chromosome, site.position)

    def __len__(self) -> int:
        return sum(len(intervals) for intervals in self._regions.values())

    def __repr__(self) -> str:
        return f"<ExcludedRegions(chromosomes={len(self._regions)}, regions={len(self)})>"
