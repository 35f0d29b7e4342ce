"""Chromosome-indexed collection of inheritance-state blocks.

Built in two phases: a :class:`BlockIndexBuilder` collects blocks in any order,
then :meth:`BlockIndexBuilder.build` sorts each chromosome, checks that blocks
do not overlap and returns a frozen :class:`BlockIndex`. Lookups bisect the
sorted start positions, so they cost O(log n) per chromosome.
"""

from __future__ import annotations

import logging
from bisect import bisect_right
from types import MappingProxyType
from typing import Callable, Generic, Iterable, Iterator

from models.block import (
    BlockStatistics,
    GenomeWideStatistics,
    GenomicBlock,
    S,
    SiteFlag,
)
from models.errors import BlockIndexError
from models.inheritance_state import CrossTriosState, QuartetState
from models.variant_site import VariantSite

log = logging.getLogger(__name__)

Interval = tuple[str, int, int, int]


class BlockIndex(Generic[S]):
    """Frozen, per-chromosome sorted blocks. Create with :class:`BlockIndexBuilder`."""

    def __init__(self, blocks_by_chromosome: dict[str, tuple[GenomicBlock[S], ...]]):
        self._blocks = MappingProxyType(dict(blocks_by_chromosome))
        self._starts = MappingProxyType(
            {
                chrom: tuple(block.start for block in blocks)
                for chrom, blocks in blocks_by_chromosome.items()
            }
        )

    @property
    def chromosomes(self) -> tuple[str, ...]:
        return tuple(self._blocks)

    def blocks(self, chromosome: str | None = None) -> Iterator[GenomicBlock[S]]:
        """Iterate blocks of one chromosome, or of all in load order."""
        if chromosome is not None:
            yield from self._blocks.get(chromosome, ())
            return
        for chrom_blocks in self._blocks.values():
            yield from chrom_blocks

    def __len__(self) -> int:
        return sum(len(blocks) for blocks in self._blocks.values())

    def __iter__(self) -> Iterator[GenomicBlock[S]]:
        return self.blocks()

    def lookup(self, chromosome: str, position: int) -> GenomicBlock[S] | None:
        """Block with ``start <= position < stop``, or None for gaps and unknown chromosomes."""
        starts = self._starts.get(chromosome)
        if not starts:
            return None
        i = bisect_right(starts, position) - 1
        if i < 0:
            return None
        block = self._blocks[chromosome][i]
        if position < block.stop:
            return block
        return None

    def lookup_site(self, site: VariantSite) -> GenomicBlock[S] | None:
        return self.lookup(site.chromosome, site.position)

    def classify(self, site: VariantSite) -> SiteFlag | None:
        """Count ``site`` in its enclosing block; sites outside every block are ignored."""
        block = self.lookup_site(site)
        if block is None:
            return None
        return block.classify(site)

    def block_statistics(self) -> list[BlockStatistics]:
        return [block.statistics() for block in self.blocks()]

    def genome_wide_statistics(self) -> GenomeWideStatistics:
        block_count = variant_count = mie_count = sce_count = ni_count = 0
        for block in self.blocks():
            block_count += 1
            variant_count += block.variant_count
            mie_count += block.mie_count
            sce_count += block.sce_count
            ni_count += block.ni_count
        return GenomeWideStatistics(
            block_count=block_count,
            variant_count=variant_count,
            mie_count=mie_count,
            sce_count=sce_count,
            ni_count=ni_count,
        )

    def bedgraph_records(self, include_partial: bool = False) -> list[Interval]:
        """(chromosome, start, stop, score) for each block, partial blocks skipped by default."""
        return [
            (block.chromosome, block.start, block.stop, block.score)
            for block in self.blocks()
            if include_partial or not block.is_partial
        ]

    def __repr__(self) -> str:
        return f"<BlockIndex(chromosomes={len(self._blocks)}, blocks={len(self)})>"


class BlockIndexBuilder(Generic[S]):
    """Collects blocks, then builds a :class:`BlockIndex` once."""

    def __init__(self):
        self._blocks: dict[str, list[GenomicBlock[S]]] = {}
        self._built = False

    def add(self, block: GenomicBlock[S]) -> None:
        if self._built:
            raise BlockIndexError("Cannot add blocks to an index that was already built")
        if block.stop <= block.start:
            raise BlockIndexError(
                f"Block {block.chromosome}:{block.start}-{block.stop} "
                f"has a stop position that is not after its start"
            )
        self._blocks.setdefault(block.chromosome, []).append(block)

    def build(self) -> BlockIndex[S]:
        """Sort every chromosome and freeze the index.

        Raises:
            BlockIndexError: If two blocks of a chromosome overlap
        """
        if self._built:
            raise BlockIndexError("Block index was already built")
        frozen = {}
        for chrom, blocks in self._blocks.items():
            ordered = sorted(blocks, key=lambda b: b.start)
            for previous, current in zip(ordered, ordered[1:]):
                if current.start < previous.stop:
                    raise BlockIndexError(
                        f"Overlapping blocks on {chrom}: "
                        f"{previous.start}-{previous.stop} and "
                        f"{current.start}-{current.stop}"
                    )
            frozen[chrom] = tuple(ordered)
        self._built = True
        index = BlockIndex(frozen)
        log.debug("Built %r", index)
        return index


def build_block_index(
    intervals: Iterable[Interval],
    decode_state: Callable[[int], S | None],
) -> BlockIndex[S]:
    """Build an index from raw ``(chromosome, start, stop, score)`` intervals.

    Args:
        intervals: Raw intervals from an interval source
        decode_state: Maps a raw score to a block state (None for partial)

    Raises:
        StateEncodingError: If a score cannot be decoded
        BlockIndexError: If intervals overlap or are empty
    """
    builder: BlockIndexBuilder[S] = BlockIndexBuilder()
    for chromosome, start, stop, score in intervals:
        builder.add(GenomicBlock(chromosome, start, stop, decode_state(score)))
    return builder.build()


def quartet_block_index(intervals: Iterable[Interval]) -> BlockIndex[QuartetState]:
    return build_block_index(intervals, QuartetState.from_score)


def cross_trios_block_index(intervals: Iterable[Interval]) -> BlockIndex[CrossTriosState]:
    return build_block_index(intervals, CrossTriosState.decode)
