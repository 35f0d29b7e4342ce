"""Genomic blocks of uniform inheritance state and their error counters."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from models.inheritance_state import CrossTriosState, QuartetState
from models.variant_site import VariantSite

S = TypeVar("S", QuartetState, CrossTriosState)


class SiteFlag(Enum):
    """Counter a classified site was assigned to, in priority order."""

    MIE = "MIE"
    NI = "NI"
    SCE = "SCE"


def percentage(count: int, total: int) -> float:
    """``count`` as a percentage of ``total``; 0.0 when ``total`` is 0."""
    if total == 0:
        return 0.0
    return count / total * 100.0


@dataclass(frozen=True)
class BlockStatistics:
    chromosome: str
    start: int
    stop: int
    state: str
    variant_count: int
    mie_count: int
    sce_count: int
    ni_count: int

    @property
    def mie_percentage(self) -> float:
        return percentage(self.mie_count, self.variant_count)

    @property
    def sce_percentage(self) -> float:
        return percentage(self.sce_count, self.variant_count)

    @property
    def ni_percentage(self) -> float:
        return percentage(self.ni_count, self.variant_count)


@dataclass(frozen=True)
class GenomeWideStatistics:
    block_count: int
    variant_count: int
    mie_count: int
    sce_count: int
    ni_count: int

    @property
    def mie_percentage(self) -> float:
        return percentage(self.mie_count, self.variant_count)

    @property
    def sce_percentage(self) -> float:
        return percentage(self.sce_count, self.variant_count)

    @property
    def ni_percentage(self) -> float:
        return percentage(self.ni_count, self.variant_count)


class GenomicBlock(Generic[S]):
    """Half-open interval ``[start, stop)`` on a chromosome with one state.

    A block whose state is ``None`` (or QuartetState.PARTIAL) is partial: its
    sites are counted but never flagged as SCE. The interval and state are
    read-only; only :meth:`classify` changes the counters.

    Args:
        chromosome: Chromosome name
        start: First position of the block (inclusive)
        stop: End of the block (exclusive)
        state: Inheritance state of the block, None for a partial block
    """

    __slots__ = (
        "_chromosome",
        "_start",
        "_stop",
        "_state",
        "variant_count",
        "mie_count",
        "sce_count",
        "ni_count",
    )

    def __init__(self, chromosome: str, start: int, stop: int, state: S | None = None):
        self._chromosome = chromosome
        self._start = start
        self._stop = stop
        self._state = state
        self.variant_count = 0
        self.mie_count = 0
        self.sce_count = 0
        self.ni_count = 0

    @property
    def chromosome(self) -> str:
        return self._chromosome

    @property
    def start(self) -> int:
        return self._start

    @property
    def stop(self) -> int:
        return self._stop

    @property
    def state(self) -> S | None:
        return self._state

    @property
    def score(self) -> int:
        """Bedgraph score of the block state; partial quartet blocks score 0."""
        if self._state is None:
            return QuartetState.PARTIAL.score
        return self._state.score

    @property
    def is_partial(self) -> bool:
        return self.state is None or self.state is QuartetState.PARTIAL

    def contains(self, position: int) -> bool:
        return self.start <= position < self.stop

    def is_sce(self, site: VariantSite) -> bool:
        return site.is_sce(self.state)

    def classify(self, site: VariantSite) -> SiteFlag | None:
        """Count ``site`` in this block and return the counter it went to.

        A site lands in at most one of MIE, NI and SCE, in that priority.
        """
        self.variant_count += 1
        if site.is_mie:
            self.mie_count += 1
            return SiteFlag.MIE
        if site.is_not_informative:
            self.ni_count += 1
            return SiteFlag.NI
        if not self.is_partial and site.is_sce(self.state):
            self.sce_count += 1
            return SiteFlag.SCE
        return None

    @property
    def mie_percentage(self) -> float:
        return percentage(self.mie_count, self.variant_count)

    @property
    def sce_percentage(self) -> float:
        return percentage(self.sce_count, self.variant_count)

    @property
    def ni_percentage(self) -> float:
        return percentage(self.ni_count, self.variant_count)

    @property
    def state_label(self) -> str:
        if self.is_partial:
            return QuartetState.PARTIAL.label
        return self.state.label

    def statistics(self) -> BlockStatistics:
        return BlockStatistics(
            chromosome=self.chromosome,
            start=self.start,
            stop=self.stop,
            state=self.state_label,
            variant_count=self.variant_count,
            mie_count=self.mie_count,
            sce_count=self.sce_count,
            ni_count=self.ni_count,
        )

    def __repr__(self) -> str:
        return (
            f"<GenomicBlock({self.chromosome}:{self.start}-{self.stop}, "
            f"{self.state_label}, variants={self.variant_count})>"
        )
