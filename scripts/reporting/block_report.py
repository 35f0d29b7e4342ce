"""Tabular outputs of the block analyses.

- block statistics: one row per block plus a genome-wide ``GW`` row
- bedgraph: chromosome, start, stop, state score of the non-partial blocks
- site table: alleles, genotype pattern and candidate states of each site
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Sequence, TextIO

import pandas as pd

from analysis.state_profile import site_row
from constants import (
    BLOCK_STATS_COLUMNS,
    GENOME_WIDE_LABEL,
    NOT_AVAILABLE,
    SITE_TABLE_COLUMNS,
)
from models import BlockIndex, BlockStatistics, GenomeWideStatistics, VariantSite

log = logging.getLogger(__name__)

BEDGRAPH_COLUMNS = ["chromosome", "start", "stop", "score"]


def block_statistics_frame(
    statistics: Sequence[BlockStatistics], genome_wide: GenomeWideStatistics
) -> pd.DataFrame:
    """Block statistics table with the genome-wide row last."""
    rows = [
        [
            s.chromosome,
            s.start,
            s.stop,
            s.state,
            s.variant_count,
            s.mie_count,
            s.mie_percentage,
            s.sce_count,
            s.sce_percentage,
            s.ni_count,
            s.ni_percentage,
        ]
        for s in statistics
    ]
    rows.append(
        [
            GENOME_WIDE_LABEL,
            GENOME_WIDE_LABEL,
            GENOME_WIDE_LABEL,
            NOT_AVAILABLE,
            genome_wide.variant_count,
            genome_wide.mie_count,
            genome_wide.mie_percentage,
            genome_wide.sce_count,
            genome_wide.sce_percentage,
            genome_wide.ni_count,
            genome_wide.ni_percentage,
        ]
    )
    return pd.DataFrame(rows, columns=BLOCK_STATS_COLUMNS)


def bedgraph_frame(index: BlockIndex, include_partial: bool = False) -> pd.DataFrame:
    return pd.DataFrame(
        index.bedgraph_records(include_partial=include_partial), columns=BEDGRAPH_COLUMNS
    )


def _write_bedgraph_frame(df: pd.DataFrame, f: TextIO, track_name: str | None) -> None:
    if track_name:
        f.write(f'track type=bedGraph name="{track_name}"\n')
    df.to_csv(f, sep="\t", index=False, header=False)


def write_bedgraph(
    index: BlockIndex,
    output: str | Path | TextIO,
    include_partial: bool = False,
    track_name: str | None = None,
) -> int:
    """Write the blocks of ``index`` as a headerless bedgraph.

    Args:
        index: Blocks to write
        output: Destination path or open text stream
        include_partial: Also write partial blocks (score 0)
        track_name: Optional UCSC track name written as the first line

    Returns:
        Number of blocks written
    """
    df = bedgraph_frame(index, include_partial)
    if hasattr(output, "write"):
        _write_bedgraph_frame(df, output, track_name)
    else:
        with open(output, "w") as f:
            _write_bedgraph_frame(df, f, track_name)
    log.info("Wrote %d blocks to %s", len(df), getattr(output, "name", output))
    return len(df)


def site_table(sites: Iterable[VariantSite]) -> pd.DataFrame:
    """One row per site: alleles of every member, pattern and candidate states."""
    return pd.DataFrame([site_row(site) for site in sites], columns=SITE_TABLE_COLUMNS)
