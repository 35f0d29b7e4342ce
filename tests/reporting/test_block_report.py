"""Tests for block statistics, bedgraph and site table outputs."""

from __future__ import annotations

import io

import pytest

from constants import BLOCK_STATS_COLUMNS, SITE_TABLE_COLUMNS
from models import quartet_block_index
from reporting.block_report import (
    bedgraph_frame,
    block_statistics_frame,
    site_table,
    write_bedgraph,
)


@pytest.fixture
def index(make_site):
    index = quartet_block_index(
        [("chr1", 100, 1000, 4), ("chr1", 1000, 2000, 0), ("chr2", 0, 500, 2)]
    )
    index.classify(make_site("0/0", "0/0", "0/0", "0/1", position=150))
    index.classify(make_site("0/1", "0/1", "0/0", "1/1", position=200))
    index.classify(make_site("0/1", "0/1", "0/0", "0/0", position=300))
    index.classify(make_site("0/1", "0/1", "0/0", "0/0", position=300))
    return index


class TestBlockStatistics:
    """Tests for the block statistics table."""

    def test_frame(self, index):
        """Test one row per block plus the genome-wide row last."""
        df = block_statistics_frame(index.block_statistics(), index.genome_wide_statistics())
        assert list(df.columns) == BLOCK_STATS_COLUMNS
        assert len(df) == 4
        first = df.iloc[0]
        assert (first["chromosome"], first["start"], first["stop"]) == ("chr1", 100, 1000)
        assert first["state"] == "Identical"
        assert first["variant#"] == 4
        assert first["MIE%"] == pytest.approx(25.0)
        assert first["SCE#"] == 1

    def test_genome_wide_row(self, index):
        df = block_statistics_frame(index.block_statistics(), index.genome_wide_statistics())
        gw = df.iloc[-1]
        assert (gw["chromosome"], gw["start"], gw["stop"], gw["state"]) == (
            "GW",
            "GW",
            "GW",
            "NA",
        )
        assert gw["variant#"] == 4
        assert gw["SCE%"] == pytest.approx(25.0)

    def test_empty_blocks_have_zero_percentages(self, index):
        df = block_statistics_frame(index.block_statistics(), index.genome_wide_statistics())
        partial = df.iloc[1]
        assert partial["state"] == "partial"
        assert partial["variant#"] == 0
        assert partial["NI%"] == 0.0


class TestBedgraph:
    """Tests for bedgraph output."""

    def test_partial_blocks_skipped(self, index):
        df = bedgraph_frame(index)
        assert list(df.itertuples(index=False, name=None)) == [
            ("chr1", 100, 1000, 4),
            ("chr2", 0, 500, 2),
        ]

    def test_include_partial(self, index):
        assert len(bedgraph_frame(index, include_partial=True)) == 3

    def test_write_stream_with_track(self, index):
        """Test the track line comes first and rows have no header."""
        out = io.StringIO()
        count = write_bedgraph(index, out, track_name="quartet")
        lines = out.getvalue().splitlines()
        assert count == 2
        assert lines == [
            'track type=bedGraph name="quartet"',
            "chr1\t100\t1000\t4",
            "chr2\t0\t500\t2",
        ]

    def test_write_path(self, index, tmp_path):
        output = tmp_path / "blocks.bgr"
        write_bedgraph(index, output)
        assert output.read_text().splitlines()[0] == "chr1\t100\t1000\t4"


class TestSiteTable:
    """Tests for the site table."""

    def test_rows(self, make_site):
        df = site_table(
            [
                make_site("0/1", "0/0", "0/0", "0/0", position=100),
                make_site("0/0", "0/0", "0/0", "0/1", position=200),
            ]
        )
        assert list(df.columns) == SITE_TABLE_COLUMNS
        assert list(df["genotype pattern"]) == ["ab+aa;aa/aa", "aa/aa;aa/ab"]
        assert list(df["genotype state1"]) == ["Identical", "Mendelian Inheritance Error"]
        assert list(df["genotype state2"]) == ["Haploidentical Paternal", ""]
