"""Shared fixtures for command-line tool tests."""

from __future__ import annotations

from pathlib import Path

import pytest

FAMILY_RECORDS = [
    {"chrom": "chr1", "pos": 150, "genotypes": ["0/0", "0/0", "0/0", "0/1"]},
    {"chrom": "chr1", "pos": 200, "genotypes": ["0/1", "0/1", "0/0", "1/1"]},
    {"chrom": "chr1", "pos": 300, "genotypes": ["0/1", "0/1", "0/0", "0/0"]},
    {"chrom": "chr2", "pos": 100, "genotypes": ["0/1", "0/1", "0/1", "1/1"]},
]


@pytest.fixture
def family_vcf(quartet_vcf) -> Path:
    return quartet_vcf(FAMILY_RECORDS)


@pytest.fixture
def cross_trios_bgr(bedgraph_file) -> Path:
    # identical paternal and maternal trios on chr1
    return bedgraph_file([("chr1", 100, 1000, 8), ("chr2", 0, 1000, 0)])
