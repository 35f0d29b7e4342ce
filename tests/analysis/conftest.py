"""Shared fixtures for analysis tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from models import quartet_block_index

# One identical block on chr1; the records cover each way a site can be counted
SCENARIO_RECORDS = [
    {"chrom": "chr1", "pos": 150, "genotypes": ["0/0", "0/0", "0/0", "0/1"]},  # MIE
    {"chrom": "chr1", "pos": 200, "genotypes": ["0/1", "0/1", "0/0", "1/1"]},  # SCE
    {"chrom": "chr1", "pos": 300, "genotypes": ["0/1", "0/1", "0/0", "0/0"]},
    {"chrom": "chr1", "pos": 400, "genotypes": ["./1", "0/1", "0/0", "0/0"]},
    {"chrom": "chr1", "pos": 500, "genotypes": ["0/1", "0/1", "0/0", "0/0"], "alt": "AT"},
    {
        "chrom": "chr1",
        "pos": 600,
        "genotypes": ["0/1", "0/1", "0/0", "1/1"],
        "filter": "LowQual",
    },
    {"chrom": "chr1", "pos": 5000, "genotypes": ["0/0", "0/0", "0/0", "0/0"]},
]


@pytest.fixture
def scenario_vcf(quartet_vcf) -> Path:
    return quartet_vcf(SCENARIO_RECORDS)


@pytest.fixture
def identical_index():
    return quartet_block_index([("chr1", 100, 1000, 4)])
