"""Shared test fixtures for the quartet inheritance tools."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import pytest

# Add scripts directory and project root to path so all tests can import them
SCRIPTS_DIR = str(Path(__file__).resolve().parent.parent / "scripts")
if SCRIPTS_DIR not in sys.path:
    sys.path.insert(0, SCRIPTS_DIR)

PROJECT_ROOT = str(Path(__file__).resolve().parent.parent)
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from models import FamilyMember, Genotype, VariantSite  # noqa: E402

QUARTET_SAMPLES = ["FATHER", "MOTHER", "CHILD1", "CHILD2"]

VCF_HEADER = """##fileformat=VCFv4.2
##FILTER=<ID=PASS,Description="All filters passed">
##FILTER=<ID=LowQual,Description="Low quality">
##INFO=<ID=PhasingInconsistent,Number=0,Type=Flag,Description="Phasing inconsistent">
##FORMAT=<ID=GT,Number=1,Type=String,Description="Genotype">
##FORMAT=<ID=PL,Number=G,Type=Integer,Description="Phred-scaled genotype likelihoods">
##FORMAT=<ID=PQ,Number=1,Type=Float,Description="Phasing quality">
##contig=<ID=chr1,length=10000000>
##contig=<ID=chr2,length=10000000>
"""

# Confident PL for each called genotype: the called one is 0, the others 40+
DEFAULT_PL = {0: "0,40,80", 1: "40,0,80", 2: "80,40,0"}


def _default_pl(gt: str) -> str:
    alleles = gt.replace("|", "/").split("/")
    if any(a not in ("0", "1") for a in alleles):
        return "."
    return DEFAULT_PL[sum(int(a) for a in alleles)]


@pytest.fixture
def temp_tsv_file(tmp_path) -> Callable:
    """Fixture to create temporary text files for testing."""

    def _create_tsv(content: str, filename: str = "test.tsv") -> Path:
        """Create a file with given content.

        Args:
            content: File content
            filename: Name of the file

        Returns:
            Path to the created file
        """
        file_path = tmp_path / filename
        file_path.write_text(content)
        return file_path

    return _create_tsv


@pytest.fixture
def quartet_vcf(tmp_path) -> Callable:
    """Factory fixture for creating uncompressed quartet VCF files.

    Each record is a dict with chrom, pos, genotypes (four GT strings in
    father, mother, child1, child2 order) and optionally ref, alt, filter,
    info, pls (four PL strings) and pqs (four PQ values).

    Example:
        >>> vcf_path = quartet_vcf([
        ...     {"chrom": "chr1", "pos": 100,
        ...      "genotypes": ["0/1", "0/1", "0/0", "0/0"]},
        ... ])
    """

    def _create_vcf(
        records: list[dict],
        samples: list[str] | None = None,
        filename: str = "quartet.vcf",
    ) -> Path:
        samples = samples or QUARTET_SAMPLES
        vcf_path = tmp_path / filename
        lines = [VCF_HEADER.rstrip("\n")]
        lines.append(
            "\t".join(
                ["#CHROM", "POS", "ID", "REF", "ALT", "QUAL", "FILTER", "INFO", "FORMAT"]
                + samples
            )
        )
        for rec in records:
            genotypes = rec["genotypes"]
            pls = rec.get("pls") or [_default_pl(gt) for gt in genotypes]
            pqs = rec.get("pqs")
            fmt = "GT:PL:PQ" if pqs else "GT:PL"
            sample_fields = [
                f"{gt}:{pl}:{pqs[i]}" if pqs else f"{gt}:{pl}"
                for i, (gt, pl) in enumerate(zip(genotypes, pls))
            ]
            lines.append(
                "\t".join(
                    [
                        rec["chrom"],
                        str(rec["pos"]),
                        ".",
                        rec.get("ref", "A"),
                        rec.get("alt", "G"),
                        "50",
                        rec.get("filter", "PASS"),
                        rec.get("info", "."),
                        fmt,
                    ]
                    + sample_fields
                )
            )
        vcf_path.write_text("\n".join(lines) + "\n")
        return vcf_path

    return _create_vcf


@pytest.fixture
def bedgraph_file(tmp_path) -> Callable:
    """Factory fixture for creating bedgraph files from (chrom, start, stop, score) rows."""

    def _create_bedgraph(
        rows: list[tuple], filename: str = "blocks.bgr", track_line: bool = True
    ) -> Path:
        bgr_path = tmp_path / filename
        with open(bgr_path, "w") as f:
            if track_line:
                f.write('track type=bedGraph name="blocks"\n')
            for row in rows:
                f.write("\t".join(str(val) for val in row) + "\n")
        return bgr_path

    return _create_bedgraph


def parse_genotype(gt: str) -> Genotype:
    """Build a Genotype from a VCF-style string such as "0/1" or "1|0"."""
    phased = "|" in gt
    first, second = gt.replace("|", "/").split("/")
    return Genotype.from_indices((int(first), int(second)), phased)


def quartet_genotypes(father: str, mother: str, child1: str, child2: str) -> dict:
    return {
        FamilyMember.FATHER: parse_genotype(father),
        FamilyMember.MOTHER: parse_genotype(mother),
        FamilyMember.CHILD1: parse_genotype(child1),
        FamilyMember.CHILD2: parse_genotype(child2),
    }


@pytest.fixture
def make_site() -> Callable:
    """Factory fixture for variant sites from four GT strings.

    Example:
        >>> site = make_site("0/1", "0/1", "0/0", "0/0", position=150)
    """

    def _make_site(
        father: str,
        mother: str,
        child1: str,
        child2: str,
        chromosome: str = "chr1",
        position: int = 100,
        reference: str = "A",
        alternative: str = "G",
    ) -> VariantSite:
        return VariantSite(
            chromosome=chromosome,
            position=position,
            reference=reference,
            alternative=alternative,
            genotypes=quartet_genotypes(father, mother, child1, child2),
        )

    return _make_site
