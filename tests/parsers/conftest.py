"""Shared fixtures for parser tests."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import pytest

# Add scripts directory to path
SCRIPTS_DIR = str(Path(__file__).resolve().parent.parent.parent / "scripts")
if SCRIPTS_DIR not in sys.path:
    sys.path.insert(0, SCRIPTS_DIR)


@pytest.fixture
def isca_file(tmp_path) -> Callable:
    """Factory fixture for creating ISCA smoothed block files.

    Each row is (chromosome, binary state, start, stop); the unused ISCA
    columns are filled with placeholders.

    Example:
        >>> isca_path = isca_file([("chr1", "0000", 100, 5000)])
    """
    def _create_isca(rows: list[tuple], filename: str = "blocks.isca") -> Path:
        isca_path = tmp_path / filename

        with open(isca_path, 'w') as f:
            f.write("#chromosome\tfirst\tlast\tstate\tlength\tstart\tstop\n")
            for chrom, state, start, stop in rows:
                f.write(f"{chrom}\t1\t2\t{state}\t{stop - start}\t{start}\t{stop}\n")

        return isca_path

    return _create_isca
