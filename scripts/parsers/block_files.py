"""Load inheritance-state block files into a BlockIndex.

Three interval sources are supported:

- quartet bedgraph: chromosome, start, stop, quartet state score
- cross-trios bedgraph: chromosome, start, stop, cross-trios state score
- ISCA smoothed blocks: chromosome (col 0), binary state (col 3),
  start (col 5), stop (col 6)

Bedgraph ``track``/``browser`` lines and ``#`` comments are ignored. Rows with
unusable coordinates or non-numeric scores are skipped with a warning. A numeric
score outside the state domain or overlapping blocks make the whole file invalid.
"""

import io
import logging
from pathlib import Path
from typing import Callable

import pandas as pd

from constants import BEDGRAPH_METADATA_PREFIXES, BlockFileFormat
from models import (
    BlockIndex,
    BlockIndexBuilder,
    CrossTriosState,
    GenomicBlock,
    QuartetState,
)
from models.errors import StateEncodingError
from utils import parse_position, parse_score
from validators import (
    ValidationError,
    validate_column_count,
    validate_file_exists,
    validate_non_empty,
)

log = logging.getLogger(__name__)

BEDGRAPH_COLUMNS = 4
ISCA_COLUMNS = 7

ISCA_CHROMOSOME_COL = 0
ISCA_STATE_COL = 3
ISCA_START_COL = 5
ISCA_STOP_COL = 6


def is_metadata_line(line: str) -> bool:
    """True for blank lines, comments and bedgraph track/browser lines."""
    stripped = line.strip()
    if not stripped:
        return True
    return stripped.lower().startswith(BEDGRAPH_METADATA_PREFIXES)


def read_interval_table(path: str | Path, min_columns: int, description: str) -> pd.DataFrame:
    """Read the data rows of a tab-separated block file as strings.

    Args:
        path: Path to the block file
        min_columns: Number of columns the format requires
        description: Description of file for error messages

    Returns:
        Headerless DataFrame with integer column labels

    Raises:
        ValidationError: If the file is missing, empty or too narrow
    """
    path = validate_file_exists(path, description)
    with open(path) as f:
        lines = [line for line in f if not is_metadata_line(line)]

    df = pd.DataFrame()
    if lines:
        width = max(line.rstrip("\n").count("\t") + 1 for line in lines)
        df = pd.read_csv(
            io.StringIO("".join(lines)),
            sep="\t",
            header=None,
            names=range(width),
            dtype=str,
            keep_default_na=False,
        )
    validate_non_empty(df, path.name)
    validate_column_count(df, min_columns, path.name)
    return df


def _coordinates(row, start_col: int, stop_col: int, path_name: str, line_no: int):
    start = parse_position(row[start_col])
    stop = parse_position(row[stop_col])
    if start is None or stop is None or stop <= start:
        log.warning(
            "Skipping row %d of %s: invalid coordinates %r-%r",
            line_no,
            path_name,
            row[start_col],
            row[stop_col],
        )
        return None
    return start, stop


def _load_bedgraph(
    path: str | Path, decode_state: Callable[[int], object], description: str
) -> BlockIndex:
    df = read_interval_table(path, BEDGRAPH_COLUMNS, description)
    path_name = Path(path).name
    builder = BlockIndexBuilder()
    skipped = 0

    for line_no, row in enumerate(df.itertuples(index=False, name=None), start=1):
        coords = _coordinates(row, 1, 2, path_name, line_no)
        if coords is None:
            skipped += 1
            continue
        score = parse_score(row[3])
        if score is None:
            log.warning("Skipping row %d of %s: invalid score %r", line_no, path_name, row[3])
            skipped += 1
            continue
        try:
            state = decode_state(score)
        except StateEncodingError as e:
            raise StateEncodingError(f"Row {line_no} of {path_name}: {e}") from e
        builder.add(GenomicBlock(row[0].strip(), coords[0], coords[1], state))

    index = builder.build()
    log.info("Loaded %d blocks from %s (%d rows skipped)", len(index), path_name, skipped)
    return index


def load_quartet_bedgraph(path: str | Path) -> BlockIndex[QuartetState]:
    """Load a bedgraph of quartet state scores. Score 0 gives a partial block.

    Raises:
        ValidationError: If the file is missing or malformed as a whole
        StateEncodingError: If a score does not decode to a state
        BlockIndexError: If blocks overlap
    """
    return _load_bedgraph(path, QuartetState.from_score, "Quartet bedgraph")


def load_cross_trios_bedgraph(path: str | Path) -> BlockIndex[CrossTriosState]:
    """Load a bedgraph of cross-trios state scores (paternal + 3 * maternal).

    Raises:
        ValidationError: If the file is missing or malformed as a whole
        StateEncodingError: If a score does not decode to a state
        BlockIndexError: If blocks overlap
    """
    return _load_bedgraph(path, CrossTriosState.decode, "Cross-trios bedgraph")


def load_isca_blocks(path: str | Path) -> BlockIndex[QuartetState]:
    """Load the smoothed block file of the ISCA software.

    Unknown binary states give partial blocks.

    Raises:
        ValidationError: If the file is missing or malformed as a whole
        BlockIndexError: If blocks overlap
    """
    df = read_interval_table(path, ISCA_COLUMNS, "ISCA block file")
    path_name = Path(path).name
    builder: BlockIndexBuilder[QuartetState] = BlockIndexBuilder()
    skipped = 0

    for line_no, row in enumerate(df.itertuples(index=False, name=None), start=1):
        coords = _coordinates(row, ISCA_START_COL, ISCA_STOP_COL, path_name, line_no)
        if coords is None:
            skipped += 1
            continue
        state = QuartetState.from_binary_state(str(row[ISCA_STATE_COL]))
        builder.add(
            GenomicBlock(row[ISCA_CHROMOSOME_COL].strip(), coords[0], coords[1], state)
        )

    index = builder.build()
    log.info("Loaded %d ISCA blocks from %s (%d rows skipped)", len(index), path_name, skipped)
    return index


_LOADERS = {
    BlockFileFormat.QUARTET_BEDGRAPH: load_quartet_bedgraph,
    BlockFileFormat.CROSS_TRIOS_BEDGRAPH: load_cross_trios_bedgraph,
    BlockFileFormat.ISCA: load_isca_blocks,
}


def load_block_index(path: str | Path, file_format: str) -> BlockIndex:
    """Load a block file of the given format.

    Args:
        path: Path to the block file
        file_format: One of BlockFileFormat.ALL

    Raises:
        ValidationError: If the format is unknown or the file is invalid
        StateEncodingError: If a bedgraph score does not decode to a state
        BlockIndexError: If blocks overlap
    """
    if file_format not in BlockFileFormat.ALL:
        raise ValidationError(
            f"Unknown block file format '{file_format}'. "
            f"Valid formats are: {sorted(BlockFileFormat.ALL)}"
        )
    return _LOADERS[file_format](path)
