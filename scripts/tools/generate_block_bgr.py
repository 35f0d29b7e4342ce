"""Convert a block file (ISCA output by default) to a bedgraph of state scores.

Usage:
    python scripts/tools/generate_block_bgr.py --blocks isca_blocks.txt \
        [--block-format isca] [--output blocks.bgr]
"""

import logging
import sys
from pathlib import Path

import click

# Add scripts directory to path for imports
SCRIPTS_DIR = str(Path(__file__).resolve().parent.parent)
if SCRIPTS_DIR not in sys.path:
    sys.path.insert(0, SCRIPTS_DIR)

PROJECT_ROOT = str(Path(__file__).resolve().parent.parent.parent)
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from constants import BlockFileFormat  # noqa: E402
from models import BlockIndexError, StateEncodingError  # noqa: E402
from parsers.block_files import load_block_index  # noqa: E402
from reporting.block_report import write_bedgraph  # noqa: E402
from tools.common import (  # noqa: E402
    block_format_option,
    log_file_option,
    setup_logging,
    verbose_option,
)
from validators import ValidationError  # noqa: E402

log = logging.getLogger(__name__)


def main(
    block_path: str,
    output: str = "-",
    block_format: str = BlockFileFormat.ISCA,
    include_partial: bool = False,
    track_name: str | None = None,
) -> int:
    """Write the blocks of ``block_path`` as a bedgraph.

    Returns:
        0 on success, 1 on invalid input
    """
    try:
        index = load_block_index(block_path, block_format)
        write_bedgraph(
            index,
            sys.stdout if output == "-" else output,
            include_partial=include_partial,
            track_name=track_name,
        )
        return 0

    except (ValidationError, BlockIndexError, StateEncodingError) as e:
        log.error(str(e))
        return 1

    except Exception:
        log.exception("Unexpected error while generating the block bedgraph")
        return 1


@click.command()
@click.option("--blocks", "block_path", required=True, type=click.Path(dir_okay=False),
              help="Inheritance-state block file")
@click.option("--output", "-o", default="-", show_default=True,
              help="Output bedgraph, '-' for standard output")
@block_format_option(BlockFileFormat.ISCA)
@click.option("--include-partial", is_flag=True, help="Also write partial blocks")
@click.option("--track-name", default=None, help="Write a UCSC track line with this name")
@log_file_option
@verbose_option
def cli(block_path, output, block_format, include_partial, track_name, log_file, verbose):
    """Write inheritance-state blocks as a bedgraph."""
    setup_logging(log_file, verbose)
    sys.exit(main(block_path, output, block_format, include_partial, track_name))


if __name__ == "__main__":
    cli()
