"""Add MIE and SCE INFO flags to the records of a quartet VCF.

Usage:
    python scripts/tools/mark_sce_mie.py --vcf family.vcf.gz \
        --blocks blocks.bgr --output marked.vcf.gz
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

from analysis.sce_mie import mark_vcf  # noqa: E402
from constants import BlockFileFormat  # noqa: E402
from models import BlockIndexError, StateEncodingError  # noqa: E402
from parsers.block_files import load_block_index  # noqa: E402
from record_filters import load_record_filters  # noqa: E402
from tools.common import (  # noqa: E402
    block_format_option,
    filter_config_option,
    log_file_option,
    setup_logging,
    verbose_option,
)
from validators import ValidationError  # noqa: E402

log = logging.getLogger(__name__)


def main(
    vcf_path: str,
    block_path: str,
    output: str,
    block_format: str = BlockFileFormat.CROSS_TRIOS_BEDGRAPH,
    filter_config: str | None = None,
) -> int:
    """Copy ``vcf_path`` to ``output`` with MIE/SCE flags.

    Returns:
        0 on success, 1 on invalid input
    """
    try:
        config = load_record_filters(filter_config)
        index = load_block_index(block_path, block_format)
        mark_vcf(vcf_path, output, index, config)
        return 0

    except (ValidationError, BlockIndexError, StateEncodingError) as e:
        log.error(str(e))
        return 1

    except Exception:
        log.exception("Unexpected error while marking SCE and MIE variants")
        return 1


@click.command()
@click.option("--vcf", "vcf_path", required=True, type=click.Path(dir_okay=False),
              help="Quartet VCF (father, mother, child1, child2)")
@click.option("--blocks", "block_path", required=True, type=click.Path(dir_okay=False),
              help="Inheritance-state block file")
@click.option("--output", "-o", default="-", show_default=True,
              help="Output VCF, '-' for standard output")
@block_format_option(BlockFileFormat.CROSS_TRIOS_BEDGRAPH)
@filter_config_option
@log_file_option
@verbose_option
def cli(vcf_path, block_path, output, block_format, filter_config, log_file, verbose):
    """Flag MIE and SCE records of a quartet VCF."""
    setup_logging(log_file, verbose)
    sys.exit(main(vcf_path, block_path, output, block_format, filter_config))


if __name__ == "__main__":
    cli()
