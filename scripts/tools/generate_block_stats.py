"""Count MIE, SCE and not informative variants per inheritance-state block.

Usage:
    python scripts/tools/generate_block_stats.py --vcf family.vcf.gz \
        --blocks blocks.bgr [--block-format cross_trios_bgr] \
        [--excluded-regions segdups.bed] [--output stats.tsv]
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

from analysis.block_stats import generate_block_stats  # noqa: E402
from analysis.excluded_regions import ExcludedRegions  # noqa: E402
from constants import BlockFileFormat  # noqa: E402
from models import BlockIndexError, StateEncodingError  # noqa: E402
from parsers.block_files import load_block_index  # noqa: E402
from record_filters import load_record_filters  # noqa: E402
from reporting.block_report import block_statistics_frame  # noqa: E402
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
    block_format: str = BlockFileFormat.CROSS_TRIOS_BEDGRAPH,
    output: str = "-",
    excluded_regions_path: str | None = None,
    filter_config: str | None = None,
) -> int:
    """Write the block statistics table of a quartet VCF.

    Returns:
        0 on success, 1 on invalid input
    """
    try:
        config = load_record_filters(filter_config)
        index = load_block_index(block_path, block_format)
        excluded = None
        if excluded_regions_path is not None:
            excluded = ExcludedRegions.from_file(excluded_regions_path)

        run = generate_block_stats(vcf_path, index, config, excluded)
        df = block_statistics_frame(run.block_statistics, run.genome_wide)
        if output == "-":
            click.echo(run.summary())
            df.to_csv(sys.stdout, sep="\t", index=False)
        else:
            df.to_csv(output, sep="\t", index=False)
            log.info("Wrote block statistics to %s", output)
        return 0

    except (ValidationError, BlockIndexError, StateEncodingError) as e:
        log.error(str(e))
        return 1

    except Exception:
        log.exception("Unexpected error while generating block statistics")
        return 1


@click.command()
@click.option("--vcf", "vcf_path", required=True, type=click.Path(dir_okay=False),
              help="Quartet VCF (father, mother, child1, child2)")
@click.option("--blocks", "block_path", required=True, type=click.Path(dir_okay=False),
              help="Inheritance-state block file")
@block_format_option(BlockFileFormat.CROSS_TRIOS_BEDGRAPH)
@click.option("--output", "-o", default="-", show_default=True,
              help="Output TSV, '-' for standard output")
@click.option("--excluded-regions", "-s", "excluded_regions_path", default=None,
              type=click.Path(dir_okay=False),
              help="BED of regions to leave out (e.g. segmental duplications)")
@filter_config_option
@log_file_option
@verbose_option
def cli(vcf_path, block_path, block_format, output, excluded_regions_path,
        filter_config, log_file, verbose):
    """Count MIE, SCE and not informative variants per block."""
    setup_logging(log_file, verbose)
    sys.exit(
        main(vcf_path, block_path, block_format, output, excluded_regions_path, filter_config)
    )


if __name__ == "__main__":
    cli()
