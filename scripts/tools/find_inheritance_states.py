"""Compute the dominant inheritance state of every site of a quartet VCF.

Usage:
    python scripts/tools/find_inheritance_states.py --vcf family.vcf.gz \
        [--moving-window] [--half-window 500000] [--output states.tsv] \
        [--site-table sites.tsv]
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

from analysis.state_profile import HALF_WINDOW_SIZE, profile_sites  # noqa: E402
from parsers.quartet_vcf import load_quartet_sites  # noqa: E402
from record_filters import load_record_filters  # noqa: E402
from reporting.block_report import site_table  # noqa: E402
from tools.common import (  # noqa: E402
    filter_config_option,
    log_file_option,
    setup_logging,
    verbose_option,
)
from validators import ValidationError  # noqa: E402

log = logging.getLogger(__name__)


def main(
    vcf_path: str,
    output: str = "-",
    moving_window: bool = False,
    half_window: int = HALF_WINDOW_SIZE,
    filter_config: str | None = None,
    site_table_path: str | None = None,
) -> int:
    """Write the per-site state votes, averages and dominant states.

    With ``site_table_path``, the alleles, pattern and candidate states of every
    decoded site are also written there as a TSV.

    Returns:
        0 on success, 1 on invalid input
    """
    try:
        config = load_record_filters(filter_config)
        sites, _ = load_quartet_sites(vcf_path, config)
        df = profile_sites(sites, moving_window=moving_window, half_window=half_window)
        df.to_csv(sys.stdout if output == "-" else output, sep="\t", index=False)
        if site_table_path is not None:
            site_table(sites).to_csv(site_table_path, sep="\t", index=False)
            log.info("Wrote %d sites to %s", len(sites), site_table_path)
        return 0

    except ValidationError as e:
        log.error(str(e))
        return 1

    except Exception:
        log.exception("Unexpected error while finding inheritance states")
        return 1


@click.command()
@click.option("--vcf", "vcf_path", required=True, type=click.Path(dir_okay=False),
              help="Quartet VCF (father, mother, child1, child2)")
@click.option("--output", "-o", default="-", show_default=True,
              help="Output TSV, '-' for standard output")
@click.option("--moving-window", is_flag=True,
              help="Average over a moving window instead of fixed bins")
@click.option("--half-window", type=click.IntRange(min=1), default=HALF_WINDOW_SIZE,
              show_default=True, help="Half bin size / moving-window radius (bp)")
@click.option("--site-table", "site_table_path", default=None, type=click.Path(dir_okay=False),
              help="Also write the pattern and candidate states of every site here")
@filter_config_option
@log_file_option
@verbose_option
def cli(vcf_path, output, moving_window, half_window, site_table_path, filter_config,
        log_file, verbose):
    """Find the dominant inheritance state along the genome."""
    setup_logging(log_file, verbose)
    sys.exit(
        main(vcf_path, output, moving_window, half_window, filter_config, site_table_path)
    )


if __name__ == "__main__":
    cli()
