"""Shared set-up for the command-line tools."""

import logging

import click

from constants import BlockFileFormat

LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"


def setup_logging(log_file: str | None = None, verbose: bool = False) -> None:
    logging.basicConfig(
        filename=log_file,
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
    )


def block_format_option(default: str):
    return click.option(
        "--block-format",
        "-f",
        type=click.Choice(sorted(BlockFileFormat.ALL)),
        default=default,
        show_default=True,
        help="Format of the block file",
    )


filter_config_option = click.option(
    "--filter-config",
    "-c",
    type=click.Path(dir_okay=False),
    default=None,
    help="YAML file of record filters (defaults apply when omitted)",
)
log_file_option = click.option(
    "--log-file", type=click.Path(dir_okay=False), default=None, help="Write the log here"
)
verbose_option = click.option(
    "--verbose", "-v", is_flag=True, help="Log every rejected record"
)
