"""Shared utility functions for the quartet inheritance tools.

This module provides small conversion helpers used by the parsers and
reporting code to keep numeric handling consistent.
"""

import math
from typing import Any


def parse_score(val: Any) -> int | None:
    """Convert a bedgraph score to an int, truncating toward zero.

    Scores are written as floats by some tools (e.g. "1.5" for trio
    bedgraphs), so the value is parsed as a float first.

    Args:
        val: Raw score value

    Returns:
        Integer score, or None if the value is not a finite number

    Examples:
        >>> parse_score("4")
        4
        >>> parse_score("-1.0")
        -1
        >>> parse_score("1.5")
        1
        >>> parse_score("abc")
        None
    """
    try:
        result = float(val)
    except (ValueError, TypeError):
        return None
    if math.isnan(result) or math.isinf(result):
        return None
    return int(result)


def parse_position(val: Any) -> int | None:
    """Convert a coordinate to a non-negative int.

    Args:
        val: Raw coordinate value

    Returns:
        Integer coordinate, or None if it is missing, fractional or negative

    Examples:
        >>> parse_position("100")
        100
        >>> parse_position(100.0)
        100
        >>> parse_position("-5")
        None
    """
    try:
        result = float(val)
    except (ValueError, TypeError):
        return None
    if math.isnan(result) or math.isinf(result) or not result.is_integer():
        return None
    if result < 0:
        return None
    return int(result)


def format_site_key(chrom: str, pos: int) -> str:
    """Format site coordinates for log messages.

    Examples:
        >>> format_site_key("chr1", 12345)
        'chr1:12345'
    """
    return f"{chrom}:{pos}"

