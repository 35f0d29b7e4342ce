"""Base validation utilities for the quartet inheritance tools.

This module provides core validation functions to ensure inputs are usable
before processing, preventing silent failures and improving error messages.
"""

from pathlib import Path

import pandas as pd


class ValidationError(Exception):
    """Custom exception for input and configuration validation failures."""

    pass


def validate_file_exists(file_path: str | Path, file_description: str) -> Path:
    """Validate that a file exists and is readable.

    Args:
        file_path: Path to file
        file_description: Description of file for error messages

    Returns:
        Resolved Path object

    Raises:
        ValidationError: If file doesn't exist or isn't a file
    """
    path = Path(file_path)
    if not path.exists():
        raise ValidationError(f"{file_description} not found: {path}")
    if not path.is_file():
        raise ValidationError(f"{file_description} is not a file: {path}")
    return path


def validate_column_count(df: pd.DataFrame, minimum: int, file_name: str) -> None:
    """Validate that a headerless table has at least ``minimum`` columns.

    Args:
        df: DataFrame read without a header
        minimum: Number of columns the format requires
        file_name: Name of file being validated (for error messages)

    Raises:
        ValidationError: If the table is too narrow
    """
    if df.shape[1] < minimum:
        raise ValidationError(
            f"{file_name} has {df.shape[1]} column(s), expected at least {minimum}"
        )


def validate_non_empty(df: pd.DataFrame, file_name: str) -> None:
    """Validate that DataFrame is not empty.

    Args:
        df: DataFrame to validate
        file_name: Name of file being validated

    Raises:
        ValidationError: If DataFrame is empty
    """
    if len(df) == 0:
        raise ValidationError(f"{file_name} contains no data rows")


def validate_sample_names(
    available: list[str], requested: list[str] | None, file_name: str
) -> list[str]:
    """Resolve the father, mother, child1, child2 sample names of a VCF.

    Args:
        available: Sample names declared in the VCF header
        requested: Explicit sample names in member order, or None to use the
            first four samples
        file_name: Name of file being validated

    Returns:
        Four sample names in member order

    Raises:
        ValidationError: If fewer than four samples exist or a name is unknown
    """
    if requested is None:
        if len(available) < 4:
            raise ValidationError(
                f"{file_name} declares {len(available)} sample(s), "
                f"a family quartet needs 4"
            )
        return list(available[:4])

    if len(requested) != 4:
        raise ValidationError(
            f"Expected 4 sample names (father, mother, child1, child2), "
            f"got {len(requested)}"
        )
    missing = [name for name in requested if name not in available]
    if missing:
        raise ValidationError(f"{file_name} has no sample(s) named {missing}")
    return list(requested)
