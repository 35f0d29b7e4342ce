"""Input validation utilities for the quartet inheritance tools.

This package checks files, tables and configuration before processing so that
tools fail early with a clear message instead of silently producing nothing.

Modules:
    base: Core validators (files, table shape, sample names)
    config: Record-filter configuration validation

Example:
    >>> from validators import ValidationError, validate_file_exists
    >>> try:
    ...     validate_file_exists("family.vcf.gz", "Quartet VCF")
    ... except ValidationError as e:
    ...     print(f"Validation failed: {e}")
"""

from .base import (
    ValidationError,
    validate_column_count,
    validate_file_exists,
    validate_non_empty,
    validate_sample_names,
)

from .config import (
    validate_filter_config,
    validate_min_genotype_pl,
    validate_phasing_quality_threshold,
    validate_samples,
)

__all__ = [
    # Exception
    "ValidationError",
    # Base validators
    "validate_column_count",
    "validate_file_exists",
    "validate_non_empty",
    "validate_sample_names",
    # Config validators
    "validate_filter_config",
    "validate_min_genotype_pl",
    "validate_phasing_quality_threshold",
    "validate_samples",
]
