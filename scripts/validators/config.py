"""Validation of the record-filter configuration (filters.yaml).

This module checks that the YAML document has known keys and values of the
right type before any record is read.
"""


from .base import ValidationError

BOOLEAN_KEYS = {
    "filter_field",
    "exclude_mie",
    "exclude_fully_heterozygous",
    "exclude_three_quarter_heterozygous",
}
VALID_KEYS = BOOLEAN_KEYS | {"min_genotype_pl", "phasing_quality_threshold", "samples"}


def validate_min_genotype_pl(value) -> None:
    """Validate the PL threshold: a non-negative integer or null (disabled).

    Raises:
        ValidationError: If the value is not a non-negative integer
    """
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValidationError(
            f"min_genotype_pl must be a non-negative integer or null, got: {value!r}"
        )


def validate_phasing_quality_threshold(value) -> None:
    """Validate the PQ threshold.

    Raises:
        ValidationError: If the value is not a number
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(
            f"phasing_quality_threshold must be a number, got: {value!r}"
        )


def validate_samples(samples) -> None:
    """Validate an explicit father, mother, child1, child2 sample list.

    Raises:
        ValidationError: If it is not a list of four distinct non-empty strings
    """
    if samples is None:
        return
    if not isinstance(samples, list) or len(samples) != 4:
        raise ValidationError(
            "samples must list exactly 4 names: father, mother, child1, child2"
        )
    if not all(isinstance(s, str) and s for s in samples):
        raise ValidationError(f"samples must be non-empty strings, got: {samples}")
    if len(set(samples)) != 4:
        raise ValidationError(f"samples must be distinct, got: {samples}")


def validate_filter_config(config: dict) -> None:
    """Comprehensive filter configuration validation.

    Args:
        config: Configuration dictionary loaded from filters.yaml

    Raises:
        ValidationError: If configuration is invalid

    Example:
        >>> validate_filter_config({
        ...     "filter_field": True,
        ...     "min_genotype_pl": 30,
        ...     "phasing_quality_threshold": 0,
        ...     "exclude_mie": False,
        ... })
    """
    if not isinstance(config, dict):
        raise ValidationError(
            f"Filter config must be a mapping, got: {type(config).__name__}"
        )

    unknown = set(config) - VALID_KEYS
    if unknown:
        raise ValidationError(
            f"Filter config has unknown keys: {sorted(unknown)}. "
            f"Valid keys are: {sorted(VALID_KEYS)}"
        )

    for key in BOOLEAN_KEYS & set(config):
        if not isinstance(config[key], bool):
            raise ValidationError(
                f"Filter config field '{key}' must be true or false, "
                f"got: {config[key]!r}"
            )

    if "min_genotype_pl" in config:
        validate_min_genotype_pl(config["min_genotype_pl"])
    if "phasing_quality_threshold" in config:
        validate_phasing_quality_threshold(config["phasing_quality_threshold"])
    validate_samples(config.get("samples"))
