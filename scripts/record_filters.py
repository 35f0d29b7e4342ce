"""Record-filter settings for quartet VCF decoding.

Settings are read from a YAML document (see filters.yaml) and validated
before use. Keys that are absent keep their default value.
"""

import logging
from dataclasses import dataclass, fields
from pathlib import Path

import yaml

from validators import ValidationError, validate_file_exists, validate_filter_config

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecordFilterConfig:
    """Which records are rejected before they become variant sites.

    Attributes:
        filter_field: Reject records whose FILTER column is not PASS
        min_genotype_pl: Reject records where some member's genotype PL
            confidence is below this value; None disables the check
        phasing_quality_threshold: Members with a PQ below this are unphased
        exclude_mie: Reject Mendelian inheritance errors
        exclude_fully_heterozygous: Reject ``ab/ab;ab/ab`` sites
        exclude_three_quarter_heterozygous: Reject sites where three of the
            four members are heterozygous
        samples: Father, mother, child1, child2 sample names; None uses the
            first four samples of the VCF
    """

    filter_field: bool = True
    min_genotype_pl: int | None = 30
    phasing_quality_threshold: float = 0
    exclude_mie: bool = False
    exclude_fully_heterozygous: bool = False
    exclude_three_quarter_heterozygous: bool = False
    samples: tuple[str, ...] | None = None

    @classmethod
    def from_dict(cls, config: dict) -> "RecordFilterConfig":
        """Build settings from a validated mapping.

        Raises:
            ValidationError: If the mapping is invalid
        """
        validate_filter_config(config)
        known = {f.name for f in fields(cls)}
        values = {k: v for k, v in config.items() if k in known}
        if values.get("samples") is not None:
            values["samples"] = tuple(values["samples"])
        return cls(**values)


def load_record_filters(config_path: str | Path | None) -> RecordFilterConfig:
    """Load record-filter settings from a YAML file.

    Args:
        config_path: Path to the YAML file, or None for the defaults

    Returns:
        Validated settings

    Raises:
        ValidationError: If the file is missing, unparsable or invalid
    """
    if config_path is None:
        return RecordFilterConfig()

    path = validate_file_exists(config_path, "Filter config")
    try:
        with open(path) as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValidationError(f"Failed to parse filter config {path}: {e}") from e

    if config is None:
        config = {}
    settings = RecordFilterConfig.from_dict(config)
    log.info("Loaded record filters from %s: %s", path, settings)
    return settings
