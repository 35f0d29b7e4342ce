"""Shared test fixtures for validator tests."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import pytest
import yaml

# Add scripts directory to path
SCRIPTS_DIR = str(Path(__file__).resolve().parent.parent.parent / "scripts")
if SCRIPTS_DIR not in sys.path:
    sys.path.insert(0, SCRIPTS_DIR)


@pytest.fixture
def filter_config() -> Callable:
    """Factory fixture for filter configuration dictionaries.

    Returns a function that creates a config dict with the default settings.

    Example:
        >>> config = filter_config(min_genotype_pl=None, exclude_mie=True)
    """
    def _create_config(**overrides) -> dict:
        config = {
            "filter_field": True,
            "min_genotype_pl": 30,
            "phasing_quality_threshold": 0,
            "exclude_mie": False,
            "exclude_fully_heterozygous": False,
            "exclude_three_quarter_heterozygous": False,
        }
        config.update(overrides)
        return config

    return _create_config


@pytest.fixture
def filter_config_file(tmp_path) -> Callable:
    """Factory fixture writing a filter config mapping to a YAML file."""
    def _create_file(config, filename: str = "filters.yaml") -> Path:
        config_path = tmp_path / filename
        with open(config_path, 'w') as f:
            yaml.safe_dump(config, f)
        return config_path

    return _create_file
