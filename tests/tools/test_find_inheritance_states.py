"""Tests for the find_inheritance_states command."""

from __future__ import annotations

import pandas as pd
from click.testing import CliRunner

from analysis.state_profile import DOMINANT_COLUMN
from constants import SITE_TABLE_COLUMNS
from tools.find_inheritance_states import cli, main


class TestMain:
    """Tests for find_inheritance_states.main."""

    def test_binned(self, family_vcf, tmp_path):
        output = tmp_path / "states.tsv"
        assert main(str(family_vcf), output=str(output)) == 0
        df = pd.read_csv(output, sep="\t", keep_default_na=False)
        assert len(df) == 4
        assert list(df["position"]) == [150, 200, 300, 100]
        assert df.iloc[3][DOMINANT_COLUMN] == "Haploidentical Maternal"

    def test_moving_window(self, family_vcf, tmp_path):
        output = tmp_path / "states.tsv"
        code = main(str(family_vcf), output=str(output), moving_window=True, half_window=10)
        assert code == 0
        df = pd.read_csv(output, sep="\t", keep_default_na=False)
        assert list(df[DOMINANT_COLUMN])[:3] == [
            "Mendelian Inheritance Error",
            "Non-Identical",
            "Identical",
        ]

    def test_site_table(self, family_vcf, tmp_path):
        """Test the site table lists the pattern and candidates of every decoded site."""
        sites_path = tmp_path / "sites.tsv"
        code = main(
            str(family_vcf), output=str(tmp_path / "states.tsv"), site_table_path=str(sites_path)
        )
        assert code == 0
        df = pd.read_csv(sites_path, sep="\t", keep_default_na=False)
        assert list(df.columns) == SITE_TABLE_COLUMNS
        assert list(df["genotype pattern"]) == [
            "aa/aa;aa/ab",
            "ab/ab;aa/bb",
            "ab/ab;aa/aa",
            "ab/ab;aa/ab",
        ]
        assert list(df["genotype state2"]) == ["", "", "", "Haploidentical Maternal"]

    def test_missing_vcf(self, tmp_path):
        assert main(str(tmp_path / "missing.vcf")) == 1


class TestCli:
    """Tests for the click entry point."""

    def test_stdout(self, family_vcf):
        result = CliRunner().invoke(cli, ["--vcf", str(family_vcf), "--moving-window"])
        assert result.exit_code == 0
        header = result.output.splitlines()[0].split("\t")
        assert header[-1] == DOMINANT_COLUMN

    def test_half_window_must_be_positive(self, family_vcf):
        result = CliRunner().invoke(cli, ["--vcf", str(family_vcf), "--half-window", "0"])
        assert result.exit_code == 2
