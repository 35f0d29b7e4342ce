"""Tests for the mark_sce_mie command."""

from __future__ import annotations

import pysam
from click.testing import CliRunner

from constants import InfoFlag
from tools.mark_sce_mie import cli, main


def _flagged(vcf_path, flag: str) -> list[int]:
    with pysam.VariantFile(str(vcf_path)) as vcf:
        return [rec.pos for rec in vcf if flag in rec.info]


class TestMain:
    """Tests for mark_sce_mie.main."""

    def test_marks_records(self, family_vcf, cross_trios_bgr, tmp_path):
        output = tmp_path / "marked.vcf.gz"
        assert main(str(family_vcf), str(cross_trios_bgr), str(output)) == 0
        assert _flagged(output, InfoFlag.MIE) == [150]
        assert _flagged(output, InfoFlag.SCE) == [200]

    def test_missing_blocks(self, family_vcf, tmp_path):
        output = tmp_path / "marked.vcf"
        assert main(str(family_vcf), str(tmp_path / "missing.bgr"), str(output)) == 1
        assert not output.exists()


class TestCli:
    """Tests for the click entry point."""

    def test_output_option(self, family_vcf, cross_trios_bgr, tmp_path):
        output = tmp_path / "marked.vcf"
        result = CliRunner().invoke(
            cli,
            [
                "--vcf",
                str(family_vcf),
                "--blocks",
                str(cross_trios_bgr),
                "--output",
                str(output),
            ],
        )
        assert result.exit_code == 0
        with pysam.VariantFile(str(output)) as vcf:
            assert len(list(vcf)) == 4

    def test_missing_required_option(self, family_vcf):
        result = CliRunner().invoke(cli, ["--vcf", str(family_vcf)])
        assert result.exit_code == 2
        assert "--blocks" in result.output
