"""Tests for VariantSite."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = str(Path(__file__).resolve().parent.parent.parent)
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from models import (  # noqa: E402
    CrossTriosState,
    FamilyMember,
    Genotype,
    QuartetState,
    TrioState,
    VariantSite,
)


class TestVariantSiteConstruction:
    """Tests for pattern derivation at construction."""

    def test_pattern_and_candidates(self, make_site):
        """Test the pattern and candidates are derived once."""
        site = make_site("0/1", "0/0", "0/0", "0/1")
        assert site.genotype_pattern == "ab+aa;aa/ab"
        assert site.candidate_states.states == (
            QuartetState.NON_IDENTICAL,
            QuartetState.MATERNAL,
        )

    def test_missing_member_raises(self):
        """Test a quartet with a missing genotype is rejected."""
        genotypes = {
            FamilyMember.FATHER: Genotype.from_indices((0, 1)),
            FamilyMember.MOTHER: Genotype.from_indices((0, 1)),
            FamilyMember.CHILD1: Genotype.from_indices((0, 0)),
        }
        with pytest.raises(KeyError):
            VariantSite("chr1", 100, "A", "G", genotypes)

    def test_genotypes_are_read_only(self, make_site):
        """Test the genotype mapping cannot be modified."""
        site = make_site("0/1", "0/1", "0/0", "0/0")
        with pytest.raises(TypeError):
            site.genotypes[FamilyMember.FATHER] = Genotype.from_indices((1, 1))

    def test_site_is_frozen(self, make_site):
        """Test fields cannot be reassigned."""
        site = make_site("0/1", "0/1", "0/0", "0/0")
        with pytest.raises(AttributeError):
            site.position = 200

    def test_genotype_access(self, make_site):
        """Test per-member genotype and phasing access."""
        site = make_site("0|1", "0/1", "0/0", "1|1")
        assert str(site.genotype(FamilyMember.FATHER)) == "0|1"
        assert site.is_phased(FamilyMember.FATHER)
        assert not site.is_phased(FamilyMember.MOTHER)
        assert site.is_phased(FamilyMember.CHILD2)

    def test_with_genotypes_rederives_pattern(self, make_site):
        """Test replacing a genotype gives a new pattern and leaves the original alone."""
        site = make_site("0/1", "0/1", "0/0", "0/0")
        updated = site.with_genotypes(child2=Genotype.from_indices((1, 1)))
        assert site.genotype_pattern == "ab/ab;aa/aa"
        assert updated.genotype_pattern == "ab/ab;aa/bb"
        assert updated.position == site.position


class TestVariantSiteFlags:
    """Tests for the MIE, not informative and indel properties."""

    def test_mie(self, make_site):
        site = make_site("0/0", "0/0", "0/0", "0/1")
        assert site.is_mie
        assert not site.is_not_informative

    def test_not_informative(self, make_site):
        site = make_site("0/0", "0/0", "0/0", "0/0")
        assert site.is_not_informative
        assert not site.is_mie

    def test_indel(self, make_site):
        assert make_site("0/1", "0/1", "0/0", "0/0", reference="AT").is_indel
        assert make_site("0/1", "0/1", "0/0", "0/0", alternative="GC").is_indel
        assert not make_site("0/1", "0/1", "0/0", "0/0").is_indel


class TestVariantSiteSce:
    """Tests for VariantSite.is_sce."""

    def test_quartet_state_not_candidate(self, make_site):
        """Test a site whose candidates exclude the block state is SCE."""
        site = make_site("0/1", "0/1", "0/1", "1/1")  # ab/ab;aa/ab -> P or M
        assert site.is_sce(QuartetState.IDENTICAL)

    def test_quartet_state_secondary_candidate(self, make_site):
        """Test the secondary candidate counts as consistent."""
        site = make_site("0/1", "0/0", "0/0", "0/0")  # ab+aa;aa/aa -> I or P
        assert not site.is_sce(QuartetState.PATERNAL)
        assert not site.is_sce(QuartetState.IDENTICAL)

    def test_mie_and_not_informative_never_sce(self, make_site):
        """Test MIE and not informative sites are never SCE."""
        mie = make_site("0/0", "0/0", "0/0", "0/1")
        ni = make_site("0/0", "0/0", "0/0", "0/0")
        assert not mie.is_sce(QuartetState.IDENTICAL)
        assert not ni.is_sce(QuartetState.IDENTICAL)

    def test_partial_block_never_sce(self, make_site):
        """Test partial block states never produce an SCE."""
        site = make_site("0/1", "0/1", "0/0", "1/1")  # N only
        assert not site.is_sce(None)
        assert not site.is_sce(QuartetState.PARTIAL)

    def test_cross_trios_incompatible(self, make_site):
        """Test a site incompatible with a cross-trios state is SCE."""
        site = make_site("0/1", "0/1", "0/0", "1/1")  # N only
        block_state = CrossTriosState(TrioState.IDENTICAL, TrioState.IDENTICAL)
        assert site.is_sce(block_state)

    def test_cross_trios_compatible(self, make_site):
        """Test one compatible candidate is enough."""
        site = make_site("0/1", "0/1", "0/1", "1/1")  # P or M
        block_state = CrossTriosState(TrioState.NON_IDENTICAL, TrioState.IDENTICAL)
        assert not site.is_sce(block_state)

    def test_cross_trios_unknown_never_sce(self, make_site):
        """Test an unknown/unknown cross-trios block accepts every site."""
        site = make_site("0/1", "0/1", "0/0", "1/1")
        block_state = CrossTriosState(TrioState.UNKNOWN, TrioState.UNKNOWN)
        assert not site.is_sce(block_state)
