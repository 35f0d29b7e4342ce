"""Inheritance-state model for family quartets."""

from models.allele import Allele
from models.block import (
    BlockStatistics,
    GenomeWideStatistics,
    GenomicBlock,
    SiteFlag,
    percentage,
)
from models.block_index import (
    BlockIndex,
    BlockIndexBuilder,
    build_block_index,
    cross_trios_block_index,
    quartet_block_index,
)
from models.errors import BlockIndexError, StateEncodingError, UnknownPatternError
from models.family import CHILDREN, FOUNDERS, FamilyMember, Genotype
from models.inheritance_state import CrossTriosState, QuartetState, TrioState
from models.patterns import CandidateStates, classify_pattern, derive_pattern
from models.variant_site import VariantSite

__all__ = [
    "Allele",
    "BlockIndex",
    "BlockIndexBuilder",
    "BlockIndexError",
    "BlockStatistics",
    "CandidateStates",
    "CHILDREN",
    "CrossTriosState",
    "FamilyMember",
    "FOUNDERS",
    "GenomeWideStatistics",
    "GenomicBlock",
    "Genotype",
    "QuartetState",
    "SiteFlag",
    "StateEncodingError",
    "TrioState",
    "UnknownPatternError",
    "VariantSite",
    "build_block_index",
    "classify_pattern",
    "cross_trios_block_index",
    "derive_pattern",
    "percentage",
    "quartet_block_index",
]
