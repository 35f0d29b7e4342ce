"""Constants shared by the quartet inheritance tools.

Centralizes magic strings into named constants for type safety and IDE support.
"""


class BlockFileFormat:
    """Interval sources a block index can be loaded from."""

    QUARTET_BEDGRAPH = "quartet_bgr"
    CROSS_TRIOS_BEDGRAPH = "cross_trios_bgr"
    ISCA = "isca"

    ALL = {QUARTET_BEDGRAPH, CROSS_TRIOS_BEDGRAPH, ISCA}


class InfoFlag:
    """INFO flags added to marked VCF records."""

    MIE = "MIE"
    SCE = "SCE"
    PHASING_INCONSISTENT = "PhasingInconsistent"

    DESCRIPTIONS = {
        MIE: "Mendelian Inheritance Error",
        SCE: "State Consistency Error",
    }


class FilterName:
    """Names of the record filters reported by FilteredVCFLineError."""

    FILTER_FIELD = "Filter Field"
    PL = "PL"
    MIE = "MIE"
    FULLY_HETEROZYGOUS = "Fully Heterozygous"
    THREE_QUARTER_HETEROZYGOUS = "3/4 Heterozygous"


class FormatField:
    """FORMAT keys read from quartet VCFs."""

    GT = "GT"
    PL = "PL"
    PQ = "PQ"


# Bedgraph lines starting with these are metadata, not intervals
BEDGRAPH_METADATA_PREFIXES = ("#", "track", "browser")

PASS_FILTER = "PASS"

# Label used for the chromosome/start/stop cells of the genome-wide row
GENOME_WIDE_LABEL = "GW"
NOT_AVAILABLE = "NA"

BLOCK_STATS_COLUMNS = [
    "chromosome",
    "start",
    "stop",
    "state",
    "variant#",
    "MIE#",
    "MIE%",
    "SCE#",
    "SCE%",
    "NI#",
    "NI%",
]

SITE_TABLE_COLUMNS = [
    "chromosome",
    "position",
    "reference allele",
    "alternative allele",
    "father allele1",
    "father allele2",
    "mother allele1",
    "mother allele2",
    "kid1 allele1",
    "kid1 allele2",
    "kid2 allele1",
    "kid2 allele2",
    "genotype pattern",
    "genotype state1",
    "genotype state2",
]
