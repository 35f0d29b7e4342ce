"""Dominant inheritance state along the genome.

Each site votes for its candidate states: the primary candidate gets
``1 / len(candidates)``, the secondary candidate 0.5. Votes are averaged per
chromosome, either over fixed bins of ``2 * half_window`` bp or over a moving
window of ``+/- half_window`` bp around each site, and the state with the
highest average is the dominant state of the site.
"""

import logging
from bisect import bisect_left, bisect_right
from itertools import accumulate, groupby
from typing import Sequence

import pandas as pd

from constants import SITE_TABLE_COLUMNS
from models import FamilyMember, QuartetState, VariantSite

log = logging.getLogger(__name__)

HALF_WINDOW_SIZE = 500_000

# Earlier states win ties; a later state must score strictly higher
PROFILE_STATES = (
    QuartetState.IDENTICAL,
    QuartetState.MATERNAL,
    QuartetState.PATERNAL,
    QuartetState.NON_IDENTICAL,
    QuartetState.NOT_INFORMATIVE,
    QuartetState.MIE,
)

WEIGHT_COLUMNS = {
    QuartetState.IDENTICAL: "I",
    QuartetState.MATERNAL: "M",
    QuartetState.PATERNAL: "F",
    QuartetState.NON_IDENTICAL: "Not-ID",
    QuartetState.NOT_INFORMATIVE: "Not-Inf",
    QuartetState.MIE: "NotMend",
}
AVERAGE_COLUMNS = {state: f"{name} Avg" for state, name in WEIGHT_COLUMNS.items()}
DOMINANT_COLUMN = "Dominant"


def state_weight(site: VariantSite, state: QuartetState) -> float:
    """Vote of ``site`` for ``state``."""
    candidates = site.candidate_states
    if candidates.primary is state:
        return 1 / len(candidates)
    if candidates.secondary is state:
        return 0.5
    return 0.0


def binned_averages(
    positions: Sequence[int], values: Sequence[float], bin_size: int
) -> list[float]:
    """Mean of ``values`` over the fixed ``bin_size`` bin each position falls in.

    Positions must be sorted.
    """
    averages: list[float] = []
    for _, members in groupby(range(len(positions)), key=lambda j: positions[j] // bin_size):
        members = list(members)
        mean = sum(values[j] for j in members) / len(members)
        averages.extend(mean for _ in members)
    return averages


def moving_window_averages(
    positions: Sequence[int], values: Sequence[float], half_window: int
) -> list[float]:
    """Mean of ``values`` over the sites within ``half_window`` bp of each position.

    Positions must be sorted.
    """
    sums = [0.0, *accumulate(values)]
    averages = []
    for pos in positions:
        lo = bisect_left(positions, pos - half_window)
        hi = bisect_right(positions, pos + half_window)
        averages.append((sums[hi] - sums[lo]) / (hi - lo))
    return averages


def dominant_state(averages: dict[QuartetState, float]) -> QuartetState:
    """State with the highest average, earlier states of PROFILE_STATES winning ties."""
    best = PROFILE_STATES[0]
    best_score = averages[best]
    for state in PROFILE_STATES[1:]:
        if averages[state] > best_score:
            best, best_score = state, averages[state]
    return best


def site_row(site: VariantSite) -> list:
    """Values of the SITE_TABLE_COLUMNS for one site."""
    row = [site.chromosome, site.position, site.reference, site.alternative]
    for member in FamilyMember:
        genotype = site.genotype(member)
        row.extend([str(genotype.first), str(genotype.second)])
    candidates = site.candidate_states
    row.append(site.genotype_pattern)
    row.append(str(candidates.primary))
    row.append(str(candidates.secondary) if candidates.secondary is not None else "")
    return row


def profile_sites(
    sites: Sequence[VariantSite],
    moving_window: bool = False,
    half_window: int = HALF_WINDOW_SIZE,
) -> pd.DataFrame:
    """Compute state votes, their averages and the dominant state of each site.

    Args:
        sites: Sites in VCF order (sorted by position within a chromosome)
        moving_window: Average over a moving window instead of fixed bins
        half_window: Half the bin size, or the moving-window radius

    Returns:
        DataFrame with the site columns, one vote and one average column per
        state, and the dominant state label
    """
    columns = (
        SITE_TABLE_COLUMNS
        + list(WEIGHT_COLUMNS.values())
        + list(AVERAGE_COLUMNS.values())
        + [DOMINANT_COLUMN]
    )
    rows = []
    for chromosome, chrom_sites in groupby(sites, key=lambda s: s.chromosome):
        chrom_sites = list(chrom_sites)
        positions = [s.position for s in chrom_sites]
        weights = {
            state: [state_weight(s, state) for s in chrom_sites] for state in PROFILE_STATES
        }
        if moving_window:
            averages = {
                state: moving_window_averages(positions, values, half_window)
                for state, values in weights.items()
            }
        else:
            averages = {
                state: binned_averages(positions, values, half_window * 2)
                for state, values in weights.items()
            }

        for i, site in enumerate(chrom_sites):
            site_averages = {state: averages[state][i] for state in PROFILE_STATES}
            rows.append(
                site_row(site)
                + [weights[state][i] for state in PROFILE_STATES]
                + [site_averages[state] for state in PROFILE_STATES]
                + [str(dominant_state(site_averages))]
            )
        log.debug("Profiled %d sites on %s", len(chrom_sites), chromosome)

    log.info(
        "Computed dominant states of %d sites (%s)",
        len(rows),
        "moving window" if moving_window else "binned",
    )
    return pd.DataFrame(rows, columns=columns)
