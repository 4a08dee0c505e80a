"""Glucose response propensity from binding site motif occurrences."""

from dataclasses import dataclass, field
from typing import Iterable

from glucose_pipeline.scoring.binding_sites import BINDING_SITES, BindingSite
from glucose_pipeline.scoring.promoter import extract_promoter


@dataclass
class PropensityResult:
    """Total propensity of a promoter and the contribution of each motif.

    Attributes:
        total: Sum of the contributions, accumulated in table order
        contributions: Motif -> occurrences * weight, in table order
    """

    total: float = 0.0
    contributions: dict[str, float] = field(default_factory=dict)


def count_occurrences(promoter: str, motif: str) -> int:
    """Count occurrences of motif in promoter, overlaps included.

    Each search resumes one character after the previous hit rather than
    after its end, so "aaa" occurs twice in "aaaa". The published scores were
    produced with this counting and it is kept as-is.
    """
    count = 0
    idx = promoter.find(motif)
    while idx != -1:
        count += 1
        idx = promoter.find(motif, idx + 1)
    return count


def score_promoter(
    promoter: str,
    sites: Iterable[BindingSite] = BINDING_SITES,
) -> PropensityResult:
    """
    Score an extracted promoter region against a binding site table.

    Every site is scanned independently: one stretch of promoter can count
    towards several motifs. The total is the sum of the per-motif
    contributions in table order, so it always equals
    sum(result.contributions.values()).

    Args:
        promoter: Promoter region (see extract_promoter)
        sites: Binding site table (default: BINDING_SITES)

    Returns:
        PropensityResult with total and per-motif contributions

    Notes:
        - Empty promoter gives total 0.0 and all contributions 0.0
        - Motifs longer than the promoter contribute 0.0
    """
    result = PropensityResult()

    for site in sites:
        score = count_occurrences(promoter, site.motif) * site.weight
        result.contributions[site.motif] = score
        result.total += score

    return result


def compute_propensity(
    sequence: str,
    sites: Iterable[BindingSite] = BINDING_SITES,
) -> float:
    """Propensity for glucose response of a full (mixed-case) gene sequence."""
    return score_promoter(extract_promoter(sequence), sites).total


def binding_site_contributions(
    sequence: str,
    sites: Iterable[BindingSite] = BINDING_SITES,
) -> dict[str, float]:
    """Contribution of each binding site to the propensity of a gene sequence."""
    return score_promoter(extract_promoter(sequence), sites).contributions
