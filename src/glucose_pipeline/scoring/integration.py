"""Assign propensity scores to a collection of genes."""

from typing import Iterable

import structlog

from glucose_pipeline.genes.models import GeneRecord
from glucose_pipeline.scoring.binding_sites import BINDING_SITES, BindingSite
from glucose_pipeline.scoring.propensity import compute_propensity

logger = structlog.get_logger(__name__)


def score_genes(
    genes: list[GeneRecord],
    sites: Iterable[BindingSite] = BINDING_SITES,
) -> list[GeneRecord]:
    """
    Compute and store the glucose response propensity of every gene.

    Args:
        genes: Records to score; propensity is overwritten in place
        sites: Binding site table (default: BINDING_SITES)

    Returns:
        The same list, for chaining
    """
    sites = tuple(sites)

    for gene in genes:
        gene.propensity = compute_propensity(gene.sequence, sites)

    if genes:
        scores = [g.propensity for g in genes]
        logger.info(
            "score_genes_complete",
            gene_count=len(genes),
            mean_propensity=f"{sum(scores) / len(scores):.4f}",
            max_propensity=f"{max(scores):.4f}",
            positive_count=sum(1 for s in scores if s > 0),
        )
    else:
        logger.warning("score_genes_empty")

    return genes
