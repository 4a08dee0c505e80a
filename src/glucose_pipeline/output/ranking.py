"""Ranking genes by propensity and selecting the top candidates."""

from glucose_pipeline.genes.models import GeneRecord


def rank_genes(genes: list[GeneRecord]) -> list[GeneRecord]:
    """
    Order genes from highest to lowest propensity.

    The sort is stable: genes with equal propensity keep their input order,
    which makes the exported ranking deterministic for a given input file.

    Args:
        genes: Scored gene records (not modified)

    Returns:
        New list sorted by propensity DESC
    """
    return sorted(genes, key=lambda g: g.propensity, reverse=True)


def select_top(genes: list[GeneRecord], top_n: int) -> list[GeneRecord]:
    """
    Select the top_n highest-propensity genes.

    Asking for more genes than available returns all of them.

    Raises:
        ValueError: If top_n is negative
    """
    if top_n < 0:
        raise ValueError(f"top_n must be >= 0, got {top_n}")

    return rank_genes(genes)[:top_n]
