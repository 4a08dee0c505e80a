"""Text report of a gene's binding site contributions."""

from glucose_pipeline.genes.models import GeneRecord


def format_gene_report(gene: GeneRecord, contributions: dict[str, float]) -> str:
    """
    Render a gene and the contribution of each binding site to its propensity.

    Args:
        gene: Scored gene record
        contributions: Motif -> contribution (see binding_site_contributions)

    Returns:
        Multi-line report; motifs listed alphabetically with signed
        contributions, e.g.

            Gene ID     = AT1G01010
            Propensity  = 2.5789
            ...
                 Motif   Contribution
                 acggg   +0.9637
    """
    lines = [
        f"Gene ID     = {gene.gene_id}",
        f"Propensity  = {gene.propensity:.4f}",
        f"Sequence    = {gene.sequence}",
        "",
        "Binding site contributions:",
        "",
        f"{'Motif':>10}   Contribution",
    ]

    for motif in sorted(contributions):
        lines.append(f"{motif:>10}   {contributions[motif]:+.4f}")

    return "\n".join(lines)
