"""Output generation: top candidate ranking and per-gene reports."""

from glucose_pipeline.output.display import format_gene_report
from glucose_pipeline.output.ranking import rank_genes, select_top

__all__ = [
    "format_gene_report",
    "rank_genes",
    "select_top",
]
