"""Gene records and their quoted CSV representation.

Key exports:
- models: GeneRecord
- io: load_genes, write_genes, GENE_SCHEMA
"""

from glucose_pipeline.genes.models import GeneRecord
from glucose_pipeline.genes.io import GENE_SCHEMA, load_genes, write_genes

__all__ = [
    "GeneRecord",
    "GENE_SCHEMA",
    "load_genes",
    "write_genes",
]
