"""Binding site motif scoring of promoter regions for glucose response."""

from glucose_pipeline.scoring.binding_sites import (
    BINDING_SITES,
    REFERENCE_MOTIFS,
    BindingSite,
    build_binding_sites,
    expand_ambiguity,
)
from glucose_pipeline.scoring.promoter import extract_promoter
from glucose_pipeline.scoring.propensity import (
    PropensityResult,
    binding_site_contributions,
    compute_propensity,
    count_occurrences,
    score_promoter,
)
from glucose_pipeline.scoring.integration import score_genes

__all__ = [
    "BINDING_SITES",
    "REFERENCE_MOTIFS",
    "BindingSite",
    "build_binding_sites",
    "expand_ambiguity",
    "extract_promoter",
    "PropensityResult",
    "binding_site_contributions",
    "compute_propensity",
    "count_occurrences",
    "score_promoter",
    "score_genes",
]
