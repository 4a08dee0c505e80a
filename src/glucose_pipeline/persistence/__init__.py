"""Provenance tracking for pipeline runs."""

from glucose_pipeline.persistence.provenance import ProvenanceTracker

__all__ = ["ProvenanceTracker"]
