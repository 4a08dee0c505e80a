"""Glucose response propensity pipeline for Arabidopsis promoter sequences."""

__version__ = "0.1.0"
