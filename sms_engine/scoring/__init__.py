"""Confidence scoring for SMS analysis."""

from .confidence import ConfidenceScorer

__all__ = [
    "ConfidenceScorer",
]
