"""
Confidence scoring module.

Computes the overall confidence of a result from the fields it carries.
"""

from .scorer import ConfidenceScorer, ConfidenceWeights

__all__ = [
    "ConfidenceScorer",
    "ConfidenceWeights",
]
