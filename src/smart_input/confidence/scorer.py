"""
Confidence scoring implementation.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class ConfidenceWeights:
    """Weight of each present field in the overall confidence."""

    amount: float = 0.4
    merchant: float = 0.3
    category: float = 0.3


class ConfidenceScorer:
    """
    Computes the confidence of a smart-input result.

    Each field contributes its full weight or nothing:
    - amount: present and greater than zero
    - merchant: present and not blank
    - category: present and not blank
    """

    def __init__(self, weights: Optional[ConfidenceWeights] = None):
        """Initialize scorer with weights."""
        self.weights = weights or ConfidenceWeights()

    def score(
        self,
        amount: Optional[Decimal],
        merchant: Optional[str],
        category: Optional[str],
    ) -> float:
        """
        Compute confidence in [0.0, 1.0].

        A zero amount (the lenient result of an unparseable numeral)
        earns no credit.
        """
        total = 0.0
        if amount is not None and amount > 0:
            total += self.weights.amount
        if merchant and merchant.strip():
            total += self.weights.merchant
        if category and category.strip():
            total += self.weights.category

        # Round away float noise (0.4 + 0.3 != 0.7)
        return min(1.0, round(total, 2))
