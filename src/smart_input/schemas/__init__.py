"""
SSOT (Single Source of Truth) schemas for smart input.

These canonical schemas are the ONLY models used across all modules.
"""

from .draft import Category, DraftTransaction, TransactionType
from .smart_input_result import NOT_FOUND, AmountMatch, AmountStatus, SmartInputResult

__all__ = [
    # Extraction output
    "SmartInputResult",
    "AmountMatch",
    "AmountStatus",
    "NOT_FOUND",
    # Draft transaction
    "DraftTransaction",
    "Category",
    "TransactionType",
]
