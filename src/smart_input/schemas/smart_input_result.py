"""
Canonical smart-input result (SSOT).

Every entry point of the extraction engine returns a SmartInputResult.
Callers bind it into a draft transaction; nothing here is persisted.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Optional


class AmountStatus(str, Enum):
    """
    Outcome of an amount parse.

    NOT_FOUND: No amount pattern matched
    PARSED: A pattern matched and the numeral converted cleanly
    PARSE_FAILED: A pattern matched but the numeral did not convert
    """

    NOT_FOUND = "NOT_FOUND"
    PARSED = "PARSED"
    PARSE_FAILED = "PARSE_FAILED"


@dataclass(frozen=True)
class AmountMatch:
    """Tri-state amount match, with the rule that produced it."""

    status: AmountStatus
    amount: Optional[Decimal] = None
    pattern: Optional[str] = None  # Rule name, e.g. "yen_prefix"
    raw: Optional[str] = None  # Matched substring

    @property
    def found(self) -> bool:
        return self.status != AmountStatus.NOT_FOUND

    def resolve(self, lenient: bool = True) -> Optional[Decimal]:
        """
        Collapse the match into the amount callers see.

        A PARSE_FAILED match becomes Decimal("0") when lenient and None
        otherwise. Callers must read a zero as "recognized but unparseable".
        """
        if self.status == AmountStatus.PARSED:
            return self.amount
        if self.status == AmountStatus.PARSE_FAILED and lenient:
            return Decimal("0")
        return None


NOT_FOUND = AmountMatch(status=AmountStatus.NOT_FOUND)


@dataclass(frozen=True)
class SmartInputResult:
    """
    Structured transaction draft extracted from recognized text.

    All fields are optional except confidence, which is derived from
    the presence of amount, merchant and suggested_category.
    """

    amount: Optional[Decimal] = None
    merchant: Optional[str] = None
    suggested_category: Optional[str] = None
    note: Optional[str] = None
    confidence: float = 0.0

    @property
    def is_empty(self) -> bool:
        """True when no field was extracted."""
        return (
            self.amount is None
            and not self.merchant
            and not self.suggested_category
            and not self.note
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "amount": str(self.amount) if self.amount is not None else None,
            "merchant": self.merchant,
            "suggested_category": self.suggested_category,
            "note": self.note,
            "confidence": self.confidence,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "SmartInputResult":
        """Create from dictionary."""
        return cls(
            amount=Decimal(data["amount"]) if data.get("amount") is not None else None,
            merchant=data.get("merchant"),
            suggested_category=data.get("suggested_category"),
            note=data.get("note"),
            confidence=data.get("confidence", 0.0),
        )
