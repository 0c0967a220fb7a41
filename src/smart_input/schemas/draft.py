"""
In-memory draft transaction filled from a smart-input result.

The draft is what the add-transaction form edits; it is persisted by
the caller only after the user confirms it.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Iterable, Optional

from .smart_input_result import SmartInputResult


class TransactionType(str, Enum):
    """Direction of a transaction."""

    INCOME = "INCOME"
    EXPENSE = "EXPENSE"


@dataclass(frozen=True)
class Category:
    """A user category as stored by the persistence layer."""

    id: int
    name: str
    type: TransactionType
    icon: Optional[str] = None


@dataclass
class DraftTransaction:
    """
    Unsaved candidate transaction.

    Fields start empty (amount zero) and are overwritten by
    apply_result() only where the result carries a value.
    """

    transaction_type: TransactionType = TransactionType.EXPENSE
    amount: Decimal = Decimal("0")
    merchant: Optional[str] = None
    note: str = ""
    category: Optional[Category] = None
    account_id: Optional[int] = None

    def apply_result(
        self,
        result: SmartInputResult,
        categories: Iterable[Category] = (),
    ) -> "DraftTransaction":
        """
        Copy extracted fields into the draft.

        The suggested category is resolved against the user's categories by
        exact name, restricted to the draft's transaction type. An unmatched
        suggestion leaves the current selection alone.

        Returns:
            self, for chaining
        """
        if result.amount is not None:
            self.amount = result.amount
        if result.merchant:
            self.merchant = result.merchant
        if result.note is not None:
            self.note = result.note

        if result.suggested_category:
            for category in categories:
                if (
                    category.name == result.suggested_category
                    and category.type == self.transaction_type
                ):
                    self.category = category
                    break

        return self

    @property
    def is_complete(self) -> bool:
        """A draft can be saved once it has a positive amount and a category."""
        return self.amount > 0 and self.category is not None
