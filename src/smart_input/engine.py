"""
Smart-input extraction engine.

Turns recognized text into a SmartInputResult:
1. Receipt lines (OCR): amount cascade, keyword merchant, category, note
2. Voice transcript: spoken amount, phrasing merchant, category, raw note

The engine holds configuration only; every call is a pure function of its
input, so one instance can be shared freely.
"""

import logging
from typing import Optional, Sequence

from .confidence import ConfidenceScorer
from .config import ExtractionConfig
from .extractors.amount import match_amount, match_voice_amount
from .extractors.category import suggest_category
from .extractors.merchant import extract_merchant, extract_voice_merchant
from .extractors.note import generate_note
from .schemas.smart_input_result import SmartInputResult

logger = logging.getLogger(__name__)


class SmartInputEngine:
    """Extracts transaction drafts from OCR lines and voice transcripts."""

    def __init__(
        self,
        config: Optional[ExtractionConfig] = None,
        scorer: Optional[ConfidenceScorer] = None,
    ):
        self.config = config or ExtractionConfig()
        self.scorer = scorer or ConfidenceScorer()

    def extract_transaction_info(self, lines: Sequence[str]) -> SmartInputResult:
        """
        Extract transaction info from receipt lines.

        Args:
            lines: OCR text lines in detection order

        Returns:
            SmartInputResult (fields are None when nothing was found)
        """
        lines = list(lines)
        text = "\n".join(lines)

        amount_match = match_amount(text)
        amount = amount_match.resolve(self.config.lenient_amount_parsing)
        merchant = extract_merchant(lines)
        category = suggest_category(" ".join(lines))
        note = generate_note(lines, self.config.note_max_length)

        logger.debug(
            f"OCR extraction: amount={amount} ({amount_match.status.value}, "
            f"pattern={amount_match.pattern}), merchant={merchant!r}, category={category!r}"
        )

        return SmartInputResult(
            amount=amount,
            merchant=merchant,
            suggested_category=category,
            note=note,
            confidence=self.scorer.score(amount, merchant, category),
        )

    def parse_voice_input(self, text: str) -> SmartInputResult:
        """
        Parse a voice transcript.

        Example: "在超市花了五十块钱买菜" -> amount 50, merchant "超市",
        category 购物, note = the transcript.
        """
        amount_match = match_voice_amount(text)
        amount = amount_match.resolve(self.config.lenient_amount_parsing)
        merchant = extract_voice_merchant(text)
        category = suggest_category(text)

        logger.debug(
            f"Voice extraction: amount={amount} ({amount_match.status.value}, "
            f"pattern={amount_match.pattern}), merchant={merchant!r}, category={category!r}"
        )

        return SmartInputResult(
            amount=amount,
            merchant=merchant,
            suggested_category=category,
            note=text,
            confidence=self.scorer.score(amount, merchant, category),
        )


_default_engine = SmartInputEngine()


def extract_transaction_info(lines: Sequence[str]) -> SmartInputResult:
    """Extract from receipt lines with the default engine."""
    return _default_engine.extract_transaction_info(lines)


def parse_voice_input(text: str) -> SmartInputResult:
    """Parse a voice transcript with the default engine."""
    return _default_engine.parse_voice_input(text)
