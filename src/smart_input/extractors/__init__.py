"""
Smart-input field extractors.

Provides:
- Amount cascades for receipts and voice
- Chinese numeral conversion
- Merchant extraction (keyword and phrasing based)
- Category suggestion from an ordered keyword table
- Receipt note generation

Every table is an ordered tuple; first match wins.
"""

from .amount import (
    AMOUNT_PATTERNS,
    extract_amount,
    extract_voice_amount,
    match_amount,
    match_voice_amount,
    parse_amount,
)
from .category import CATEGORY_KEYWORDS, CATEGORY_NAMES, suggest_category
from .merchant import (
    MERCHANT_KEYWORDS,
    VOICE_MERCHANT_PATTERNS,
    extract_merchant,
    extract_voice_merchant,
)
from .note import DEFAULT_NOTE_MAX_LENGTH, generate_note
from .numerals import CHINESE_DIGITS, chinese_to_number

__all__ = [
    # Amount
    "AMOUNT_PATTERNS",
    "extract_amount",
    "extract_voice_amount",
    "match_amount",
    "match_voice_amount",
    "parse_amount",
    # Numerals
    "CHINESE_DIGITS",
    "chinese_to_number",
    # Merchant
    "MERCHANT_KEYWORDS",
    "VOICE_MERCHANT_PATTERNS",
    "extract_merchant",
    "extract_voice_merchant",
    # Category
    "CATEGORY_KEYWORDS",
    "CATEGORY_NAMES",
    "suggest_category",
    # Note
    "DEFAULT_NOTE_MAX_LENGTH",
    "generate_note",
]
