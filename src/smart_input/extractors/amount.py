"""
Amount extraction for receipts (OCR) and spoken input (voice).

Both paths are first-match-wins cascades over ordered pattern tables.
Supported formats:
- Receipts: ¥128.50, 89.00元, 金额：300, 总计/合计：¥89, 应付：45.8, 票价：58元
- Voice: 一百二十八块五毛, 三百块钱, 50块, 38元
"""

import re
from decimal import Decimal, InvalidOperation
from typing import Optional

from ..schemas.smart_input_result import NOT_FOUND, AmountMatch, AmountStatus
from .numerals import CHINESE_DIGIT_CLASS, chinese_to_number

NUMBER = r"(\d+(?:\.\d+)?)"
YEN = "[¥￥]"
# Same-line whitespace only; OCR lines are joined with newlines
GAP = r"[ \t]*"

# Receipt amount patterns (priority order)
AMOUNT_PATTERNS = (
    (re.compile(YEN + GAP + NUMBER), "yen_prefix"),
    (re.compile(NUMBER + "元"), "yuan_suffix"),
    (re.compile(r"金额[：:]" + GAP + NUMBER), "amount_label"),
    (re.compile(r"(?:总计|合计)[：:]" + GAP + YEN + "?" + GAP + NUMBER), "total_label"),
    (re.compile(r"应付[：:]" + GAP + YEN + "?" + GAP + NUMBER), "due_label"),
    (re.compile(r"票价[：:]" + GAP + NUMBER + "元?"), "fare_label"),
)

# Spoken amount patterns (priority order)
# Jiao is a single digit after 块; "一百块二十个" stops at 块
VOICE_CHINESE_PATTERN = re.compile(
    "(" + CHINESE_DIGIT_CLASS + "+)块"
    "(?:([一二三四五六七八九])(?!" + CHINESE_DIGIT_CLASS + "))?毛?"
)
VOICE_ARABIC_PATTERN = re.compile(NUMBER + r"(?:块钱?|元)")

JIAO = Decimal("0.1")
CENTS = Decimal("0.01")


def parse_amount(raw: str, pattern: Optional[str] = None) -> AmountMatch:
    """
    Parse a matched numeral into a tri-state AmountMatch.

    A numeral that does not convert is PARSE_FAILED, not NOT_FOUND:
    the pattern did match.
    """
    try:
        amount = Decimal(raw)
    except (InvalidOperation, ValueError):
        return AmountMatch(status=AmountStatus.PARSE_FAILED, pattern=pattern, raw=raw)

    if not amount.is_finite() or amount < 0:
        return AmountMatch(status=AmountStatus.PARSE_FAILED, pattern=pattern, raw=raw)

    return AmountMatch(status=AmountStatus.PARSED, amount=amount, pattern=pattern, raw=raw)


def match_amount(text: str) -> AmountMatch:
    """Run the receipt cascade over a line or text block."""
    if not text:
        return NOT_FOUND

    for pattern, name in AMOUNT_PATTERNS:
        match = pattern.search(text)
        if match:
            return parse_amount(match.group(1), name)

    return NOT_FOUND


def extract_amount(text: str, lenient: bool = True) -> Optional[Decimal]:
    """
    Return the first receipt amount in text, or None.

    With lenient parsing an unparseable match comes back as Decimal("0").
    """
    return match_amount(text).resolve(lenient)


def match_voice_amount(text: str) -> AmountMatch:
    """
    Run the spoken-amount cascade.

    Strategy:
    1. Chinese numerals: yuan before 块, optional jiao after it
    2. Arabic numerals followed by 块/块钱/元
    """
    if not text:
        return NOT_FOUND

    match = VOICE_CHINESE_PATTERN.search(text)
    if match:
        yuan = Decimal(str(chinese_to_number(match.group(1))))
        jiao = Decimal(str(chinese_to_number(match.group(2)))) if match.group(2) else Decimal("0")
        amount = (yuan + jiao * JIAO).quantize(CENTS)
        return AmountMatch(
            status=AmountStatus.PARSED,
            amount=amount,
            pattern="chinese_numeral",
            raw=match.group(0),
        )

    match = VOICE_ARABIC_PATTERN.search(text)
    if match:
        return parse_amount(match.group(1), "arabic_numeral")

    return NOT_FOUND


def extract_voice_amount(text: str, lenient: bool = True) -> Optional[Decimal]:
    """Return the spoken amount in text, or None."""
    return match_voice_amount(text).resolve(lenient)
