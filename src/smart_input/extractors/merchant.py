"""
Merchant extraction.

Receipts: the merchant is looked up by keyword, line by line.
Voice: the merchant is captured from phrasing such as "在...买" or "去...消费".
"""

import re
from typing import Optional, Sequence

# Place keywords (priority order)
MERCHANT_KEYWORDS = (
    "超市",
    "商店",
    "店",
    "餐厅",
    "饭店",
    "火锅",
    "咖啡",
    "茶",
    "药店",
    "医院",
    "加油站",
    "影城",
    "电影院",
    "KTV",
    "健身",
    "美容",
    "理发",
    "洗车",
    "停车",
)

# Voice merchant patterns (priority order)
VOICE_MERCHANT_PATTERNS = (
    (re.compile(r"在(.+?)买"), "at_buy"),
    (re.compile(r"在(.+?)花"), "at_spend"),
    (re.compile(r"去(.+?)消费"), "go_consume"),
    (re.compile(r"(.+?)店"), "shop_suffix"),
    (re.compile(r"(.+?)超市"), "supermarket_suffix"),
    (re.compile(r"(.+?)餐厅"), "restaurant_suffix"),
)


def _find_keyword(text: str) -> Optional[str]:
    for keyword in MERCHANT_KEYWORDS:
        if keyword in text:
            return keyword
    return None


def extract_merchant(lines: Sequence[str]) -> Optional[str]:
    """
    Extract the merchant from receipt lines.

    On the first line that contains a keyword, prefer the first
    whitespace-delimited token that wraps the keyword with more text
    ("沃尔玛超市" over "超市"); otherwise take the whole trimmed line.
    """
    for line in lines:
        keyword = _find_keyword(line)
        if keyword is None:
            continue

        for token in line.split():
            if keyword in token and len(token) > len(keyword):
                return token

        return line.strip() or None

    return None


def extract_voice_merchant(text: str) -> Optional[str]:
    """
    Extract the merchant from a voice transcript.

    Falls back to the bare place keyword ("加油站") when no phrasing
    pattern captures anything.
    """
    if not text:
        return None

    for pattern, _name in VOICE_MERCHANT_PATTERNS:
        match = pattern.search(text)
        if match:
            merchant = match.group(1).strip()
            if merchant:
                return merchant

    return _find_keyword(text)
