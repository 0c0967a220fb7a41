"""
Note generation for receipts.

Keeps the descriptive lines of a receipt and drops numbers, fragments and
total labels, which the amount extractor has already consumed.
"""

import re
from typing import Optional, Sequence

DEFAULT_NOTE_MAX_LENGTH = 50

NUMERIC_PATTERN = re.compile(r"\d+")
TOTAL_LABELS = ("合计", "总计", "应付")
MIN_LINE_LENGTH = 3


def is_note_line(line: str) -> bool:
    """Check whether a receipt line belongs in the note."""
    stripped = line.strip()
    if len(stripped) < MIN_LINE_LENGTH:
        return False
    if NUMERIC_PATTERN.search(stripped):
        return False
    return not any(label in stripped for label in TOTAL_LABELS)


def generate_note(
    lines: Sequence[str],
    max_length: int = DEFAULT_NOTE_MAX_LENGTH,
) -> Optional[str]:
    """
    Join the surviving receipt lines with single spaces.

    Returns:
        At most max_length characters, or None if every line was dropped
    """
    kept = [line.strip() for line in lines if is_note_line(line)]
    if not kept:
        return None
    return " ".join(kept)[:max_length]
