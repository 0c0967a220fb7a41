"""
Spoken Chinese numeral conversion.

Converts numerals as they come out of speech-to-text ("一百二十八",
"十五", "三百", "两百零五") into numbers. Only the characters in
CHINESE_DIGITS are understood. 两 is the spoken form of 2 and 零 marks a
skipped place, so without them "两百块" would read as "百块" (100).
"""

# Character -> value. Values >= 10 are units.
CHINESE_DIGITS = {
    "零": 0,
    "一": 1,
    "二": 2,
    "两": 2,
    "三": 3,
    "四": 4,
    "五": 5,
    "六": 6,
    "七": 7,
    "八": 8,
    "九": 9,
    "十": 10,
    "百": 100,
    "千": 1000,
    "万": 10000,
}

# Regex character class matching one numeral character
CHINESE_DIGIT_CLASS = "[" + "".join(CHINESE_DIGITS) + "]"

SECTION_UNIT = 10000


def chinese_to_number(text: str) -> float:
    """
    Convert a Chinese numeral string to a number.

    Scans right to left. Each digit is multiplied by the unit currently in
    force; 十/百/千 set that unit within the current section and 万 opens a
    new section. A unit with no digit in front of it counts as one of
    itself, so "十五" is 15 and "十万" is 100000.

    Args:
        text: Numeral characters only, e.g. "一百二十八"

    Returns:
        The value as a float (empty string gives 0.0)

    Raises:
        ValueError: If text contains a character outside CHINESE_DIGITS
    """
    result = 0
    section = 1
    unit = 1
    unit_bound = True  # current unit already has a digit

    for char in reversed(text):
        value = CHINESE_DIGITS.get(char)
        if value is None:
            raise ValueError(f"Not a Chinese numeral: {char!r} in {text!r}")

        if value == SECTION_UNIT:
            if not unit_bound:
                result += unit
            section = SECTION_UNIT
            unit = SECTION_UNIT
            unit_bound = False
        elif value >= 10:
            # "一百十": the bare 十 is worth ten before 百 takes over
            if not unit_bound and unit != section:
                result += unit
            unit = value * section
            unit_bound = False
        else:
            result += value * unit
            unit_bound = True

    if not unit_bound:
        result += unit

    return float(result)
