"""Numeric token extraction and tolerant comparison."""

import math
import re

# Digit/comma runs with an optional decimal part ("1,250", "563", "9,000.00")
_NUMBER_PATTERN = re.compile(r"[\d,]+\.?\d*")


def extract_numbers(text: str | None) -> list[float]:
    """Extract the numbers appearing in a string.

    Thousands separators are stripped before parsing. Runs that do not
    parse to a finite number (e.g. a lone comma) are discarded.

    Args:
        text: Text to scan.

    Returns:
        Numbers in order of appearance.
    """
    if not text:
        return []

    numbers: list[float] = []
    for match in _NUMBER_PATTERN.findall(text):
        try:
            value = float(match.replace(",", ""))
        except ValueError:
            continue
        if math.isfinite(value):
            numbers.append(value)
    return numbers


def fuzzy_number_match(
    search_num: float,
    target_num: float,
    tolerance: float = 0.1,
) -> bool:
    """Check whether ``target_num`` is within a relative tolerance of ``search_num``.

    Args:
        search_num: Number from the query.
        target_num: Number found in the record.
        tolerance: Allowed relative difference (0.2 means 20%).

    Returns:
        True if ``|search - target| <= tolerance * |search|``. The boundary is
        inclusive up to float rounding, so 563 matches 675.6 at 20%. A query
        of 0 only matches 0.
    """
    if search_num == 0:
        return target_num == 0
    diff = abs(search_num - target_num)
    allowed = tolerance * abs(search_num)
    return diff <= allowed or math.isclose(diff, allowed)
