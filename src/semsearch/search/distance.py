"""Edit-distance scoring.

Thin wrappers over rapidfuzz's Levenshtein implementation that add the
case folding, trivial-case shortcuts and length cap used by the matchers.
"""

from rapidfuzz.distance import Levenshtein

# Longer inputs are treated as "no useful similarity"
MAX_DISTANCE_LENGTH = 50


def levenshtein_distance(str1: str, str2: str) -> int:
    """Compute the case-insensitive Levenshtein distance.

    Args:
        str1: First string.
        str2: Second string.

    Returns:
        Number of single-character edits, or ``max(len(str1), len(str2))``
        when either string exceeds :data:`MAX_DISTANCE_LENGTH`.
    """
    a = str1.lower()
    b = str2.lower()

    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)

    if len(a) > MAX_DISTANCE_LENGTH or len(b) > MAX_DISTANCE_LENGTH:
        return max(len(a), len(b))

    return Levenshtein.distance(a, b)


def string_similarity(str1: str, str2: str) -> float:
    """Similarity in [0, 1] derived from the edit distance.

    Args:
        str1: First string.
        str2: Second string.

    Returns:
        ``(longest - distance) / longest``; 1.0 when both are empty.
    """
    longer, shorter = (str1, str2) if len(str1) > len(str2) else (str2, str1)
    if not longer:
        return 1.0

    distance = levenshtein_distance(longer, shorter)
    return (len(longer) - distance) / len(longer)
