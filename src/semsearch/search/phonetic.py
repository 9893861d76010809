"""Phonetic matching for common Spanish spelling confusions.

Words are compared through a small set of spelling variants (``codigo``
-> ``kodigo``, ``vale`` -> ``bale``, ...). Prefix checks are deliberately
permissive so that partially typed words already match while the user is
still typing.
"""

from typing import Any

from semsearch.cache import FIFOCache
from semsearch.search.distance import string_similarity
from semsearch.search.normalize import normalize

# Substring -> spellings it is commonly confused with. Order matters: once
# MAX_VARIATIONS is reached, later rules are not applied.
SPELLING_CONFUSIONS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("c", ("k", "s")),
    ("k", ("c", "qu")),
    ("qu", ("k", "c")),
    ("s", ("z", "c")),
    ("z", ("s",)),
    ("b", ("v",)),
    ("v", ("b",)),
    ("g", ("j",)),
    ("j", ("g",)),
    ("y", ("ll", "i")),
    ("ll", ("y",)),
    ("h", ("",)),  # silent h
    ("x", ("s",)),
)

# Prefix swaps added on top of the single substitutions
PREFIX_SWAPS: tuple[tuple[str, str], ...] = (
    ("cod", "kod"),
    ("kod", "cod"),
)

MAX_VARIATIONS = 8
MIN_WORD_LENGTH = 2
MAX_WORD_LENGTH = 15

# Variants that are prefixes of each other still match within this gap
MAX_PREFIX_LENGTH_DIFF = 3

DEFAULT_THRESHOLD = 0.8


def generate_variations(word: str) -> tuple[str, ...]:
    """Generate spelling variants of a word (uncached).

    Each rule substitutes a single occurrence at a time, for every
    occurrence, so ``"bob"`` yields ``"vob"`` and ``"bov"`` but not
    ``"vov"``.

    Args:
        word: Word to vary.

    Returns:
        Up to :data:`MAX_VARIATIONS` distinct variants, the normalized word
        first. Words outside the 2-15 character band only return their
        normalized form.
    """
    normalized = normalize(word)
    variations: dict[str, None] = {normalized: None}

    if MIN_WORD_LENGTH <= len(word) <= MAX_WORD_LENGTH:
        for mistake, corrections in SPELLING_CONFUSIONS:
            if mistake not in normalized:
                continue
            for correction in corrections:
                index = normalized.find(mistake)
                while index != -1 and len(variations) < MAX_VARIATIONS:
                    variant = (
                        normalized[:index]
                        + correction
                        + normalized[index + len(mistake) :]
                    )
                    variations[variant] = None
                    index = normalized.find(mistake, index + 1)

        for prefix, replacement in PREFIX_SWAPS:
            if normalized.startswith(prefix):
                variations[replacement + normalized[len(prefix) :]] = None

    return tuple(variations)[:MAX_VARIATIONS]


def _is_prefix_pair(normalized1: str, normalized2: str) -> bool:
    return normalized2.startswith(normalized1) or normalized1.startswith(normalized2)


def _variations_match(
    variations1: tuple[str, ...],
    variations2: tuple[str, ...],
    threshold: float,
) -> bool:
    for v1 in variations1:
        for v2 in variations2:
            if v1 == v2:
                return True

            if v2.startswith(v1) or v1.startswith(v2):
                if abs(len(v1) - len(v2)) <= MAX_PREFIX_LENGTH_DIFF:
                    return True

            if string_similarity(v1, v2) >= threshold:
                return True

    return False


def phonetic_match(
    word1: str,
    word2: str,
    threshold: float = DEFAULT_THRESHOLD,
) -> bool:
    """Compare two words through their spelling variants (uncached).

    Args:
        word1: First word.
        word2: Second word.
        threshold: Minimum similarity between any pair of variants.

    Returns:
        True if either word is a prefix of the other, any variants are
        equal, any variant is a close prefix of another, or any pair of
        variants is at least ``threshold`` similar.
    """
    if _is_prefix_pair(normalize(word1), normalize(word2)):
        return True
    return _variations_match(
        generate_variations(word1),
        generate_variations(word2),
        threshold,
    )


class PhoneticMatcher:
    """Phonetic matcher with an instance-owned variation cache.

    Each engine owns one matcher; disposing the engine clears the cache.
    """

    def __init__(self, cache_size: int = 200) -> None:
        """Initialize the matcher.

        Args:
            cache_size: Capacity of the FIFO variation cache.
        """
        self._cache = FIFOCache(capacity=cache_size)

    def variations(self, word: str) -> tuple[str, ...]:
        """Spelling variants of ``word``, cached by the raw word."""
        cached = self._cache.get(word)
        if cached is not None:
            return cached

        result = generate_variations(word)
        self._cache.set(word, result)
        return result

    def match(
        self,
        word1: str,
        word2: str,
        threshold: float = DEFAULT_THRESHOLD,
    ) -> bool:
        """Cached equivalent of :func:`phonetic_match`."""
        if _is_prefix_pair(normalize(word1), normalize(word2)):
            return True
        return _variations_match(
            self.variations(word1),
            self.variations(word2),
            threshold,
        )

    def cache_stats(self) -> dict[str, Any]:
        """Statistics of the variation cache."""
        return self._cache.stats()

    def clear(self) -> int:
        """Drop all cached variations.

        Returns:
            Number of entries removed.
        """
        return self._cache.clear()

    def dispose(self) -> None:
        """Release cached state."""
        self._cache.clear()
