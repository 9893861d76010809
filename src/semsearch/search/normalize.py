"""Text normalization and tokenization.

Every other matcher works on the output of :func:`normalize`, so the
rules here define what "the same word" means across the engine: accents
and case are ignored, surrounding whitespace is dropped.
"""

import re
import unicodedata

# Combining diacritical marks block (U+0300 - U+036F)
_DIACRITICS = re.compile(r"[\u0300-\u036f]")

# Token separators: whitespace, comma, period, hyphen, underscore, slash
_TOKEN_SPLIT = re.compile(r"[\s,.\-_/]+")


def normalize(text: str | None) -> str:
    """Normalize text for comparison.

    Lowercases, decomposes to NFD, removes combining accents and trims.

    Args:
        text: Text to normalize. ``None`` and empty strings give ``""``.

    Returns:
        Normalized text.
    """
    if not text:
        return ""
    # Lowercase first: some uppercase letters lowercase to a base letter
    # plus a combining mark (e.g. "İ").
    decomposed = unicodedata.normalize("NFD", text.lower())
    return _DIACRITICS.sub("", decomposed).strip()


def tokenize(text: str | None) -> list[str]:
    """Split text into normalized words longer than one character.

    Args:
        text: Text to tokenize.

    Returns:
        List of normalized tokens, in order of appearance.
    """
    return [word for word in _TOKEN_SPLIT.split(normalize(text)) if len(word) > 1]
