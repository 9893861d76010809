"""Typo-tolerant containment checks.

Standalone helpers built on the phonetic and edit-distance matchers, for
callers that need a yes/no answer (or the matched word pairs) rather than
a ranked list.
"""

from collections.abc import Callable
from dataclasses import dataclass

from semsearch.search.distance import string_similarity
from semsearch.search.normalize import normalize, tokenize
from semsearch.search.phonetic import PhoneticMatcher, phonetic_match

# Words this short need an exact or strict phonetic match
SHORT_WORD_LENGTH = 3
SHORT_WORD_THRESHOLD = 0.9

MAX_PHONETIC_MATCHES = 20


@dataclass(frozen=True)
class PhoneticHit:
    """A search word and the text word it phonetically matched."""

    search_word: str
    text_word: str


def _matcher_fn(
    matcher: PhoneticMatcher | None,
) -> Callable[[str, str, float], bool]:
    return matcher.match if matcher is not None else phonetic_match


def fuzzy_contains(
    text: str,
    search: str,
    threshold: float = 0.8,
    matcher: PhoneticMatcher | None = None,
) -> bool:
    """Check whether every search word appears in the text, allowing typos.

    Args:
        text: Text to look in.
        search: Search phrase.
        threshold: Similarity needed for words longer than three characters.
        matcher: Optional cached matcher to use for phonetic checks.

    Returns:
        True if the normalized phrase is a substring of the text, or every
        search word has an exact, fuzzy or phonetic counterpart in it.
    """
    if normalize(search) in normalize(text):
        return True

    match = _matcher_fn(matcher)
    text_words = tokenize(text)

    for search_word in tokenize(search):
        if len(search_word) <= SHORT_WORD_LENGTH:
            found = any(
                text_word == search_word
                or match(text_word, search_word, SHORT_WORD_THRESHOLD)
                for text_word in text_words
            )
        else:
            found = any(
                string_similarity(text_word, search_word) >= threshold
                or match(text_word, search_word, threshold)
                for text_word in text_words
            )
        if not found:
            return False

    return True


def find_phonetic_matches(
    text: str,
    search_term: str,
    max_matches: int = MAX_PHONETIC_MATCHES,
    matcher: PhoneticMatcher | None = None,
) -> list[PhoneticHit]:
    """List the text words that phonetically match each search word.

    Search words of four characters or fewer use a looser threshold (0.65)
    than longer ones (0.75) so partially typed words still match.

    Args:
        text: Text to scan.
        search_term: Search phrase.
        max_matches: Stop after this many hits.
        matcher: Optional cached matcher to use.

    Returns:
        Matched word pairs in scan order.
    """
    match = _matcher_fn(matcher)
    text_words = tokenize(text)
    hits: list[PhoneticHit] = []

    for search_word in tokenize(search_term):
        threshold = 0.65 if len(search_word) <= 4 else 0.75
        for text_word in text_words:
            if len(hits) >= max_matches:
                return hits
            if match(search_word, text_word, threshold):
                hits.append(PhoneticHit(search_word=search_word, text_word=text_word))

    return hits
