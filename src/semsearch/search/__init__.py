"""Search system for semsearch.

This module provides weighted multi-field ranking of in-memory records
with synonym expansion, numeric tolerance, Spanish phonetic matching and
edit-distance fuzzy matching.
"""

from semsearch.search.debounce import Debouncer
from semsearch.search.distance import levenshtein_distance, string_similarity
from semsearch.search.engine import (
    PreparedQuery,
    SearchEngine,
    SearchField,
    SearchResponse,
    field_text,
    resolve_path,
    search,
)
from semsearch.search.fuzzy import PhoneticHit, find_phonetic_matches, fuzzy_contains
from semsearch.search.normalize import normalize, tokenize
from semsearch.search.numeric import extract_numbers, fuzzy_number_match
from semsearch.search.phonetic import (
    PhoneticMatcher,
    generate_variations,
    phonetic_match,
)
from semsearch.search.presets import Preset, get_preset, list_presets
from semsearch.search.session import SearchSession
from semsearch.search.synonyms import (
    ExpandedSemanticMap,
    SemanticMap,
    expand_semantic_map,
)

__all__ = [
    # Engine
    "SearchEngine",
    "SearchField",
    "SearchResponse",
    "PreparedQuery",
    "search",
    "resolve_path",
    "field_text",
    # Session
    "SearchSession",
    "Debouncer",
    # Normalizer
    "normalize",
    "tokenize",
    # Synonyms
    "SemanticMap",
    "ExpandedSemanticMap",
    "expand_semantic_map",
    # Phonetic
    "PhoneticMatcher",
    "generate_variations",
    "phonetic_match",
    # Distance
    "levenshtein_distance",
    "string_similarity",
    # Numeric
    "extract_numbers",
    "fuzzy_number_match",
    # Fuzzy helpers
    "fuzzy_contains",
    "find_phonetic_matches",
    "PhoneticHit",
    # Presets
    "Preset",
    "get_preset",
    "list_presets",
]
