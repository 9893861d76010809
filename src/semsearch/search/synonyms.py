"""Semantic map (thesaurus) expansion.

A semantic map is authored as ``term -> related terms``. Expansion makes
it usable at query time: accent-free spellings become keys too, and every
related term points back to the term it came from, so a query for either
side finds the other.
"""

from collections.abc import Iterator, Mapping, Sequence

from semsearch.search.normalize import normalize

SemanticMap = Mapping[str, Sequence[str]]

# Caps on reverse-entry fan-out
MAX_EXPANSIONS = 50
MAX_RELATED = 10


class ExpandedSemanticMap(Mapping[str, tuple[str, ...]]):
    """Read-only, bidirectional, accent-insensitive semantic map."""

    def __init__(self, entries: dict[str, tuple[str, ...]]) -> None:
        self._entries = entries

    def __getitem__(self, key: str) -> tuple[str, ...]:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"ExpandedSemanticMap({len(self._entries)} terms)"

    def related(self, word: str) -> list[str]:
        """Get the normalized terms related to a word.

        Args:
            word: Query word (normalized before lookup).

        Returns:
            Normalized related terms, without duplicates.
        """
        terms = self._entries.get(normalize(word), ())
        return list(dict.fromkeys(normalize(term) for term in terms))


def _unique(values: Sequence[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(values))


def expand_semantic_map(semantic_map: SemanticMap | None) -> ExpandedSemanticMap:
    """Expand a semantic map into a bidirectional lookup table.

    For each ``key -> values`` entry, ``key`` and its normalized form map
    to the values plus their normalized forms. Each of the first
    :data:`MAX_EXPANSIONS` values (and its normalized form) is registered,
    unless already present, as a key mapping back to the original key and
    up to :data:`MAX_RELATED` of its values.

    Args:
        semantic_map: Term to related terms. ``None`` gives an empty map.

    Returns:
        The expanded map. Expanding an already expanded map returns it
        unchanged.
    """
    if isinstance(semantic_map, ExpandedSemanticMap):
        return semantic_map

    expanded: dict[str, tuple[str, ...]] = {}

    for key, values in (semantic_map or {}).items():
        values = list(values)
        normalized_key = normalize(key)
        all_values = _unique(values + [normalize(v) for v in values])

        expanded[key] = all_values
        if normalized_key != key:
            expanded[normalized_key] = all_values

        back_refs = _unique([key, normalized_key, *values[:MAX_RELATED]])
        for value in values[:MAX_EXPANSIONS]:
            normalized_value = normalize(value)
            if value not in expanded:
                expanded[value] = back_refs
            if normalized_value != value and normalized_value not in expanded:
                expanded[normalized_value] = back_refs

    return ExpandedSemanticMap(expanded)
