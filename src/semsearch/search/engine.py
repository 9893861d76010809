"""Weighted multi-field ranking engine.

This module scores in-memory records against a free-text query by
combining substring, numeric, synonym, phonetic, fuzzy and exact-field
signals, then returns the matching records best first.
"""

import logging
import math
import re
import time
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from semsearch.config.schema import SearchOptions
from semsearch.exceptions import InvalidFieldError
from semsearch.search.distance import string_similarity
from semsearch.search.normalize import normalize, tokenize
from semsearch.search.numeric import extract_numbers, fuzzy_number_match
from semsearch.search.phonetic import PhoneticMatcher
from semsearch.search.synonyms import (
    ExpandedSemanticMap,
    SemanticMap,
    expand_semantic_map,
)
from semsearch.utils.logging import get_logger, log_with_context

logger = get_logger(__name__)

# Score contributions
FULL_QUERY_BONUS = 20.0
EXACT_NUMBER_BONUS = 15.0
APPROX_NUMBER_BONUS = 10.0
NUMBER_FIELD_BONUS = 3.0
EXPANDED_TERM_BONUS = 5.0
PHONETIC_BONUS = 5.0
PHONETIC_PREFIX_BONUS = 4.0
PREFIX_BONUS = 3.5
FUZZY_FACTOR = 3.0
WORD_FIELD_BONUS = 2.0
OCCURRENCE_BONUS = 0.5
EXACT_FIELD_BONUS = 10.0

# Phonetic thresholds for the word-level pass
PHONETIC_THRESHOLD = 0.75
PHONETIC_PREFIX_THRESHOLD = 0.70
FIELD_WORD_THRESHOLD = 0.8

# Extra characters of the text word compared against a partial query word
PREFIX_SLACK = 2


@dataclass(frozen=True)
class SearchField:
    """A record attribute included in the search surface.

    Attributes:
        name: Attribute name or dotted path (``"customer.name"``).
        weight: Optional weight; overrides ``SearchOptions.score_weights``.
    """

    name: str
    weight: float | None = None

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise InvalidFieldError("Field name must not be empty")
        if self.weight is not None and self.weight <= 0:
            raise InvalidFieldError(
                f"Weight for field '{self.name}' must be positive, got {self.weight}"
            )

    @classmethod
    def parse(cls, spec: str) -> "SearchField":
        """Parse a ``name`` or ``name=weight`` field specification.

        Raises:
            InvalidFieldError: If the name is empty or the weight is not a
                positive number.
        """
        name, sep, weight_text = spec.partition("=")
        name = name.strip()
        if not sep:
            return cls(name=name)
        try:
            weight = float(weight_text)
        except ValueError as e:
            raise InvalidFieldError(
                f"Invalid weight '{weight_text}' for field '{name}'"
            ) from e
        return cls(name=name, weight=weight)


def resolve_path(record: Any, path: str) -> Any:
    """Follow a dotted path through mappings, sequences and attributes.

    Returns:
        The value found, or None if any step is missing.
    """
    value = record
    for part in path.split("."):
        if value is None or not part:
            return None
        if isinstance(value, Mapping):
            value = value.get(part)
        elif isinstance(value, Sequence) and not isinstance(value, str):
            try:
                value = value[int(part)]
            except (ValueError, IndexError):
                return None
        elif part.startswith("_"):
            return None
        else:
            value = getattr(value, part, None)
    return value


def field_text(value: Any) -> str:
    """Render a field value as searchable text."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join(field_text(item) for item in value)
    return str(value)


@dataclass
class PreparedQuery:
    """A query broken down once for scoring many records."""

    text: str
    normalized: str
    words: list[str]
    numbers: list[float]
    expanded_terms: list[str]
    word_patterns: list[re.Pattern[str]] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.text.strip()


@dataclass
class SearchResponse:
    """Result of ranking a collection against a query."""

    query: str
    results: list[Any]
    scores: list[float]
    total_records: int
    search_time_ms: float = 0.0

    @property
    def results_count(self) -> int:
        return len(self.results)

    @property
    def is_searching(self) -> bool:
        """True when the query is not blank."""
        return bool(self.query.strip())


class SearchEngine:
    """Ranks records against free-text queries.

    The engine is configured once with the fields to search, an optional
    semantic map and scoring options, and can then rank any number of
    record collections. It owns a phonetic variation cache; call
    :meth:`dispose` (or use it as a context manager) to release it.
    """

    def __init__(
        self,
        fields: Sequence[str | SearchField],
        semantic_map: SemanticMap | None = None,
        options: SearchOptions | None = None,
        *,
        phonetic_cache_size: int = 200,
    ) -> None:
        """Initialize the engine.

        Args:
            fields: Field names (dotted paths allowed) or SearchField objects.
            semantic_map: Thesaurus of term -> related terms.
            options: Scoring options. Defaults to ``SearchOptions()``.
            phonetic_cache_size: Capacity of the phonetic variation cache.
        """
        self.matcher = PhoneticMatcher(cache_size=phonetic_cache_size)
        self._fields: tuple[SearchField, ...] = ()
        self._weights: dict[str, float] = {}
        self._expanded_map = expand_semantic_map(None)
        self._options = SearchOptions()
        self.configure(fields=fields, semantic_map=semantic_map, options=options)

    # -------------------------------------------------------------------------
    # Configuration
    # -------------------------------------------------------------------------

    def configure(
        self,
        *,
        fields: Sequence[str | SearchField] | None = None,
        semantic_map: SemanticMap | None = None,
        options: SearchOptions | None = None,
    ) -> None:
        """Replace any of the fields, semantic map or options.

        Arguments left as None keep their current value.
        """
        if fields is not None:
            self._fields = tuple(
                f if isinstance(f, SearchField) else SearchField(name=f) for f in fields
            )
        if semantic_map is not None:
            self._expanded_map = expand_semantic_map(semantic_map)
        if options is not None:
            self._options = options

        self._weights = dict(self._options.score_weights)
        for search_field in self._fields:
            if search_field.weight is not None:
                self._weights[search_field.name] = search_field.weight

    @property
    def fields(self) -> tuple[str, ...]:
        """Names of the searched fields, in order."""
        return tuple(dict.fromkeys(f.name for f in self._fields))

    @property
    def options(self) -> SearchOptions:
        return self._options

    @property
    def expanded_map(self) -> ExpandedSemanticMap:
        return self._expanded_map

    def weight_for(self, field_name: str) -> float:
        """Effective weight of a field (default 1)."""
        return self._weights.get(field_name, 1.0)

    # -------------------------------------------------------------------------
    # Scoring
    # -------------------------------------------------------------------------

    def prepare(self, query: str) -> PreparedQuery:
        """Normalize, tokenize and synonym-expand a query."""
        words = tokenize(query)

        expanded: dict[str, None] = dict.fromkeys(words)
        for word in words:
            for related in self._expanded_map.related(word):
                if related:
                    expanded[related] = None

        return PreparedQuery(
            text=query,
            normalized=normalize(query),
            words=words,
            numbers=extract_numbers(query),
            expanded_terms=list(expanded),
            word_patterns=[re.compile(re.escape(w), re.IGNORECASE) for w in words],
        )

    def field_texts(self, record: Any) -> dict[str, str]:
        """Searchable text of each configured field of a record."""
        return {name: field_text(resolve_path(record, name)) for name in self.fields}

    def score(self, record: Any, query: str | PreparedQuery) -> float:
        """Relevance score of a single record.

        Args:
            record: Record to score.
            query: Raw query or a query from :meth:`prepare`.

        Returns:
            The score; 0.0 for a blank query.
        """
        prepared = query if isinstance(query, PreparedQuery) else self.prepare(query)
        if prepared.is_empty:
            return 0.0
        return self._score(record, prepared)

    def _score(self, record: Any, query: PreparedQuery) -> float:
        options = self._options
        texts = self.field_texts(record)
        full_text = " ".join(texts.values())
        normalized_full = normalize(full_text)
        normalized_fields = {name: normalize(text) for name, text in texts.items()}

        score = 0.0

        # Whole query as a substring
        if query.normalized in normalized_full:
            score += FULL_QUERY_BONUS

        # Approximate numbers
        if options.enable_numeric_search and query.numbers:
            text_numbers = extract_numbers(full_text)
            field_numbers = {name: extract_numbers(text) for name, text in texts.items()}
            for query_num in query.numbers:
                for text_num in text_numbers:
                    if not fuzzy_number_match(
                        query_num, text_num, options.number_tolerance
                    ):
                        continue
                    score += (
                        EXACT_NUMBER_BONUS
                        if query_num == text_num
                        else APPROX_NUMBER_BONUS
                    )
                    for name, numbers in field_numbers.items():
                        if text_num in numbers:
                            score += NUMBER_FIELD_BONUS * self.weight_for(name)

        # Query words and their synonyms
        for term in query.expanded_terms:
            if term not in normalized_full:
                continue
            for name, text in normalized_fields.items():
                if term in text:
                    score += EXPANDED_TERM_BONUS * self.weight_for(name)

        # Typos and spelling confusions
        if options.enable_fuzzy:
            score += self._word_match_score(texts, full_text, query)

        # Occurrences of each query word
        for pattern in query.word_patterns:
            score += OCCURRENCE_BONUS * len(pattern.findall(normalized_full))

        # Whole field equals the query
        for name, text in normalized_fields.items():
            if text == query.normalized:
                score += EXACT_FIELD_BONUS * self.weight_for(name)

        return score

    def _word_match_score(
        self,
        texts: dict[str, str],
        full_text: str,
        query: PreparedQuery,
    ) -> float:
        options = self._options
        match = self.matcher.match
        text_words = tokenize(full_text)
        field_words = {name: tokenize(text) for name, text in texts.items()}
        field_bonus: dict[str, float] = {}
        score = 0.0

        for query_word in query.words:
            query_len = len(query_word)
            use_phonetic = (
                options.enable_partial_phonetic
                and query_len >= options.min_phonetic_length
            )

            for text_word in text_words:
                text_len = len(text_word)
                match_score = 0.0

                if use_phonetic:
                    if match(query_word, text_word, PHONETIC_THRESHOLD):
                        match_score = PHONETIC_BONUS
                    elif text_len >= query_len:
                        prefix = text_word[: min(query_len + PREFIX_SLACK, text_len)]
                        if match(query_word, prefix, PHONETIC_PREFIX_THRESHOLD):
                            match_score = PHONETIC_PREFIX_BONUS

                if match_score == 0 and query_len >= 2:
                    if text_word.startswith(query_word):
                        match_score = PREFIX_BONUS
                    else:
                        similarity = string_similarity(query_word, text_word)
                        if options.fuzzy_threshold <= similarity < 1:
                            match_score = FUZZY_FACTOR * similarity

                if match_score > 0:
                    score += match_score
                    if text_word not in field_bonus:
                        field_bonus[text_word] = sum(
                            WORD_FIELD_BONUS * self.weight_for(name)
                            for name, words in field_words.items()
                            if text_word in words
                            or any(
                                match(word, text_word, FIELD_WORD_THRESHOLD)
                                for word in words
                            )
                        )
                    score += field_bonus[text_word]

        return score

    # -------------------------------------------------------------------------
    # Ranking
    # -------------------------------------------------------------------------

    def search(self, records: Iterable[Any], query: str) -> SearchResponse:
        """Rank records against a query.

        A blank query returns every record, in input order, unscored.
        Otherwise records scoring strictly above ``min_score`` are returned
        best first; equal scores keep their input order.

        Args:
            records: Records to rank. They are never modified.
            query: Free-text query.

        Returns:
            SearchResponse with the ranked records and their scores.
        """
        start = time.perf_counter()
        items = list(records)
        prepared = self.prepare(query)

        if prepared.is_empty:
            return SearchResponse(
                query=query,
                results=items,
                scores=[0.0] * len(items),
                total_records=len(items),
                search_time_ms=(time.perf_counter() - start) * 1000,
            )

        scored = [(self._score(record, prepared), record) for record in items]
        kept = [pair for pair in scored if pair[0] > self._options.min_score]
        # list.sort is stable, also with reverse=True
        kept.sort(key=lambda pair: pair[0], reverse=True)

        elapsed_ms = (time.perf_counter() - start) * 1000
        log_with_context(
            logger,
            logging.DEBUG,
            "Ranked records",
            query=query,
            candidates=len(items),
            matches=len(kept),
            expanded_terms=len(prepared.expanded_terms),
            elapsed_ms=round(elapsed_ms, 3),
        )

        return SearchResponse(
            query=query,
            results=[record for _, record in kept],
            scores=[score for score, _ in kept],
            total_records=len(items),
            search_time_ms=elapsed_ms,
        )

    def rank(self, records: Iterable[Any], query: str) -> list[Any]:
        """Ranked records only; see :meth:`search`."""
        return self.search(records, query).results

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def dispose(self) -> None:
        """Clear the phonetic variation cache."""
        self.matcher.dispose()

    def __enter__(self) -> "SearchEngine":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.dispose()


def search(
    records: Iterable[Any],
    query: str,
    fields: Sequence[str | SearchField],
    semantic_map: SemanticMap | None = None,
    options: SearchOptions | None = None,
) -> list[Any]:
    """Rank records with a throwaway engine.

    Args:
        records: Records to rank.
        query: Free-text query.
        fields: Field names or SearchField objects.
        semantic_map: Optional thesaurus.
        options: Optional scoring options.

    Returns:
        Matching records, best first.
    """
    with SearchEngine(fields, semantic_map, options) as engine:
        return engine.rank(records, query)
