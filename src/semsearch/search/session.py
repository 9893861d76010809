"""Interactive search session.

A session holds the live query typed by a user and keeps a ranked result
list in sync with it. Query changes are debounced; changes to the records,
fields, semantic map or options recompute immediately.

Usage:
    engine = SearchEngine(["client", "status"], semantic_map)
    with SearchSession(engine, orders, debounce_ms=200) as session:
        session.subscribe(lambda response: render(response.results))
        session.set_query("aprob")
        session.set_query("aprobado")  # only this one is ranked
"""

import threading
from collections.abc import Callable, Iterable, Sequence
from typing import Any

from semsearch.cache import FIFOCache
from semsearch.config.schema import SearchOptions, SemSearchConfig
from semsearch.search.debounce import Debouncer
from semsearch.search.engine import SearchEngine, SearchField, SearchResponse
from semsearch.search.synonyms import SemanticMap
from semsearch.utils.logging import get_logger

logger = get_logger(__name__)

Subscriber = Callable[[SearchResponse], None]


class SearchSession:
    """Debounced, reactive wrapper around a :class:`SearchEngine`."""

    def __init__(
        self,
        engine: SearchEngine,
        records: Iterable[Any] = (),
        *,
        debounce_ms: int = 200,
        result_cache_size: int = 100,
    ) -> None:
        """Initialize the session.

        Args:
            engine: Engine used for ranking.
            records: Records to search.
            debounce_ms: Quiet window before a query change is ranked.
            result_cache_size: Capacity of the per-session result cache.
        """
        self._engine = engine
        self._records = list(records)
        self._lock = threading.RLock()
        self._cache = FIFOCache(capacity=result_cache_size)
        self._subscribers: list[Subscriber] = []
        self._query = ""
        self._debounced_query = ""
        self._response = engine.search(self._records, "")
        self._debouncer = Debouncer(debounce_ms, self._apply_query)
        self._disposed = False

    @classmethod
    def from_config(
        cls,
        engine: SearchEngine,
        records: Iterable[Any],
        config: SemSearchConfig,
    ) -> "SearchSession":
        """Create a session with the debounce window and cache size from config."""
        return cls(
            engine,
            records,
            debounce_ms=config.session.debounce_ms,
            result_cache_size=config.cache.result_cache_size,
        )

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def engine(self) -> SearchEngine:
        return self._engine

    @property
    def query(self) -> str:
        """The live query, as last set."""
        return self._query

    @property
    def debounced_query(self) -> str:
        """The query the current results were ranked for."""
        return self._debounced_query

    @property
    def response(self) -> SearchResponse:
        with self._lock:
            return self._response

    @property
    def results(self) -> list[Any]:
        return self.response.results

    @property
    def results_count(self) -> int:
        return self.response.results_count

    @property
    def is_searching(self) -> bool:
        """True while the live query is not blank."""
        return bool(self._query.strip())

    @property
    def is_processing(self) -> bool:
        """True while a query change is waiting out the debounce window."""
        return self._debouncer.pending

    def cache_stats(self) -> dict[str, Any]:
        return self._cache.stats()

    # -------------------------------------------------------------------------
    # Inputs
    # -------------------------------------------------------------------------

    def set_query(self, text: str) -> None:
        """Set the live query; ranking happens after the debounce window."""
        if self._disposed:
            raise RuntimeError("SearchSession has been disposed")
        self._query = text
        logger.debug("Query scheduled: %r", text)
        self._debouncer(text)

    def flush(self) -> SearchResponse:
        """Rank a pending query immediately and return the current response."""
        self._debouncer.flush()
        return self.response

    def update(
        self,
        *,
        records: Iterable[Any] | None = None,
        fields: Sequence[str | SearchField] | None = None,
        semantic_map: SemanticMap | None = None,
        options: SearchOptions | None = None,
    ) -> SearchResponse:
        """Replace search inputs and recompute for the current debounced query.

        Arguments left as None keep their current value. Cached results are
        discarded.
        """
        with self._lock:
            if records is not None:
                self._records = list(records)
            self._engine.configure(
                fields=fields, semantic_map=semantic_map, options=options
            )
            self._cache.clear()
            response, subscribers = self._evaluate(self._debounced_query)
        self._notify(response, subscribers)
        return response

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register a callback for every new response.

        Returns:
            A function that removes the callback.
        """
        with self._lock:
            self._subscribers.append(callback)

        def unsubscribe() -> None:
            with self._lock:
                if callback in self._subscribers:
                    self._subscribers.remove(callback)

        return unsubscribe

    # -------------------------------------------------------------------------
    # Evaluation
    # -------------------------------------------------------------------------

    def _apply_query(self, text: str) -> None:
        with self._lock:
            if self._disposed:
                return
            self._debounced_query = text
            response, subscribers = self._evaluate(text)
        self._notify(response, subscribers)

    def _evaluate(self, text: str) -> tuple[SearchResponse, list[Subscriber]]:
        """Rank ``text`` and store the response. Caller holds the lock."""
        response = self._cache.get(text)
        if response is None:
            response = self._engine.search(self._records, text)
            self._cache.set(text, response)
        else:
            logger.debug("Result cache hit: %r", text)
        self._response = response
        return response, list(self._subscribers)

    def _notify(self, response: SearchResponse, subscribers: list[Subscriber]) -> None:
        # Called with the lock released
        for callback in subscribers:
            callback(response)

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def dispose(self) -> None:
        """Cancel pending work and release caches."""
        self._debouncer.dispose()
        with self._lock:
            self._disposed = True
            self._cache.clear()
            self._subscribers.clear()
        self._engine.dispose()

    def __enter__(self) -> "SearchSession":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.dispose()
