"""semsearch: typo-tolerant semantic search over in-memory records."""

from semsearch.config.schema import SearchOptions
from semsearch.search import (
    SearchEngine,
    SearchField,
    SearchResponse,
    SearchSession,
    expand_semantic_map,
    get_preset,
    search,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "SearchEngine",
    "SearchField",
    "SearchOptions",
    "SearchResponse",
    "SearchSession",
    "expand_semantic_map",
    "get_preset",
    "search",
]
