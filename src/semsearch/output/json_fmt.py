"""JSON output formatter.

Every document is one JSON object with a ``success`` flag. Search results
carry the records untouched; scores travel in a parallel array.
"""

import json
from typing import Any, TextIO

from semsearch.output.base import OutputData, OutputFormat, OutputFormatter
from semsearch.search.engine import SearchResponse


class JSONFormatter(OutputFormatter):
    """JSON output for scripts and other tools."""

    def __init__(
        self,
        stream: TextIO | None = None,
        error_stream: TextIO | None = None,
        verbose: bool = False,
        indent: int | None = 2,
        ensure_ascii: bool = False,
    ) -> None:
        """Initialize JSON formatter.

        Args:
            stream: Output stream.
            error_stream: Error stream.
            verbose: Whether to include metadata and search timings.
            indent: JSON indentation (None for one document per line).
            ensure_ascii: Whether to escape accented characters.
        """
        super().__init__(stream, error_stream, verbose)
        self._indent = indent
        self._ensure_ascii = ensure_ascii

    @property
    def format_type(self) -> OutputFormat:
        return OutputFormat.JSON

    def _dump(self, document: dict[str, Any]) -> str:
        # Record values we can't encode (dates, decimals) are stringified
        return json.dumps(
            document,
            indent=self._indent,
            ensure_ascii=self._ensure_ascii,
            default=str,
        )

    def _document(self, title: str | None = None, **payload: Any) -> str:
        document: dict[str, Any] = {"success": True}
        if title:
            document["title"] = title
        document.update(payload)
        return self._dump(document)

    def format(self, data: OutputData) -> str:
        if not data.success:
            failure: dict[str, Any] = {"success": False, "error": data.error}
            if data.title:
                failure["title"] = data.title
            return self._dump(failure)

        if self._verbose and data.metadata:
            return self._document(
                data.title, content=data.content, metadata=data.metadata
            )
        return self._document(data.title, content=data.content)

    def format_list(self, items: list[str], title: str | None = None) -> str:
        return self._document(title, items=list(items), count=len(items))

    def format_table(
        self,
        rows: list[dict[str, Any]],
        columns: list[str] | None = None,
        title: str | None = None,
    ) -> str:
        """Rows as objects; with ``columns``, only those keys, in that order."""
        if columns is None:
            return self._document(title, rows=rows, count=len(rows))
        projected = [{col: row.get(col) for col in columns} for row in rows]
        return self._document(
            title, columns=columns, rows=projected, count=len(projected)
        )

    def format_results(
        self,
        response: SearchResponse,
        columns: list[str],
        show_scores: bool = False,
    ) -> str:
        """Format a search response with the full records.

        ``columns`` is ignored: records are emitted whole, as returned.
        """
        payload: dict[str, Any] = {
            "query": response.query,
            "is_searching": response.is_searching,
            "count": response.results_count,
            "total": response.total_records,
            "results": response.results,
        }
        if show_scores:
            payload["scores"] = [round(score, 4) for score in response.scores]
        if self._verbose:
            payload["search_time_ms"] = round(response.search_time_ms, 3)
        return self._document(**payload)
