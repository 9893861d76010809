"""Plain text output formatter.

Output is tab-separated so it can be piped into ``cut``, ``sort`` or a
spreadsheet. Titles and timings are written as ``#`` comment lines.
"""

from collections.abc import Iterable
from typing import Any, TextIO

from semsearch.output.base import (
    OutputData,
    OutputFormat,
    OutputFormatter,
    match_spans,
    result_rows,
    results_title,
)
from semsearch.search.engine import SearchResponse
from semsearch.search.normalize import tokenize

MATCH_MARKER = "*"


def _cell(value: Any) -> str:
    """Render a value on one line without tabs."""
    return " ".join(str(value).split())


def _mark(text: str, spans: list[tuple[int, int]]) -> str:
    for start, end in reversed(spans):
        text = f"{text[:start]}{MATCH_MARKER}{text[start:end]}{MATCH_MARKER}{text[end:]}"
    return text


class PlainFormatter(OutputFormatter):
    """Tab-separated plain text formatter."""

    def __init__(
        self,
        stream: TextIO | None = None,
        error_stream: TextIO | None = None,
        verbose: bool = False,
        mark_matches: bool = False,
        separator: str = "\t",
    ) -> None:
        """Initialize plain formatter.

        Args:
            stream: Output stream.
            error_stream: Error stream.
            verbose: Whether to show metadata and timings.
            mark_matches: Wrap query words found in result cells in ``*``.
            separator: Column separator.
        """
        super().__init__(stream, error_stream, verbose)
        self._mark_matches = mark_matches
        self._separator = separator

    @property
    def format_type(self) -> OutputFormat:
        return OutputFormat.PLAIN

    def _join(self, cells: Iterable[Any]) -> str:
        return self._separator.join(_cell(cell) for cell in cells)

    @staticmethod
    def _comments(*texts: str | None) -> list[str]:
        return [f"# {text}" for text in texts if text]

    def format(self, data: OutputData) -> str:
        """Format output data as plain text."""
        lines = self._comments(data.title)

        if not data.success:
            lines.append(f"Error: {data.error or 'unknown error'}")
            return "\n".join(lines)

        if isinstance(data.content, dict):
            lines.extend(self._join(item) for item in data.content.items())
        elif isinstance(data.content, list):
            lines.extend(_cell(item) for item in data.content)
        else:
            lines.append(data.content)

        if self._verbose:
            lines.extend(
                self._comments(*(f"{k}={v}" for k, v in data.metadata.items()))
            )
        return "\n".join(lines)

    def format_list(self, items: list[str], title: str | None = None) -> str:
        """One item per line."""
        return "\n".join(self._comments(title) + [_cell(item) for item in items])

    def format_table(
        self,
        rows: list[dict[str, Any]],
        columns: list[str] | None = None,
        title: str | None = None,
    ) -> str:
        """Header line followed by one separated line per row."""
        if columns is None:
            columns = list(rows[0]) if rows else []

        lines = self._comments(title)
        if columns:
            lines.append(self._join(columns))
        lines.extend(self._join(row.get(col, "") for col in columns) for row in rows)
        return "\n".join(lines)

    def format_results(
        self,
        response: SearchResponse,
        columns: list[str],
        show_scores: bool = False,
    ) -> str:
        """Ranked records, optionally marking the query words they contain.

        Scores are printed with two decimals; the headline and, in verbose
        mode, the search time go in comment lines.
        """
        timing = f"{response.search_time_ms:.1f} ms" if self._verbose else None
        lines = self._comments(results_title(response), timing)

        rows = result_rows(response, columns, show_scores)
        if not rows:
            return "\n".join(lines)

        words = tokenize(response.query) if self._mark_matches else []
        lines.append(self._join((["#", "score"] if show_scores else []) + columns))
        for row in rows:
            cells = [str(row["#"]), f"{row['score']:.2f}"] if show_scores else []
            for col in columns:
                text = _cell(row.get(col, ""))
                cells.append(_mark(text, match_spans(text, words)) if words else text)
            lines.append(self._separator.join(cells))
        return "\n".join(lines)
