"""Output formatter protocol and base classes."""

import re
import sys
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, TextIO

from semsearch.config.schema import OutputFormat
from semsearch.search.engine import SearchResponse, field_text, resolve_path
from semsearch.search.normalize import normalize


@dataclass
class OutputData:
    """Container for output data to be formatted.

    Attributes:
        content: The main content to display.
        title: Optional title for the output.
        metadata: Additional metadata (timing, counts, etc.).
        error: Error message if operation failed.
        success: Whether the operation was successful.
    """

    content: str | list[str] | dict[str, Any]
    title: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)
    error: str | None = None
    success: bool = True

    @classmethod
    def from_error(cls, error: str, title: str | None = None) -> "OutputData":
        """Create an OutputData instance for an error."""
        return cls(
            content="",
            title=title,
            error=error,
            success=False,
        )

    @classmethod
    def from_content(
        cls,
        content: str | list[str] | dict[str, Any],
        title: str | None = None,
        **metadata: Any,
    ) -> "OutputData":
        """Create an OutputData instance for successful output."""
        return cls(
            content=content,
            title=title,
            metadata=metadata,
            success=True,
        )


def result_rows(
    response: SearchResponse,
    columns: list[str],
    show_scores: bool = False,
) -> list[dict[str, Any]]:
    """Flatten ranked records into table rows.

    Args:
        response: Search response to render.
        columns: Record fields (dotted paths allowed) to include.
        show_scores: Prepend rank and score columns.

    Returns:
        One dict per result, keyed by column name.
    """
    rows: list[dict[str, Any]] = []
    for rank, (record, score) in enumerate(
        zip(response.results, response.scores), start=1
    ):
        row: dict[str, Any] = {}
        if show_scores:
            row["#"] = rank
            row["score"] = round(score, 2)
        for column in columns:
            row[column] = field_text(resolve_path(record, column))
        rows.append(row)
    return rows


def results_title(response: SearchResponse) -> str:
    """Headline for a search response."""
    if not response.is_searching:
        return f"{response.total_records} records"
    return (
        f'{response.results_count} of {response.total_records} records '
        f'match "{response.query}"'
    )


def match_spans(text: str, words: Sequence[str]) -> list[tuple[int, int]]:
    """Find where query words occur in ``text``.

    Matching ignores case and accents the same way ranking does, so
    ``"codigo"`` is found in ``"Código QR"``. Overlapping spans are merged.

    Args:
        text: Display text to scan.
        words: Normalized query words, as returned by ``tokenize``.

    Returns:
        Sorted ``(start, end)`` character offsets into ``text``.
    """
    folded: list[str] = []
    owners: list[int] = []
    for index, char in enumerate(text):
        for piece in normalize(char) or char:
            folded.append(piece)
            owners.append(index)
    haystack = "".join(folded)

    spans: list[tuple[int, int]] = []
    for word in words:
        if not word:
            continue
        for match in re.finditer(re.escape(word), haystack):
            spans.append((owners[match.start()], owners[match.end() - 1] + 1))

    merged: list[tuple[int, int]] = []
    for start, end in sorted(spans):
        if merged and start <= merged[-1][1]:
            merged[-1] = (merged[-1][0], max(end, merged[-1][1]))
        else:
            merged.append((start, end))
    return merged


class OutputFormatter(ABC):
    """Abstract base class for output formatters.

    Formatters are responsible for rendering search results and messages
    to the terminal in different formats (plain text, JSON, rich).
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        error_stream: TextIO | None = None,
        verbose: bool = False,
    ) -> None:
        """Initialize the formatter.

        Args:
            stream: Output stream (defaults to stdout).
            error_stream: Error stream (defaults to stderr).
            verbose: Whether to show verbose output.
        """
        self._stream = stream or sys.stdout
        self._error_stream = error_stream or sys.stderr
        self._verbose = verbose

    @property
    def stream(self) -> TextIO:
        """Get the output stream."""
        return self._stream

    @property
    def error_stream(self) -> TextIO:
        """Get the error stream."""
        return self._error_stream

    @property
    def verbose(self) -> bool:
        """Whether verbose output is enabled."""
        return self._verbose

    @property
    @abstractmethod
    def format_type(self) -> OutputFormat:
        """Get the format type of this formatter."""
        pass

    @abstractmethod
    def format(self, data: OutputData) -> str:
        """Format output data as a string.

        Args:
            data: The output data to format.

        Returns:
            Formatted string representation.
        """
        pass

    def print(self, data: OutputData) -> None:
        """Format and print output data.

        Args:
            data: The output data to print.
        """
        formatted = self.format(data)
        if data.success:
            print(formatted, file=self._stream)
        else:
            print(formatted, file=self._error_stream)

    def print_error(self, message: str, title: str | None = None) -> None:
        """Print an error message.

        Args:
            message: The error message.
            title: Optional title.
        """
        self.print(OutputData.from_error(message, title))

    def print_content(
        self,
        content: str | list[str] | dict[str, Any],
        title: str | None = None,
        **metadata: Any,
    ) -> None:
        """Print content directly.

        Args:
            content: The content to print.
            title: Optional title.
            **metadata: Additional metadata.
        """
        self.print(OutputData.from_content(content, title, **metadata))

    def print_text(self, text: str) -> None:
        """Print already formatted text to the output stream."""
        print(text, file=self._stream)

    @abstractmethod
    def format_list(self, items: list[str], title: str | None = None) -> str:
        """Format a list of items.

        Args:
            items: List of strings to format.
            title: Optional title.

        Returns:
            Formatted string representation.
        """
        pass

    @abstractmethod
    def format_table(
        self,
        rows: list[dict[str, Any]],
        columns: list[str] | None = None,
        title: str | None = None,
    ) -> str:
        """Format data as a table.

        Args:
            rows: List of row dictionaries.
            columns: Column names (inferred from rows if None).
            title: Optional title.

        Returns:
            Formatted string representation.
        """
        pass

    @abstractmethod
    def format_results(
        self,
        response: SearchResponse,
        columns: list[str],
        show_scores: bool = False,
    ) -> str:
        """Format a search response as a table of ranked records.

        Args:
            response: The response to render.
            columns: Record fields to show.
            show_scores: Include rank and score columns.

        Returns:
            Formatted string representation.
        """
        pass
