"""Rich terminal output formatter."""

from io import StringIO
from typing import Any, TextIO

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

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

MATCH_STYLE = "bold yellow"


class RichFormatter(OutputFormatter):
    """Rich terminal output formatter.

    Renders result tables, panels and key/value listings with the Rich
    library. Rendering happens into a string buffer so the same output can
    be returned by ``format_*`` and printed by ``print``.
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        error_stream: TextIO | None = None,
        verbose: bool = False,
        width: int | None = None,
        color: bool = True,
    ) -> None:
        """Initialize rich formatter.

        Args:
            stream: Output stream.
            error_stream: Error stream.
            verbose: Whether to show verbose output.
            width: Console width (None for auto-detect).
            color: Whether printed output may use color.
        """
        super().__init__(stream, error_stream, verbose)
        self._width = width
        self._color = color
        self._console: Console | None = None
        self._error_console: Console | None = None

    def _get_console(self) -> Console:
        """Lazily initialize and return the Rich console."""
        if self._console is None:
            self._console = Console(
                file=self._stream,
                width=self._width,
                no_color=not self._color,
            )
        return self._console

    def _get_error_console(self) -> Console:
        """Lazily initialize and return the error console."""
        if self._error_console is None:
            self._error_console = Console(
                file=self._error_stream,
                width=self._width,
                stderr=True,
                no_color=not self._color,
            )
        return self._error_console

    def _render(self, renderable: Any) -> str:
        string_io = StringIO()
        temp_console = Console(file=string_io, width=self._width, force_terminal=False)
        temp_console.print(renderable)
        return string_io.getvalue().rstrip()

    @property
    def format_type(self) -> OutputFormat:
        return OutputFormat.RICH

    def format(self, data: OutputData) -> str:
        """Format output data with Rich formatting."""
        if not data.success and data.error:
            error_text = Text(f"Error: {data.error}", style="bold red")
            if data.title:
                return self._render(
                    Panel(error_text, title=data.title, border_style="red")
                )
            return self._render(error_text)

        content_renderable: Any
        if isinstance(data.content, str):
            content_renderable = Text(data.content)
        elif isinstance(data.content, list):
            table = Table(show_header=False, box=None)
            table.add_column("Item")
            for item in data.content:
                table.add_row(str(item))
            content_renderable = table
        else:
            table = Table(show_header=False, box=None, padding=(0, 1))
            table.add_column("Key", style="bold cyan")
            table.add_column("Value")
            for key, value in data.content.items():
                table.add_row(str(key), str(value))
            content_renderable = table

        parts = [self._render(Panel(content_renderable, title=data.title))
                 if data.title else self._render(content_renderable)]

        if self._verbose and data.metadata:
            meta_table = Table(title="Metadata", show_header=False, box=None)
            meta_table.add_column("Key", style="dim")
            meta_table.add_column("Value", style="dim")
            for key, value in data.metadata.items():
                meta_table.add_row(str(key), str(value))
            parts.append(self._render(meta_table))

        return "\n\n".join(parts)

    def format_list(self, items: list[str], title: str | None = None) -> str:
        """Format a list with Rich formatting."""
        table = Table(show_header=False, box=None)
        table.add_column("Item")
        for item in items:
            table.add_row(f"• {item}")

        if title:
            return self._render(Panel(table, title=title))
        return self._render(table)

    def format_table(
        self,
        rows: list[dict[str, Any]],
        columns: list[str] | None = None,
        title: str | None = None,
    ) -> str:
        """Format data as a Rich table."""
        if not rows:
            return title or ""

        if columns is None:
            columns = list(rows[0].keys())

        table = Table(title=title)
        for col in columns:
            table.add_column(col, style="cyan")
        for row in rows:
            table.add_row(*[str(row.get(col, "")) for col in columns])

        return self._render(table)

    def results_table(
        self,
        response: SearchResponse,
        columns: list[str],
        show_scores: bool = False,
    ) -> Table:
        """Build the results table.

        Scores are right-aligned and query words found in a cell are
        highlighted.
        """
        rows = result_rows(response, columns, show_scores)
        table = Table(title=results_title(response))
        if show_scores:
            table.add_column("#", justify="right", style="dim")
            table.add_column("score", justify="right", style="green")
        for col in columns:
            table.add_column(col, style="cyan")
        words = tokenize(response.query)
        for row in rows:
            cells: list[Any] = (
                [str(row["#"]), f"{row['score']:.2f}"] if show_scores else []
            )
            for col in columns:
                text = Text(str(row.get(col, "")))
                for start, end in match_spans(text.plain, words):
                    text.stylize(MATCH_STYLE, start, end)
                cells.append(text)
            table.add_row(*cells)

        if self._verbose:
            table.caption = f"{response.search_time_ms:.1f} ms"
        return table

    def format_results(
        self,
        response: SearchResponse,
        columns: list[str],
        show_scores: bool = False,
    ) -> str:
        """Format a search response as a Rich table."""
        if not response.results:
            title = results_title(response)
            return self._render(Text(f"{title}: no matches", style="yellow"))
        return self._render(self.results_table(response, columns, show_scores))

    def print(self, data: OutputData) -> None:
        """Print output using Rich console directly."""
        console = self._get_console() if data.success else self._get_error_console()
        console.print(self.format(data), highlight=False, markup=False)

    def print_text(self, text: str) -> None:
        """Print already formatted text through the Rich console."""
        self._get_console().print(text, highlight=False, markup=False)
