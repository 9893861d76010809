"""Main CLI application for semsearch."""

import dataclasses
from pathlib import Path
from typing import Any, NoReturn

import typer
from rich.console import Console

from semsearch import __version__
from semsearch.cli.options import (
    FieldOption,
    FormatChoice,
    FormatOption,
    PresetOption,
    ThresholdOption,
    ToleranceOption,
    VerboseOption,
    get_output_format,
)
from semsearch.config import SemSearchConfig, SearchOptions, get_config
from semsearch.exceptions import InvalidFieldError, SemSearchError
from semsearch.output import OutputFormatter, get_formatter
from semsearch.output.base import OutputFormat
from semsearch.search import (
    SearchEngine,
    SearchField,
    generate_variations,
    get_preset,
    levenshtein_distance,
    list_presets,
    phonetic_match,
    string_similarity,
)
from semsearch.utils.files import load_records, load_semantic_map
from semsearch.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)

# Create Typer app
app = typer.Typer(
    name="semsearch",
    help="Semantic and fuzzy search over JSON records",
    add_completion=True,
    no_args_is_help=True,
)

# Rich console for output
console = Console()
err_console = Console(stderr=True)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"semsearch version {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Semantic and fuzzy search over JSON records."""
    pass


def _fail(error: SemSearchError) -> NoReturn:
    """Report an error and exit with its code."""
    err_console.print(f"[red]Error:[/red] {error.user_message}")
    detail = str(error)
    if detail and detail != error.user_message:
        err_console.print(detail, style="dim", markup=False)
    raise typer.Exit(error.exit_code)


def _load_settings(verbose: bool) -> SemSearchConfig:
    """Load configuration and configure logging from it."""
    config = get_config()
    setup_logging(
        level="DEBUG" if verbose else config.logging.level,
        log_file=config.logging.file,
        json_format=config.logging.json_format,
        use_color=config.output.color,
    )
    return config


def _make_formatter(
    config: SemSearchConfig,
    format_choice: FormatChoice | None,
    verbose: bool,
    mark: bool = False,
) -> OutputFormatter:
    output_format = get_output_format(
        format_choice, config.output.default_format.value
    )
    kwargs: dict[str, Any] = {}
    if output_format == OutputFormat.RICH:
        kwargs["color"] = config.output.color
    elif output_format == OutputFormat.PLAIN:
        kwargs["mark_matches"] = mark
    return get_formatter(output_format, verbose=verbose, **kwargs)


def _infer_fields(records: list[dict[str, Any]]) -> list[str]:
    """Use the keys of the first record when no fields were given."""
    if not records:
        return []
    return list(records[0].keys())


@app.command()
def search(
    data_file: Path = typer.Argument(
        ..., help="JSON, JSON Lines or NDJSON file with records."
    ),
    query: str = typer.Argument(..., help="Search query."),
    preset: PresetOption = None,
    field: FieldOption = None,
    map_file: Path | None = typer.Option(
        None, "--map", help="Semantic map file (JSON or TOML)."
    ),
    min_score: float | None = typer.Option(
        None, "--min-score", help="Only return records scoring above this."
    ),
    fuzzy_threshold: ThresholdOption = None,
    number_tolerance: ToleranceOption = None,
    no_fuzzy: bool = typer.Option(
        False, "--no-fuzzy", help="Disable phonetic and fuzzy matching."
    ),
    no_numeric: bool = typer.Option(
        False, "--no-numeric", help="Disable numeric tolerance matching."
    ),
    limit: int | None = typer.Option(
        None, "--limit", "-n", min=1, help="Show at most this many results."
    ),
    format: FormatOption = None,
    scores: bool = typer.Option(False, "--scores", "-s", help="Show scores."),
    mark: bool = typer.Option(
        False, "--mark", "-m", help="Wrap matched query words in * (plain output)."
    ),
    verbose: VerboseOption = False,
) -> None:
    """Rank records in DATA_FILE against QUERY."""
    try:
        config = _load_settings(verbose)
        records = load_records(data_file)
        logger.debug("Loaded %d records from %s", len(records), data_file)

        fields: list[str | SearchField] = []
        semantic_map: dict[str, list[str]] = {}
        options: SearchOptions = config.search

        preset_name = preset or config.default_preset
        if preset_name:
            chosen = get_preset(preset_name)
            fields = list(chosen.fields)
            semantic_map = dict(chosen.semantic_map)
            options = chosen.options

        if field:
            fields = [SearchField.parse(spec) for spec in field]
        if not fields:
            fields = list(_infer_fields(records))
            if records and not fields:
                raise InvalidFieldError("No fields to search: pass --field or --preset")

        if map_file is not None:
            semantic_map.update(load_semantic_map(map_file))

        overrides: dict[str, Any] = {}
        if min_score is not None:
            overrides["min_score"] = min_score
        if fuzzy_threshold is not None:
            overrides["fuzzy_threshold"] = fuzzy_threshold
        if number_tolerance is not None:
            overrides["number_tolerance"] = number_tolerance
        if no_fuzzy:
            overrides["enable_fuzzy"] = False
        if no_numeric:
            overrides["enable_numeric_search"] = False
        if overrides:
            options = options.model_copy(update=overrides)

        with SearchEngine(
            fields,
            semantic_map,
            options,
            phonetic_cache_size=config.cache.phonetic_cache_size,
        ) as engine:
            response = engine.search(records, query)
            columns = list(engine.fields)

        if limit is not None:
            response = dataclasses.replace(
                response,
                results=response.results[:limit],
                scores=response.scores[:limit],
            )

        formatter = _make_formatter(config, format, verbose, mark)
        formatter.print_text(
            formatter.format_results(
                response, columns, show_scores=scores or config.output.show_scores
            )
        )
    except SemSearchError as e:
        _fail(e)


@app.command()
def variations(
    word: str = typer.Argument(..., help="Word to expand."),
    format: FormatOption = None,
) -> None:
    """Show the Spanish spelling variants used for phonetic matching."""
    try:
        config = _load_settings(False)
    except SemSearchError as e:
        _fail(e)

    formatter = _make_formatter(config, format, False)
    formatter.print_text(
        formatter.format_list(
            list(generate_variations(word)), title=f"Variations of '{word}'"
        )
    )


@app.command()
def similarity(
    first: str = typer.Argument(..., help="First word."),
    second: str = typer.Argument(..., help="Second word."),
    format: FormatOption = None,
) -> None:
    """Compare two words by edit distance, similarity and phonetics."""
    try:
        config = _load_settings(False)
    except SemSearchError as e:
        _fail(e)

    formatter = _make_formatter(config, format, False)
    formatter.print_content(
        {
            "distance": levenshtein_distance(first, second),
            "similarity": round(string_similarity(first, second), 4),
            "phonetic_match": phonetic_match(first, second),
        },
        title=f"'{first}' vs '{second}'",
    )


@app.command()
def presets(
    name: str | None = typer.Argument(None, help="Show a single preset in detail."),
    format: FormatOption = None,
) -> None:
    """List built-in search presets."""
    try:
        config = _load_settings(False)
        formatter = _make_formatter(config, format, False)

        if name is None:
            rows = [
                {
                    "name": p.name,
                    "fields": ", ".join(p.fields),
                    "description": p.description,
                }
                for p in list_presets()
            ]
            formatter.print_text(
                formatter.format_table(
                    rows, columns=["name", "fields", "description"], title="Presets"
                )
            )
            return

        chosen = get_preset(name)
        weights = ", ".join(
            f"{f}={chosen.options.weight_for(f):g}" for f in chosen.fields
        )
        formatter.print_content(
            {
                "description": chosen.description,
                "fields": weights,
                "fuzzy_threshold": chosen.options.fuzzy_threshold,
                "number_tolerance": chosen.options.number_tolerance,
                "numeric_search": chosen.options.enable_numeric_search,
                "synonyms": ", ".join(chosen.semantic_map),
            },
            title=chosen.name,
        )
    except SemSearchError as e:
        _fail(e)


@app.command("config")
def config_cmd(
    show_path: bool = typer.Option(
        False,
        "--path",
        "-p",
        help="Show config file path.",
    ),
) -> None:
    """Show current configuration."""
    from semsearch.config.defaults import get_config_path

    if show_path:
        console.print(str(get_config_path()))
        return

    try:
        config = get_config()
    except SemSearchError as e:
        _fail(e)

    console.print("[bold]semsearch configuration[/bold]\n")
    console.print(f"Config file: {get_config_path()}")
    console.print(f"Default preset: {config.default_preset or '-'}")
    console.print(f"Output format: {config.output.default_format.value}")
    console.print(f"Log level: {config.logging.level}")

    console.print("\n[bold]Search:[/bold]")
    for key, value in config.search.model_dump().items():
        console.print(f"  {key}: {value}")

    console.print("\n[bold]Caches:[/bold]")
    console.print(f"  phonetic_cache_size: {config.cache.phonetic_cache_size}")
    console.print(f"  result_cache_size: {config.cache.result_cache_size}")
    console.print(f"  debounce_ms: {config.session.debounce_ms}")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
