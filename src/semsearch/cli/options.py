"""Shared CLI options for semsearch commands.

This module provides reusable Typer options that are shared across
multiple commands.
"""

from enum import Enum
from typing import Annotated

import typer

from semsearch.config.schema import OutputFormat


class FormatChoice(str, Enum):
    """Output format choices for CLI."""

    PLAIN = "plain"
    JSON = "json"
    RICH = "rich"


# Type aliases for common CLI options
FormatOption = Annotated[
    FormatChoice | None,
    typer.Option(
        "--format",
        "-f",
        help="Output format (plain, json, rich). Defaults to config setting.",
        case_sensitive=False,
    ),
]

PresetOption = Annotated[
    str | None,
    typer.Option(
        "--preset",
        "-P",
        help="Built-in preset (orders, users, faq). Defaults to config setting.",
    ),
]

FieldOption = Annotated[
    list[str] | None,
    typer.Option(
        "--field",
        "-F",
        help="Field to search, as 'name' or 'name=weight'. Repeatable.",
    ),
]

ThresholdOption = Annotated[
    float | None,
    typer.Option(
        "--fuzzy-threshold",
        min=0.0,
        max=1.0,
        help="Minimum similarity for fuzzy word matches.",
    ),
]

ToleranceOption = Annotated[
    float | None,
    typer.Option(
        "--number-tolerance",
        min=0.0,
        max=1.0,
        help="Relative tolerance for numeric matches (0.2 = 20%).",
    ),
]

VerboseOption = Annotated[
    bool,
    typer.Option(
        "--verbose",
        "-v",
        help="Show verbose output and debug logs.",
    ),
]


def get_output_format(
    format_choice: FormatChoice | None, default: str = "rich"
) -> OutputFormat:
    """Convert CLI format choice to OutputFormat.

    Args:
        format_choice: CLI format choice or None.
        default: Default format if none specified.

    Returns:
        OutputFormat enum value.
    """
    if format_choice is None:
        return OutputFormat(default)
    return OutputFormat(format_choice.value)
