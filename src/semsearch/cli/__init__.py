"""CLI layer for semsearch.

This module provides the command-line interface for semsearch,
built on Typer with Rich formatting support.

Usage:
    semsearch search orders.json "aprobad" --preset orders
    semsearch variations kodigo
"""

from semsearch.cli.app import app, main
from semsearch.cli.options import (
    FieldOption,
    FormatChoice,
    FormatOption,
    PresetOption,
    VerboseOption,
)

__all__ = [
    # App
    "app",
    "main",
    # Options
    "FieldOption",
    "FormatChoice",
    "FormatOption",
    "PresetOption",
    "VerboseOption",
]
