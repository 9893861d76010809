"""Loading records and semantic maps from disk."""

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from semsearch.exceptions import DataFileNotFoundError, DataFormatError

RECORD_EXTENSIONS = frozenset({".json", ".jsonl", ".ndjson"})
MAP_EXTENSIONS = frozenset({".json", ".toml"})


def _require_file(path: Path) -> None:
    if not path.is_file():
        raise DataFileNotFoundError(f"Data file not found: {path}")


def load_records(path: Path) -> list[dict[str, Any]]:
    """Load searchable records from a JSON or JSON Lines file.

    A JSON file may hold a list of objects or an object with a
    ``"records"`` list.

    Args:
        path: File to read.

    Returns:
        Records in file order.

    Raises:
        DataFileNotFoundError: If the file doesn't exist.
        DataFormatError: If the file can't be parsed or holds no records.
    """
    _require_file(path)
    suffix = path.suffix.lower()
    if suffix not in RECORD_EXTENSIONS:
        raise DataFormatError(
            f"Unsupported records file '{path.name}'. "
            f"Expected one of: {', '.join(sorted(RECORD_EXTENSIONS))}"
        )

    text = path.read_text(encoding="utf-8")
    try:
        if suffix == ".json":
            data = json.loads(text)
        else:
            data = [json.loads(line) for line in text.splitlines() if line.strip()]
    except json.JSONDecodeError as e:
        raise DataFormatError(f"Malformed JSON in {path}: {e}") from e

    if isinstance(data, Mapping) and "records" in data:
        data = data["records"]

    if not isinstance(data, list) or not all(isinstance(r, Mapping) for r in data):
        raise DataFormatError(f"{path} must contain a list of objects")

    return [dict(record) for record in data]


def load_semantic_map(path: Path) -> dict[str, list[str]]:
    """Load a semantic map (term -> related terms) from JSON or TOML.

    Args:
        path: File to read.

    Returns:
        The semantic map.

    Raises:
        DataFileNotFoundError: If the file doesn't exist.
        DataFormatError: If the file isn't a mapping of strings to string lists.
    """
    _require_file(path)
    suffix = path.suffix.lower()

    try:
        if suffix == ".json":
            data = json.loads(path.read_text(encoding="utf-8"))
        elif suffix == ".toml":
            try:
                import tomllib
            except ImportError:
                import tomli as tomllib
            with open(path, "rb") as f:
                data = tomllib.load(f)
        else:
            raise DataFormatError(
                f"Unsupported semantic map file '{path.name}'. "
                f"Expected one of: {', '.join(sorted(MAP_EXTENSIONS))}"
            )
    except (json.JSONDecodeError, ValueError) as e:
        raise DataFormatError(f"Malformed semantic map {path}: {e}") from e

    if not isinstance(data, Mapping):
        raise DataFormatError(f"{path} must contain an object of term lists")

    semantic_map: dict[str, list[str]] = {}
    for term, related in data.items():
        if not isinstance(related, list) or not all(isinstance(r, str) for r in related):
            raise DataFormatError(f"Related terms for '{term}' must be a list of strings")
        semantic_map[str(term)] = related
    return semantic_map
