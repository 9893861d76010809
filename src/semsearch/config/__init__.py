"""Configuration management."""

from semsearch.config.loader import get_config, load_config, reload_config, reset_config
from semsearch.config.schema import SearchOptions, SemSearchConfig

__all__ = [
    "SemSearchConfig",
    "SearchOptions",
    "get_config",
    "load_config",
    "reload_config",
    "reset_config",
]
