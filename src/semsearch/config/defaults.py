"""Default configuration values and paths."""

import os
from pathlib import Path
from typing import Final

# Default directories
DEFAULT_CONFIG_DIR: Final[Path] = Path.home() / ".config" / "semsearch"

# Default file paths
DEFAULT_CONFIG_FILE: Final[Path] = DEFAULT_CONFIG_DIR / "config.toml"

# Environment variable names
ENV_CONFIG_PATH: Final[str] = "SEMSEARCH_CONFIG"
ENV_LOG_LEVEL: Final[str] = "SEMSEARCH_LOG_LEVEL"
ENV_DEBOUNCE_MS: Final[str] = "SEMSEARCH_DEBOUNCE_MS"
ENV_DEFAULT_PRESET: Final[str] = "SEMSEARCH_PRESET"
ENV_NO_FUZZY: Final[str] = "SEMSEARCH_NO_FUZZY"

# Default config content (TOML)
DEFAULT_CONFIG_TOML: Final[str] = """\
# semsearch configuration

# default_preset = "orders"

[search]
min_score = 0.0
fuzzy_threshold = 0.7
number_tolerance = 0.15
enable_fuzzy = true
enable_numeric_search = true
enable_partial_phonetic = true
min_phonetic_length = 3

[search.score_weights]
# status = 2.0

[cache]
phonetic_cache_size = 200
result_cache_size = 100

[session]
debounce_ms = 200

[output]
default_format = "rich"
show_scores = false
color = true

[logging]
level = "INFO"
json_format = false
"""


def ensure_directories() -> None:
    """Ensure all default directories exist."""
    DEFAULT_CONFIG_DIR.mkdir(parents=True, exist_ok=True)


def get_config_path() -> Path:
    """Get the configuration file path."""
    env_path = os.environ.get(ENV_CONFIG_PATH)
    if env_path:
        return Path(env_path)
    return DEFAULT_CONFIG_FILE
