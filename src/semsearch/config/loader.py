"""Configuration loading from TOML files and environment variables."""

import contextlib
import os
from pathlib import Path

from pydantic import ValidationError

from semsearch.config.defaults import (
    DEFAULT_CONFIG_TOML,
    ENV_DEBOUNCE_MS,
    ENV_DEFAULT_PRESET,
    ENV_LOG_LEVEL,
    ENV_NO_FUZZY,
    get_config_path,
)
from semsearch.config.schema import SemSearchConfig
from semsearch.exceptions import (
    ConfigError,
    ConfigNotFoundError,
    ConfigValidationError,
)

# Global config instance (singleton)
_config: SemSearchConfig | None = None


def load_config(
    config_path: Path | None = None,
    *,
    create_if_missing: bool = False,
    required: bool = False,
) -> SemSearchConfig:
    """Load configuration from a TOML file and environment variables.

    Args:
        config_path: Path to config file. If None, uses default.
        create_if_missing: Write the default config if the file doesn't exist.
        required: Raise instead of falling back to defaults when the file
            doesn't exist.

    Returns:
        Loaded and validated configuration.

    Raises:
        ConfigNotFoundError: If ``required`` and the file doesn't exist.
        ConfigError: If configuration cannot be loaded.
        ConfigValidationError: If configuration is invalid.
    """
    # Use Python 3.11+ tomllib or fallback
    try:
        import tomllib
    except ImportError:
        try:
            import tomli as tomllib
        except ImportError as err:
            raise ConfigError(
                "tomllib not available. Install 'tomli' for Python < 3.11"
            ) from err

    path = config_path or get_config_path()

    if not path.exists():
        if required:
            raise ConfigNotFoundError(f"Config file not found: {path}")
        if create_if_missing:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(DEFAULT_CONFIG_TOML)
        else:
            # Return default config without file
            return _apply_env_overrides(SemSearchConfig())

    # Load TOML file
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Failed to load config from {path}: {e}") from e

    # Parse into Pydantic model
    try:
        config = SemSearchConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid configuration: {e}") from e

    # Apply environment variable overrides
    return _apply_env_overrides(config)


def _apply_env_overrides(config: SemSearchConfig) -> SemSearchConfig:
    """Apply environment variable overrides to configuration."""
    log_level = os.environ.get(ENV_LOG_LEVEL)
    if log_level:
        config.logging.level = log_level.upper()

    debounce = os.environ.get(ENV_DEBOUNCE_MS)
    if debounce:
        with contextlib.suppress(ValueError):
            config.session.debounce_ms = max(0, int(debounce))

    preset = os.environ.get(ENV_DEFAULT_PRESET)
    if preset:
        config.default_preset = preset.lower()

    no_fuzzy = os.environ.get(ENV_NO_FUZZY)
    if no_fuzzy and no_fuzzy.lower() in ("1", "true", "yes"):
        config.search.enable_fuzzy = False

    return config


def get_config() -> SemSearchConfig:
    """Get the current configuration (singleton).

    Loads config on first access, caches for subsequent calls.

    Returns:
        Current configuration.
    """
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reload_config(config_path: Path | None = None) -> SemSearchConfig:
    """Reload configuration from disk.

    Args:
        config_path: Path to config file. If None, uses default.

    Returns:
        Reloaded configuration.
    """
    global _config
    _config = load_config(config_path)
    return _config


def reset_config() -> None:
    """Reset the configuration singleton (mainly for testing)."""
    global _config
    _config = None
