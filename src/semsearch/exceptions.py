"""Exception hierarchy for semsearch."""


class SemSearchError(Exception):
    """Base exception for all semsearch errors."""

    exit_code: int = 1
    user_message: str = "An error occurred"

    def __init__(
        self,
        message: str | None = None,
        *,
        user_message: str | None = None,
    ) -> None:
        super().__init__(message or self.user_message)
        if user_message:
            self.user_message = user_message


# Config Errors
class ConfigError(SemSearchError):
    """Configuration errors."""

    exit_code = 20
    user_message = "Configuration error"


class ConfigNotFoundError(ConfigError):
    """Configuration file not found."""

    exit_code = 21
    user_message = "Configuration file not found"


class ConfigValidationError(ConfigError):
    """Configuration validation failed."""

    exit_code = 22
    user_message = "Invalid configuration"


# Search Errors
class SearchError(SemSearchError):
    """Search-related errors."""

    exit_code = 30
    user_message = "Search error"


class InvalidFieldError(SearchError):
    """A search field specification could not be parsed."""

    exit_code = 31
    user_message = "Invalid search field. Use 'name' or 'name=weight'."


class PresetNotFoundError(SearchError):
    """Requested search preset doesn't exist."""

    exit_code = 32
    user_message = "Search preset not found. Run 'semsearch presets' to list them."


# Data Errors
class DataError(SemSearchError):
    """Errors loading records or semantic maps."""

    exit_code = 40
    user_message = "Data error"


class DataFileNotFoundError(DataError):
    """Data file not found."""

    exit_code = 41
    user_message = "Data file not found"


class DataFormatError(DataError):
    """Data file could not be parsed."""

    exit_code = 42
    user_message = "Unsupported or malformed data file"
