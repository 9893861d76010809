"""Tests for exception hierarchy."""

import pytest

from semsearch.exceptions import (
    ConfigError,
    ConfigNotFoundError,
    ConfigValidationError,
    DataError,
    DataFileNotFoundError,
    DataFormatError,
    InvalidFieldError,
    PresetNotFoundError,
    SearchError,
    SemSearchError,
)


class TestSemSearchError:
    """Tests for base SemSearchError."""

    def test_default_message(self) -> None:
        """Test default error message."""
        error = SemSearchError()
        assert str(error) == "An error occurred"
        assert error.user_message == "An error occurred"
        assert error.exit_code == 1

    def test_custom_message(self) -> None:
        """Test custom error message."""
        error = SemSearchError("Custom error")
        assert str(error) == "Custom error"
        assert error.user_message == "An error occurred"

    def test_custom_user_message(self) -> None:
        """Test custom user message."""
        error = SemSearchError("Internal", user_message="User-friendly message")
        assert error.user_message == "User-friendly message"
        assert str(error) == "Internal"

    def test_user_message_override_is_per_instance(self) -> None:
        """Overriding the user message does not leak to the class."""
        SearchError(user_message="Something specific")
        assert SearchError().user_message == "Search error"


class TestConfigErrors:
    """Tests for configuration errors."""

    def test_exit_codes(self) -> None:
        """Test config error exit codes."""
        assert ConfigError().exit_code == 20
        assert ConfigNotFoundError().exit_code == 21
        assert ConfigValidationError().exit_code == 22

    def test_user_messages(self) -> None:
        """Test config error user messages."""
        assert "not found" in ConfigNotFoundError().user_message.lower()
        assert "invalid" in ConfigValidationError().user_message.lower()


class TestSearchErrors:
    """Tests for search errors."""

    def test_exit_codes(self) -> None:
        """Test search error exit codes."""
        assert SearchError().exit_code == 30
        assert InvalidFieldError().exit_code == 31
        assert PresetNotFoundError().exit_code == 32

    def test_invalid_field_mentions_syntax(self) -> None:
        """The user message explains the field syntax."""
        assert "name=weight" in InvalidFieldError().user_message

    def test_preset_not_found_points_to_listing(self) -> None:
        """The user message suggests listing presets."""
        assert "semsearch presets" in PresetNotFoundError().user_message


class TestDataErrors:
    """Tests for data loading errors."""

    def test_exit_codes(self) -> None:
        """Test data error exit codes."""
        assert DataError().exit_code == 40
        assert DataFileNotFoundError().exit_code == 41
        assert DataFormatError().exit_code == 42


class TestHierarchy:
    """Tests for exception inheritance."""

    @pytest.mark.parametrize(
        ("error_cls", "parent"),
        [
            (ConfigNotFoundError, ConfigError),
            (ConfigValidationError, ConfigError),
            (InvalidFieldError, SearchError),
            (PresetNotFoundError, SearchError),
            (DataFileNotFoundError, DataError),
            (DataFormatError, DataError),
            (ConfigError, SemSearchError),
            (SearchError, SemSearchError),
            (DataError, SemSearchError),
        ],
    )
    def test_inheritance(self, error_cls: type, parent: type) -> None:
        """Test each error derives from its category."""
        assert issubclass(error_cls, parent)

    def test_catch_all(self) -> None:
        """Test that all errors can be caught with the base class."""
        with pytest.raises(SemSearchError):
            raise DataFormatError("bad file")
