"""Tests for error types and formatting."""

from ssnkit.errors import (
    ConfigurationError,
    GenerationError,
    InvalidRuleModeError,
    SsnFormatError,
    SsnKitError,
    format_error,
    unknown_choice,
)


class TestErrors:
    """Test cases for the exception hierarchy."""

    def test_base_error_with_suggestion(self):
        """Test that the suggestion is rendered as a hint."""
        error = SsnKitError("Something failed", "Try again")
        assert error.message == "Something failed"
        assert str(error) == "Something failed\n\nHint: Try again"

    def test_base_error_without_suggestion(self):
        """Test the plain message."""
        assert str(SsnKitError("Something failed")) == "Something failed"

    def test_format_error_keeps_length_only(self):
        """Test that the parser error does not store the input."""
        error = SsnFormatError("bad", "123-45-678")
        assert error.length == 10
        assert not hasattr(error, "raw")
        assert SsnFormatError("bad").length is None

    def test_configuration_error(self):
        """Test that collected errors appear in the hint."""
        error = ConfigurationError("Invalid options", ["'a' is wrong", "'b' is wrong"])
        assert error.errors == ["'a' is wrong", "'b' is wrong"]
        assert "  - 'a' is wrong" in str(error)

    def test_configuration_error_without_details(self):
        """Test a configuration error with no detail list."""
        error = ConfigurationError("Invalid options")
        assert error.errors == []
        assert error.suggestion is None

    def test_invalid_rule_mode(self):
        """Test the rule mode error hierarchy and hint."""
        error = InvalidRuleModeError("2012")
        assert isinstance(error, ConfigurationError)
        assert error.mode == "2012"
        assert "pre2011, post2011, both" in str(error)

    def test_generation_error(self):
        """Test the generation error."""
        error = GenerationError(7)
        assert error.attempts == 7
        assert "7 attempts" in error.message
        assert "rng" in error.suggestion

    def test_unknown_choice(self):
        """Test the choice message."""
        message = unknown_choice("format", "xml", ["dashed", "digits"])
        assert message == "'format': invalid value 'xml'. Must be one of: dashed, digits"


class TestFormatError:
    """Test cases for format_error."""

    def test_ssnkit_error(self):
        """Test that package errors render as themselves."""
        error = SsnKitError("Failed", "Hint text")
        assert format_error(error) == str(error)

    def test_value_error(self):
        """Test ValueError formatting."""
        assert format_error(ValueError("bad")).startswith("Invalid value: bad")

    def test_type_error(self):
        """Test TypeError formatting."""
        assert "must be passed as str" in format_error(TypeError("bad"))

    def test_other_error(self):
        """Test other exceptions."""
        assert format_error(KeyError("k")) == "Unexpected error: KeyError: 'k'"
