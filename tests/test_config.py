"""Tests for option objects and option resolution."""

import pytest

from ssnkit.config import (
    DashMode,
    GenerateMode,
    GenerateOptions,
    MaskOptions,
    NormalizeOptions,
    OutputFormat,
    ValidationOptions,
    merge_options,
    resolve_options,
    validate_options_dict,
)
from ssnkit.errors import ConfigurationError, InvalidRuleModeError
from ssnkit.rules import RuleMode


class TestDefaults:
    """Test cases for option defaults."""

    def test_validation_defaults(self):
        """Test the default validation options."""
        opts = ValidationOptions()
        assert opts.require_separators is True
        assert opts.rule_mode is RuleMode.POST_2011
        assert opts.allow_partial is False
        assert opts.reject_area_lookahead is False

    def test_normalize_defaults(self):
        """Test the default normalize options."""
        assert NormalizeOptions() == NormalizeOptions(
            allow_partial=True, digits_only=False, enforce_length=True
        )

    def test_mask_defaults(self):
        """Test the default mask options."""
        opts = MaskOptions()
        assert opts.mask_char == "*"
        assert opts.enforce_length is False
        assert opts.dash_mode is DashMode.NORMALIZE

    def test_generate_defaults(self):
        """Test the default generator options."""
        opts = GenerateOptions()
        assert opts.mode is GenerateMode.PUBLIC
        assert opts.format is OutputFormat.DASHED
        assert opts.max_attempts == 1000


class TestEnumCoercion:
    """Test cases for string values of enum options."""

    def test_strings_become_enums(self):
        """Test that string values are converted."""
        assert ValidationOptions(rule_mode="pre2011").rule_mode is RuleMode.PRE_2011
        assert MaskOptions(dash_mode="preserve").dash_mode is DashMode.PRESERVE
        assert GenerateOptions(mode="any", format="digits").format is OutputFormat.DIGITS

    def test_invalid_rule_mode(self):
        """Test that an unknown rule mode raises the specific error."""
        with pytest.raises(InvalidRuleModeError) as exc_info:
            ValidationOptions(rule_mode="1990")
        assert "pre2011" in str(exc_info.value)

    def test_invalid_enum(self):
        """Test that other unknown enum values raise ConfigurationError."""
        with pytest.raises(ConfigurationError) as exc_info:
            GenerateOptions(format="xml")
        assert "dashed" in exc_info.value.errors[0]

    def test_frozen(self):
        """Test that options cannot be changed after construction."""
        opts = ValidationOptions()
        with pytest.raises(AttributeError):
            opts.allow_partial = True


class TestValidateOptionsDict:
    """Test cases for validate_options_dict."""

    def test_valid(self):
        """Test a valid dictionary."""
        assert validate_options_dict(ValidationOptions, {"allow_partial": True}) == []

    def test_unknown_key(self):
        """Test an unknown option name."""
        errors = validate_options_dict(ValidationOptions, {"partial": True})
        assert len(errors) == 1
        assert "Unknown option 'partial'" in errors[0]

    def test_wrong_types(self):
        """Test values of the wrong type."""
        errors = validate_options_dict(
            GenerateOptions, {"max_attempts": "10", "public_value": 5}
        )
        assert len(errors) == 2

    def test_bool_is_not_int(self):
        """Test that booleans are rejected for integer options."""
        assert validate_options_dict(GenerateOptions, {"max_attempts": False})

    def test_str_option(self):
        """Test string options."""
        assert validate_options_dict(MaskOptions, {"mask_char": 1})
        assert validate_options_dict(MaskOptions, {"mask_char": "#"}) == []


class TestResolveOptions:
    """Test cases for resolve_options."""

    def test_none(self):
        """Test resolving defaults."""
        assert resolve_options(ValidationOptions) == ValidationOptions()

    def test_instance_passthrough(self):
        """Test that an instance without overrides is returned as-is."""
        opts = ValidationOptions(allow_partial=True)
        assert resolve_options(ValidationOptions, opts) is opts

    def test_instance_with_overrides(self):
        """Test overriding fields of an instance."""
        opts = ValidationOptions(rule_mode="pre2011")
        resolved = resolve_options(ValidationOptions, opts, allow_partial=True)
        assert resolved.rule_mode is RuleMode.PRE_2011
        assert resolved.allow_partial is True

    def test_dict_with_overrides(self):
        """Test that overrides win over dictionary values."""
        resolved = resolve_options(NormalizeOptions, {"digits_only": True}, digits_only=False)
        assert resolved.digits_only is False

    def test_unsupported_type(self):
        """Test that other option containers are rejected."""
        with pytest.raises(TypeError):
            resolve_options(ValidationOptions, [("allow_partial", True)])

    def test_errors_collected(self):
        """Test that every problem is reported at once."""
        with pytest.raises(ConfigurationError) as exc_info:
            resolve_options(ValidationOptions, {"allow_partial": 1, "typo": True})
        assert len(exc_info.value.errors) == 2


def test_merge_options():
    """Test that merging leaves the inputs untouched."""
    base = {"a": 1, "b": 2}
    merged = merge_options(base, {"b": 3})
    assert merged == {"a": 1, "b": 3}
    assert base == {"a": 1, "b": 2}
