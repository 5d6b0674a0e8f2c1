"""Tests for the segment parser."""

import pytest

from ssnkit.errors import SsnFormatError
from ssnkit.parser import ParsedSsn, parse


class TestStrictParsing:
    """Test cases for full-value parsing."""

    def test_dashed(self):
        """Test the canonical dashed form."""
        parsed = parse("123-45-6789")
        assert parsed == ParsedSsn("123456789", frozenset({3, 5}))
        assert parsed.complete

    def test_digits_only_requires_opt_out(self):
        """Test that digits-only input needs require_separators=False."""
        with pytest.raises(SsnFormatError):
            parse("123456789")
        assert parse("123456789", require_separators=False).digits == "123456789"

    def test_dashed_accepted_without_required_separators(self):
        """Test that dashed input is still accepted when separators are optional."""
        assert parse("123-45-6789", require_separators=False).digits == "123456789"

    @pytest.mark.parametrize(
        "raw",
        [
            "",
            "123-456-789",
            "12-345-6789",
            "123--45-6789",
            "123-45-678",
            "123-45-67890",
            "123-45-6789\n",
            " 123-45-6789",
            "abc",
            "1e10",
            "2.39",
            "١٢٣-٤٥-٦٧٨٩",
        ],
    )
    def test_rejects_malformed(self, raw):
        """Test values that never match the fixed pattern."""
        with pytest.raises(SsnFormatError):
            parse(raw, require_separators=False)

    def test_error_does_not_keep_raw_value(self):
        """Test that the error carries only the input length."""
        with pytest.raises(SsnFormatError) as exc_info:
            parse("123-45-678")
        assert exc_info.value.length == 10
        assert "123-45-678" not in str(exc_info.value)


class TestPartialParsing:
    """Test cases for typing-as-you-go parsing."""

    @pytest.mark.parametrize(
        "raw, digits, separators",
        [
            ("", "", set()),
            ("1", "1", set()),
            ("123", "123", set()),
            ("123-", "123", {3}),
            ("123-4", "1234", {3}),
            ("123-45", "12345", {3}),
            ("123-45-", "12345", {3, 5}),
            ("123-45-6", "123456", {3, 5}),
            ("123-45-6789", "123456789", {3, 5}),
        ],
    )
    def test_dashed_prefixes(self, raw, digits, separators):
        """Test prefixes of the dashed form."""
        parsed = parse(raw, allow_partial=True)
        assert parsed.digits == digits
        assert parsed.separators == frozenset(separators)

    def test_required_separator_after_area(self):
        """Test that a fourth digit needs a dash before it."""
        with pytest.raises(SsnFormatError, match="required after digit 3"):
            parse("1234", allow_partial=True)

    def test_required_separator_after_group(self):
        """Test that a sixth digit needs a second dash before it."""
        with pytest.raises(SsnFormatError, match="required after digit 5"):
            parse("123-456", allow_partial=True)

    @pytest.mark.parametrize("raw", ["-", "1-", "12-", "123--", "123-4-", "123-45--", "1234-5"])
    def test_misplaced_separators(self, raw):
        """Test dashes in positions a dashed SSN never has."""
        with pytest.raises(SsnFormatError):
            parse(raw, allow_partial=True)

    def test_optional_separators(self):
        """Test digits-only and mixed prefixes when dashes are optional."""
        assert parse("1234", require_separators=False, allow_partial=True).digits == "1234"
        assert parse("123456", require_separators=False, allow_partial=True).digits == "123456"
        assert parse("12345-6", require_separators=False, allow_partial=True).separators == frozenset({5})
        with pytest.raises(SsnFormatError):
            parse("12-3", require_separators=False, allow_partial=True)

    def test_too_long(self):
        """Test that a tenth digit is rejected."""
        with pytest.raises(SsnFormatError, match="too long"):
            parse("123-45-67890", allow_partial=True)
        with pytest.raises(SsnFormatError, match="too long"):
            parse("1234567890", require_separators=False, allow_partial=True)

    def test_illegal_characters(self):
        """Test characters other than digits and dashes."""
        for raw in ["a", "12 3", "123.", "١"]:
            with pytest.raises(SsnFormatError, match="Only digits"):
                parse(raw, allow_partial=True)

    def test_segments(self):
        """Test segment access on a partial value."""
        segments = parse("123-4", allow_partial=True).segments
        assert segments.area == "123"
        assert segments.group == "4"
        assert segments.area_complete
        assert not segments.group_complete

    def test_non_string(self):
        """Test that non-string input fails fast."""
        with pytest.raises(TypeError):
            parse(None, allow_partial=True)
