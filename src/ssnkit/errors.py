"""Custom exceptions and error handling for ssnkit.

Validation failures are reported as data (see :mod:`ssnkit.validator`);
the exceptions below cover malformed options, parser internals and
generator misconfiguration. Each carries an optional suggestion that is
rendered as a hint when the error is printed.
"""

from typing import Iterable, List, Optional


class SsnKitError(Exception):
    """Base exception for ssnkit errors."""

    def __init__(self, message: str, suggestion: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.suggestion = suggestion

    def __str__(self) -> str:
        if self.suggestion:
            return f"{self.message}\n\nHint: {self.suggestion}"
        return self.message


class SsnFormatError(SsnKitError):
    """Raised by the segment parser when input cannot form an SSN."""

    def __init__(self, message: str, raw: Optional[str] = None):
        super().__init__(message)
        # Only the length is kept; the raw value may be sensitive.
        self.length = len(raw) if raw is not None else None


class ConfigurationError(SsnKitError):
    """Raised when options are invalid."""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        self.errors = list(errors or [])
        suggestion = None
        if self.errors:
            suggestion = "Configuration errors:\n" + "\n".join(
                f"  - {e}" for e in self.errors
            )
        super().__init__(message, suggestion)


class InvalidRuleModeError(ConfigurationError):
    """Raised when an unknown rule mode is specified."""

    VALID_MODES = ["pre2011", "post2011", "both"]

    def __init__(self, mode: str):
        super().__init__(
            f"Invalid rule mode: '{mode}'",
            [
                f"Valid rule modes: {', '.join(self.VALID_MODES)}",
                "'pre2011': also reject areas 734-749 and 773 and above",
                "'post2011': base rules only (default)",
                "'both': accepted alias of 'post2011'",
            ],
        )
        self.mode = mode


class GenerationError(SsnKitError):
    """Raised when the generator cannot produce a value within its retry cap."""

    def __init__(self, attempts: int):
        suggestion = (
            "The random source kept producing excluded values.\n"
            "  - Check that a custom rng returns floats in [0, 1)\n"
            "  - A constant rng can only ever produce one candidate\n"
            "  - Raise max_attempts only if the rng is known to be correct"
        )
        super().__init__(
            f"No acceptable SSN generated after {attempts} attempts", suggestion
        )
        self.attempts = attempts


def unknown_choice(field: str, value: object, choices: Iterable[str]) -> str:
    """Build the message used for an option value outside its choices."""
    return f"'{field}': invalid value {value!r}. Must be one of: {', '.join(choices)}"


def format_error(e: Exception) -> str:
    """Format an exception into a user-friendly message.

    Args:
        e: The exception to format.

    Returns:
        A user-friendly error message with suggestions.
    """
    if isinstance(e, SsnKitError):
        return str(e)

    if isinstance(e, ValueError):
        return f"Invalid value: {e}\n\nHint: Check your input parameters match the expected format."

    if isinstance(e, TypeError):
        return f"Type error: {e}\n\nHint: SSN values must be passed as str."

    return f"Unexpected error: {type(e).__name__}: {e}"
