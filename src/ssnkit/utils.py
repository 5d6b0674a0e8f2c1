"""Utility functions for ssnkit.

This module provides the string helpers shared by the validator,
normalizer, masker and generator: digit extraction, dash insertion and
digit masking.
"""

import re
from typing import Any, Optional

SEPARATOR = "-"

AREA_WIDTH = 3
GROUP_WIDTH = 2
SERIAL_WIDTH = 4

# Offsets at which a separator may appear, counted in digits.
AREA_END = AREA_WIDTH
GROUP_END = AREA_WIDTH + GROUP_WIDTH
SSN_LENGTH = AREA_WIDTH + GROUP_WIDTH + SERIAL_WIDTH

ASCII_DIGITS = frozenset("0123456789")

_NON_DIGITS = re.compile(r"[^0-9]")


def require_str(value: Any, name: str = "value") -> str:
    """Fail fast on non-string input.

    Args:
        value: The value passed by the caller.
        name: Argument name used in the error message.

    Returns:
        The value, unchanged.

    Raises:
        TypeError: If value is not a str.
    """
    if not isinstance(value, str):
        raise TypeError(f"{name} must be str, not {type(value).__name__}")
    return value


def extract_digits(value: str, limit: Optional[int] = None) -> str:
    """Extract ASCII digits from a string, dropping everything else.

    Args:
        value: Raw input, possibly containing separators, spaces or text.
        limit: Maximum number of digits to keep (None keeps all).

    Returns:
        The digits in input order.

    Example:
        >>> extract_digits("SSN: 123 45 6789")
        '123456789'
        >>> extract_digits("12345678999", limit=9)
        '123456789'
    """
    digits = _NON_DIGITS.sub("", require_str(value))
    if limit is not None:
        digits = digits[:limit]
    return digits


def format_digits(digits: str) -> str:
    """Insert separators into a digit string in DDD-DD-DDDD style.

    Pure formatting: the input is not validated and any characters are
    placed positionally. Digits beyond the ninth are appended to the serial
    segment without another separator.

    Args:
        digits: Digit string, usually from :func:`extract_digits`.

    Returns:
        The dashed representation.

    Example:
        >>> format_digits("1234")
        '123-4'
        >>> format_digits("1234567890")
        '123-45-67890'
    """
    require_str(digits, "digits")
    if len(digits) <= AREA_END:
        return digits
    if len(digits) <= GROUP_END:
        return f"{digits[:AREA_END]}{SEPARATOR}{digits[AREA_END:]}"
    return (
        f"{digits[:AREA_END]}{SEPARATOR}"
        f"{digits[AREA_END:GROUP_END]}{SEPARATOR}{digits[GROUP_END:]}"
    )


def mask_digits(digits: str, mask_char: str = "*", preserve_last: int = 0) -> str:
    """Mask a digit string, preserving only the last N characters.

    Args:
        digits: The digit string to mask.
        mask_char: Character to use for masking.
        preserve_last: Number of trailing characters left as-is.

    Returns:
        The masked string, same length as the input.

    Example:
        >>> mask_digits("123456789", preserve_last=4)
        '*****6789'
    """
    if not digits:
        return digits

    preserve_last = max(0, min(preserve_last, len(digits)))
    masked_length = len(digits) - preserve_last
    return mask_char * masked_length + digits[masked_length:]
