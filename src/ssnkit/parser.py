"""Segment parser for raw SSN input.

Turns a raw string into its digits plus the offsets at which separators
were typed, rejecting anything that can never be part of a valid SSN.
Strict mode matches the whole value against a fixed pattern; partial
mode scans character by character so that an in-progress value such as
``"123-4"`` can be accepted while ``"12-3"`` is rejected.
"""

import re
from dataclasses import dataclass
from typing import FrozenSet

from ssnkit.errors import SsnFormatError
from ssnkit.rules import Segments
from ssnkit.utils import (
    AREA_END,
    ASCII_DIGITS,
    GROUP_END,
    SEPARATOR,
    SSN_LENGTH,
    require_str,
)

DASHED_PATTERN = re.compile(r"[0-9]{3}-[0-9]{2}-[0-9]{4}")
DIGITS_PATTERN = re.compile(r"[0-9]{9}")

SEPARATOR_OFFSETS = (AREA_END, GROUP_END)


@dataclass(frozen=True)
class ParsedSsn:
    """Digits and separator offsets parsed from raw input.

    Attributes:
        digits: ASCII digits in input order (0 to 9 of them).
        separators: Digit offsets at which a separator appeared.
    """

    digits: str
    separators: FrozenSet[int] = frozenset()

    @property
    def segments(self) -> Segments:
        return Segments.from_digits(self.digits)

    @property
    def complete(self) -> bool:
        return len(self.digits) == SSN_LENGTH


def parse(
    raw: str, require_separators: bool = True, allow_partial: bool = False
) -> ParsedSsn:
    """Parse raw input into digits and separator offsets.

    Args:
        raw: The value as typed or submitted.
        require_separators: Require ``-`` after the area and group segments.
        allow_partial: Accept an in-progress prefix instead of a full value.

    Returns:
        The parsed digits and separators.

    Raises:
        SsnFormatError: If the input cannot be (part of) an SSN.
        TypeError: If raw is not a str.
    """
    require_str(raw, "raw")
    if allow_partial:
        return _parse_partial(raw, require_separators)
    return _parse_full(raw, require_separators)


def _parse_full(raw: str, require_separators: bool) -> ParsedSsn:
    if DASHED_PATTERN.fullmatch(raw):
        return ParsedSsn(raw.replace(SEPARATOR, ""), frozenset(SEPARATOR_OFFSETS))

    if not require_separators and DIGITS_PATTERN.fullmatch(raw):
        return ParsedSsn(raw)

    if require_separators:
        raise SsnFormatError("Invalid SSN format. Expected ###-##-####.", raw)
    raise SsnFormatError("Invalid SSN format. Expected ###-##-#### or #########.", raw)


def _parse_partial(raw: str, require_separators: bool) -> ParsedSsn:
    digits = []
    separators = set()

    for ch in raw:
        if ch in ASCII_DIGITS:
            count = len(digits)
            if count == SSN_LENGTH:
                raise SsnFormatError("SSN is too long.", raw)
            if require_separators and count in SEPARATOR_OFFSETS and count not in separators:
                raise SsnFormatError(
                    f"A '{SEPARATOR}' is required after digit {count}.", raw
                )
            digits.append(ch)
            continue

        if ch != SEPARATOR:
            raise SsnFormatError(f"Only digits and '{SEPARATOR}' are allowed.", raw)

        count = len(digits)
        if count not in SEPARATOR_OFFSETS or count in separators:
            raise SsnFormatError(f"'{SEPARATOR}' is in an invalid position.", raw)
        separators.add(count)

    return ParsedSsn("".join(digits), frozenset(separators))
