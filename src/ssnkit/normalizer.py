"""Display normalization for SSN input.

The normalizer is the lenient companion of the parser: it keeps every
ASCII digit, drops everything else and re-inserts separators. It never
rejects input, which makes it safe to run on every keystroke.
"""

from typing import Any, Dict, Union

from ssnkit.config import NormalizeOptions, resolve_options
from ssnkit.utils import SSN_LENGTH, extract_digits, format_digits, require_str


def normalize(
    raw: str,
    options: Union[NormalizeOptions, Dict[str, Any], None] = None,
    **overrides: Any,
) -> str:
    """Normalize raw input into a display string.

    Args:
        raw: The value as typed.
        options: NormalizeOptions, an options dict, or None for defaults.
        **overrides: Individual options, e.g. ``digits_only=True``.

    Returns:
        The dashed (or digits-only) form. With ``allow_partial=False`` the
        raw input is returned unchanged until it holds 9 digits.

    Example:
        >>> normalize("1234")
        '123-4'
        >>> normalize("SSN: 123 45 6789")
        '123-45-6789'
        >>> normalize("1234", allow_partial=False)
        '1234'
    """
    require_str(raw, "raw")
    opts = resolve_options(NormalizeOptions, options, **overrides)

    if not opts.allow_partial:
        digits = extract_digits(raw)
        if len(digits) < SSN_LENGTH:
            return raw
        digits = digits[:SSN_LENGTH]
    else:
        digits = extract_digits(raw, SSN_LENGTH if opts.enforce_length else None)

    if opts.digits_only:
        return digits
    return format_digits(digits)
