"""Display masking for SSN input.

Masking runs the normalizer in digits-only mode, replaces digits with the
mask character and then re-applies separators. Separators are never
masked, and a digit is only ever revealed when ``reveal_last4`` is set
and the digit belongs to the serial segment (positions 6-9).

Example:
    >>> mask("123-45-6789")
    '***-**-****'
    >>> mask("123-45-6789", reveal_last4=True)
    '***-**-6789'
    >>> mask("123456", reveal_last4=True, digits_only=True)
    '*****6'
"""

from typing import Any, Dict, Union

from ssnkit.config import DashMode, MaskOptions, resolve_options
from ssnkit.normalizer import normalize
from ssnkit.utils import (
    GROUP_END,
    SEPARATOR,
    SSN_LENGTH,
    extract_digits,
    format_digits,
    mask_digits,
    require_str,
)


def mask(
    raw: str,
    options: Union[MaskOptions, Dict[str, Any], None] = None,
    **overrides: Any,
) -> str:
    """Mask the digits of a raw SSN value.

    Args:
        raw: The value as typed or stored.
        options: MaskOptions, an options dict, or None for defaults.
        **overrides: Individual options, e.g. ``reveal_last4=True``.

    Returns:
        The masked string. Input without digits masks to an empty string.
    """
    require_str(raw, "raw")
    opts = resolve_options(MaskOptions, options, **overrides)
    mask_char = opts.effective_mask_char

    normalized = normalize(
        raw,
        allow_partial=opts.allow_partial,
        digits_only=True,
        enforce_length=opts.enforce_length,
    )
    # normalize() hands back the raw input untouched while it is short of
    # 9 digits and allow_partial is off, so extract again.
    digits = extract_digits(normalized, SSN_LENGTH if opts.enforce_length else None)

    head, serial, overflow = digits[:GROUP_END], digits[GROUP_END:SSN_LENGTH], digits[SSN_LENGTH:]
    reveal = len(serial) if opts.reveal_last4 else 0
    masked = (
        mask_digits(head, mask_char)
        + mask_digits(serial, mask_char, preserve_last=reveal)
        + mask_digits(overflow, mask_char)
    )

    if opts.digits_only:
        return masked
    if opts.dash_mode is DashMode.PRESERVE and SEPARATOR not in raw:
        return masked
    return format_digits(masked)
