"""SSN validation.

Composes the segment parser with the rule engine. Validation never
raises for string input: every failure, including malformed input, is
returned as an invalid :class:`ValidationResult`.

Example:
    >>> validate("123-45-6789").normalized
    '123-45-6789'
    >>> validate("078-05-1120").reason_code
    'DENYLISTED'
    >>> validate("123-4", allow_partial=True).ok
    True
"""

import logging
from typing import Any, Dict, Union

from ssnkit.config import ValidationOptions, resolve_options
from ssnkit.errors import SsnFormatError
from ssnkit.parser import parse
from ssnkit.rules import ReasonCode, RuleEngine, ValidationResult
from ssnkit.utils import require_str

logger = logging.getLogger(__name__)

OptionsArg = Union[ValidationOptions, Dict[str, Any], None]


def validate(raw: str, options: OptionsArg = None, **overrides: Any) -> ValidationResult:
    """Validate a raw SSN value.

    Args:
        raw: The value as typed or submitted.
        options: ValidationOptions, an options dict, or None for defaults
            (separators required, post-2011 rules, full value required).
        **overrides: Individual options, e.g. ``allow_partial=True``.

    Returns:
        ValidationResult. When ok, ``normalized`` is the dashed form (the
        dashed prefix in partial mode).

    Raises:
        TypeError: If raw is not a str.
        ConfigurationError: If the options are invalid.
    """
    require_str(raw, "raw")
    opts = resolve_options(ValidationOptions, options, **overrides)

    try:
        parsed = parse(raw, opts.require_separators, opts.allow_partial)
    except SsnFormatError as e:
        logger.debug(f"Rejected input of length {e.length}: {e.message}")
        return ValidationResult.invalid(ReasonCode.INVALID_FORMAT, e.message)

    engine = RuleEngine(opts.rule_mode, opts.reject_area_lookahead)
    if opts.allow_partial:
        result = engine.evaluate_partial(parsed.digits)
    else:
        result = engine.evaluate_strict(parsed.digits)

    if not result.ok:
        logger.debug(f"Rejected {len(parsed.digits)}-digit input: {result.reason_code}")
    return result


def is_valid(raw: str, options: OptionsArg = None, **overrides: Any) -> bool:
    """Return True if the value is valid (or valid so far in partial mode)."""
    return validate(raw, options, **overrides).ok

