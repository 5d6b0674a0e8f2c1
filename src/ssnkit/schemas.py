"""Pydantic field types for SSN form inputs.

Two flavours are provided:

- typing fields normalize every value to its dashed prefix and accept
  anything that could still become a valid SSN, for live form feedback;
- submit fields normalize to the canonical form and require a complete,
  valid SSN.

Example:
    >>> from pydantic import BaseModel
    >>> class Applicant(BaseModel):
    ...     ssn: SsnSubmit
    >>> Applicant(ssn="123456789").ssn
    '123-45-6789'
"""

from typing import Annotated, Any, Callable, Dict

from pydantic import AfterValidator
from pydantic_core import PydanticCustomError

from ssnkit.config import ValidationOptions
from ssnkit.normalizer import normalize
from ssnkit.rules import RuleMode, ValidationResult
from ssnkit.validator import validate

ERROR_TYPE = "ssn_invalid"


def _raise_invalid(result: ValidationResult) -> None:
    raise PydanticCustomError(
        ERROR_TYPE,
        "{message}",
        {"message": result.message, "reason_code": result.reason_code},
    )


def _typing_validator(options: ValidationOptions) -> Callable[[str], str]:
    def check(value: str) -> str:
        normalized = normalize(value, allow_partial=True, enforce_length=False)
        result = validate(normalized, options)
        if not result.ok:
            _raise_invalid(result)
        return result.normalized

    return check


def _submit_validator(options: ValidationOptions) -> Callable[[str], str]:
    def check(value: str) -> str:
        normalized = normalize(
            value,
            allow_partial=False,
            enforce_length=True,
            digits_only=not options.require_separators,
        )
        result = validate(normalized, options)
        if not result.ok:
            _raise_invalid(result)
        return normalized

    return check


def ssn_typing_field(require_separators: bool = True, rule_mode: Any = RuleMode.POST_2011) -> Any:
    """Build an annotated str type that validates an SSN as it is typed.

    Args:
        require_separators: Passed to the partial validator. Values are
            normalized to dashed form first, so this rarely matters here.
        rule_mode: Area rule set, as a RuleMode or its string value.

    Returns:
        ``Annotated[str, ...]`` usable as a model field or TypeAdapter type.
    """
    options = ValidationOptions(
        require_separators=require_separators, rule_mode=rule_mode, allow_partial=True
    )
    return Annotated[str, AfterValidator(_typing_validator(options))]


def ssn_submit_field(require_separators: bool = True, rule_mode: Any = RuleMode.POST_2011) -> Any:
    """Build an annotated str type that requires a complete, valid SSN.

    Args:
        require_separators: Output ``DDD-DD-DDDD`` when True, ``DDDDDDDDD``
            when False.
        rule_mode: Area rule set, as a RuleMode or its string value.

    Returns:
        ``Annotated[str, ...]`` usable as a model field or TypeAdapter type.
    """
    options = ValidationOptions(
        require_separators=require_separators, rule_mode=rule_mode, allow_partial=False
    )
    return Annotated[str, AfterValidator(_submit_validator(options))]


def error_reason(error: Dict[str, Any]) -> Any:
    """Return the reason code from one entry of ``ValidationError.errors()``."""
    return (error.get("ctx") or {}).get("reason_code")


SsnTyping = ssn_typing_field()
SsnSubmit = ssn_submit_field()
