"""Option objects for ssnkit operations.

Every public operation takes its options as one of these frozen
dataclasses, a plain dictionary (for example loaded from application
settings) or keyword overrides. Enum-valued fields accept either the
enum member or its string value.

Example:
    >>> opts = resolve_options(ValidationOptions, {"rule_mode": "pre2011"})
    >>> opts.rule_mode
    <RuleMode.PRE_2011: 'pre2011'>
"""

import dataclasses
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Type, TypeVar, Union

from ssnkit.errors import ConfigurationError, InvalidRuleModeError, unknown_choice
from ssnkit.rules import DENYLIST, RuleMode
from ssnkit.utils import extract_digits, format_digits

logger = logging.getLogger(__name__)

OptionsT = TypeVar("OptionsT")


class GenerateMode(Enum):
    """What kind of SSN the generator produces."""

    PUBLIC = "public"
    ANY = "any"
    PRE_2011 = "pre2011"
    POST_2011 = "post2011"


class OutputFormat(Enum):
    """Generator output shape."""

    DASHED = "dashed"
    DIGITS = "digits"


class DashMode(Enum):
    """How the masker decides whether to emit separators.

    ``NORMALIZE`` always inserts them; ``PRESERVE`` only does when the raw
    input already contained one.
    """

    NORMALIZE = "normalize"
    PRESERVE = "preserve"


def _coerce_enum(enum_cls: Type[Enum], field: str, value: Any) -> Enum:
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        if enum_cls is RuleMode:
            raise InvalidRuleModeError(str(value)) from None
        raise ConfigurationError(
            f"Invalid option '{field}'",
            [unknown_choice(field, value, [m.value for m in enum_cls])],
        ) from None


def _coerce_enum_fields(options: Any) -> None:
    for f in dataclasses.fields(options):
        if isinstance(f.type, type) and issubclass(f.type, Enum):
            value = _coerce_enum(f.type, f.name, getattr(options, f.name))
            object.__setattr__(options, f.name, value)


@dataclass(frozen=True)
class ValidationOptions:
    """Rule configuration for the validator.

    Attributes:
        require_separators: Require ``-`` after the area and group segments.
        rule_mode: Area rule set (pre2011, post2011 or both).
        allow_partial: Answer "could this still become valid" for prefixes.
        reject_area_lookahead: In partial mode, reject a leading 9 as soon
            as it is typed instead of waiting for the area to complete.
    """

    require_separators: bool = True
    rule_mode: RuleMode = RuleMode.POST_2011
    allow_partial: bool = False
    reject_area_lookahead: bool = False

    def __post_init__(self):
        _coerce_enum_fields(self)


@dataclass(frozen=True)
class NormalizeOptions:
    """Options for the display normalizer.

    Attributes:
        allow_partial: Format in-progress input; when False the raw input is
            returned unchanged until 9 digits are present.
        digits_only: Return bare digits instead of the dashed form.
        enforce_length: Cap extraction at 9 digits.
    """

    allow_partial: bool = True
    digits_only: bool = False
    enforce_length: bool = True


@dataclass(frozen=True)
class MaskOptions:
    """Options for the display masker."""

    allow_partial: bool = True
    reveal_last4: bool = False
    mask_char: str = "*"
    digits_only: bool = False
    enforce_length: bool = False
    dash_mode: DashMode = DashMode.NORMALIZE

    def __post_init__(self):
        _coerce_enum_fields(self)

    @property
    def effective_mask_char(self) -> str:
        return self.mask_char[:1] or "*"


@dataclass(frozen=True)
class GenerateOptions:
    """Options for the generator.

    Attributes:
        mode: public, any, pre2011 or post2011.
        format: dashed or digits.
        public_value: Force a specific publicly advertised value (public mode).
        max_attempts: Cap on rejection-sampling iterations.
    """

    mode: GenerateMode = GenerateMode.PUBLIC
    format: OutputFormat = OutputFormat.DASHED
    public_value: Optional[str] = None
    max_attempts: int = 1000

    def __post_init__(self):
        _coerce_enum_fields(self)
        errors = []
        if self.max_attempts < 1:
            errors.append(f"'max_attempts' must be positive, got {self.max_attempts}")
        if self.public_value is not None:
            dashed = format_digits(extract_digits(self.public_value))
            if dashed not in DENYLIST:
                errors.append(
                    "'public_value' must be one of: " + ", ".join(sorted(DENYLIST))
                )
            else:
                object.__setattr__(self, "public_value", dashed)
        if errors:
            raise ConfigurationError("Invalid generator options", errors)


def validate_options_dict(options_cls: Type[Any], config: Dict[str, Any]) -> List[str]:
    """Validate an options dictionary against an options class.

    Enum-valued options are checked when the dataclass is built, which
    raises a more specific error for an unknown rule mode.

    Args:
        options_cls: One of the option dataclasses.
        config: Dictionary of option names to values.

    Returns:
        List of validation error messages. Empty if valid.
    """
    errors = []
    fields = {f.name: f for f in dataclasses.fields(options_cls)}

    for name, value in config.items():
        f = fields.get(name)
        if f is None:
            errors.append(
                f"Unknown option '{name}' for {options_cls.__name__}. "
                f"Must be one of: {', '.join(fields)}"
            )
            continue

        if f.type is bool:
            if not isinstance(value, bool):
                errors.append(f"'{name}' must be a boolean, got {value!r}")
        elif f.type is int:
            if isinstance(value, bool) or not isinstance(value, int):
                errors.append(f"'{name}' must be an integer, got {value!r}")
        elif f.type is str:
            if not isinstance(value, str):
                errors.append(f"'{name}' must be a string, got {value!r}")
        elif f.type == Optional[str]:
            if value is not None and not isinstance(value, str):
                errors.append(f"'{name}' must be a string or None, got {value!r}")

    return errors


def merge_options(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge two option dictionaries, values in override winning."""
    result = base.copy()
    result.update(override)
    return result


def resolve_options(
    options_cls: Type[OptionsT],
    options: Union[OptionsT, Dict[str, Any], None] = None,
    **overrides: Any,
) -> OptionsT:
    """Build an options instance from an instance, a dict or keywords.

    Args:
        options_cls: The option dataclass to build.
        options: Existing instance, dictionary, or None for defaults.
        **overrides: Individual option values applied on top.

    Returns:
        An instance of options_cls.

    Raises:
        ConfigurationError: If any option name or value is invalid.
        TypeError: If options is of an unsupported type.
    """
    if isinstance(options, options_cls):
        if not overrides:
            return options
        base = dataclasses.asdict(options)
    elif isinstance(options, dict):
        base = options
    elif options is None:
        base = {}
    else:
        raise TypeError(
            f"options must be {options_cls.__name__}, dict or None, "
            f"not {type(options).__name__}"
        )

    merged = merge_options(base, overrides)
    errors = validate_options_dict(options_cls, merged)
    if errors:
        raise ConfigurationError(f"Invalid {options_cls.__name__}", errors)

    logger.debug(f"Resolved {options_cls.__name__} from {sorted(merged)}")
    return options_cls(**merged)
