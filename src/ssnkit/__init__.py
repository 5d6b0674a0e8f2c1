"""ssnkit: US Social Security Number validation for forms and backends.

This package validates, normalizes, masks and generates SSNs held as
strings. The same rule engine answers "is this valid" for a submitted
value and "could this still become valid" while the value is typed.

QUICK START:
    >>> from ssnkit import validate, normalize, mask
    >>> validate("123-45-6789").ok
    True
    >>> validate("078-05-1120").reason_code
    'DENYLISTED'
    >>> normalize("1234")
    '123-4'
    >>> mask("123-45-6789", reveal_last4=True)
    '***-**-6789'

FORMS (pydantic):
    >>> from pydantic import BaseModel
    >>> from ssnkit.schemas import SsnSubmit
    >>> class Applicant(BaseModel):
    ...     ssn: SsnSubmit

Modules:
    - validator: validate / is_valid (strict and partial)
    - normalizer: display formatting that never rejects
    - masker: display masking
    - generator: test data generation
    - rules: area/group/serial/denylist rules
    - parser: raw input to digits and separators
    - config: option objects
    - schemas: pydantic field types
    - cli: command line interface
"""

from ssnkit.__version__ import __version__, __version_info__
from ssnkit.config import (
    DashMode,
    GenerateMode,
    GenerateOptions,
    MaskOptions,
    NormalizeOptions,
    OutputFormat,
    ValidationOptions,
)
from ssnkit.errors import (
    ConfigurationError,
    GenerationError,
    InvalidRuleModeError,
    SsnFormatError,
    SsnKitError,
)
from ssnkit.generator import generate
from ssnkit.masker import mask
from ssnkit.normalizer import normalize
from ssnkit.parser import ParsedSsn, parse
from ssnkit.rules import DENYLIST, ReasonCode, RuleMode, ValidationResult
from ssnkit.utils import extract_digits, format_digits
from ssnkit.validator import is_valid, validate

__all__ = [
    # Operations
    "validate",
    "is_valid",
    "normalize",
    "mask",
    "generate",
    "format_digits",
    "extract_digits",
    "parse",
    # Types
    "ValidationResult",
    "ParsedSsn",
    "ReasonCode",
    "RuleMode",
    "DENYLIST",
    # Options
    "ValidationOptions",
    "NormalizeOptions",
    "MaskOptions",
    "GenerateOptions",
    "GenerateMode",
    "OutputFormat",
    "DashMode",
    # Errors
    "SsnKitError",
    "SsnFormatError",
    "ConfigurationError",
    "InvalidRuleModeError",
    "GenerationError",
    "__version__",
    "__version_info__",
]
