"""Numeric rules for SSN area, group and serial segments.

The rule engine evaluates a digit sequence of any length from 0 to 9.
Each rule only fires once its segment is complete, so the same engine
answers both "is this valid" (strict) and "could this still become
valid" (partial). Rules are always checked in the order area, group,
serial, denylist; callers may rely on that order when several rules
would fail on the same input.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, NamedTuple, Optional

from ssnkit.utils import AREA_END, GROUP_END, SSN_LENGTH, format_digits


class ReasonCode(Enum):
    """Why a value failed validation."""

    INVALID_FORMAT = "INVALID_FORMAT"
    INVALID_AREA = "INVALID_AREA"
    INVALID_GROUP = "INVALID_GROUP"
    INVALID_SERIAL = "INVALID_SERIAL"
    DENYLISTED = "DENYLISTED"


class RuleMode(Enum):
    """Which area rule set to apply.

    ``BOTH`` accepts a value if either rule set accepts it. Since the
    post-2011 rules are a subset of the pre-2011 ones, it behaves exactly
    like ``POST_2011``.
    """

    PRE_2011 = "pre2011"
    POST_2011 = "post2011"
    BOTH = "both"


# Values published in advertising and sample cards. They pass the numeric
# rules but must never be accepted.
DENYLIST = frozenset({"078-05-1120", "721-07-4426", "219-09-9999"})

AREA_MAX = 899
RETIRED_AREA = 666
PRE_2011_RESERVED_AREAS = range(734, 750)
PRE_2011_AREA_LIMIT = 773

MESSAGES = {
    "area": "Area number is not allowed (000, 666, and 900-999 are invalid).",
    "area_pre2011": (
        "Area number is not allowed under pre-June 25, 2011 rules "
        "(734-749 and >= 773 are invalid)."
    ),
    "area_prefix": "Area numbers starting with 9 are not allowed.",
    "group": "Group number may not be 00.",
    "serial": "Serial number may not be 0000.",
    "denylist": "This SSN is a known publicly advertised (and invalid) value.",
    "length": "SSN must have exactly 9 digits.",
}


class Segments(NamedTuple):
    """Area, group and serial digits of a (possibly partial) SSN."""

    area: str
    group: str
    serial: str

    @classmethod
    def from_digits(cls, digits: str) -> "Segments":
        return cls(digits[:AREA_END], digits[AREA_END:GROUP_END], digits[GROUP_END:SSN_LENGTH])

    @property
    def area_complete(self) -> bool:
        return len(self.area) == AREA_END

    @property
    def group_complete(self) -> bool:
        return len(self.group) == GROUP_END - AREA_END

    @property
    def serial_complete(self) -> bool:
        return len(self.serial) == SSN_LENGTH - GROUP_END

    @property
    def digits(self) -> str:
        return self.area + self.group + self.serial


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a validation call.

    Attributes:
        ok: Whether the value is valid (or valid so far, in partial mode).
        normalized: Dashed form of the digits when ok, else None.
        reason: Failure reason when not ok.
        message: Human-readable failure message when not ok.
    """

    ok: bool
    normalized: Optional[str] = None
    reason: Optional[ReasonCode] = None
    message: Optional[str] = None

    @classmethod
    def valid(cls, normalized: str) -> "ValidationResult":
        return cls(ok=True, normalized=normalized)

    @classmethod
    def invalid(cls, reason: ReasonCode, message: str) -> "ValidationResult":
        return cls(ok=False, reason=reason, message=message)

    @property
    def reason_code(self) -> Optional[str]:
        return self.reason.value if self.reason else None

    def to_dict(self) -> Dict[str, Any]:
        if self.ok:
            return {"ok": True, "normalized": self.normalized}
        return {"ok": False, "reason_code": self.reason_code, "message": self.message}


def violates_pre_2011(area: int) -> bool:
    """Return True if an area was never issued before June 25, 2011."""
    return area in PRE_2011_RESERVED_AREAS or area >= PRE_2011_AREA_LIMIT


def check_area(area: str, rule_mode: RuleMode = RuleMode.POST_2011) -> Optional[ValidationResult]:
    """Check a complete 3-digit area number.

    Returns:
        An invalid result, or None if the area passes.
    """
    number = int(area)
    if number == 0 or number == RETIRED_AREA or number > AREA_MAX:
        return ValidationResult.invalid(ReasonCode.INVALID_AREA, MESSAGES["area"])
    if rule_mode is RuleMode.PRE_2011 and violates_pre_2011(number):
        return ValidationResult.invalid(ReasonCode.INVALID_AREA, MESSAGES["area_pre2011"])
    return None


def check_group(group: str) -> Optional[ValidationResult]:
    """Check a complete 2-digit group number."""
    if int(group) == 0:
        return ValidationResult.invalid(ReasonCode.INVALID_GROUP, MESSAGES["group"])
    return None


def check_serial(serial: str) -> Optional[ValidationResult]:
    """Check a complete 4-digit serial number."""
    if int(serial) == 0:
        return ValidationResult.invalid(ReasonCode.INVALID_SERIAL, MESSAGES["serial"])
    return None


def check_denylist(digits: str) -> Optional[ValidationResult]:
    """Check a complete 9-digit value against the denylist."""
    if format_digits(digits) in DENYLIST:
        return ValidationResult.invalid(ReasonCode.DENYLISTED, MESSAGES["denylist"])
    return None


class RuleEngine:
    """Applies the segment rules for one rule configuration.

    Attributes:
        rule_mode: Area rule set to apply.
        reject_area_lookahead: Reject a leading 9 before the area is complete.

    Example:
        >>> engine = RuleEngine(RuleMode.PRE_2011)
        >>> engine.evaluate_partial("773").reason
        <ReasonCode.INVALID_AREA: 'INVALID_AREA'>
    """

    def __init__(
        self,
        rule_mode: RuleMode = RuleMode.POST_2011,
        reject_area_lookahead: bool = False,
    ):
        self.rule_mode = rule_mode
        self.reject_area_lookahead = reject_area_lookahead

    def evaluate_partial(self, digits: str) -> ValidationResult:
        """Evaluate a prefix of up to 9 digits.

        Args:
            digits: ASCII digits typed so far.

        Returns:
            The first rule violation among completed segments, or a valid
            result whose normalized form is the dashed prefix.
        """
        segments = Segments.from_digits(digits)

        if self.reject_area_lookahead and segments.area[:1] == "9":
            return ValidationResult.invalid(ReasonCode.INVALID_AREA, MESSAGES["area_prefix"])

        checks = []
        if segments.area_complete:
            checks.append(lambda: check_area(segments.area, self.rule_mode))
        if segments.group_complete:
            checks.append(lambda: check_group(segments.group))
        if segments.serial_complete:
            checks.append(lambda: check_serial(segments.serial))
            checks.append(lambda: check_denylist(segments.digits))

        return _first_failure(checks) or ValidationResult.valid(format_digits(segments.digits))

    def evaluate_strict(self, digits: str) -> ValidationResult:
        """Evaluate a complete value; anything short of 9 digits is a format error."""
        if len(digits) != SSN_LENGTH:
            return ValidationResult.invalid(ReasonCode.INVALID_FORMAT, MESSAGES["length"])

        segments = Segments.from_digits(digits)
        failure = _first_failure(
            [
                lambda: check_area(segments.area, self.rule_mode),
                lambda: check_group(segments.group),
                lambda: check_serial(segments.serial),
                lambda: check_denylist(digits),
            ]
        )
        return failure or ValidationResult.valid(format_digits(digits))


def _first_failure(
    checks: List[Callable[[], Optional[ValidationResult]]]
) -> Optional[ValidationResult]:
    for check in checks:
        failure = check()
        if failure is not None:
            return failure
    return None
