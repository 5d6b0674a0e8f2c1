"""SSN generation for examples, fixtures and test data.

``public`` mode returns one of the publicly advertised values, which the
validator always rejects; it is the only mode safe for output others may
see. The other modes rejection-sample values that pass the chosen rule
set and never return a denylisted value.

The random source is a zero-argument callable returning a float in
[0, 1). By default it draws from the operating system's entropy pool
through :class:`random.SystemRandom`. If the platform has no entropy
source the generator falls back to :class:`random.Random` and logs a
warning; :func:`default_rng_is_secure` reports which one is in use.
"""

import logging
import random
from typing import Any, Callable, Dict, Optional, Union

from ssnkit.config import GenerateMode, GenerateOptions, OutputFormat, resolve_options
from ssnkit.errors import GenerationError
from ssnkit.rules import AREA_MAX, DENYLIST, RETIRED_AREA, violates_pre_2011
from ssnkit.utils import SEPARATOR

logger = logging.getLogger(__name__)

Rng = Callable[[], float]

PUBLIC_VALUES = tuple(sorted(DENYLIST))


def _system_rng() -> Optional[Rng]:
    system = random.SystemRandom()
    try:
        system.random()
    except NotImplementedError:
        return None
    return system.random


_SYSTEM_RNG = _system_rng()
if _SYSTEM_RNG is None:
    logger.warning(
        "OS entropy source unavailable; generated SSNs use random.Random instead"
    )
    _DEFAULT_RNG: Rng = random.Random().random
else:
    _DEFAULT_RNG = _SYSTEM_RNG


def default_rng_is_secure() -> bool:
    """Return True if the default random source is backed by OS entropy."""
    return _SYSTEM_RNG is not None


def random_int(rng: Rng, low: int, high: int) -> int:
    """Draw an integer in [low, high] from a float source."""
    return low + min(int(rng() * (high - low + 1)), high - low)


def _sample(max_attempts: int, draw: Callable[[], Any], accept: Callable[[Any], bool]) -> Any:
    for _ in range(max_attempts):
        value = draw()
        if accept(value):
            return value
    raise GenerationError(max_attempts)


def _area(rng: Rng, pre_2011: bool, max_attempts: int) -> str:
    def accept(area: int) -> bool:
        if area == RETIRED_AREA:
            return False
        return not (pre_2011 and violates_pre_2011(area))

    area = _sample(max_attempts, lambda: random_int(rng, 1, AREA_MAX), accept)
    return f"{area:03d}"


def _candidate(rng: Rng, pre_2011: bool, max_attempts: int) -> str:
    area = _area(rng, pre_2011, max_attempts)
    group = random_int(rng, 1, 99)
    serial = random_int(rng, 1, 9999)
    return f"{area}{SEPARATOR}{group:02d}{SEPARATOR}{serial:04d}"


def generate(
    options: Union[GenerateOptions, Dict[str, Any], None] = None,
    rng: Optional[Rng] = None,
    **overrides: Any,
) -> str:
    """Generate an SSN-shaped string.

    Args:
        options: GenerateOptions, an options dict, or None for defaults
            (public mode, dashed output).
        rng: Random source returning floats in [0, 1). Defaults to OS entropy.
        **overrides: Individual options, e.g. ``mode="pre2011"``.

    Returns:
        The generated value, dashed or digits-only.

    Raises:
        ConfigurationError: If the options are invalid.
        GenerationError: If no acceptable value is found within
            ``max_attempts`` draws, which only happens with a broken rng.

    Example:
        >>> generate(mode="public", public_value="078-05-1120")
        '078-05-1120'
    """
    opts = resolve_options(GenerateOptions, options, **overrides)
    rng = rng or _DEFAULT_RNG

    if opts.mode is GenerateMode.PUBLIC:
        value = opts.public_value or PUBLIC_VALUES[random_int(rng, 0, len(PUBLIC_VALUES) - 1)]
    else:
        if opts.mode is GenerateMode.ANY:
            pre_2011 = rng() < 0.5
        else:
            pre_2011 = opts.mode is GenerateMode.PRE_2011

        def accept(candidate: str) -> bool:
            if candidate in DENYLIST:
                logger.debug("Resampling: candidate matched a denylisted value")
                return False
            return True

        value = _sample(
            opts.max_attempts,
            lambda: _candidate(rng, pre_2011, opts.max_attempts),
            accept,
        )

    if opts.format is OutputFormat.DIGITS:
        return value.replace(SEPARATOR, "")
    return value
