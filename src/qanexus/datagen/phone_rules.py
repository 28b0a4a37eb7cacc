"""Pattern-driven random phone numbers.

Templates are regex-flavoured strings such as ``\\(\\d{3}\\) \\d{3}-\\d{4}``.
:func:`expand_phone_pattern` walks a template once, replacing each ``\\d``
marker with a random digit (``\\d{n}`` with ``n`` digits, ``\\d{m,n}`` with
between ``m`` and ``n``) and copying every other character literally; an
escaped non-``d`` character is copied without its backslash.

:func:`generate_phone_number` re-validates the expansion against the compiled
template and regenerates on mismatch, which can only happen for templates that
use constructs beyond digit markers and literals.  The retry loop is capped by
``max_attempts``.
"""

from __future__ import annotations

import random
import re
from functools import lru_cache

from phonenumbers import (
    SUPPORTED_REGIONS,
    PhoneNumberFormat,
    PhoneNumberType,
    example_number,
    example_number_for_type,
    format_number,
)

from ..utils.errors import UsageError
from ..utils.logging import get_logger
from .seed import secure_rng
from .tables import DEFAULT_PHONE_COUNTRY, DEFAULT_PHONE_MAX_ATTEMPTS, PHONE_PATTERNS

__all__ = [
    "DEFAULT_MAX_ATTEMPTS",
    "expand_phone_pattern",
    "pattern_for_country",
    "supported_countries",
    "generate_phone_number",
]

DEFAULT_MAX_ATTEMPTS = DEFAULT_PHONE_MAX_ATTEMPTS

_REPEAT_RX = re.compile(r"\{(\d+)(?:,(\d+))?\}")

logger = get_logger(__name__)


def expand_phone_pattern(pattern: str, *, rng: random.Random | None = None) -> str:
    """Return ``pattern`` with every digit marker replaced by random digits."""

    r = rng or secure_rng()
    out: list[str] = []
    escaped = False
    i = 0
    while i < len(pattern):
        ch = pattern[i]
        if escaped:
            if ch == "d":
                count = 1
                m = _REPEAT_RX.match(pattern, i + 1)
                if m:
                    low = int(m.group(1))
                    high = int(m.group(2)) if m.group(2) is not None else low
                    if high < low:
                        raise UsageError(f"invalid repeat count in pattern: {m.group(0)}")
                    count = r.randint(low, high)
                    i = m.end() - 1
                out.extend(str(r.randrange(10)) for _ in range(count))
            else:
                out.append(ch)
            escaped = False
        elif ch == "\\":
            escaped = True
        else:
            out.append(ch)
        i += 1
    return "".join(out)


@lru_cache(maxsize=None)
def _derived_pattern(region: str) -> str | None:
    number = example_number_for_type(region, PhoneNumberType.MOBILE) or example_number(region)
    if number is None:
        return None
    text = format_number(number, PhoneNumberFormat.INTERNATIONAL)
    parts: list[str] = []
    for m in re.finditer(r"\d+|\D", text):
        run = m.group(0)
        if text.startswith("+") and m.start() == 1:
            # country calling code stays literal
            parts.append(run)
        elif run.isdigit():
            parts.append(r"\d" if len(run) == 1 else rf"\d{{{len(run)}}}")
        else:
            parts.append(re.escape(run))
    return "".join(parts)


def pattern_for_country(country_code: str) -> str:
    """Return the phone template for ``country_code``.

    The shipped table is consulted first with an exact match.  Regions missing
    from it but known to ``phonenumbers`` get a template derived from the
    library's example number.  Anything else is a :class:`UsageError`.
    """

    pattern = PHONE_PATTERNS.get(country_code)
    if pattern is not None:
        return pattern
    if country_code in SUPPORTED_REGIONS:
        derived = _derived_pattern(country_code)
        if derived is not None:
            return derived
    logger.debug("unknown phone country code %r", country_code)
    raise UsageError(f"Invalid country code: {country_code}")


def supported_countries() -> list[str]:
    """Return every country code :func:`pattern_for_country` accepts."""

    return sorted(set(PHONE_PATTERNS) | set(SUPPORTED_REGIONS))


def generate_phone_number(
    country_code: str | None = None,
    *,
    rng: random.Random | None = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> str:
    """Return a random phone number for ``country_code`` (default ``US``)."""

    if country_code is None:
        country_code = DEFAULT_PHONE_COUNTRY
    pattern = pattern_for_country(country_code)
    compiled = re.compile(pattern)
    r = rng or secure_rng()
    for attempt in range(1, max_attempts + 1):
        candidate = expand_phone_pattern(pattern, rng=r)
        if compiled.fullmatch(candidate):
            return candidate
        logger.debug("phone candidate %d rejected by %s", attempt, pattern)
    raise UsageError(
        f"no phone number matching {pattern!r} after {max_attempts} attempts"
    )
