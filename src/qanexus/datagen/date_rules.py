"""Calendar-correct random dates and times.

:func:`random_date` fills the ``yyyy``/``yy``, ``MMM``/``MM`` and ``dd`` tokens
of a layout with random values that form a real calendar date: February only
receives day 29 in leap years and 30-day months never receive day 31.  Tokens
are substituted in a single regex pass with longer alternatives first, so a
``MMM`` token is never split into ``MM`` + ``M`` and substituted text is never
re-scanned.

:func:`today_date` is deliberately a separate entry point; passing ``None`` to
:func:`random_date` still yields a random date in the default layout.
"""

from __future__ import annotations

import random
import re
from datetime import date, datetime, timedelta

from ..utils.errors import UsageError
from ..utils.logging import get_logger
from .seed import secure_rng
from .tables import DEFAULT_YEAR_MAX, DEFAULT_YEAR_MIN, MonthAbbreviation, SupportedDateFormat

__all__ = [
    "DEFAULT_DATE_FORMAT",
    "YEAR_MIN",
    "YEAR_MAX",
    "is_leap_year",
    "max_days",
    "random_date",
    "today_date",
    "generate_time",
    "generate_timestamp",
    "generate_unix_timestamp",
]

DEFAULT_DATE_FORMAT = SupportedDateFormat.YYYY_MM_DD
YEAR_MIN = DEFAULT_YEAR_MIN
YEAR_MAX = DEFAULT_YEAR_MAX

_TOKEN_RX = re.compile(r"yyyy|yy|MMM|MM|dd")
_MAX_OFFSET_MS = 1_000_000_000

logger = get_logger(__name__)


def is_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def max_days(month: int | None, year: int | None) -> int:
    """Return the number of days in ``month`` of ``year``.

    An unknown month yields 31.  An unknown year treats February as 29 days
    long so every day that can exist is reachable.
    """

    if month is None or not 1 <= month <= 12:
        return 31
    if month == 2:
        if year is None:
            return 29
        return 29 if is_leap_year(year) else 28
    if month in (4, 6, 9, 11):
        return 30
    return 31


def random_date(
    fmt: SupportedDateFormat | str | None = None,
    *,
    rng: random.Random | None = None,
    year_min: int = YEAR_MIN,
    year_max: int = YEAR_MAX,
) -> str:
    """Return a random calendar-valid date rendered with ``fmt``.

    ``fmt`` is a :class:`SupportedDateFormat` member or a raw token string.
    ``None`` selects ``yyyy-MM-dd``.
    """

    if year_min > year_max:
        logger.debug("rejected year range [%s, %s]", year_min, year_max)
        raise UsageError(f"year_min ({year_min}) must not exceed year_max ({year_max})")
    r = rng or secure_rng()
    if fmt is None:
        fmt = DEFAULT_DATE_FORMAT
    layout = fmt.value if isinstance(fmt, SupportedDateFormat) else fmt
    tokens = set(_TOKEN_RX.findall(layout))

    year: int | None = None
    if tokens & {"yyyy", "yy"}:
        year = r.randint(year_min, year_max)

    month: int | None = None
    month_text = ""
    if "MMM" in tokens:
        abbreviation = r.choice(list(MonthAbbreviation))
        month = abbreviation.number
        month_text = abbreviation.value
    if "MM" in tokens:
        month = r.randint(1, 12) if month is None else month
    numeric_month = f"{month:02d}" if month is not None else ""
    if not month_text:
        month_text = numeric_month

    day = ""
    if "dd" in tokens:
        day = f"{r.randint(1, max_days(month, year)):02d}"

    values = {
        "yyyy": f"{year:04d}" if year is not None else "",
        "yy": f"{year % 100:02d}" if year is not None else "",
        "MMM": month_text,
        "MM": numeric_month,
        "dd": day,
    }
    return _TOKEN_RX.sub(lambda m: values[m.group(0)], layout)


def today_date(today: date | None = None) -> str:
    """Return the current calendar date as ``yyyy-MM-dd``."""

    d = today or date.today()
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def generate_time(*, rng: random.Random | None = None) -> str:
    """Return a random wall-clock time as ``HH:mm:ss``."""

    r = rng or secure_rng()
    return f"{r.randrange(24):02d}:{r.randrange(60):02d}:{r.randrange(60):02d}"


def generate_timestamp(
    *, rng: random.Random | None = None, now: datetime | None = None
) -> str:
    """Return a timestamp up to ~11.5 days before ``now``.

    The rendering matches ``yyyy-MM-dd HH:mm:ss.fff``.
    """

    r = rng or secure_rng()
    base = now or datetime.now()
    moment = base - timedelta(milliseconds=r.randrange(_MAX_OFFSET_MS))
    return moment.strftime("%Y-%m-%d %H:%M:%S.") + f"{moment.microsecond // 1000:03d}"


def generate_unix_timestamp(
    *, rng: random.Random | None = None, now: float | None = None
) -> int:
    """Return Unix seconds up to ~31.7 years before ``now``."""

    r = rng or secure_rng()
    current = int(now if now is not None else datetime.now().timestamp())
    return current - r.randrange(_MAX_OFFSET_MS)
