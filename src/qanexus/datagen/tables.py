"""Static lookup tables shared by the generators.

``PHONE_PATTERNS`` maps ISO 3166 alpha-2 codes to regex-style templates made
only of literal characters and ``\\d`` / ``\\d{n}`` digit markers, so every
template can be both expanded into a number and compiled to validate it.
"""

from __future__ import annotations

from enum import Enum

from qanexus.config import load_defaults

__all__ = [
    "MonthAbbreviation",
    "SupportedDateFormat",
    "PHONE_PATTERNS",
    "ALPHA_NUM",
    "DEFAULT_DOMAIN",
    "DEFAULT_STRING_LENGTH",
    "DEFAULT_EMAIL_USERNAME_LENGTH",
    "DEFAULT_PHONE_COUNTRY",
    "DEFAULT_PHONE_MAX_ATTEMPTS",
    "DEFAULT_YEAR_MIN",
    "DEFAULT_YEAR_MAX",
]

# Keyword defaults for callers without a configuration; owned by defaults.yml.
_SETTINGS = load_defaults().generator

ALPHA_NUM: str = _SETTINGS.alphabet
DEFAULT_DOMAIN: str = _SETTINGS.email_domain
DEFAULT_STRING_LENGTH: int = _SETTINGS.string_length
DEFAULT_EMAIL_USERNAME_LENGTH: int = _SETTINGS.email_username_length
DEFAULT_PHONE_COUNTRY: str = _SETTINGS.phone_country
DEFAULT_PHONE_MAX_ATTEMPTS: int = _SETTINGS.phone_max_attempts
DEFAULT_YEAR_MIN: int = _SETTINGS.year_min
DEFAULT_YEAR_MAX: int = _SETTINGS.year_max


class MonthAbbreviation(Enum):
    """Three-letter month names; definition order is calendar order."""

    JAN = "Jan"
    FEB = "Feb"
    MAR = "Mar"
    APR = "Apr"
    MAY = "May"
    JUN = "Jun"
    JUL = "Jul"
    AUG = "Aug"
    SEP = "Sep"
    OCT = "Oct"
    NOV = "Nov"
    DEC = "Dec"

    @property
    def number(self) -> int:
        """Return the 1-based month number."""

        return list(MonthAbbreviation).index(self) + 1


class SupportedDateFormat(Enum):
    """Date layouts understood by :func:`qanexus.datagen.date_rules.random_date`."""

    YYYY_MM_DD = "yyyy-MM-dd"
    YYYY_MM_DD_SLASH = "yyyy/MM/dd"
    YYYY_MMM_DD = "yyyy-MMM-dd"
    YYYY_MMM_DD_SLASH = "yyyy/MMM/dd"
    DD_MM_YYYY = "dd-MM-yyyy"
    DD_MMM_YYYY = "dd-MMM-yyyy"
    DD_MMM_YYYY_SLASH = "dd/MMM/yyyy"


PHONE_PATTERNS: dict[str, str] = {
    "AE": r"\+971 \d{2} \d{3} \d{4}",
    "AU": r"\+61 \d \d{4} \d{4}",
    "BR": r"\+55 \d{2} \d{5}-\d{4}",
    "CA": r"\+1 \d{3}-\d{3}-\d{4}",
    "CN": r"\+86 \d{3} \d{4} \d{4}",
    "DE": r"\+49 \d{3} \d{8}",
    "EG": r"\+20 \d{3} \d{3} \d{4}",
    "ES": r"\+34 \d{3} \d{3} \d{3}",
    "FR": r"\+33 \d \d{2} \d{2} \d{2} \d{2}",
    "GB": r"\+44 \d{4} \d{6}",
    "IN": r"\+91 \d{5} \d{5}",
    "IT": r"\+39 \d{3} \d{7}",
    "JP": r"\+81 \d{2}-\d{4}-\d{4}",
    "LB": r"\+961 \d{2} \d{3} \d{3}",
    "MX": r"\+52 \d{2} \d{4} \d{4}",
    "NL": r"\+31 \d{2} \d{3} \d{4}",
    "SA": r"\+966 \d{2} \d{3} \d{4}",
    "US": r"\(\d{3}\) \d{3}-\d{4}",
}
