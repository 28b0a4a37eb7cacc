"""Random identifier-like numbers.

These generators produce values with the visible shape of real identifiers.
Credit card numbers carry a valid Luhn check digit and IBANs carry valid
ISO 13616 mod-97 check digits so that downstream validators accept them;
SSNs, passport and bank account numbers are plain digit strings.
"""

from __future__ import annotations

import random
import uuid

from ..utils.errors import UsageError
from ..utils.logging import get_logger
from .seed import secure_rng

__all__ = [
    "luhn_check_digit",
    "iban_check_digits",
    "generate_uuid",
    "generate_ssn",
    "generate_passport_number",
    "generate_credit_card_number",
    "generate_bank_account_number",
    "generate_iban",
]

logger = get_logger(__name__)


def _digits(r: random.Random, count: int) -> str:
    return "".join(str(r.randrange(10)) for _ in range(count))


# ---------------------------------------------------------------------------
# Checksums


def _luhn_checksum(num: str) -> int:
    total = 0
    reverse = list(map(int, num[::-1]))
    for idx, digit in enumerate(reverse):
        if idx % 2 == 1:
            doubled = digit * 2
            total += doubled - 9 if doubled > 9 else doubled
        else:
            total += digit
    return total % 10


def luhn_check_digit(prefix: str) -> int:
    """Return the digit that makes ``prefix`` + digit Luhn-valid."""

    return (10 - _luhn_checksum(prefix + "0")) % 10


def iban_check_digits(country: str, bban: str) -> str:
    """Return the two mod-97 check digits for ``country`` and ``bban``."""

    converted = bban + country + "00"
    num = ""
    for ch in converted:
        if ch.isdigit():
            num += ch
        else:
            num += str(ord(ch.upper()) - 55)
    remainder = 0
    for ch in num:
        remainder = (remainder * 10 + int(ch)) % 97
    return f"{98 - remainder:02d}"


# ---------------------------------------------------------------------------
# Generators


def generate_uuid(*, rng: random.Random | None = None) -> str:
    """Return a version 4 UUID whose random bits come from ``rng``."""

    r = rng or secure_rng()
    return str(uuid.UUID(int=r.getrandbits(128), version=4))


def generate_ssn(*, rng: random.Random | None = None) -> str:
    """Return an ``XXX-XX-XXXX`` social security number shape."""

    r = rng or secure_rng()
    return f"{r.randrange(1000):03d}-{r.randrange(100):02d}-{r.randrange(10000):04d}"


def generate_passport_number(*, rng: random.Random | None = None) -> str:
    return _digits(rng or secure_rng(), 9)


def generate_credit_card_number(*, rng: random.Random | None = None) -> str:
    """Return a 16-digit number whose last digit is the Luhn check digit."""

    body = _digits(rng or secure_rng(), 15)
    return body + str(luhn_check_digit(body))


def generate_bank_account_number(*, rng: random.Random | None = None) -> str:
    return _digits(rng or secure_rng(), 12)


def generate_iban(
    country: str = "DE", *, rng: random.Random | None = None, bban_length: int = 18
) -> str:
    """Return an IBAN for ``country`` with a numeric BBAN and valid checksum.

    The default ``DE`` layout is 22 characters: country, two check digits and
    an 18 digit BBAN.
    """

    if len(country) != 2 or not country.isalpha():
        logger.debug("rejected IBAN country %r", country)
        raise UsageError(f"Invalid IBAN country code: {country}")
    if bban_length < 1:
        logger.debug("rejected BBAN length %s", bban_length)
        raise UsageError("bban_length must be positive")
    country = country.upper()
    bban = _digits(rng or secure_rng(), bban_length)
    return country + iban_check_digits(country, bban) + bban
