"""Configured facade over the generator rule modules.

:class:`DataGenerator` binds a :class:`~qanexus.config.ConfigModel` and a
random source to the stateless helpers in the ``*_rules`` modules so callers
get configured defaults (string length, email domain, phone country, year
range) without threading them through every call.

Random source: when ``rng`` is omitted and the configuration carries no seed,
each call draws from a fresh :class:`random.SystemRandom`.  A configured seed
or an injected ``rng`` makes the whole generator reproducible.
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import TypeVar

from qanexus.config import ConfigModel, load_config

from ..models import ComplexNumber
from . import date_rules, identifier_rules, network_rules, number_rules, phone_rules, text_rules
from .seed import get_secret_bytes, rng_for, secure_rng
from .tables import SupportedDateFormat

T = TypeVar("T")


class DataGenerator:
    """Generate randomized test data using configured defaults."""

    def __init__(
        self,
        cfg: ConfigModel | None = None,
        *,
        rng: random.Random | None = None,
    ) -> None:
        """Initialize the generator.

        Parameters
        ----------
        cfg:
            Configuration supplying defaults; :func:`load_config` when omitted.
        rng:
            Optional random source shared by every call.  Without it, a
            configured seed yields one reproducible stream, otherwise each
            call uses OS entropy.
        """

        self.cfg: ConfigModel = cfg if cfg is not None else load_config()
        if rng is None and get_secret_bytes(self.cfg):
            rng = rng_for(self.cfg, "qanexus")
        self._rng: random.Random | None = rng

    def rng(self) -> random.Random:
        """Return the random source for the next call."""

        return self._rng if self._rng is not None else secure_rng()

    # -- Text -------------------------------------------------------------

    def string(self, length: int | None = None) -> str:
        settings = self.cfg.generator
        return text_rules.generate_string(
            settings.string_length if length is None else length,
            rng=self.rng(),
            alphabet=settings.alphabet,
        )

    def email(self, username_length: int | None = None, domain: str | None = None) -> str:
        settings = self.cfg.generator
        return text_rules.generate_email(
            settings.email_username_length if username_length is None else username_length,
            settings.email_domain if domain is None else domain,
            rng=self.rng(),
            alphabet=settings.alphabet,
        )

    def hex(self, length: int) -> str:
        return text_rules.generate_hex(length, rng=self.rng())

    def hex_color(self) -> str:
        return text_rules.generate_hex_color(rng=self.rng())

    def uuid(self) -> str:
        return identifier_rules.generate_uuid(rng=self.rng())

    # -- Phone and dates --------------------------------------------------

    def phone_number(self, country_code: str | None = None) -> str:
        settings = self.cfg.generator
        return phone_rules.generate_phone_number(
            settings.phone_country if country_code is None else country_code,
            rng=self.rng(),
            max_attempts=settings.phone_max_attempts,
        )

    def date(self, fmt: SupportedDateFormat | str | None = None) -> str:
        """Return a random date rendered with ``fmt`` (default ``yyyy-MM-dd``)."""

        settings = self.cfg.generator
        return date_rules.random_date(
            fmt, rng=self.rng(), year_min=settings.year_min, year_max=settings.year_max
        )

    def today(self) -> str:
        """Return today's date as ``yyyy-MM-dd``."""

        return date_rules.today_date()

    def time(self) -> str:
        return date_rules.generate_time(rng=self.rng())

    def timestamp(self) -> str:
        return date_rules.generate_timestamp(rng=self.rng())

    def unix_timestamp(self) -> int:
        return date_rules.generate_unix_timestamp(rng=self.rng())

    # -- Identifiers ------------------------------------------------------

    def ssn(self) -> str:
        return identifier_rules.generate_ssn(rng=self.rng())

    def passport_number(self) -> str:
        return identifier_rules.generate_passport_number(rng=self.rng())

    def credit_card_number(self) -> str:
        return identifier_rules.generate_credit_card_number(rng=self.rng())

    def bank_account_number(self) -> str:
        return identifier_rules.generate_bank_account_number(rng=self.rng())

    def iban(self, country: str | None = None) -> str:
        return identifier_rules.generate_iban(
            self.cfg.generator.iban_country if country is None else country, rng=self.rng()
        )

    # -- Network ----------------------------------------------------------

    def ip_address(self) -> str:
        return network_rules.generate_ip_address(rng=self.rng())

    def mac_address(self) -> str:
        return network_rules.generate_mac_address(rng=self.rng())

    # -- Numbers ----------------------------------------------------------

    def boolean(self) -> bool:
        return number_rules.generate_boolean(rng=self.rng())

    def binary_data(self, length: int) -> bytes:
        return number_rules.generate_binary_data(length, rng=self.rng())

    def byte(self) -> int:
        return number_rules.generate_byte(rng=self.rng())

    def integer(self, min_value: int, max_value: int) -> int:
        return number_rules.generate_int(min_value, max_value, rng=self.rng())

    def double(self, min_value: float, max_value: float) -> float:
        return number_rules.generate_double(min_value, max_value, rng=self.rng())

    def long(self, min_value: int, max_value: int) -> int:
        return number_rules.generate_long(min_value, max_value, rng=self.rng())

    def short(self, min_value: int, max_value: int) -> int:
        return number_rules.generate_short(min_value, max_value, rng=self.rng())

    def char(self, min_char: str, max_char: str) -> str:
        return number_rules.generate_char(min_char, max_char, rng=self.rng())

    def gaussian(self, mean: float, standard_deviation: float) -> float:
        return number_rules.generate_gaussian(mean, standard_deviation, rng=self.rng())

    def custom_distribution(self, probabilities: Sequence[float]) -> int:
        return number_rules.generate_random_with_custom_distribution(
            probabilities, rng=self.rng()
        )

    def prime(self, min_value: int, max_value: int) -> int:
        return number_rules.generate_random_prime(min_value, max_value, rng=self.rng())

    def percentage(self) -> float:
        return number_rules.generate_random_percentage(rng=self.rng())

    def from_set(self, values: Sequence[T]) -> T:
        return number_rules.generate_random_from_set(values, rng=self.rng())

    def even(self, min_value: int, max_value: int) -> int:
        return number_rules.generate_random_even(min_value, max_value, rng=self.rng())

    def odd(self, min_value: int, max_value: int) -> int:
        return number_rules.generate_random_odd(min_value, max_value, rng=self.rng())

    def unique_sequence(self, min_value: int, max_value: int, length: int) -> list[int]:
        return number_rules.generate_unique_random_sequence(
            min_value, max_value, length, rng=self.rng()
        )

    def exponential(self, rate: float) -> float:
        return number_rules.generate_random_exponential(rate, rng=self.rng())

    def complex_number(
        self, real_min: float, real_max: float, imaginary_min: float, imaginary_max: float
    ) -> ComplexNumber:
        return number_rules.generate_random_complex_number(
            real_min, real_max, imaginary_min, imaginary_max, rng=self.rng()
        )
