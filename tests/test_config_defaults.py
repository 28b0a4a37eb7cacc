import pytest

from qanexus.config import load_config, load_defaults
from qanexus.datagen import tables
from qanexus.datagen.date_rules import YEAR_MAX, YEAR_MIN
from qanexus.datagen.phone_rules import DEFAULT_MAX_ATTEMPTS


def test_default_values() -> None:
    cfg = load_config(env={})
    gen = cfg.generator
    assert cfg.schema_version == 1
    assert gen.string_length == 10
    assert gen.email_username_length == 10
    assert gen.email_domain == "@defaultDomain.com"
    assert gen.alphabet == "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789-"
    assert gen.phone_country == "US"
    assert gen.phone_max_attempts == 1000
    assert (gen.year_min, gen.year_max) == (1900, 1999)
    assert gen.iban_country == "DE"
    assert cfg.assertions.color is True
    assert cfg.seed.secret_env == "QANEXUS_SEED"
    assert cfg.seed.secret is None


def test_function_defaults_come_from_defaults_file() -> None:
    gen = load_defaults().generator
    assert tables.ALPHA_NUM == gen.alphabet
    assert tables.DEFAULT_DOMAIN == gen.email_domain
    assert tables.DEFAULT_STRING_LENGTH == gen.string_length
    assert tables.DEFAULT_EMAIL_USERNAME_LENGTH == gen.email_username_length
    assert tables.DEFAULT_PHONE_COUNTRY == gen.phone_country
    assert DEFAULT_MAX_ATTEMPTS == gen.phone_max_attempts
    assert (YEAR_MIN, YEAR_MAX) == (gen.year_min, gen.year_max)


def test_load_defaults_ignores_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NO_COLOR", "1")
    load_defaults.cache_clear()
    assert load_defaults().assertions.color is True
