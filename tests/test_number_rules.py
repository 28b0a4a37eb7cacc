from __future__ import annotations

import logging
import random

import pytest

from qanexus.datagen import (
    generate_binary_data,
    generate_boolean,
    generate_byte,
    generate_char,
    generate_double,
    generate_gaussian,
    generate_int,
    generate_long,
    generate_random_complex_number,
    generate_random_even,
    generate_random_exponential,
    generate_random_from_set,
    generate_random_odd,
    generate_random_percentage,
    generate_random_prime,
    generate_random_with_custom_distribution,
    generate_short,
    generate_unique_random_sequence,
    is_prime,
    seeded_rng,
)
from qanexus.models import ComplexNumber
from qanexus.utils.errors import UsageError


def test_unique_sequence_is_distinct_and_in_range() -> None:
    seq = generate_unique_random_sequence(5, 15, 11)
    assert len(seq) == 11
    assert len(set(seq)) == 11
    assert all(5 <= n <= 15 for n in seq)


def test_unique_sequence_too_long() -> None:
    with pytest.raises(UsageError, match="exceeds the range size"):
        generate_unique_random_sequence(1, 5, 6)


def test_int_bounds_inclusive() -> None:
    rng = seeded_rng("ints")
    values = {generate_int(1, 3, rng=rng) for _ in range(200)}
    assert values == {1, 2, 3}
    assert generate_int(7, 7) == 7


def test_inverted_range_is_usage_error() -> None:
    with pytest.raises(UsageError):
        generate_int(5, 1)
    with pytest.raises(UsageError):
        generate_double(1.0, 0.0)


def test_floating_ranges() -> None:
    rng = seeded_rng("floats")
    for _ in range(100):
        assert 1.5 <= generate_double(1.5, 2.5, rng=rng) < 2.5
        assert 0.0 <= generate_random_percentage(rng=rng) < 100.0
    assert 10 <= generate_long(10, 20) < 20
    assert generate_long(4, 4) == 4


def test_fixed_width_values() -> None:
    rng = seeded_rng("widths")
    for _ in range(100):
        assert -128 <= generate_byte(rng=rng) <= 127
        assert -5 <= generate_short(-5, 5, rng=rng) <= 5
        assert "a" <= generate_char("a", "f", rng=rng) <= "f"
    with pytest.raises(UsageError):
        generate_short(0, 40_000)
    with pytest.raises(UsageError):
        generate_char("ab", "z")


def test_binary_data_and_boolean() -> None:
    data = generate_binary_data(32)
    assert isinstance(data, bytes)
    assert len(data) == 32
    assert generate_binary_data(0) == b""
    with pytest.raises(UsageError):
        generate_binary_data(-1)
    assert isinstance(generate_boolean(), bool)


def test_is_prime() -> None:
    assert [n for n in range(20) if is_prime(n)] == [2, 3, 5, 7, 11, 13, 17, 19]


def test_random_prime() -> None:
    rng = seeded_rng("primes")
    for _ in range(50):
        assert is_prime(generate_random_prime(10, 50, rng=rng))
    assert generate_random_prime(24, 29) == 29
    with pytest.raises(UsageError, match="no prime"):
        generate_random_prime(24, 28)


def test_even_and_odd() -> None:
    rng = seeded_rng("parity")
    for _ in range(50):
        assert generate_random_even(-7, 7, rng=rng) % 2 == 0
        assert generate_random_odd(-7, 7, rng=rng) % 2 == 1
    assert generate_random_even(3, 4) == 4
    assert generate_random_odd(-3, -2) == -3
    with pytest.raises(UsageError):
        generate_random_odd(2, 2)
    with pytest.raises(UsageError):
        generate_random_even(3, 3)


def test_custom_distribution() -> None:
    rng = seeded_rng("dist")
    draws = {generate_random_with_custom_distribution([0.0, 1.0, 0.0], rng=rng) for _ in range(50)}
    assert draws == {1}
    assert generate_random_with_custom_distribution([0.0, 0.0]) == 1
    with pytest.raises(UsageError):
        generate_random_with_custom_distribution([])


def test_from_set() -> None:
    assert generate_random_from_set([4, 8, 15]) in {4, 8, 15}
    with pytest.raises(UsageError):
        generate_random_from_set([])


def test_exponential_and_gaussian() -> None:
    rng = seeded_rng("exp")
    samples = [generate_random_exponential(2.0, rng=rng) for _ in range(2000)]
    assert all(s >= 0 for s in samples)
    assert 0.4 < sum(samples) / len(samples) < 0.6
    with pytest.raises(UsageError):
        generate_random_exponential(0)
    gauss = [generate_gaussian(10.0, 0.5, rng=rng) for _ in range(2000)]
    assert 9.9 < sum(gauss) / len(gauss) < 10.1


def test_complex_number() -> None:
    value = generate_random_complex_number(1.0, 2.0, -3.0, -2.0)
    assert isinstance(value, ComplexNumber)
    assert 1.0 <= value.real < 2.0
    assert -3.0 <= value.imaginary < -2.0
    assert str(ComplexNumber(1.5, -2.25)) == "1.50 + -2.25i"
    assert complex(ComplexNumber(1.0, 2.0)) == 1 + 2j


def test_random_prime_wide_range() -> None:
    rng = seeded_rng("wide")
    for _ in range(5):
        value = generate_random_prime(1, 2**31 - 1, rng=rng)
        assert is_prime(value)
        assert 2 <= value <= 2**31 - 1


def test_random_prime_wraps_to_low_end() -> None:
    class HighStart(random.Random):
        def randint(self, a: int, b: int) -> int:
            return b

    assert generate_random_prime(10, 16, rng=HighStart()) == 11


def test_usage_errors_are_logged(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="qanexus")
    with pytest.raises(UsageError):
        generate_random_even(3, 3)
    with pytest.raises(UsageError):
        generate_unique_random_sequence(1, 2, 3)
    with pytest.raises(UsageError):
        generate_binary_data(-1)
    messages = [rec.getMessage() for rec in caplog.records]
    assert any("no even candidate" in m for m in messages)
    assert any("sequence of 3 exceeds" in m for m in messages)
    assert any("rejected length -1" in m for m in messages)
