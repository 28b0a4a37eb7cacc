"""Random numeric values and distributions.

Integer helpers mirror the fixed-width types test fixtures commonly need
(byte, short, long).  Range helpers validate their bounds and raise
:class:`~qanexus.utils.errors.UsageError` instead of looping forever when a
range cannot contain a qualifying value: the even and odd helpers pick directly
from the qualifying candidates and the prime helper scans from a random start.
"""

from __future__ import annotations

import itertools
import math
import random
from collections.abc import Sequence
from typing import TypeVar

from ..models import ComplexNumber
from ..utils.errors import UsageError
from ..utils.logging import get_logger
from .seed import secure_rng

__all__ = [
    "is_prime",
    "generate_boolean",
    "generate_int",
    "generate_float",
    "generate_double",
    "generate_long",
    "generate_short",
    "generate_byte",
    "generate_char",
    "generate_binary_data",
    "generate_byte_array",
    "generate_gaussian",
    "generate_random_with_custom_distribution",
    "generate_random_prime",
    "generate_random_percentage",
    "generate_random_from_set",
    "generate_random_even",
    "generate_random_odd",
    "generate_unique_random_sequence",
    "generate_random_exponential",
    "generate_random_complex_number",
]

T = TypeVar("T")

SHORT_MIN, SHORT_MAX = -(2**15), 2**15 - 1

logger = get_logger(__name__)


def _check_range(min_value: float, max_value: float) -> None:
    if min_value > max_value:
        logger.debug("rejected range [%s, %s]", min_value, max_value)
        raise UsageError(f"min ({min_value}) must not exceed max ({max_value})")


def _check_length(length: int) -> None:
    if length < 0:
        logger.debug("rejected length %s", length)
        raise UsageError(f"length must be non-negative, got {length}")


def is_prime(number: int) -> bool:
    if number <= 1:
        return False
    if number == 2:
        return True
    if number % 2 == 0:
        return False
    i = 3
    while i * i <= number:
        if number % i == 0:
            return False
        i += 2
    return True


def generate_boolean(*, rng: random.Random | None = None) -> bool:
    return (rng or secure_rng()).random() < 0.5


def generate_int(min_value: int, max_value: int, *, rng: random.Random | None = None) -> int:
    """Return an integer in ``[min_value, max_value]``."""

    _check_range(min_value, max_value)
    return (rng or secure_rng()).randint(min_value, max_value)


def generate_double(
    min_value: float, max_value: float, *, rng: random.Random | None = None
) -> float:
    """Return a float in ``[min_value, max_value)``."""

    _check_range(min_value, max_value)
    return min_value + (rng or secure_rng()).random() * (max_value - min_value)


generate_float = generate_double


def generate_long(min_value: int, max_value: int, *, rng: random.Random | None = None) -> int:
    """Return an integer in ``[min_value, max_value)``; ``min_value`` when equal."""

    _check_range(min_value, max_value)
    if min_value == max_value:
        return min_value
    return (rng or secure_rng()).randrange(min_value, max_value)


def generate_short(
    min_value: int = SHORT_MIN, max_value: int = SHORT_MAX, *, rng: random.Random | None = None
) -> int:
    """Return an integer in ``[min_value, max_value]`` within the 16-bit range."""

    if min_value < SHORT_MIN or max_value > SHORT_MAX:
        raise UsageError(f"short bounds must lie within [{SHORT_MIN}, {SHORT_MAX}]")
    return generate_int(min_value, max_value, rng=rng)


def generate_byte(*, rng: random.Random | None = None) -> int:
    """Return a signed byte value in ``[-128, 127]``."""

    return (rng or secure_rng()).randrange(256) - 128


def generate_char(min_char: str, max_char: str, *, rng: random.Random | None = None) -> str:
    """Return a character whose code point lies in ``[min_char, max_char]``."""

    if len(min_char) != 1 or len(max_char) != 1:
        raise UsageError("char bounds must be single characters")
    return chr(generate_int(ord(min_char), ord(max_char), rng=rng))


def generate_binary_data(length: int, *, rng: random.Random | None = None) -> bytes:
    _check_length(length)
    r = rng or secure_rng()
    return bytes(r.getrandbits(8) for _ in range(length))


generate_byte_array = generate_binary_data


def generate_gaussian(
    mean: float, standard_deviation: float, *, rng: random.Random | None = None
) -> float:
    return (rng or secure_rng()).gauss(mean, standard_deviation)


def generate_random_with_custom_distribution(
    probabilities: Sequence[float], *, rng: random.Random | None = None
) -> int:
    """Return an index drawn with the given per-index probabilities.

    The probabilities are accumulated in order; when they sum to less than one
    the remaining mass falls on the last index.
    """

    if not probabilities:
        raise UsageError("probabilities must not be empty")
    if any(p < 0 for p in probabilities):
        raise UsageError("probabilities must be non-negative")
    p = (rng or secure_rng()).random()
    cumulative = 0.0
    for idx, probability in enumerate(probabilities):
        cumulative += probability
        if p <= cumulative:
            return idx
    return len(probabilities) - 1


def _pick(candidates: Sequence[T], what: str, r: random.Random) -> T:
    if not candidates:
        logger.debug("no %s candidate in range", what)
        raise UsageError(f"range contains no {what} number")
    return r.choice(candidates)


def generate_random_prime(
    min_value: int, max_value: int, *, rng: random.Random | None = None
) -> int:
    """Return a prime in ``[min_value, max_value]``.

    Scans upward from a random starting point, wrapping around to the low end
    of the range.
    """

    _check_range(min_value, max_value)
    low = max(min_value, 2)
    if low <= max_value:
        start = (rng or secure_rng()).randint(low, max_value)
        for number in itertools.chain(range(start, max_value + 1), range(low, start)):
            if is_prime(number):
                return number
    logger.debug("no prime candidate in [%s, %s]", min_value, max_value)
    raise UsageError("range contains no prime number")


def generate_random_percentage(*, rng: random.Random | None = None) -> float:
    """Return a float in ``[0, 100)``."""

    return (rng or secure_rng()).random() * 100.0


def generate_random_from_set(values: Sequence[T], *, rng: random.Random | None = None) -> T:
    if not values:
        raise UsageError("cannot pick from an empty set")
    return (rng or secure_rng()).choice(values)


def generate_random_even(
    min_value: int, max_value: int, *, rng: random.Random | None = None
) -> int:
    _check_range(min_value, max_value)
    start = min_value if min_value % 2 == 0 else min_value + 1
    return _pick(range(start, max_value + 1, 2), "even", rng or secure_rng())


def generate_random_odd(
    min_value: int, max_value: int, *, rng: random.Random | None = None
) -> int:
    _check_range(min_value, max_value)
    start = min_value if min_value % 2 == 1 else min_value + 1
    return _pick(range(start, max_value + 1, 2), "odd", rng or secure_rng())


def generate_unique_random_sequence(
    min_value: int, max_value: int, length: int, *, rng: random.Random | None = None
) -> list[int]:
    """Return ``length`` distinct integers from ``[min_value, max_value]``."""

    _check_length(length)
    if length > max_value - min_value + 1:
        logger.debug("sequence of %d exceeds [%s, %s]", length, min_value, max_value)
        raise UsageError("Sequence length exceeds the range size.")
    return (rng or secure_rng()).sample(range(min_value, max_value + 1), length)


def generate_random_exponential(rate: float, *, rng: random.Random | None = None) -> float:
    """Return an exponentially distributed value with rate ``rate`` (lambda)."""

    if rate <= 0:
        raise UsageError(f"rate must be positive, got {rate}")
    return -math.log(1.0 - (rng or secure_rng()).random()) / rate


def generate_random_complex_number(
    real_min: float,
    real_max: float,
    imaginary_min: float,
    imaginary_max: float,
    *,
    rng: random.Random | None = None,
) -> ComplexNumber:
    r = rng or secure_rng()
    return ComplexNumber(
        real=generate_double(real_min, real_max, rng=r),
        imaginary=generate_double(imaginary_min, imaginary_max, rng=r),
    )
