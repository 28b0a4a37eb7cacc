"""Random strings, emails and hexadecimal text."""

from __future__ import annotations

import random

from ..utils.errors import UsageError
from ..utils.logging import get_logger
from .seed import secure_rng
from .tables import (
    ALPHA_NUM,
    DEFAULT_DOMAIN,
    DEFAULT_EMAIL_USERNAME_LENGTH,
    DEFAULT_STRING_LENGTH,
)

__all__ = [
    "generate_string",
    "generate_email",
    "generate_hex",
    "generate_hex_color",
]

_HEX = "0123456789abcdef"

logger = get_logger(__name__)


def generate_string(
    length: int = DEFAULT_STRING_LENGTH,
    *,
    rng: random.Random | None = None,
    alphabet: str = ALPHA_NUM,
) -> str:
    """Return ``length`` characters drawn uniformly from ``alphabet``."""

    if length < 0:
        logger.debug("rejected string length %s", length)
        raise UsageError(f"length must be non-negative, got {length}")
    if not alphabet:
        logger.debug("rejected empty alphabet")
        raise UsageError("alphabet must not be empty")
    r = rng or secure_rng()
    return "".join(r.choice(alphabet) for _ in range(length))


def generate_email(
    username_length: int = DEFAULT_EMAIL_USERNAME_LENGTH,
    domain: str = DEFAULT_DOMAIN,
    *,
    rng: random.Random | None = None,
    alphabet: str = ALPHA_NUM,
) -> str:
    """Return a random username followed by ``domain``.

    ``domain`` is appended verbatim; an ``@`` is inserted when it lacks one.
    """

    if not domain.startswith("@"):
        domain = "@" + domain
    return generate_string(username_length, rng=rng, alphabet=alphabet) + domain


def generate_hex(length: int, *, rng: random.Random | None = None) -> str:
    """Return ``length`` lowercase hexadecimal digits."""

    return generate_string(length, rng=rng, alphabet=_HEX)


def generate_hex_color(*, rng: random.Random | None = None) -> str:
    """Return a ``#rrggbb`` colour code."""

    return "#" + generate_hex(6, rng=rng)
