"""Random source construction for the data generators.

By default every generator call draws from :class:`random.SystemRandom`, which
reads the operating system's entropy pool and cannot be seeded.  Tests and
fixtures that need reproducible values inject a :class:`random.Random`
obtained from :func:`seeded_rng` instead.

Seeds are canonicalized and hashed with SHA256 under a fixed namespace so the
same seed text always yields the same stream, independent of the Python
version's string hashing.  When a secret seed is configured the digest is
keyed with HMAC-SHA256.
"""

from __future__ import annotations

import hashlib
import hmac
import random
import re
import unicodedata
from typing import Final

from qanexus.config import ConfigModel

_NS_RNG: Final = b"qanexus/v1/rng"


def canonicalize_key(key: str) -> str:
    """Normalize a seed key for hashing.

    The normalization steps are:

    - strip leading/trailing whitespace
    - collapse internal whitespace runs to a single space
    - lowercase
    - NFC normalize
    """

    normalized = unicodedata.normalize("NFC", key.strip())
    normalized = re.sub(r"\s+", " ", normalized)
    return normalized.lower()


def secure_rng() -> random.Random:
    """Return a fresh, unseedable RNG backed by OS entropy."""

    return random.SystemRandom()


def seeded_rng(key: str, *, secret: bytes = b"") -> random.Random:
    """Derive a reproducible RNG from ``key`` and an optional ``secret``."""

    data = _NS_RNG + canonicalize_key(key).encode("utf-8")
    if secret:
        digest = hmac.new(secret, data, hashlib.sha256).digest()
    else:
        digest = hashlib.sha256(data).digest()
    return random.Random(int.from_bytes(digest, "big"))


def get_secret_bytes(cfg: ConfigModel) -> bytes:
    """Return the configured seed as bytes, or ``b""`` when unset."""

    secret = cfg.seed.secret
    if secret is None:
        return b""
    return secret.get_secret_value().encode("utf-8")


def rng_for(cfg: ConfigModel, key: str = "default") -> random.Random:
    """Return the RNG implied by ``cfg``.

    With a configured seed the stream is reproducible for a given ``key``;
    without one a :func:`secure_rng` is returned and ``key`` is ignored.
    """

    secret = get_secret_bytes(cfg)
    if secret:
        return seeded_rng(key, secret=secret)
    return secure_rng()


__all__ = [
    "canonicalize_key",
    "secure_rng",
    "seeded_rng",
    "get_secret_bytes",
    "rng_for",
]
