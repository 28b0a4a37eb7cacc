"""Random network addresses."""

from __future__ import annotations

import random

from .seed import secure_rng

__all__ = ["generate_ip_address", "generate_mac_address"]


def generate_ip_address(*, rng: random.Random | None = None) -> str:
    """Return a dotted IPv4 address; any octet value in ``[0, 255]`` may occur."""

    r = rng or secure_rng()
    return ".".join(str(r.randrange(256)) for _ in range(4))


def generate_mac_address(*, rng: random.Random | None = None) -> str:
    """Return six colon-separated uppercase hex groups."""

    r = rng or secure_rng()
    return ":".join(f"{r.randrange(256):02X}" for _ in range(6))
