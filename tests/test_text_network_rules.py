from __future__ import annotations

import re

import pytest

from qanexus.datagen import (
    generate_email,
    generate_hex,
    generate_hex_color,
    generate_ip_address,
    generate_mac_address,
    generate_string,
)
from qanexus.datagen.tables import ALPHA_NUM
from qanexus.utils.errors import UsageError


def test_generate_string_defaults() -> None:
    value = generate_string()
    assert len(value) == 10
    assert set(value) <= set(ALPHA_NUM)
    assert generate_string(0) == ""
    assert set(generate_string(50, alphabet="xy")) <= {"x", "y"}
    with pytest.raises(UsageError):
        generate_string(-1)


def test_generate_email() -> None:
    email = generate_email(5, "@example.com")
    assert email.endswith("@example.com")
    assert len(email) - len("@example.com") == 5
    assert generate_email().endswith("@defaultDomain.com")
    assert generate_email(3, "example.org").endswith("@example.org")


def test_generate_hex() -> None:
    assert re.fullmatch(r"[0-9a-fA-F]{10}", generate_hex(10))
    assert re.fullmatch(r"#[0-9a-f]{6}", generate_hex_color())


def test_ip_address() -> None:
    parts = generate_ip_address().split(".")
    assert len(parts) == 4
    assert all(0 <= int(p) <= 255 for p in parts)


def test_mac_address() -> None:
    assert re.fullmatch(r"([0-9A-F]{2}:){5}[0-9A-F]{2}", generate_mac_address())
