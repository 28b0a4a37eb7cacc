from __future__ import annotations

import pytest

from qanexus.utils.errors import AssertionFailedError, UsageError, colorize


def test_colorize_wraps_in_red() -> None:
    assert colorize("boom") == "\x1b[31mboom\x1b[0m"


def test_assertion_failed_error_text() -> None:
    err = AssertionFailedError("Mismatch Expected: 1, but was: 2")
    assert isinstance(err, AssertionError)
    assert err.message == "Mismatch Expected: 1, but was: 2"
    assert str(err) == colorize(err.message)
    plain = AssertionFailedError("plain", color=False)
    assert str(plain) == "plain"


def test_usage_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        raise UsageError("bad range")
