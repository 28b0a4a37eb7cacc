from __future__ import annotations

import importlib
import os
import re
from pathlib import Path

import pytest
from typer.testing import CliRunner

from qanexus.cli import app
from qanexus.datagen import PHONE_PATTERNS


def test_generate_count() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["generate", "ssn", "-n", "3"])
    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert len(lines) == 3
    assert all(re.fullmatch(r"\d{3}-\d{2}-\d{4}", line) for line in lines)


def test_generate_phone_for_country() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["generate", "phone", "--country", "FR"])
    assert result.exit_code == 0
    assert re.fullmatch(PHONE_PATTERNS["FR"], result.stdout.strip())


def test_generate_date_with_named_format() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["generate", "date", "-f", "dd_mm_yyyy"])
    assert result.exit_code == 0
    assert re.fullmatch(r"\d{2}-\d{2}-19\d{2}", result.stdout.strip())


def test_seed_makes_output_reproducible() -> None:
    runner = CliRunner()
    args = ["generate", "date", "-n", "5", "--seed", "fixture"]
    first = runner.invoke(app, args)
    second = runner.invoke(app, args)
    assert first.exit_code == 0
    assert first.stdout == second.stdout


def test_unknown_kind() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["generate", "zebra"])
    assert result.exit_code == 2
    assert "Unknown kind: zebra" in result.stderr


def test_invalid_country() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["generate", "phone", "--country", "ZZ"])
    assert result.exit_code == 2
    assert "Invalid country code" in result.stderr


def test_bad_config(tmp_path: Path) -> None:
    bad_cfg = tmp_path / "bad.yml"
    bad_cfg.write_text("unknown: true\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["generate", "uuid", "--config", str(bad_cfg)])
    assert result.exit_code == 4


def test_config_drives_defaults(tmp_path: Path) -> None:
    cfg = tmp_path / "cfg.yml"
    cfg.write_text("generator:\n  string_length: 3\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["generate", "string", "--config", str(cfg)])
    assert result.exit_code == 0
    assert len(result.stdout.strip()) == 3


def test_explicit_zero_length_is_kept() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["generate", "hex", "--length", "0", "-n", "2"])
    assert result.exit_code == 0
    assert result.stdout == "\n\n"
    result = runner.invoke(app, ["generate", "binary", "--length", "0"])
    assert result.stdout == "\n"


def test_importing_cli_leaves_color_environment_alone(monkeypatch: pytest.MonkeyPatch) -> None:
    import qanexus.cli

    monkeypatch.delenv("NO_COLOR", raising=False)
    importlib.reload(qanexus.cli)
    assert "NO_COLOR" not in os.environ
