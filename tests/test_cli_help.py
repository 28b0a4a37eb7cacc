from __future__ import annotations

from typer.testing import CliRunner

from qanexus.cli import app


def test_global_help() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["--help"])
    assert "qanexus generate KIND" in result.stdout
    assert "generate" in result.stdout
    assert "countries" in result.stdout


def test_generate_help() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["generate", "--help"])
    assert "--count" in result.stdout
    assert "--format" in result.stdout
    assert "--country" in result.stdout
    assert "--seed" in result.stdout
    assert "--config" in result.stdout


def test_listing_commands() -> None:
    runner = CliRunner()
    kinds = runner.invoke(app, ["kinds"])
    assert kinds.exit_code == 0
    assert "credit-card" in kinds.stdout.split()
    formats = runner.invoke(app, ["formats"])
    assert "DD_MMM_YYYY\tdd-MMM-yyyy" in formats.stdout
    countries = runner.invoke(app, ["countries"])
    assert "LB" in countries.stdout.split()
    assert "US" in countries.stdout.split()
