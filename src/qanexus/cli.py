"""Typer-based command line interface for the data generators.

``qanexus generate KIND`` prints one or more random values of the requested
kind; ``qanexus formats`` and ``qanexus countries`` list the accepted date
layouts and phone country codes.

Exit codes
----------
0 success
2 usage error (unknown kind, invalid arguments for a generator)
4 configuration error
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any, Optional

import typer
from pydantic import SecretStr, ValidationError

from .config import ConfigModel, load_config
from .datagen import DataGenerator, SupportedDateFormat
from .datagen.phone_rules import supported_countries
from .utils.errors import UsageError
from .utils.logging import configure as configure_logging

app = typer.Typer(
    name="qanexus",
    help="Random test data generators. Use 'qanexus generate KIND' to print values.",
)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> None:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _resolve_format(value: str | None) -> SupportedDateFormat | str | None:
    """Map a format name such as ``DD_MMM_YYYY`` to its member; keep raw layouts."""

    if value is None:
        return None
    try:
        return SupportedDateFormat[value.upper()]
    except KeyError:
        return value


Producer = Callable[[DataGenerator, dict[str, Any]], object]

_KINDS: dict[str, Producer] = {
    "string": lambda g, o: g.string(o["length"]),
    "email": lambda g, o: g.email(o["length"]),
    "phone": lambda g, o: g.phone_number(o["country"]),
    "date": lambda g, o: g.date(_resolve_format(o["format"])),
    "today": lambda g, o: g.today(),
    "time": lambda g, o: g.time(),
    "timestamp": lambda g, o: g.timestamp(),
    "unix-timestamp": lambda g, o: g.unix_timestamp(),
    "uuid": lambda g, o: g.uuid(),
    "ssn": lambda g, o: g.ssn(),
    "passport": lambda g, o: g.passport_number(),
    "credit-card": lambda g, o: g.credit_card_number(),
    "bank-account": lambda g, o: g.bank_account_number(),
    "iban": lambda g, o: g.iban(o["country"]),
    "boolean": lambda g, o: g.boolean(),
    "binary": lambda g, o: g.binary_data(16 if o["length"] is None else o["length"]).hex(),
    "ip": lambda g, o: g.ip_address(),
    "mac": lambda g, o: g.mac_address(),
    "hex": lambda g, o: g.hex(10 if o["length"] is None else o["length"]),
    "hex-color": lambda g, o: g.hex_color(),
    "percentage": lambda g, o: g.percentage(),
}


def _apply_seed(cfg: ConfigModel, seed: str | None) -> ConfigModel:
    """Return a copy of ``cfg`` seeded with ``seed`` when given."""

    if seed is None:
        return cfg
    new_cfg = cfg.model_copy(deep=True)
    new_cfg.seed.secret = SecretStr(seed)
    return new_cfg


@app.callback()
def main() -> None:
    """Entry point for the qanexus command group."""
    pass


@app.command()
def generate(  # noqa: PLR0913
    kind: str = typer.Argument(..., help="Kind of value, see 'qanexus kinds'"),  # noqa: B008
    count: int = typer.Option(1, "--count", "-n", min=1, help="Number of values"),  # noqa: B008
    fmt: Optional[str] = typer.Option(  # noqa: B008
        None, "--format", "-f", help="Date format name (e.g. DD_MMM_YYYY) or layout"
    ),
    country: Optional[str] = typer.Option(  # noqa: B008
        None, "--country", "-c", help="ISO country code for phone/iban"
    ),
    length: Optional[int] = typer.Option(  # noqa: B008
        None, "--length", "-l", min=0, help="Length for string/email/hex/binary"
    ),
    seed: Optional[str] = typer.Option(  # noqa: B008
        None, "--seed", help="Seed for reproducible output"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Log generator activity to stderr"
    ),
) -> None:
    """Print ``count`` random values of ``kind``, one per line."""

    configure_logging(verbose)
    producer = _KINDS.get(kind)
    if producer is None:
        _safe_exit(2, f"Unknown kind: {kind}")

    try:
        cfg = load_config(config_path)
    except (ValidationError, OSError, ValueError) as exc:
        _safe_exit(4, str(exc).splitlines()[0])

    gen = DataGenerator(_apply_seed(cfg, seed))
    opts: dict[str, Any] = {"format": fmt, "country": country, "length": length}
    try:
        for _ in range(count):
            typer.echo(str(producer(gen, opts)))
    except UsageError as exc:
        _safe_exit(2, str(exc))


@app.command()
def kinds() -> None:
    """List the value kinds accepted by ``generate``."""

    for name in sorted(_KINDS):
        typer.echo(name)


@app.command()
def formats() -> None:
    """List the named date formats."""

    for member in SupportedDateFormat:
        typer.echo(f"{member.name}\t{member.value}")


@app.command()
def countries() -> None:
    """List the country codes accepted for phone numbers."""

    for code in supported_countries():
        typer.echo(code)
