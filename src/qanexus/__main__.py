"""Allow ``python -m qanexus``."""

from .cli import app

app()
