"""Configuration loading utilities.

Precedence of configuration sources:
    1. Package defaults (``defaults.yml``)
    2. Optional user-provided YAML passed to :func:`load_config`
    3. Environment variables: the seed named by ``seed.secret_env`` and
       ``NO_COLOR`` for assertion messages
"""

from .schema import ConfigModel, load_config, load_defaults

__all__ = ["ConfigModel", "load_config", "load_defaults"]
