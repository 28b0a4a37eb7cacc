"""Typed configuration schema and loader for the qanexus package."""

from __future__ import annotations

import os
from functools import lru_cache
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, SecretStr, conint, model_validator

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class GeneratorSettings(BaseModel):
    """Defaults used by the data generators when a caller omits an argument."""

    alphabet: str = Field(min_length=1)
    string_length: conint(ge=0)
    email_username_length: conint(ge=0)
    email_domain: str
    phone_country: str = Field(min_length=2, max_length=2)
    phone_max_attempts: conint(ge=1)
    year_min: conint(ge=1000, le=9999)
    year_max: conint(ge=1000, le=9999)
    iban_country: str = Field(pattern=r"^[A-Z]{2}$")

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def _check_year_range(self) -> "GeneratorSettings":
        if self.year_min > self.year_max:
            raise ValueError("year_min must not exceed year_max")
        return self


class AssertionSettings(BaseModel):
    """Rendering options for assertion failures."""

    color: bool

    model_config = ConfigDict(extra="forbid")


class SeedSettings(BaseModel):
    """Optional seed making generator output reproducible."""

    secret_env: str
    secret: SecretStr | None = None

    model_config = ConfigDict(extra="forbid")


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)
    generator: GeneratorSettings
    assertions: AssertionSettings
    seed: SeedSettings

    model_config = ConfigDict(extra="forbid")


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def _read_defaults() -> dict[str, Any]:
    with (
        importlib_resources.files("qanexus.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        return yaml.safe_load(f) or {}


@lru_cache(maxsize=1)
def load_defaults() -> ConfigModel:
    """Return the validated package defaults, ignoring user files and environment.

    Generator functions called without a configuration take their keyword
    defaults from here.  Callers must not mutate the returned model.
    """

    return ConfigModel.model_validate(_read_defaults())


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ConfigModel:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML <
    environment variables.  ``NO_COLOR`` (any value) turns off ANSI colour in
    assertion messages.
    """

    defaults = _read_defaults()

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        merged = deep_merge_dicts(defaults, overrides)
    else:
        merged = defaults

    cfg = ConfigModel.model_validate(merged)

    environ = env if env is not None else os.environ
    secret_env = cfg.seed.secret_env
    if secret_env in environ:
        cfg.seed.secret = SecretStr(environ[secret_env])
    if "NO_COLOR" in environ:
        cfg.assertions.color = False

    return cfg


__all__ = [
    "ConfigModel",
    "GeneratorSettings",
    "AssertionSettings",
    "SeedSettings",
    "deep_merge_dicts",
    "load_config",
    "load_defaults",
]
