from __future__ import annotations

import random

from pydantic import SecretStr

from qanexus.config import ConfigModel, load_config
from qanexus.datagen.seed import canonicalize_key, rng_for, secure_rng, seeded_rng


def cfg_with_secret(s: str) -> ConfigModel:
    cfg = load_config(env={})
    seed = cfg.seed.model_copy(update={"secret": SecretStr(s)})
    return cfg.model_copy(update={"seed": seed})


def test_seeded_rng_determinism() -> None:
    r1 = seeded_rng("Fixtures  A")
    r2 = seeded_rng("fixtures a")
    assert [r1.random() for _ in range(3)] == [r2.random() for _ in range(3)]


def test_secret_sensitivity() -> None:
    a = seeded_rng("key", secret=b"alpha").random()
    b = seeded_rng("key", secret=b"beta").random()
    assert a != b


def test_secure_rng_is_system_random() -> None:
    assert isinstance(secure_rng(), random.SystemRandom)


def test_rng_for_config() -> None:
    assert isinstance(rng_for(load_config(env={})), random.SystemRandom)
    cfg = cfg_with_secret("alpha")
    r1 = rng_for(cfg, "dates")
    r2 = rng_for(cfg, "dates")
    assert r1.random() == r2.random()


def test_canonicalize_key() -> None:
    assert canonicalize_key("  JOHN \t DOE ") == "john doe"
