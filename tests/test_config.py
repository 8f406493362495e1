"""Driver settings loaded from the environment."""

import pytest
from pydantic import ValidationError
from twolayerdh.common.config import ExchangeSettings, load_settings
from twolayerdh.common.errors import InvalidParameterError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("TWOLAYERDH_PRIME", "TWOLAYERDH_MODE", "TWOLAYERDH_SEED"):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = load_settings()
    assert settings.prime == 23
    assert settings.mode == "manual"
    assert settings.seed is None


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("TWOLAYERDH_PRIME", "170141183460469231731687303715884105727")
    monkeypatch.setenv("TWOLAYERDH_MODE", "auto mode enabled 121m")
    monkeypatch.setenv("TWOLAYERDH_SEED", "17")
    settings = load_settings()
    assert settings.prime == 2**127 - 1
    assert settings.mode == "auto mode enabled 121m"
    assert settings.seed == 17


def test_bad_prime_in_environment(monkeypatch):
    monkeypatch.setenv("TWOLAYERDH_PRIME", "twenty-three")
    with pytest.raises(InvalidParameterError):
        load_settings()


@pytest.mark.parametrize("seed", ["x", "-4", "1.5"])
def test_bad_seed_in_environment(monkeypatch, seed):
    monkeypatch.setenv("TWOLAYERDH_SEED", seed)
    with pytest.raises(InvalidParameterError):
        load_settings()


def test_prime_below_two_rejected():
    with pytest.raises(ValidationError):
        ExchangeSettings(prime=1)
