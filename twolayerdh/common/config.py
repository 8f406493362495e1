"""Environment-backed settings for the exchange driver."""

import os
from typing import Optional
from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator
from twolayerdh.common import bigint
from twolayerdh.crypto.modes import Mode


class ExchangeSettings(BaseModel):
    """Defaults used by the driver when no command-line value is given."""
    prime: int = Field(23, description="Round 2 modulus P")
    mode: str = Field(Mode.MANUAL.value, description="Mode identifier string")
    seed: Optional[int] = Field(None, description="Seed for reproducible auto-mode draws")

    @field_validator("prime")
    @classmethod
    def check_prime(cls, v: int) -> int:
        if v < 2:
            raise ValueError("prime must be at least 2")
        return v


def load_settings() -> ExchangeSettings:
    """Read settings from the environment, after loading any .env file."""
    load_dotenv()

    seed = os.getenv('TWOLAYERDH_SEED')
    return ExchangeSettings(
        prime=bigint.from_decimal(os.getenv('TWOLAYERDH_PRIME', '23')),
        mode=os.getenv('TWOLAYERDH_MODE', Mode.MANUAL.value),
        seed=bigint.from_decimal(seed) if seed else None
    )
