"""Pydantic models for the public values exchanged between peers."""

from pydantic import BaseModel, Field, field_validator
from typing import Literal
from twolayerdh.common import bigint


class PublicValue(BaseModel):
    """Base model for a public value carried as a decimal string."""
    version: Literal["2.0"] = "2.0"
    value: str = Field(..., description="Public value as a base-10 string")

    @field_validator("value")
    @classmethod
    def check_decimal(cls, v: str) -> str:
        return bigint.to_decimal(bigint.from_decimal(v))

    @classmethod
    def from_int(cls, n: int) -> "PublicValue":
        """Build a message from an integer public value."""
        return cls(value=bigint.to_decimal(n))

    def as_int(self) -> int:
        """Return the carried public value as an integer."""
        return bigint.from_decimal(self.value)


class Round1Public(PublicValue):
    """Round 1 public value G^a1 mod P1."""
    type: Literal["round1_public"] = "round1_public"


class Round2Public(PublicValue):
    """Round 2 public value base^a2 mod P."""
    type: Literal["round2_public"] = "round2_public"
