"""Pydantic models for TOTP parameters."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from totpkit.errors import InvalidConfig

MAX_DIGITS = 8  # truncation table covers 10^0 .. 10^8


class Algorithm(StrEnum):
    SHA1 = "SHA1"
    SHA256 = "SHA256"
    SHA512 = "SHA512"

    @property
    def hashlib_name(self) -> str:
        return self.value.lower()

    @classmethod
    def parse(cls, name: Any) -> Algorithm:
        """Accept ``SHA1``, ``sha-256``, ``HmacSHA512`` and similar spellings."""
        if isinstance(name, cls):
            return name
        if not isinstance(name, str):
            raise InvalidConfig(f"Algorithm name must be a string, got {type(name).__name__}")
        key = name.strip().upper().replace("-", "").replace("_", "")
        if key.startswith("HMAC"):
            key = key[len("HMAC"):]
        try:
            return cls(key)
        except ValueError:
            raise InvalidConfig(f"Unsupported algorithm: {name!r}") from None


class TotpConfig(BaseModel):
    """Immutable engine parameters (RFC 6238 defaults)."""

    model_config = ConfigDict(frozen=True)

    algorithm: Algorithm = Algorithm.SHA1
    step_seconds: int = 30
    digits: int = 6
    epoch_offset_seconds: int = 0  # T0
    backward_steps: int = 1

    @field_validator("algorithm", mode="before")
    @classmethod
    def _parse_algorithm(cls, value: Any) -> Algorithm:
        return Algorithm.parse(value)

    @model_validator(mode="after")
    def _check_ranges(self) -> TotpConfig:
        if not 1 <= self.digits <= MAX_DIGITS:
            raise InvalidConfig(f"digits must be between 1 and {MAX_DIGITS}, got {self.digits}")
        if self.step_seconds <= 0:
            raise InvalidConfig(f"step_seconds must be positive, got {self.step_seconds}")
        if self.backward_steps < 0:
            raise InvalidConfig(f"backward_steps must not be negative, got {self.backward_steps}")
        return self
