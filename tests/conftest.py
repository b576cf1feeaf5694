"""Shared fixtures."""

from __future__ import annotations

import pytest

from totpkit.config import Settings


@pytest.fixture
def rfc_secret() -> bytes:
    """HMAC-SHA1 seed used by the RFC 6238 / RFC 4226 test vectors."""
    return b"12345678901234567890"


@pytest.fixture
def clean_settings() -> Settings:
    """Settings with defaults only (no .env file)."""
    return Settings(_env_file=None)
