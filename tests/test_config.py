"""Tests for environment-driven settings."""

from __future__ import annotations

import pytest

from totpkit.config import Settings
from totpkit.errors import InvalidConfig
from totpkit.models import Algorithm, TotpConfig


def test_settings_defaults(clean_settings):
    assert clean_settings.algorithm == "SHA1"
    assert clean_settings.step_seconds == 30
    assert clean_settings.digits == 6
    assert clean_settings.secret_size == 20
    assert clean_settings.host == "localhost"
    assert clean_settings.totp_config() == TotpConfig()


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("TOTP_ALGORITHM", "HmacSHA256")
    monkeypatch.setenv("TOTP_DIGITS", "8")
    monkeypatch.setenv("TOTP_STEP_SECONDS", "60")
    monkeypatch.setenv("TOTP_BACKWARD_STEPS", "2")
    s = Settings(_env_file=None)
    config = s.totp_config()
    assert config.algorithm == Algorithm.SHA256
    assert config.digits == 8
    assert config.step_seconds == 60
    assert config.backward_steps == 2


def test_settings_ignore_unprefixed_env(monkeypatch):
    monkeypatch.setenv("DIGITS", "8")
    assert Settings(_env_file=None).digits == 6


def test_settings_from_env_file(tmp_path):
    env = tmp_path / ".env"
    env.write_text("TOTP_DIGITS=7\nTOTP_HOST=auth.example.com\nUNRELATED=1\n")
    s = Settings(_env_file=env)
    assert s.digits == 7
    assert s.host == "auth.example.com"


@pytest.mark.parametrize("overrides", [{"digits": 9}, {"step_seconds": 0}, {"algorithm": "MD5"}])
def test_bad_settings_raise_invalid_config(overrides):
    s = Settings(_env_file=None, **overrides)
    with pytest.raises(InvalidConfig):
        s.totp_config()
