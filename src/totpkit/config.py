"""Central configuration loaded from environment variables (``TOTP_*``) and ``.env``."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

from totpkit.models import TotpConfig
from totpkit.secret import SecretSize


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TOTP_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Engine
    algorithm: str = "SHA1"
    step_seconds: int = 30
    digits: int = 6
    epoch_offset_seconds: int = 0
    backward_steps: int = 1

    # Enrollment
    secret_size: int = SecretSize.DEFAULT
    host: str = "localhost"

    # Logging
    log_level: str = "INFO"

    def totp_config(self) -> TotpConfig:
        """Build the engine config; raises InvalidConfig on bad values."""
        return TotpConfig(
            algorithm=self.algorithm,
            step_seconds=self.step_seconds,
            digits=self.digits,
            epoch_offset_seconds=self.epoch_offset_seconds,
            backward_steps=self.backward_steps,
        )


settings = Settings()
