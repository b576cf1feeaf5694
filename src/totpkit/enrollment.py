"""Authenticator-app enrollment: otpauth:// URIs and code checks for an enrolled user.

The web layer keeps a ``(username, base32 secret)`` pair however it likes,
calls ``enroll`` once to create it and ``verify`` on each login.
"""

from __future__ import annotations

import logging
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict

from totpkit.config import settings
from totpkit.engine import TotpEngine
from totpkit.secret import decode_base32, encode_base32, generate

logger = logging.getLogger(__name__)

QR_CHART_URL = "https://chart.googleapis.com/chart?chs=200x200&chld=M%7C0&cht=qr&chl="


def provisioning_uri(username: str, host: str, secret: str) -> str:
    """The otpauth URI authenticator apps scan. Format is fixed; do not alter."""
    return f"otpauth://totp/{username}@{host}?secret={secret}"


def qr_url(username: str, host: str, secret: str) -> str:
    """Google Chart image URL rendering the provisioning URI as a QR code."""
    return QR_CHART_URL + quote(provisioning_uri(username, host, secret), safe="")


class Enrollment(BaseModel):
    """A user's enrolled shared secret, as stored by the caller."""

    model_config = ConfigDict(frozen=True)

    username: str
    host: str
    secret: str  # base32

    @property
    def uri(self) -> str:
        return provisioning_uri(self.username, self.host, self.secret)

    @property
    def qr_url(self) -> str:
        return qr_url(self.username, self.host, self.secret)


def enroll(username: str, host: str | None = None, size: int | None = None) -> Enrollment:
    """Create a fresh secret for ``username``."""
    host = settings.host if host is None else host
    if not username or not username.strip():
        raise ValueError("Username missing")
    if not host.strip():
        raise ValueError("Host missing")

    secret = encode_base32(generate(settings.secret_size if size is None else size))
    logger.info("Enrolled %s@%s", username, host)
    return Enrollment(username=username, host=host, secret=secret)


def verify(enrollment: Enrollment | str, code: str, engine: TotpEngine | None = None) -> bool:
    """Check ``code`` against an enrollment or a bare base32 secret.

    Raises InvalidEncoding if the stored secret is malformed; a wrong code is
    just False.
    """
    if isinstance(enrollment, Enrollment):
        secret_text, who = enrollment.secret, enrollment.username
    else:
        secret_text, who = enrollment, None

    secret = decode_base32(secret_text)
    if engine is None:
        engine = TotpEngine(settings.totp_config())

    valid = engine.validate(secret, code)
    if who:
        logger.info("TOTP check for %s: %s", who, "valid" if valid else "invalid")
    else:
        logger.debug("TOTP check: %s", "valid" if valid else "invalid")
    return valid
