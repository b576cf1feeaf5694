"""Shared-secret generation and text encodings (Base32, hex)."""

from __future__ import annotations

import base64
import binascii
import re
import secrets
from enum import IntEnum

from totpkit.errors import InvalidEncoding, RandomSourceUnavailable

_HEX_RE = re.compile(r"[0-9a-fA-F]+")


class SecretSize(IntEnum):
    DEFAULT = 20  # HMAC-SHA1 block output, what authenticator apps expect
    MEDIUM = 32
    LARGE = 64


def generate(size: int = SecretSize.DEFAULT) -> bytes:
    """Return ``size`` bytes from the OS CSPRNG."""
    if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
        raise ValueError(f"Secret size must be a positive integer, got {size!r}")
    try:
        return secrets.token_bytes(int(size))
    except (NotImplementedError, OSError) as e:
        raise RandomSourceUnavailable("Secure random source is not available") from e


def encode_base32(secret: bytes) -> str:
    """RFC 4648 Base32, uppercase, without ``=`` padding."""
    return base64.b32encode(secret).decode("ascii").rstrip("=")


def decode_base32(text: str) -> bytes:
    """Decode Base32 as typed by a person or shown by an authenticator app.

    Case, embedded spaces and missing padding are tolerated.
    """
    if not isinstance(text, str):
        raise InvalidEncoding(f"Base32 secret must be text, got {type(text).__name__}")
    cleaned = "".join(text.split()).upper().rstrip("=")
    if not cleaned:
        raise InvalidEncoding("Empty Base32 secret")
    padded = cleaned + "=" * (-len(cleaned) % 8)
    try:
        secret = base64.b32decode(padded)
    except (binascii.Error, ValueError) as e:
        raise InvalidEncoding(f"Invalid Base32 secret: {e}") from None
    if not secret:
        raise InvalidEncoding("Base32 secret decodes to zero bytes")
    return secret


def encode_hex(secret: bytes) -> str:
    return secret.hex()


def decode_hex(text: str) -> bytes:
    if not isinstance(text, str):
        raise InvalidEncoding(f"Hex secret must be text, got {type(text).__name__}")
    cleaned = text.strip()
    if not cleaned:
        raise InvalidEncoding("Empty hex secret")
    if len(cleaned) % 2:
        raise InvalidEncoding(f"Hex secret has odd length ({len(cleaned)})")
    if not _HEX_RE.fullmatch(cleaned):
        raise InvalidEncoding("Hex secret contains non-hex characters")
    return bytes.fromhex(cleaned)
