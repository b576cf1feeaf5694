"""Exceptions raised by totpkit."""

from __future__ import annotations


class TotpError(Exception):
    """Base class for all totpkit errors."""


class InvalidConfig(TotpError):
    """Bad TOTP parameters: digits outside 1-8, a non-positive step, or an unknown algorithm."""


class InvalidEncoding(TotpError, ValueError):
    """Secret text that is not valid Base32 or hex."""


class RandomSourceUnavailable(TotpError):
    """The OS secure random generator could not be read."""
