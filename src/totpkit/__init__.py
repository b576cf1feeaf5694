"""totpkit: RFC 6238 time-based one-time passwords for authenticator apps."""

from totpkit.clock import Clock, FixedClock, system_clock
from totpkit.engine import TotpEngine
from totpkit.errors import InvalidConfig, InvalidEncoding, RandomSourceUnavailable, TotpError
from totpkit.models import Algorithm, TotpConfig
from totpkit.secret import SecretSize, decode_base32, decode_hex, encode_base32, encode_hex, generate

__version__ = "0.1.0"

__all__ = [
    "Algorithm",
    "Clock",
    "FixedClock",
    "InvalidConfig",
    "InvalidEncoding",
    "RandomSourceUnavailable",
    "SecretSize",
    "TotpConfig",
    "TotpEngine",
    "TotpError",
    "decode_base32",
    "decode_hex",
    "encode_base32",
    "encode_hex",
    "generate",
    "system_clock",
]
