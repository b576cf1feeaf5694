"""totpkit CLI: manual checks against an authenticator app.

Usage:
    python -m totpkit secret [--size N] [--hex]     # New random secret
    python -m totpkit code SECRET [--time T]        # Code for now (or T)
    python -m totpkit code SECRET --counter C       # Code for an explicit counter
    python -m totpkit verify SECRET CODE            # Exit 0 if valid, 1 if not
    python -m totpkit uri USERNAME HOST SECRET      # otpauth:// enrollment URI
    python -m totpkit counter [--time T]            # Current time step

Engine parameters come from TOTP_* environment variables (see totpkit.config).
"""

from __future__ import annotations

import argparse
import logging
import sys

from totpkit.clock import FixedClock
from totpkit.config import settings
from totpkit.engine import TotpEngine
from totpkit.enrollment import provisioning_uri, qr_url
from totpkit.errors import InvalidConfig
from totpkit.secret import decode_base32, decode_hex, encode_base32, encode_hex, generate

logger = logging.getLogger("totpkit")

EXIT_OK = 0
EXIT_INVALID_CODE = 1
EXIT_ERROR = 2


def _engine(args: argparse.Namespace) -> TotpEngine:
    clock = FixedClock(args.time) if getattr(args, "time", None) is not None else None
    return TotpEngine(settings.totp_config(), clock=clock)


def _secret(args: argparse.Namespace) -> bytes:
    return decode_hex(args.secret) if args.hex else decode_base32(args.secret)


def cmd_secret(args: argparse.Namespace) -> int:
    """Print a freshly generated secret."""
    raw = generate(settings.secret_size if args.size is None else args.size)
    print(encode_hex(raw) if args.hex else encode_base32(raw))
    return EXIT_OK


def cmd_code(args: argparse.Namespace) -> int:
    """Print the code for the current (or given) time or counter."""
    engine = _engine(args)
    secret = _secret(args)
    counter = args.counter if args.counter is not None else engine.current_counter()
    print(engine.generate_code(secret, counter))
    if args.counter is None:
        logger.debug("counter=%d, %.0fs remaining", counter, engine.seconds_remaining())
    return EXIT_OK


def cmd_verify(args: argparse.Namespace) -> int:
    """Validate a code against the backward window."""
    engine = _engine(args)
    counter = engine.matching_counter(_secret(args), args.code)
    if counter is None:
        print("invalid")
        return EXIT_INVALID_CODE
    print(f"valid (counter {counter})")
    return EXIT_OK


def cmd_uri(args: argparse.Namespace) -> int:
    """Print the otpauth:// URI (or QR image URL) for enrollment."""
    secret = args.secret
    decode_base32(secret)  # reject malformed secrets before printing
    if args.qr:
        print(qr_url(args.username, args.host, secret))
    else:
        print(provisioning_uri(args.username, args.host, secret))
    return EXIT_OK


def cmd_counter(args: argparse.Namespace) -> int:
    """Print the current time step and seconds until it rolls over."""
    engine = _engine(args)
    print(f"{engine.current_counter()} ({engine.seconds_remaining():.0f}s remaining)")
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="totpkit",
        description="RFC 6238 time-based one-time passwords",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", help="Command to run")

    # secret
    p_secret = sub.add_parser("secret", help="Generate a new shared secret")
    p_secret.add_argument("--size", type=int, help="Secret length in bytes")
    p_secret.add_argument("--hex", action="store_true", help="Print hex instead of Base32")

    # code
    p_code = sub.add_parser("code", help="Generate a code")
    p_code.add_argument("secret", help="Shared secret (Base32 unless --hex)")
    p_code.add_argument("--hex", action="store_true")
    p_code.add_argument("--time", type=float, help="Unix time to use instead of now")
    p_code.add_argument("--counter", type=int, help="Explicit counter (overrides --time)")

    # verify
    p_verify = sub.add_parser("verify", help="Validate a code")
    p_verify.add_argument("secret", help="Shared secret (Base32 unless --hex)")
    p_verify.add_argument("code")
    p_verify.add_argument("--hex", action="store_true")
    p_verify.add_argument("--time", type=float, help="Unix time to use instead of now")

    # uri
    p_uri = sub.add_parser("uri", help="Enrollment URI for an authenticator app")
    p_uri.add_argument("username")
    p_uri.add_argument("host")
    p_uri.add_argument("secret", help="Base32 shared secret")
    p_uri.add_argument("--qr", action="store_true", help="Print a QR image URL instead")

    # counter
    p_counter = sub.add_parser("counter", help="Show the current time step")
    p_counter.add_argument("--time", type=float, help="Unix time to use instead of now")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
    )

    if not args.command:
        parser.print_help()
        return EXIT_OK

    dispatch = {
        "secret": cmd_secret,
        "code": cmd_code,
        "verify": cmd_verify,
        "uri": cmd_uri,
        "counter": cmd_counter,
    }
    try:
        return dispatch[args.command](args)
    except (InvalidConfig, ValueError) as e:
        logger.error("%s", e)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
