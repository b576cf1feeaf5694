"""RFC 6238 TOTP engine.

Codes are HOTP values (RFC 4226) over a counter derived from wall-clock time:

    counter = floor((unix_time - T0) / step)

Validation accepts the current counter and up to ``backward_steps`` earlier
ones, most recent first. Counters ahead of the server clock are never
accepted.
"""

from __future__ import annotations

import hashlib
import hmac
import struct

from totpkit.clock import Clock, system_clock
from totpkit.errors import InvalidConfig
from totpkit.models import TotpConfig

MAX_COUNTER = 2**64 - 1  # serialized as an unsigned 64-bit big-endian integer


class TotpEngine:
    """Generates and validates codes for one ``TotpConfig``.

    Holds no mutable state after construction and can be shared between
    threads.
    """

    def __init__(self, config: TotpConfig | None = None, clock: Clock | None = None) -> None:
        self.config = config if config is not None else TotpConfig()
        self.clock = clock if clock is not None else system_clock
        self._digest = self.config.algorithm.hashlib_name
        try:
            hashlib.new(self._digest)
        except ValueError as e:
            raise InvalidConfig(f"Algorithm not available in this runtime: {self.config.algorithm}") from e
        self._modulus = 10**self.config.digits

    def __repr__(self) -> str:
        c = self.config
        return (
            f"TotpEngine(algorithm={c.algorithm}, step={c.step_seconds}s, "
            f"digits={c.digits}, backward_steps={c.backward_steps})"
        )

    # --- counters ---

    def counter_at(self, time_seconds: float) -> int:
        """Time step number containing ``time_seconds``."""
        return int((time_seconds - self.config.epoch_offset_seconds) // self.config.step_seconds)

    def current_counter(self) -> int:
        return self.counter_at(self.clock())

    def seconds_remaining(self) -> float:
        """Seconds left before the current code rolls over."""
        elapsed = (self.clock() - self.config.epoch_offset_seconds) % self.config.step_seconds
        return self.config.step_seconds - elapsed

    # --- codes ---

    def generate_code(self, secret: bytes, counter: int | None = None) -> str:
        """Return the zero-padded code for ``counter`` (default: the current one)."""
        if counter is None:
            counter = self.current_counter()
        if not 0 <= counter <= MAX_COUNTER:
            raise ValueError(f"Counter must be between 0 and 2**64 - 1, got {counter}")

        mac = hmac.new(secret, struct.pack(">Q", counter), self._digest).digest()
        offset = mac[-1] & 0x0F
        bin_code = struct.unpack(">I", mac[offset : offset + 4])[0] & 0x7FFFFFFF
        return str(bin_code % self._modulus).zfill(self.config.digits)

    def matching_counter(self, secret: bytes, code: str) -> int | None:
        """Counter whose code equals ``code`` within the backward window, or None.

        Callers that keep the last accepted counter can use this to refuse
        replays of a code within its window.
        """
        if not isinstance(code, str) or len(code) != self.config.digits:
            return None
        presented = code.encode("utf-8")
        current = self.current_counter()
        for i in range(self.config.backward_steps + 1):
            counter = current - i
            if counter < 0:
                break
            if counter > MAX_COUNTER:
                continue
            candidate = self.generate_code(secret, counter).encode("ascii")
            if hmac.compare_digest(candidate, presented):
                return counter
        return None

    def validate(self, secret: bytes, code: str) -> bool:
        """True if ``code`` matches the current or one of the previous counters."""
        return self.matching_counter(secret, code) is not None
