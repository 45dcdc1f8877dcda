"""Seed for object hash tables, chosen once per process."""

from __future__ import annotations

import os
import threading
import time

_MASK = 0xFFFFFFFF
_SEED_BYTES = 4


def seed_from_urandom() -> int | None:
    """Read a 32-bit seed from the system's random source.

    The bytes are taken in big-endian order. Returns None when no random
    source is available.
    """
    try:
        data = os.urandom(_SEED_BYTES)
    except (OSError, NotImplementedError):
        return None
    if len(data) != _SEED_BYTES:
        return None
    return int.from_bytes(data, "big")


def seed_from_timestamp_and_pid() -> int:
    """Build a 32-bit seed from the current time and the process id."""
    now = time.time_ns()
    seconds = now // 1_000_000_000
    microseconds = (now // 1_000) % 1_000_000
    return (seconds ^ microseconds ^ os.getpid()) & _MASK


def generate_seed() -> int:
    """Return a fresh seed that is never zero."""
    seed = seed_from_urandom()
    if seed is None:
        seed = seed_from_timestamp_and_pid()
    return seed or 1


class _SeedState:
    """Holds a seed that may be set only once, safely across threads."""

    def __init__(self) -> None:
        self.value = 0
        self._lock = threading.Lock()

    def seed(self, seed: int = 0) -> None:
        if self.value:
            return
        with self._lock:
            if self.value:
                return
            new_seed = seed & _MASK
            self.value = new_seed or generate_seed()


_STATE = _SeedState()


def object_seed(seed: int = 0) -> None:
    """Set the process-wide seed unless it is already set.

    The value is truncated to 32 bits; a value of 0 means a seed is
    generated.
    """
    _STATE.seed(seed)


def current_seed() -> int:
    """Return the process-wide seed, or 0 if it has not been set."""
    return _STATE.value