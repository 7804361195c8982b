"""Process-wide request counter."""

from __future__ import annotations

import threading

UINT64_MAX = 2**64 - 1


class RequestCounter:
    """Thread-safe unsigned 64-bit counter for served metrics requests."""

    def __init__(self, start: int = 0) -> None:
        if not 0 <= start <= UINT64_MAX:
            raise ValueError(f"start must fit in an unsigned 64-bit integer, got {start}")
        self._lock = threading.Lock()
        self._value = start

    def increment(self) -> int:
        """Add one and return the post-increment value."""

        with self._lock:
            self._value = (self._value + 1) & UINT64_MAX
            return self._value

    @property
    def value(self) -> int:
        with self._lock:
            return self._value
