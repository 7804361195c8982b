"""Pseudo-random metric values."""

from __future__ import annotations

import random
import threading
import time

from backend.simulation.models import MetricsSnapshot

CPU_RANGE = range(0, 100)
LATENCY_RANGE = range(0, 300)
MEMORY_RANGE = range(100, 4000)


class MetricsGenerator:
    """Draws uniformly distributed readings from one shared random source.

    ``random.Random`` keeps mutable state, so every draw happens under a lock
    to keep concurrent handlers from interleaving inside the generator.
    """

    def __init__(self, seed: int | None = None) -> None:
        self.seed = time.time_ns() if seed is None else seed
        self._random = random.Random(self.seed)
        self._lock = threading.Lock()

    def generate(self, request_count: int) -> MetricsSnapshot:
        with self._lock:
            cpu = self._random.randrange(CPU_RANGE.start, CPU_RANGE.stop)
            latency = self._random.randrange(LATENCY_RANGE.start, LATENCY_RANGE.stop)
            memory = self._random.randrange(MEMORY_RANGE.start, MEMORY_RANGE.stop)

        return MetricsSnapshot(
            cpu_usage_percent=cpu,
            latency_milliseconds=latency,
            memory_usage_megabytes=memory,
            request_count=request_count,
        )
