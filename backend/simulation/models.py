"""Value objects served by the metrics endpoint."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class MetricsSnapshot:
    """One set of simulated readings, created fresh for a single response."""

    cpu_usage_percent: int
    latency_milliseconds: int
    memory_usage_megabytes: int
    request_count: int

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON body keyed the way dashboard clients expect."""

        return {
            "cpu_usage": self.cpu_usage_percent,
            "latency_ms": self.latency_milliseconds,
            "memory_usage_mb": self.memory_usage_megabytes,
            "request_count": self.request_count,
        }
