"""Synthetic system metrics."""

from backend.simulation.generator import CPU_RANGE, LATENCY_RANGE, MEMORY_RANGE, MetricsGenerator
from backend.simulation.models import MetricsSnapshot

__all__ = [
    "CPU_RANGE",
    "LATENCY_RANGE",
    "MEMORY_RANGE",
    "MetricsGenerator",
    "MetricsSnapshot",
]
