"""
Lightweight metrics collection for the Live Scoreboard.
Wraps prometheus_client collectors; exposition is left to the owning process.
"""
from __future__ import annotations

import time
from contextlib import contextmanager
from typing import Iterator

from prometheus_client import Counter, Gauge, Histogram

from shared.models.enums import Operation, Outcome

# ── Counters ────────────────────────────────────────────────────────────
SB_OPERATIONS = Counter(
    "sb_operations_total",
    "Total registry operations by outcome",
    ["operation", "outcome"],
)

# ── Histograms ──────────────────────────────────────────────────────────
SB_SUMMARY_LATENCY = Histogram(
    "sb_summary_latency_seconds",
    "Time to build a sorted scoreboard summary",
    buckets=(0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1),
)

# ── Gauges ──────────────────────────────────────────────────────────────
SB_ACTIVE_MATCHES = Gauge(
    "sb_active_matches",
    "Number of matches currently on the scoreboard",
)


def record_operation(operation: Operation, outcome: Outcome = Outcome.OK) -> None:
    SB_OPERATIONS.labels(operation=operation.value, outcome=outcome.value).inc()


@contextmanager
def track_latency(histogram: Histogram, **labels: str) -> Iterator[None]:
    """Context manager to track operation latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed = time.perf_counter() - start
        if labels:
            histogram.labels(**labels).observe(elapsed)
        else:
            histogram.observe(elapsed)
