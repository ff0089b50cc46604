"""In-memory metrics tracking for observability.

Lightweight counters and timing aggregates keyed by metric name, e.g.
"sns.verification.send.success" or "s3.upload.error".

Usage:
    from storefront.infrastructure.metrics import InMemoryMetrics

    metrics = InMemoryMetrics()
    metrics.increment("s3.upload.success")
    metrics.record_timing("sns.verification.send.time", 42.0)

    stats = metrics.get_stats("sns.verification.send.time")
    print(f"Average send: {stats['avg_ms']} ms")
"""

from collections import defaultdict
from dataclasses import dataclass
from threading import Lock
from typing import Any


@dataclass
class MetricStats:
    """Aggregate for one metric name.

    Attributes:
        count: Counter value (sum of increments) or number of timings.
        total_ms: Sum of recorded durations.
        max_ms: Longest recorded duration.
    """

    count: int = 0
    total_ms: float = 0.0
    max_ms: float = 0.0

    @property
    def avg_ms(self) -> float:
        """Average recorded duration (0.0 when no timings)."""
        if self.count == 0 or self.total_ms == 0.0:
            return 0.0
        return self.total_ms / self.count

    def to_dict(self) -> dict[str, Any]:
        """Convert stats to dictionary for JSON serialization."""
        return {
            "count": self.count,
            "total_ms": round(self.total_ms, 3),
            "max_ms": round(self.max_ms, 3),
            "avg_ms": round(self.avg_ms, 3),
        }


class InMemoryMetrics:
    """Thread-safe in-memory implementation of MetricsProtocol.

    Suitable for development and single-process deployments. Values can be
    exported to an observability platform through get_all_stats().

    Example:
        metrics = InMemoryMetrics()
        metrics.increment("verification.sweep.deleted", 3)
        metrics.get_stats("verification.sweep.deleted")["count"]  # 3
    """

    def __init__(self) -> None:
        """Initialize metrics tracker with empty counters."""
        self._stats: dict[str, MetricStats] = defaultdict(MetricStats)
        self._lock = Lock()

    def increment(self, name: str, value: int = 1) -> None:
        """Increase a counter.

        Args:
            name: Metric name.
            value: Amount to add (default 1).
        """
        with self._lock:
            self._stats[name].count += value

    def record_timing(self, name: str, duration_ms: float) -> None:
        """Record one duration sample.

        Args:
            name: Metric name.
            duration_ms: Duration in milliseconds.
        """
        with self._lock:
            stats = self._stats[name]
            stats.count += 1
            stats.total_ms += duration_ms
            stats.max_ms = max(stats.max_ms, duration_ms)

    def get_stats(self, name: str) -> dict[str, Any]:
        """Get statistics for one metric.

        Args:
            name: Metric name.

        Returns:
            Dictionary with count, total_ms, max_ms, avg_ms.
        """
        with self._lock:
            stats = self._stats.get(name, MetricStats())
            return stats.to_dict()

    def get_all_stats(self) -> dict[str, dict[str, Any]]:
        """Get statistics for all metric names."""
        with self._lock:
            return {name: stats.to_dict() for name, stats in self._stats.items()}

    def reset(self, name: str | None = None) -> None:
        """Reset metrics.

        Args:
            name: Optional metric to reset. If None, reset all.
        """
        with self._lock:
            if name is None:
                self._stats.clear()
            else:
                self._stats.pop(name, None)
