"""MetricsProtocol: counters and timings for observability.

Metric names are dotted, e.g. ``sns.verification.send.failure``.
"""

from typing import Protocol


class MetricsProtocol(Protocol):
    """Counter and timing sink."""

    def increment(self, name: str, value: int = 1) -> None:
        """Increment a counter.

        Args:
            name: Metric name.
            value: Amount to add (default 1).
        """
        ...

    def record_timing(self, name: str, duration_ms: float) -> None:
        """Record an execution time sample.

        Args:
            name: Metric name.
            duration_ms: Duration in milliseconds.
        """
        ...
