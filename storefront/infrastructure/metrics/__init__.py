"""Metrics adapters."""

from storefront.infrastructure.metrics.in_memory_metrics import (
    InMemoryMetrics,
    MetricStats,
)

__all__ = ["InMemoryMetrics", "MetricStats"]
