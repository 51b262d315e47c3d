"""
Telemetry module for Zoom SDK

Metric sinks and the naming scheme for per-request timing and status
counters.
"""

from .sinks import (
    MetricsSink,
    MetricEvent,
    MetricKind,
    NullMetricsSink,
    InMemoryMetricsSink,
    LoggingMetricsSink,
)
from .naming import (
    LATENCY_METRIC_PREFIX,
    STATUS_METRIC_PREFIX,
    REQUEST_EXCEPTION_METRIC,
    path_prefix,
    latency_metric_name,
    status_metric_name,
)

__all__ = [
    'MetricsSink',
    'MetricEvent',
    'MetricKind',
    'NullMetricsSink',
    'InMemoryMetricsSink',
    'LoggingMetricsSink',
    'LATENCY_METRIC_PREFIX',
    'STATUS_METRIC_PREFIX',
    'REQUEST_EXCEPTION_METRIC',
    'path_prefix',
    'latency_metric_name',
    'status_metric_name',
]
