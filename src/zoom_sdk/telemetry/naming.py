"""
Metric names for Zoom API calls

Names use the first path segment as a low-cardinality dimension, e.g. a
``GET users/me`` answered with 200 is reported as
``zoom.http.code.users.200``.
"""

LATENCY_METRIC_PREFIX = "zoom.http.latency"
STATUS_METRIC_PREFIX = "zoom.http.code"
REQUEST_EXCEPTION_METRIC = "error.zoom_request_exception"


def path_prefix(path: str) -> str:
    """First slash-delimited segment of a request path (the whole path if it has no slash)."""
    return path.split("/", 1)[0]


def latency_metric_name(prefix: str, status: int) -> str:
    return f"{LATENCY_METRIC_PREFIX}.{prefix}.{status}"


def status_metric_name(prefix: str, status: int) -> str:
    return f"{STATUS_METRIC_PREFIX}.{prefix}.{status}"
