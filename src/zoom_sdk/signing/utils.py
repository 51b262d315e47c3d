"""
Utility functions for token signing

This module provides clock helpers, header normalization and a small timer
used for latency measurement.
"""

import time
from typing import Dict, Mapping, Optional

from .types import Clock


def current_time_ms(clock: Optional[Clock] = None) -> int:
    """
    Current Unix time in whole milliseconds.

    Args:
        clock: Callable returning Unix seconds (defaults to time.time)

    Returns:
        int: Milliseconds since epoch
    """
    now = (clock or time.time)()
    return int(round(now * 1000))


def normalize_header_name(name: str) -> str:
    """
    Normalize header name to lowercase for consistent processing.

    Args:
        name: Header name to normalize

    Returns:
        str: Lowercase header name
    """
    return name.lower().strip()


def normalize_headers(headers: Optional[Mapping[str, str]]) -> Dict[str, str]:
    """
    Lowercase all header names. Later duplicates win.

    Args:
        headers: Header mapping, may be None

    Returns:
        dict: New dict keyed by lowercase header name
    """
    if not headers:
        return {}
    return {normalize_header_name(k): v for k, v in headers.items()}


def merge_headers(*layers: Optional[Mapping[str, str]]) -> Dict[str, str]:
    """
    Merge header mappings case-insensitively, later layers taking precedence.

    Args:
        *layers: Header mappings from lowest to highest precedence

    Returns:
        dict: Merged headers with lowercase names
    """
    merged: Dict[str, str] = {}
    for layer in layers:
        merged.update(normalize_headers(layer))
    return merged


class PerformanceTimer:
    """Simple performance timer for monitoring request latency."""

    def __init__(self):
        self.start_time = time.perf_counter()

    def elapsed_ms(self) -> float:
        """Get elapsed time in milliseconds."""
        return (time.perf_counter() - self.start_time) * 1000
