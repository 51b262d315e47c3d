"""
Metrics sinks for request telemetry

The client reports two kinds of metric: timings (milliseconds) and counter
increments. Any object with ``timing`` and ``increment`` methods can be
passed to the client; the sinks here cover the common cases.
"""

import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Protocol, Union, runtime_checkable

logger = logging.getLogger(__name__)


class MetricKind(str, Enum):
    """Kinds of metric event"""
    TIMING = "timing"
    COUNTER = "counter"


@dataclass(frozen=True)
class MetricEvent:
    """A single recorded metric"""
    kind: MetricKind
    name: str
    value: Union[int, float]


@runtime_checkable
class MetricsSink(Protocol):
    """Protocol for telemetry backends"""

    def timing(self, name: str, ms: float) -> None:
        """Record a duration in milliseconds"""
        ...

    def increment(self, name: str, amount: int = 1) -> None:
        """Increment a counter"""
        ...


class NullMetricsSink:
    """Sink that discards everything"""

    def timing(self, name: str, ms: float) -> None:
        pass

    def increment(self, name: str, amount: int = 1) -> None:
        pass


class InMemoryMetricsSink:
    """Thread-safe sink that keeps every event in memory"""

    def __init__(self):
        self._events: List[MetricEvent] = []
        self._lock = threading.RLock()

    def timing(self, name: str, ms: float) -> None:
        with self._lock:
            self._events.append(MetricEvent(MetricKind.TIMING, name, ms))

    def increment(self, name: str, amount: int = 1) -> None:
        with self._lock:
            self._events.append(MetricEvent(MetricKind.COUNTER, name, amount))

    @property
    def events(self) -> List[MetricEvent]:
        """Snapshot of all recorded events in arrival order"""
        with self._lock:
            return list(self._events)

    def timings(self, name: Optional[str] = None) -> List[MetricEvent]:
        return self._select(MetricKind.TIMING, name)

    def counters(self, name: Optional[str] = None) -> List[MetricEvent]:
        return self._select(MetricKind.COUNTER, name)

    def count(self, name: str) -> Union[int, float]:
        """Sum of all increments recorded under ``name``"""
        return sum(event.value for event in self.counters(name))

    def clear(self) -> None:
        with self._lock:
            self._events.clear()

    def _select(self, kind: MetricKind, name: Optional[str]) -> List[MetricEvent]:
        with self._lock:
            return [
                event for event in self._events
                if event.kind == kind and (name is None or event.name == name)
            ]


class LoggingMetricsSink:
    """Sink that writes each metric to a logger"""

    def __init__(self, log: Optional[logging.Logger] = None, level: int = logging.DEBUG):
        self.log = log or logger
        self.level = level

    def timing(self, name: str, ms: float) -> None:
        self.log.log(self.level, f"timing {name}={ms:.2f}ms")

    def increment(self, name: str, amount: int = 1) -> None:
        self.log.log(self.level, f"increment {name}+{amount}")
