import logging
from typing import Protocol

logger = logging.getLogger(__name__)

Labels = dict[str, str] | None


class MetricsHook(Protocol):
    """Receives parse and collection metrics. Names live in `names`."""

    def record_latency(self, name: str, value_ms: float, labels: Labels = None) -> None: ...

    def increment(self, name: str, value: int = 1, labels: Labels = None) -> None: ...

    def record_gauge(self, name: str, value: float, labels: Labels = None) -> None: ...


class NoOpMetricsHook:
    def record_latency(self, name: str, value_ms: float, labels: Labels = None) -> None:
        pass

    def increment(self, name: str, value: int = 1, labels: Labels = None) -> None:
        pass

    def record_gauge(self, name: str, value: float, labels: Labels = None) -> None:
        pass


class LoggingMetricsHook:
    """Writes every metric to the log, for runs without a metrics backend."""

    def __init__(self, level: int = logging.DEBUG) -> None:
        self._level = level

    def record_latency(self, name: str, value_ms: float, labels: Labels = None) -> None:
        logger.log(self._level, "%s=%.2fms labels=%s", name, value_ms, labels or {})

    def increment(self, name: str, value: int = 1, labels: Labels = None) -> None:
        logger.log(self._level, "%s+=%d labels=%s", name, value, labels or {})

    def record_gauge(self, name: str, value: float, labels: Labels = None) -> None:
        logger.log(self._level, "%s=%s labels=%s", name, value, labels or {})
