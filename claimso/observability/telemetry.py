"""
In-process telemetry for the CLAIMSO services.

Nothing is exported to a metrics backend. Events are written as structured
log lines, counters and latency samples live in memory so tests and the
health endpoint can read them. Latency samples are kept in a bounded window
per metric so a long-running worker does not grow without limit.
"""

from __future__ import annotations

import contextlib
import logging
import time
from collections import deque
from collections.abc import Iterator
from typing import Any

logger = logging.getLogger("claimso.telemetry")

LATENCY_WINDOW = 1000

_COUNTERS: dict[str, int] = {}
_LATENCIES: dict[str, deque[float]] = {}


def _latency_key(metric_name: str) -> str:
    """``foo.latency`` is stored as ``foo.latency_ms``; names already ending in ``_ms`` are kept."""
    if metric_name.endswith(".latency"):
        return f"{metric_name}_ms"
    return metric_name


def log_event(event_name: str, **fields: Any) -> None:
    """
    Write one structured event line: ``event=<name> k1=v1 k2=v2``.

    Fields are emitted in sorted order. Callers must pass redacted values only.
    """
    rendered = " ".join(f"{key}={fields[key]!r}" for key in sorted(fields))
    logger.info("event=%s %s", event_name, rendered)


def counter(name: str, increment: int = 1) -> int:
    """Add ``increment`` to a named counter and return the new value."""
    value = _COUNTERS.get(name, 0) + increment
    _COUNTERS[name] = value
    logger.debug("counter=%s value=%s", name, value)
    return value


def get_counter(name: str) -> int:
    return _COUNTERS.get(name, 0)


def counters_with_prefix(prefix: str) -> dict[str, int]:
    """All counters whose name starts with ``prefix``, sorted by name."""
    return {name: _COUNTERS[name] for name in sorted(_COUNTERS) if name.startswith(prefix)}


@contextlib.contextmanager
def time_block(metric_name: str) -> Iterator[None]:
    """
    Record the wall time of the enclosed block, in milliseconds.

    The sample is recorded even when the block raises.
    """
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed_ms = (time.perf_counter() - start) * 1000
        key = _latency_key(metric_name)
        _LATENCIES.setdefault(key, deque(maxlen=LATENCY_WINDOW)).append(elapsed_ms)
        logger.debug("timing=%s ms=%.3f", key, elapsed_ms)


def get_latency_stats(metric_name: str) -> dict[str, float]:
    """Count, min, max, avg, p50 and p95 over the current sample window."""
    samples = sorted(_LATENCIES.get(_latency_key(metric_name), ()))
    count = len(samples)
    if not count:
        return {"count": 0, "min": 0.0, "max": 0.0, "avg": 0.0, "p50": 0.0, "p95": 0.0}

    return {
        "count": count,
        "min": samples[0],
        "max": samples[-1],
        "avg": sum(samples) / count,
        "p50": samples[count // 2],
        "p95": samples[min(int(count * 0.95), count - 1)],
    }


def reset_telemetry() -> None:
    """Drop all counters and latency samples."""
    _COUNTERS.clear()
    _LATENCIES.clear()
