"""
Prometheus Metrics: switching observability.

Exposes counters and a histogram for:
- Verdicts produced by the context classifier
- Input source switches issued (and failed)
- Override region lifecycle events
- Refresh latency

Usage
-----
    from smart_input.switching.metrics import record_switch, timed_refresh

    with timed_refresh():
        session.refresh(cursor)
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Generator, Optional

from prometheus_client import Counter, Histogram

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Metric definitions
# ---------------------------------------------------------------------------

# Verdicts by value ("primary" / "secondary" / "none").
VERDICTS: Counter = Counter(
    "sis_verdicts_total",
    "Context classifier verdicts by value",
    ["verdict"],
)

# Switches issued, labelled by target role.
SWITCHES: Counter = Counter(
    "sis_switches_total",
    "Input source switches issued by target role",
    ["target"],
)

# Calls to the external input source manager that raised.
SWITCH_FAILURES: Counter = Counter(
    "sis_switch_failures_total",
    "Failed calls to the external input source manager",
    ["operation"],
)

# Override region lifecycle (activated / deactivated / dismissed).
REGION_EVENTS: Counter = Counter(
    "sis_override_region_events_total",
    "Override region lifecycle events",
    ["event"],
)

REFRESH_LATENCY: Histogram = Histogram(
    "sis_refresh_seconds",
    "Time spent detecting context and switching input source",
    buckets=(0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5),
)


# ---------------------------------------------------------------------------
# Convenience helpers
# ---------------------------------------------------------------------------

def record_verdict(verdict: Optional[str]) -> None:
    """Increment the verdict counter; None is recorded as "none"."""
    VERDICTS.labels(verdict=verdict or "none").inc()


def record_switch(target: str) -> None:
    """Increment the switch counter for *target* ("primary" / "secondary")."""
    SWITCHES.labels(target=target).inc()


def record_switch_failure(operation: str) -> None:
    """Increment the failure counter for *operation* ("get" / "set")."""
    SWITCH_FAILURES.labels(operation=operation).inc()


def record_region_event(event: str) -> None:
    REGION_EVENTS.labels(event=event).inc()


@contextmanager
def timed_refresh() -> Generator[None, None, None]:
    """
    Context manager that records refresh latency.

    Usage::

        with timed_refresh():
            session.refresh(cursor)
    """
    with REFRESH_LATENCY.time():
        yield
