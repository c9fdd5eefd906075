"""
Analysis telemetry.

Privacy-safe by construction: only counts, scores and the weighting policy
are emitted. Policy text never leaves the process.
"""
import os
import logging
from typing import Literal

from azure.monitor.opentelemetry import configure_azure_monitor
from opentelemetry.trace import get_current_span

logger = logging.getLogger("policylens.telemetry")


def init_telemetry():
    """
    Initialize Azure Application Insights via OpenTelemetry.
    Disabled unless a connection string is configured.
    """
    connection_string = os.getenv("AZURE_APPINSIGHTS_CONNECTION_STRING")

    if not connection_string:
        logger.debug("Telemetry disabled (no connection string)")
        return

    configure_azure_monitor(
        connection_string=connection_string
    )


def emit_analysis_telemetry(
    analysis_latency_ms: int,
    score: int,
    weighting_policy: Literal["priority", "risk"],
    violation_count: int,
):
    """
    Emit a single telemetry event for a completed analysis.

    The attribute set is locked: no kwargs, no payloads, no policy text.
    """
    assert isinstance(analysis_latency_ms, int), "analysis_latency_ms must be int"
    assert isinstance(score, int) and 0 <= score <= 100, "score must be int in 0..100"
    assert weighting_policy in ("priority", "risk"), f"weighting_policy must be one of ('priority', 'risk'), got {weighting_policy}"
    assert isinstance(violation_count, int), "violation_count must be int"

    span = get_current_span()
    if not span or not span.is_recording():
        return  # No active span - telemetry disabled or not in trace context

    span.add_event(
        name="policylens.analysis",
        attributes={
            "analysis_latency_ms": analysis_latency_ms,
            "score": score,
            "weighting_policy": weighting_policy,
            "violation_count": violation_count,
        }
    )


def scrub_exception_for_telemetry(exception: Exception) -> str:
    """
    Never log str(e) or stack traces that may quote policy text.
    Log only the exception class name.
    """
    return type(exception).__name__


def emit_exception_telemetry(exception: Exception):
    span = get_current_span()
    if not span or not span.is_recording():
        return

    span.add_event(
        name="policylens.exception",
        attributes={
            "exception_type": scrub_exception_for_telemetry(exception)
        }
    )
