"""Shared telemetry: logging setup, OpenTelemetry config, and tracing helpers."""

from sportsdb.shared.telemetry.logging import setup_logging
from sportsdb.shared.telemetry.telemetry import (
    SearchTelemetry,
    get_telemetry,
    set_telemetry,
)
from sportsdb.shared.telemetry.tracing import (
    add_span_attributes,
    traced,
)

__all__ = [
    "setup_logging",
    "SearchTelemetry",
    "get_telemetry",
    "set_telemetry",
    "traced",
    "add_span_attributes",
]
