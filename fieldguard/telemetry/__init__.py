"""Telemetry package - OpenTelemetry instruments for validation sessions."""

from .metrics import (
    record_raise,
    record_violation_recorded,
    validation_raised_total,
    violation_recorded_total,
)
from .runtime import meter

__all__ = [
    "meter",
    "record_raise",
    "record_violation_recorded",
    "validation_raised_total",
    "violation_recorded_total",
]
