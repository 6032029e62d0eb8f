# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Metric instrument definitions for fieldguard."""

from __future__ import annotations

import logging

from ..config import Settings
from .runtime import meter

logger = logging.getLogger(__name__)

violation_recorded_total = meter.create_counter(
    name="fieldguard.violation.recorded.total",
    description="Counts violations recorded into a validation session, partitioned by check.",
    unit="1",
)

validation_raised_total = meter.create_counter(
    name="fieldguard.validation.raised.total",
    description="Counts validation sessions that ended in a raised error, partitioned by mode.",
    unit="1",
)


def record_violation_recorded(settings: Settings, check: str) -> None:
    """Count one recorded violation for *check*."""

    if not settings.metrics_enabled:
        return
    try:
        violation_recorded_total.add(1, {"check": check})
    except Exception:
        # Telemetry must never interfere with validation
        logger.debug("Failed to record violation metric for check '%s'", check, exc_info=True)


def record_raise(settings: Settings, mode: str) -> None:
    """Count one terminal raise; *mode* is ``structured`` or ``factory``."""

    if not settings.metrics_enabled:
        return
    try:
        validation_raised_total.add(1, {"mode": mode})
    except Exception:
        logger.debug("Failed to record raise metric for mode '%s'", mode, exc_info=True)


__all__ = [
    "violation_recorded_total",
    "validation_raised_total",
    "record_violation_recorded",
    "record_raise",
]
