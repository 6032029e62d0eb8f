# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Process-wide meter used by the fieldguard instruments.

Only the OpenTelemetry API is required. Without a configured SDK meter
provider every instrument is a no-op.
"""

from __future__ import annotations

from opentelemetry import metrics

meter = metrics.get_meter("fieldguard")

__all__ = ["meter"]
