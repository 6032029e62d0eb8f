# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Environment-driven settings.

``FIELDGUARD_PATH_SEPARATOR``
    Separator appended to the prefix of every nested validator (default ``.``).
``FIELDGUARD_METRICS``
    Set to ``0``, ``false`` or ``no`` to stop recording OpenTelemetry counters.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_PATH_SEPARATOR = "."
_FALSY = ("", "0", "false", "no")

_SETTINGS: Optional["Settings"] = None


@dataclass(frozen=True)
class Settings:
    path_separator: str = DEFAULT_PATH_SEPARATOR
    metrics_enabled: bool = True


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build :class:`Settings` from *environ* (``os.environ`` by default)."""

    env = os.environ if environ is None else environ

    separator = env.get("FIELDGUARD_PATH_SEPARATOR", DEFAULT_PATH_SEPARATOR)
    if not separator:
        raise ConfigurationError("FIELDGUARD_PATH_SEPARATOR must not be empty")

    metrics_enabled = env.get("FIELDGUARD_METRICS", "1").strip().lower() not in _FALSY

    settings = Settings(path_separator=separator, metrics_enabled=metrics_enabled)
    logger.debug("Loaded fieldguard settings: %s", settings)
    return settings


def get_settings() -> Settings:
    """Return the process-wide settings, loading them on first use."""

    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = load_settings()
    return _SETTINGS


def reset_settings() -> None:
    """Forget cached settings so the next :func:`get_settings` re-reads the environment."""

    global _SETTINGS
    _SETTINGS = None


__all__ = [
    "DEFAULT_PATH_SEPARATOR",
    "Settings",
    "get_settings",
    "load_settings",
    "reset_settings",
]
