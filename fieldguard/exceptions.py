# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Exception hierarchy for fieldguard."""

from __future__ import annotations

from typing import Dict, List, Mapping, Optional, Sequence


class FieldGuardError(Exception):
    """Base class for every error raised by fieldguard."""

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class ConfigurationError(FieldGuardError):
    """Raised when fieldguard settings are invalid."""


class ValidationError(FieldGuardError):
    """Carries the violations of a finished validation session.

    ``violations`` maps each field path to the messages recorded for it. The
    mapping is copied when the error is built, so later mutation of the
    session store is not visible to code that catches the error.
    """

    def __init__(self, violations: Optional[Mapping[str, Sequence[str]]] = None):
        self.violations: Dict[str, List[str]] = {
            path: list(messages) for path, messages in (violations or {}).items()
        }
        super().__init__(self._describe())

    @classmethod
    def of(cls, violations: Mapping[str, Sequence[str]]) -> "ValidationError":
        return cls(violations)

    def __reduce__(self):
        # Rebuild from the mapping; ``args`` only holds the rendered text.
        return type(self), (self.violations,)

    def _describe(self) -> str:
        count = sum(len(messages) for messages in self.violations.values())
        lines = [f"Validation failed with {count} violation(s):"]
        for path, messages in self.violations.items():
            for message in messages:
                lines.append(f" - {path} {message}")
        return "\n".join(lines)


__all__ = [
    "FieldGuardError",
    "ConfigurationError",
    "ValidationError",
]
