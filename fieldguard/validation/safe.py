# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Failure-tolerant invocation of caller-supplied extractors and predicates.

A broken extractor or predicate must turn into a violation, never into an
aborted validation session. Both helpers return a small result object instead
of raising so the conversion can be inspected on its own:

* :func:`safe_extract` -> :class:`Extraction` (value, or absent)
* :func:`safe_test` -> :class:`Verdict` (passed, or failed)

Only :class:`Exception` subclasses are converted; ``KeyboardInterrupt`` and
``SystemExit`` still propagate. Conversions are intentionally not logged.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

T = TypeVar("T")
B = TypeVar("B")


@dataclass(frozen=True)
class Extraction(Generic[B]):
    """Outcome of applying an extractor to a bound value."""

    value: Optional[B] = None
    error: Optional[Exception] = None

    @property
    def absent(self) -> bool:
        return self.value is None

    @property
    def failed(self) -> bool:
        return self.error is not None


@dataclass(frozen=True)
class Verdict:
    """Outcome of evaluating a predicate against a bound value."""

    passed: bool
    error: Optional[Exception] = None

    @property
    def failed(self) -> bool:
        return not self.passed


def safe_extract(extractor: Callable[[T], B], value: T) -> Extraction[B]:
    """Apply *extractor* to *value*; any error yields an absent extraction."""

    try:
        return Extraction(value=extractor(value))
    except Exception as exc:  # noqa: BLE001 - caller code may raise anything
        return Extraction(error=exc)


def safe_test(predicate: Callable[[T], Any], value: T) -> Verdict:
    """Evaluate *predicate* against *value*; any error yields a failed verdict."""

    try:
        return Verdict(passed=bool(predicate(value)))
    except Exception as exc:  # noqa: BLE001 - caller code may raise anything
        return Verdict(passed=False, error=exc)


__all__ = ["Extraction", "Verdict", "safe_extract", "safe_test"]
