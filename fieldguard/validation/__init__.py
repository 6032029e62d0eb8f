"""Validation package - the fluent field validator and its building blocks.

This package provides path-scoped violation accumulation for arbitrary
objects. Nothing here raises for a violation until the caller asks for it.
"""

from .safe import Extraction, Verdict, safe_extract, safe_test
from .store import ViolationStore, merge_violations, render_violations
from .validator import Validator

__all__ = [
    "Validator",
    "ViolationStore",
    "merge_violations",
    "render_violations",
    "Extraction",
    "Verdict",
    "safe_extract",
    "safe_test",
]
