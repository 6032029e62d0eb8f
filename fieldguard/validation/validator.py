# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Fluent, path-aware field validator.

A :class:`Validator` is bound to one value and records failures into a
violation store keyed by dotted field path. :meth:`Validator.map` opens a
nested validator for a sub-object; the child extends the path prefix and
writes into the *same* store, so one session always has exactly one store.

Every check funnels through :meth:`Validator.validate`, which is a no-op on
an absent (``None``) bound value and never lets a caller-supplied extractor
or predicate raise past the call.

Example:
    .. code-block:: python

        validator = (
            Validator.of(order)
            .description("Order rejected: ")
            .string_not_empty("id", lambda o: o.id)
            .equals_any("status", lambda o: o.status, "NEW", "PAID")
            .map("customer", lambda o: o.customer, lambda c: (
                c.string_not_empty("email", lambda x: x.email)
            ))
        )
        validator.or_else_raise()
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Generic, Optional, Sized, TypeVar, Union

from ..config import Settings, get_settings
from ..exceptions import ValidationError
from ..telemetry.metrics import record_raise, record_violation_recorded
from . import messages
from .safe import Extraction, safe_extract, safe_test
from .store import (
    ViolationStore,
    bracketed,
    merge_violations,
    record_violation,
    render_value,
    render_violations,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")
B = TypeVar("B")


class Validator(Generic[T]):
    """Accumulate violations for a value and its nested fields."""

    def __init__(
        self,
        value: Optional[T],
        *,
        prefix: str = "",
        description: str = "",
        violations: Optional[ViolationStore] = None,
        settings: Optional[Settings] = None,
    ):
        self._value = value
        self._prefix = prefix
        self._description = description
        self._violations: ViolationStore = {} if violations is None else violations
        self._settings = settings if settings is not None else get_settings()

    # ------------------------------------------------------------------
    # Session setup and results
    # ------------------------------------------------------------------

    @classmethod
    def of(cls, value: Optional[T], *, settings: Optional[Settings] = None) -> "Validator[T]":
        """Start a new validation session rooted at *value*."""

        return cls(value, settings=settings)

    @property
    def value(self) -> Optional[T]:
        return self._value

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def violations(self) -> ViolationStore:
        """The live violation store shared by the whole session."""

        return self._violations

    def description(self, text: str) -> "Validator[T]":
        """Set the label prepended to :meth:`get_full_error_message`.

        Nested validators copy the description when :meth:`map` creates them,
        so set it before descending if it should apply to them too.
        """

        self._description = text
        return self

    def has_violations(self) -> bool:
        return bool(self._violations)

    def get_full_error_message(self) -> str:
        """Render the session as ``description + "[path message, ...]"``.

        Paths appear in the order they were first recorded; messages for one
        path keep their recording order. Returns ``""`` without violations.
        """

        if not self.has_violations():
            return ""
        return self._description + bracketed(render_violations(self._violations))

    def or_else_raise(self, factory: Optional[Callable[[str], BaseException]] = None) -> None:
        """Raise if any violation was recorded.

        Without *factory* a :class:`~fieldguard.exceptions.ValidationError`
        carrying the violation mapping is raised. With *factory*, it is called
        with :meth:`get_full_error_message` and whatever it returns is raised.
        """

        if not self.has_violations():
            return

        if factory is not None:
            message = self.get_full_error_message()
            logger.debug("Validation failed, raising through factory: %s", message)
            record_raise(self._settings, "factory")
            raise factory(message)

        logger.debug("Validation failed for %d field(s)", len(self._violations))
        record_raise(self._settings, "structured")
        raise ValidationError.of(self._violations)

    # ------------------------------------------------------------------
    # Core primitives
    # ------------------------------------------------------------------

    def validate(self, field_path: str, message: str, predicate: Callable[[T], Any]) -> "Validator[T]":
        """Record *message* at *field_path* unless *predicate* holds for the bound value.

        Nothing is checked when the bound value is absent. A predicate that
        raises counts as failed.
        """

        return self._check("validate", field_path, message, predicate)

    def map(
        self,
        field_path: str,
        extractor: Callable[[T], B],
        callback: Callable[["Validator[B]"], Any],
    ) -> "Validator[T]":
        """Validate a nested value reached through *extractor*.

        An absent nested value records ``must not be NULL`` at *field_path*
        instead of calling *callback*. Otherwise *callback* receives a child
        validator whose paths are prefixed with ``field_path`` and the
        configured separator.

        Paths are dot-delimited only with the default separator; a
        ``FIELDGUARD_PATH_SEPARATOR`` override changes every nested report key
        in the process.
        """

        extracted = self._extract(extractor)
        if extracted.absent:
            return self.non_null(field_path, extractor)

        child: Validator[B] = Validator(
            extracted.value,
            prefix=self._prefix + field_path + self._settings.path_separator,
            description=self._description,
            violations=self._violations,
            settings=self._settings,
        )
        callback(child)
        merge_violations(self._violations, child._violations)
        return self

    # ------------------------------------------------------------------
    # Built-in checks
    # ------------------------------------------------------------------

    def non_null(self, field_path: str, extractor: Callable[[T], Any]) -> "Validator[T]":
        extracted = self._extract(extractor)
        return self._check("non_null", field_path, messages.MUST_NOT_BE_NULL, lambda _: not extracted.absent)

    def is_null(self, field_path: str, extractor: Callable[[T], Any]) -> "Validator[T]":
        extracted = self._extract(extractor)
        return self._check("is_null", field_path, messages.MUST_BE_NULL, lambda _: extracted.absent)

    def string_not_empty(self, field_path: str, extractor: Callable[[T], Optional[str]]) -> "Validator[T]":
        text = self._extract(extractor).value
        return self._check(
            "string_not_empty",
            field_path,
            messages.MUST_NOT_BE_EMPTY,
            lambda _: isinstance(text, str) and text != "",
        )

    def equals(self, field_path: str, expected: B, extractor: Callable[[T], B]) -> "Validator[T]":
        actual = self._extract(extractor).value
        return self._check(
            "equals",
            field_path,
            lambda: messages.NOT_EQUALS.format(expected=render_value(expected)),
            lambda _: expected == actual,
        )

    def equals_any(self, field_path: str, extractor: Callable[[T], B], *candidates: B) -> "Validator[T]":
        """Require the extracted value to equal one of *candidates*."""

        actual = self._extract(extractor).value
        return self._check(
            "equals_any",
            field_path,
            lambda: messages.NOT_EQUALS_ANY.format(actual=render_value(actual), candidates=bracketed(candidates)),
            lambda _: actual in candidates,
        )

    def is_zero_or_null(self, field_path: str, extractor: Callable[[T], Any]) -> "Validator[T]":
        extracted = self._extract(extractor)
        if extracted.absent:
            return self
        return self._check("is_zero_or_null", field_path, messages.ZERO_OR_NULL, lambda _: extracted.value == 0)

    def size_equals(
        self, field_path: str, expected_size: int, extractor: Callable[[T], Optional[Sized]]
    ) -> "Validator[T]":
        extracted = self._extract(extractor)
        if extracted.absent:
            return self.non_null(field_path, extractor)
        message = messages.SIZE.format(size=expected_size)
        return self._check("size_equals", field_path, message, lambda _: len(extracted.value) == expected_size)

    def collection_is_not_empty(
        self, field_path: str, extractor: Callable[[T], Optional[Sized]]
    ) -> "Validator[T]":
        extracted = self._extract(extractor)
        if extracted.absent:
            return self.non_null(field_path, extractor)
        return self._check(
            "collection_is_not_empty",
            field_path,
            messages.MUST_NOT_BE_EMPTY,
            lambda _: len(extracted.value) > 0,
        )

    def collection_is_empty(self, field_path: str, extractor: Callable[[T], Optional[Sized]]) -> "Validator[T]":
        """Forbid a non-empty collection; an absent collection is fine."""

        extracted = self._extract(extractor)
        if extracted.absent:
            return self
        return self._check(
            "collection_is_empty",
            field_path,
            messages.NOT_ALLOWED,
            lambda _: len(extracted.value) == 0,
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _extract(self, extractor: Callable[[T], B]) -> Extraction[B]:
        return safe_extract(extractor, self._value)

    def _check(
        self,
        check: str,
        field_path: str,
        message: Union[str, Callable[[], str]],
        predicate: Callable[[T], Any],
    ) -> "Validator[T]":
        if self._value is None:
            return self
        if safe_test(predicate, self._value).passed:
            return self

        if callable(message):
            message = message()
        path = self._prefix + field_path
        record_violation(self._violations, path, message)
        logger.debug("Check '%s' failed at '%s': %s", check, path, message)
        record_violation_recorded(self._settings, check)
        return self

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(prefix={self._prefix!r}, "
            f"violations={sum(len(m) for m in self._violations.values())})"
        )


__all__ = ["Validator"]
