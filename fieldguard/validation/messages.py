# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Message templates used by the built-in checks."""

from typing import Final

FIELD_FORMAT: Final[str] = "{path} {message}"

MUST_NOT_BE_NULL: Final[str] = "must not be NULL"
MUST_BE_NULL: Final[str] = "must be NULL"
MUST_NOT_BE_EMPTY: Final[str] = "must not be EMPTY"
NOT_ALLOWED: Final[str] = "is not allowed"
ZERO_OR_NULL: Final[str] = "must be 0 or NULL"

SIZE: Final[str] = "must contain only <{size}> object(s)"
NOT_EQUALS: Final[str] = "doesn't equal to '{expected}'"
NOT_EQUALS_ANY: Final[str] = "actual value `{actual}` is not equal to any item of {candidates}"
