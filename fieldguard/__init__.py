# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""fieldguard - validate all fields of an object in one go.

Build a chain of checks against a root value, descend into nested objects
with :meth:`Validator.map`, and collect every failure keyed by its dotted
field path:

.. code-block:: python

    from fieldguard import Validator

    Validator.of(order) \\
        .description("Order is invalid: ") \\
        .string_not_empty("id", lambda o: o.id) \\
        .map("customer", lambda o: o.customer, lambda c: c.non_null("email", lambda x: x.email)) \\
        .or_else_raise()
"""

from .config import Settings, get_settings, load_settings
from .exceptions import ConfigurationError, FieldGuardError, ValidationError
from .validation import Validator, merge_violations

__version__ = "0.3.0"

__all__ = [
    "Validator",
    "merge_violations",
    "Settings",
    "get_settings",
    "load_settings",
    "FieldGuardError",
    "ValidationError",
    "ConfigurationError",
    "__version__",
]
