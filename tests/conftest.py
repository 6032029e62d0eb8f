"""Pytest fixtures for the fieldguard test-suite.

Provides a tiny order/customer/address domain model to validate and keeps
settings isolated from the developer's environment.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

import pytest

from fieldguard.config import reset_settings


# ---------------------------------------------------------------------------
# 1. Domain model used across the suite
# ---------------------------------------------------------------------------


@dataclass
class Address:
    city: Optional[str] = None
    zip_code: Optional[str] = None


@dataclass
class Customer:
    name: Optional[str] = None
    email: Optional[str] = None
    address: Optional[Address] = None


@dataclass
class Order:
    id: Optional[str] = None
    status: Optional[str] = None
    discount: Optional[float] = None
    customer: Optional[Customer] = None
    items: Optional[List[str]] = field(default_factory=list)


@pytest.fixture()
def valid_order() -> Order:  # noqa: D401
    """Return an order that passes every check used in the suite."""
    return Order(
        id="ORD-1",
        status="NEW",
        discount=0,
        customer=Customer(
            name="Alice",
            email="alice@example.com",
            address=Address(city="Berlin", zip_code="10115"),
        ),
        items=["book"],
    )


# ---------------------------------------------------------------------------
# 2. Global, reusable fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):  # noqa: D401
    """Ignore FIELDGUARD_* variables from the outer environment."""
    monkeypatch.delenv("FIELDGUARD_PATH_SEPARATOR", raising=False)
    monkeypatch.delenv("FIELDGUARD_METRICS", raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture(autouse=True)
def _silence_logging(caplog):  # noqa: D401
    """Reduce noise – most tests assert behaviour, not log output."""
    caplog.set_level("WARNING")
    yield
