# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Order Validation Demo: Every Broken Field in One Pass.

This demo shows how fieldguard validates a whole object graph at once and
reports every problem keyed by its dotted field path, instead of stopping at
the first failure.

Run with:
    python examples/order_validation_demo.py
"""

from dataclasses import dataclass, field
from typing import List, Optional

from fieldguard import ValidationError, Validator


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
    items: List[str] = field(default_factory=list)


def validate_order(order: Order) -> Validator[Order]:
    return (
        Validator.of(order)
        .description("Order rejected: ")
        .string_not_empty("id", lambda o: o.id)
        .equals_any("status", lambda o: o.status, "NEW", "PAID", "SHIPPED")
        .is_zero_or_null("discount", lambda o: o.discount)
        .collection_is_not_empty("items", lambda o: o.items)
        .map(
            "customer",
            lambda o: o.customer,
            lambda customer: customer.string_not_empty("name", lambda c: c.name)
            .validate("email", "must contain '@'", lambda c: "@" in c.email)
            .map(
                "address",
                lambda c: c.address,
                lambda address: address.string_not_empty("city", lambda a: a.city),
            ),
        )
    )


def demo_valid_order():
    """Show that a clean order produces no violations."""
    print("\n" + "=" * 70)
    print("DEMO 1: Valid Order")
    print("=" * 70)

    order = Order(
        id="ORD-42",
        status="NEW",
        discount=0,
        customer=Customer(name="Alice", email="alice@example.com", address=Address(city="Berlin")),
        items=["book"],
    )
    validator = validate_order(order)
    print(f"  has_violations(): {validator.has_violations()}")
    validator.or_else_raise()
    print("  Result: SUCCESS - or_else_raise() returned quietly")


def demo_broken_order():
    """Show the structured error for an order with several problems."""
    print("\n" + "=" * 70)
    print("DEMO 2: Broken Order, Structured Error")
    print("=" * 70)

    order = Order(
        id="",
        status="LOST",
        discount=0.15,
        customer=Customer(name="Bob", email=None, address=None),
    )
    try:
        validate_order(order).or_else_raise()
        print("  Result: FAIL - order accepted (should have been rejected)")
    except ValidationError as e:
        print("  Result: SUCCESS - order rejected")
        for path, messages in e.violations.items():
            for message in messages:
                print(f"    {path}: {message}")
        print("\n  What happened:")
        print("    - customer.email raised inside the predicate and counted as a failure")
        print("    - customer.address was missing, so its checks were replaced by one NULL violation")


def demo_custom_error():
    """Show how a factory turns the report into an application error."""
    print("\n" + "=" * 70)
    print("DEMO 3: Custom Error Factory")
    print("=" * 70)

    class BadRequest(Exception):
        pass

    try:
        validate_order(Order(id="ORD-7", status="NEW")).or_else_raise(BadRequest)
    except BadRequest as e:
        print(f"  BadRequest: {e}")


def main():
    demo_valid_order()
    demo_broken_order()
    demo_custom_error()
    print("\n" + "=" * 70)
    print("Demo Complete!")
    print("=" * 70)


if __name__ == "__main__":
    main()
