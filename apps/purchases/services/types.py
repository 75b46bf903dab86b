"""
Typed purchase request structures.

A purchase request is validated once, when these objects are built. The
processor only ever receives well-formed requests, so malformed input is
rejected before any transaction is opened.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from .exceptions import PurchaseValidationError

CENT = Decimal('0.01')

# Largest values the dispatch line and record columns can hold
MAX_UNIT_PRICE = Decimal('99999999.99')
MAX_TOTAL_AMOUNT = Decimal('9999999999.99')


@dataclass(frozen=True)
class CartLine:
    """One (item, quantity, unit price) entry of a cart."""

    item_id: UUID
    quantity: int
    unit_price: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.item_id, UUID):
            raise PurchaseValidationError(
                f"Cart line item id must be a UUID, got {self.item_id!r}"
            )
        # bool is an int subclass
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise PurchaseValidationError(
                f"Quantity must be an integer, got {type(self.quantity).__name__}"
            )
        if self.quantity <= 0:
            raise PurchaseValidationError(
                f"Quantity must be positive, got {self.quantity}"
            )
        if not isinstance(self.unit_price, Decimal) or not self.unit_price.is_finite():
            raise PurchaseValidationError(
                f"Unit price must be a finite Decimal, got {self.unit_price!r}"
            )
        if self.unit_price < 0:
            raise PurchaseValidationError(
                f"Unit price cannot be negative, got {self.unit_price}"
            )
        if self.unit_price != self.unit_price.quantize(CENT):
            raise PurchaseValidationError(
                f"Unit price cannot have more than two decimal places, got {self.unit_price}"
            )
        if self.unit_price > MAX_UNIT_PRICE:
            raise PurchaseValidationError(
                f"Unit price cannot exceed {MAX_UNIT_PRICE}, got {self.unit_price}"
            )

    @property
    def subtotal(self) -> Decimal:
        return self.quantity * self.unit_price


@dataclass(frozen=True)
class CustomerDetails:
    """Who receives the dispatch. The address is optional."""

    name: str
    email: str
    address: str = ''

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise PurchaseValidationError("Customer name is required")
        if not isinstance(self.email, str) or not self.email.strip():
            raise PurchaseValidationError("Customer email is required")
        if not isinstance(self.address, str):
            raise PurchaseValidationError("Customer address must be text")


@dataclass(frozen=True)
class PurchaseRequest:
    """A complete, validated purchase: cart plus delivery and customer details."""

    cart: tuple[CartLine, ...]
    delivery_date: date
    customer: CustomerDetails

    def __post_init__(self) -> None:
        if not isinstance(self.cart, tuple):
            raise PurchaseValidationError("Cart must be a tuple of cart lines")
        if not self.cart:
            raise PurchaseValidationError("Cart is empty")
        if not all(isinstance(line, CartLine) for line in self.cart):
            raise PurchaseValidationError("Cart may only contain cart lines")
        # datetime is a date subclass; a delivery date has no time of day
        if isinstance(self.delivery_date, datetime) or not isinstance(self.delivery_date, date):
            raise PurchaseValidationError("Delivery date must be a date")
        if not isinstance(self.customer, CustomerDetails):
            raise PurchaseValidationError("Customer details are required")
        if self.total_amount > MAX_TOTAL_AMOUNT:
            raise PurchaseValidationError(
                f"Purchase total cannot exceed {MAX_TOTAL_AMOUNT}, got {self.total_amount}"
            )

    @property
    def total_amount(self) -> Decimal:
        return sum((line.subtotal for line in self.cart), Decimal('0.00'))

    @classmethod
    def from_cart(cls, *, cart_items, delivery_date, customer_name, customer_email, customer_address=''):
        """
        Build a request from plain values, e.g. validated serializer data.

        Args:
            cart_items: Iterable of dicts with ``item_id``, ``quantity``
                and ``unit_price`` keys.
            delivery_date: Suggested delivery date.
            customer_name: Customer's name.
            customer_email: Customer's email.
            customer_address: Delivery address, may be empty.

        Raises:
            PurchaseValidationError: If any value is malformed.
        """
        return cls(
            cart=tuple(
                CartLine(
                    item_id=line['item_id'],
                    quantity=line['quantity'],
                    unit_price=line['unit_price'],
                )
                for line in cart_items
            ),
            delivery_date=delivery_date,
            customer=CustomerDetails(
                name=customer_name,
                email=customer_email,
                address=customer_address,
            ),
        )
