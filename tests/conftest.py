"""Shared fixtures: deterministic clock and random source, sample order data."""

import random
from decimal import Decimal
from typing import List

import pytest

from core.domain.clock import FixedClock
from core.domain.value_objects import CreditCardNumber, InvoiceAddress, OrderItem


VALID_CARD = "4532-0151-1283-0366"
VALID_EMAIL = "customer@example.com"
VALID_ADDRESS = "123 Main Street, Springfield, IL 62701"


@pytest.fixture
def clock() -> FixedClock:
    """Clock frozen at 2025-01-01 12:00:00 UTC."""
    return FixedClock()


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source."""
    return random.Random(42)


@pytest.fixture
def invoice_address() -> InvoiceAddress:
    return InvoiceAddress(value=VALID_ADDRESS)


@pytest.fixture
def credit_card() -> CreditCardNumber:
    return CreditCardNumber.create(VALID_CARD)


@pytest.fixture
def items() -> List[OrderItem]:
    return [
        OrderItem(
            product_id="12345",
            product_name="Gaming Laptop",
            product_amount=2,
            product_price=Decimal("1499.99"),
        )
    ]


@pytest.fixture
def order_payload() -> dict:
    """camelCase body accepted by POST /api/orders."""
    return {
        "items": [
            {
                "productId": "12345",
                "productName": "Gaming Laptop",
                "productAmount": 2,
                "productPrice": 1499.99,
            }
        ],
        "invoiceAddress": VALID_ADDRESS,
        "invoiceEmailAddress": "Customer@Example.com",
        "invoiceCreditCardNumber": VALID_CARD,
    }
