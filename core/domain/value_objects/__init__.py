"""Domain value objects."""

from .order_number import OrderNumber
from .invoice_address import InvoiceAddress
from .credit_card_number import CreditCardNumber, is_valid_luhn
from .order_item import OrderItem

__all__ = [
    "CreditCardNumber",
    "InvoiceAddress",
    "OrderItem",
    "OrderNumber",
    "is_valid_luhn",
]
