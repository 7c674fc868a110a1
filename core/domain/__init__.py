"""Domain layer - pure domain models and interfaces."""

from .entities import Order
from .enums import OrderStatus
from .exceptions import DomainError, InvalidArgumentError, InvalidStateError, NotFoundError
from .repositories import OrderRepository
from .value_objects import CreditCardNumber, InvoiceAddress, OrderItem, OrderNumber

__all__ = [
    "CreditCardNumber",
    "DomainError",
    "InvalidArgumentError",
    "InvalidStateError",
    "InvoiceAddress",
    "NotFoundError",
    "Order",
    "OrderItem",
    "OrderNumber",
    "OrderRepository",
    "OrderStatus",
]
