"""Application DTOs."""

from .order_dto import (
    CreateOrderItemRequest,
    CreateOrderRequest,
    ErrorResponse,
    OrderItemResponse,
    OrderResponse,
    ValidationErrorDetail,
)

__all__ = [
    "CreateOrderItemRequest",
    "CreateOrderRequest",
    "ErrorResponse",
    "OrderItemResponse",
    "OrderResponse",
    "ValidationErrorDetail",
]
