"""Application layer - services, use cases and DTOs."""

from .dtos import (
    CreateOrderItemRequest,
    CreateOrderRequest,
    ErrorResponse,
    OrderItemResponse,
    OrderResponse,
    ValidationErrorDetail,
)
from .services import OrderApplicationService
from .use_cases import CreateOrderUseCase, GetOrderByNumberUseCase

__all__ = [
    # DTOs
    "CreateOrderItemRequest",
    "CreateOrderRequest",
    "ErrorResponse",
    "OrderItemResponse",
    "OrderResponse",
    "ValidationErrorDetail",
    # Services
    "OrderApplicationService",
    # Use Cases
    "CreateOrderUseCase",
    "GetOrderByNumberUseCase",
]
