"""Application use cases."""
from .create_order import CreateOrderUseCase
from .get_order_by_number import GetOrderByNumberUseCase

__all__ = [
    "CreateOrderUseCase",
    "GetOrderByNumberUseCase",
]
