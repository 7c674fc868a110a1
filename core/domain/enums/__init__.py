"""Domain enums."""
from .order_status import ALLOWED_TRANSITIONS, OrderStatus

__all__ = ["ALLOWED_TRANSITIONS", "OrderStatus"]
