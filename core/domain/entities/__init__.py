"""Domain entities."""
from .order import MAX_ITEMS, MAX_NOTES_LENGTH, MAX_ORDER_TOTAL, Order

__all__ = ["MAX_ITEMS", "MAX_NOTES_LENGTH", "MAX_ORDER_TOTAL", "Order"]
