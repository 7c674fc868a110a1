"""
In-memory Order Repository Implementation.

Dict-backed storage for tests and for running the service without a
database.
"""
from typing import Dict, List, Optional
from uuid import UUID
import logging

from core.domain.entities.order import Order
from core.domain.exceptions import InvalidStateError, NotFoundError
from core.domain.repositories.order_repository import OrderRepository
from core.domain.value_objects import OrderNumber


logger = logging.getLogger(__name__)


class InMemoryOrderRepository(OrderRepository):
    """
    In-memory implementation of OrderRepository.

    Orders are keyed by order number; insertion order is kept so get_all()
    returns oldest first like the SQL implementation.
    """

    def __init__(self):
        """Initialize empty storage."""
        self._storage: Dict[str, Order] = {}
        logger.info("InMemoryOrderRepository initialized")

    async def get_by_id(self, order_id: UUID) -> Optional[Order]:
        for order in self._storage.values():
            if order.id == order_id:
                return order
        return None

    async def get_by_order_number(self, order_number: OrderNumber) -> Optional[Order]:
        order = self._storage.get(order_number.value)

        if order is None:
            logger.info(f"Order not found in memory: {order_number.value}")

        return order

    async def get_all(self) -> List[Order]:
        return list(self._storage.values())

    async def add(self, order: Order) -> Order:
        """
        Store a new order.

        Raises:
            InvalidStateError: Order number already stored
        """
        if order.order_number.value in self._storage:
            raise InvalidStateError(f"Order {order.order_number.value} already exists")

        self._storage[order.order_number.value] = order
        logger.info(f"Order saved to memory: {order.order_number.value} (status: {order.status.value})")
        return order

    async def update(self, order: Order) -> None:
        if order.order_number.value not in self._storage:
            raise NotFoundError(f"Order {order.order_number.value} not found")

        self._storage[order.order_number.value] = order

    async def delete(self, order: Order) -> None:
        if self._storage.pop(order.order_number.value, None) is None:
            logger.warning(f"Order not found for deletion: {order.order_number.value}")
        else:
            logger.info(f"Order deleted from memory: {order.order_number.value}")

    async def exists(self, order_number: OrderNumber) -> bool:
        return order_number.value in self._storage
