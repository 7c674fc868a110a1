"""Repository interfaces for Order aggregate."""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from ..entities.order import Order
from ..value_objects import OrderNumber


class OrderRepository(ABC):
    """Abstract repository for Order aggregate persistence."""

    @abstractmethod
    async def get_by_id(self, order_id: UUID) -> Optional[Order]:
        """Retrieve order by its surrogate identifier.

        Args:
            order_id: Order UUID

        Returns:
            Order if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_by_order_number(self, order_number: OrderNumber) -> Optional[Order]:
        """Retrieve order by its business key.

        Args:
            order_number: OrderNumber identifier

        Returns:
            Order if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_all(self) -> List[Order]:
        """List every stored order, oldest first."""
        pass

    @abstractmethod
    async def add(self, order: Order) -> Order:
        """Persist a new order aggregate.

        Args:
            order: Order aggregate to persist

        Returns:
            The persisted order
        """
        pass

    @abstractmethod
    async def update(self, order: Order) -> None:
        """Persist changes made to an existing order."""
        pass

    @abstractmethod
    async def delete(self, order: Order) -> None:
        """Remove an order (bypasses aggregate rules)."""
        pass

    @abstractmethod
    async def exists(self, order_number: OrderNumber) -> bool:
        """Check if an order with this number is stored.

        Args:
            order_number: OrderNumber identifier

        Returns:
            True if order exists, False otherwise
        """
        pass
