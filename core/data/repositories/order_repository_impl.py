"""SQLAlchemy implementation of OrderRepository."""

import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from core.domain.entities.order import Order
from core.domain.exceptions import NotFoundError
from core.domain.repositories.order_repository import OrderRepository
from core.domain.value_objects import OrderNumber

from ..mappers import OrderMapper
from ..models.order_model import OrderModel


logger = logging.getLogger(__name__)


class SqlAlchemyOrderRepository(OrderRepository):
    """
    Concrete implementation of OrderRepository using SQLAlchemy.

    Writes are flushed, never committed: the Unit of Work owns the
    transaction.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with SQLAlchemy session.

        Args:
            session: SQLAlchemy async session
        """
        self._session = session

    async def get_by_id(self, order_id: UUID) -> Optional[Order]:
        model = await self._session.get(OrderModel, str(order_id))
        return OrderMapper.to_domain(model) if model else None

    async def get_by_order_number(self, order_number: OrderNumber) -> Optional[Order]:
        """Retrieve order by business key.

        Args:
            order_number: OrderNumber identifier

        Returns:
            Order if found, None otherwise
        """
        model = await self._find_model(order_number)

        if not model:
            logger.info(f"Order not found: {order_number.value}")
            return None

        return OrderMapper.to_domain(model)

    async def get_all(self) -> List[Order]:
        result = await self._session.execute(
            select(OrderModel).order_by(OrderModel.created_at)
        )
        models = result.scalars().all()

        return [OrderMapper.to_domain(model) for model in models]

    async def add(self, order: Order) -> Order:
        """Insert a new order.

        Args:
            order: Order domain aggregate

        Returns:
            The same order
        """
        self._session.add(OrderMapper.to_persistence(order))
        await self._session.flush()  # Propagate to DB without committing

        logger.info(f"Order added: {order.order_number.value} ({len(order.items)} item(s))")
        return order

    async def update(self, order: Order) -> None:
        """Write aggregate changes back to its row.

        Raises:
            NotFoundError: Order was never added
        """
        model = await self._session.get(OrderModel, str(order.id))
        if model is None:
            raise NotFoundError(f"Order {order.order_number.value} not found")

        OrderMapper.update_persistence(order, model)
        await self._session.flush()

        logger.info(f"Order updated: {order.order_number.value} (status: {order.status.value})")

    async def delete(self, order: Order) -> None:
        model = await self._session.get(OrderModel, str(order.id))

        if model is None:
            logger.warning(f"Order not found for deletion: {order.order_number.value}")
            return

        await self._session.delete(model)
        await self._session.flush()
        logger.info(f"Order deleted: {order.order_number.value}")

    async def exists(self, order_number: OrderNumber) -> bool:
        """Check if order already exists (duplicate prevention).

        Args:
            order_number: OrderNumber identifier

        Returns:
            True if order exists, False otherwise
        """
        result = await self._session.execute(
            select(OrderModel.id).where(OrderModel.order_number == order_number.value)
        )
        return result.scalar_one_or_none() is not None

    async def _find_model(self, order_number: OrderNumber) -> Optional[OrderModel]:
        result = await self._session.execute(
            select(OrderModel).where(OrderModel.order_number == order_number.value)
        )
        return result.scalar_one_or_none()
