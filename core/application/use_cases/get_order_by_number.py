"""Get Order By Number Use Case."""
import logging
from typing import Optional

from core.application.dtos.order_dto import OrderResponse
from core.domain.repositories.order_repository import OrderRepository
from core.domain.value_objects import OrderNumber


logger = logging.getLogger(__name__)


class GetOrderByNumberUseCase:
    """Look an order up by its business key."""

    def __init__(self, order_repository: OrderRepository):
        self.order_repository = order_repository

    async def execute(self, order_number: str) -> Optional[OrderResponse]:
        """
        Args:
            order_number: Raw order number from the caller

        Returns:
            OrderResponse if found, None otherwise

        Raises:
            InvalidArgumentError: order_number is empty or not 3-30 characters
        """
        number = OrderNumber(value=order_number)
        order = await self.order_repository.get_by_order_number(number)

        if order is None:
            return None

        logger.debug(f"Order retrieved: {number.value}")
        return OrderResponse.from_domain(order)
