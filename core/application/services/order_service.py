"""Application service for Order operations."""

import logging
from typing import Optional

from sqlalchemy.ext.asyncio import async_sessionmaker

from core.application.dtos.order_dto import CreateOrderRequest, OrderResponse
from core.application.use_cases import CreateOrderUseCase, GetOrderByNumberUseCase
from core.data.uow import create_uow
from core.domain.clock import Clock, RandomSource, utc_now


logger = logging.getLogger(__name__)


class OrderApplicationService:
    """
    Application service for orchestrating order operations.

    Responsibilities:
    - Open one Unit of Work per call
    - Run the matching use case against the UoW repository
    - Commit only when the use case finished without error
    """

    def __init__(
        self,
        session_factory: async_sessionmaker,
        clock: Clock = utc_now,
        rng: Optional[RandomSource] = None,
    ) -> None:
        """Initialize order application service.

        Args:
            session_factory: SQLAlchemy async session factory
            clock: Time source passed down to new orders
            rng: Random source for order number suffixes
        """
        self._session_factory = session_factory
        self._clock = clock
        self._rng = rng

    async def create_order(self, request: CreateOrderRequest) -> OrderResponse:
        """Create a new order.

        Args:
            request: CreateOrderRequest DTO

        Returns:
            OrderResponse with the stored order
        """
        async with create_uow(self._session_factory) as uow:
            use_case = CreateOrderUseCase(uow.orders, clock=self._clock, rng=self._rng)
            response = await use_case.execute(request)
            await uow.commit()
            return response

    async def get_order(self, order_number: str) -> Optional[OrderResponse]:
        """Get order by its order number.

        Returns:
            OrderResponse if found, None otherwise
        """
        async with create_uow(self._session_factory) as uow:
            return await GetOrderByNumberUseCase(uow.orders).execute(order_number)
