"""
Create Order Use Case.

Flow:
1. Build value objects (address, card, items) from the request
2. Create the Order aggregate (every business rule checked up front)
3. Persist it through the repository
"""
import logging
from typing import Optional

from core.application.dtos.order_dto import CreateOrderRequest, OrderResponse
from core.domain.clock import Clock, RandomSource, utc_now
from core.domain.entities.order import Order
from core.domain.repositories.order_repository import OrderRepository
from core.domain.value_objects import CreditCardNumber, InvoiceAddress, OrderItem


logger = logging.getLogger(__name__)


class CreateOrderUseCase:
    """Validate, build and store a new order."""

    def __init__(
        self,
        order_repository: OrderRepository,
        clock: Clock = utc_now,
        rng: Optional[RandomSource] = None,
    ):
        """
        Initialize use case with dependencies.

        Args:
            order_repository: Repository for order persistence
            clock: Time source for order numbers and timestamps
            rng: Random source for order number suffixes
        """
        self.order_repository = order_repository
        self.clock = clock
        self.rng = rng

    async def execute(self, request: CreateOrderRequest) -> OrderResponse:
        """
        Execute the create workflow.

        Raises:
            InvalidArgumentError: Malformed field in the request
            InvalidStateError: Order breaks a business limit
        """
        invoice_address = InvoiceAddress(value=request.invoice_address)
        credit_card = CreditCardNumber.create(request.invoice_credit_card_number)

        items = [
            OrderItem(
                product_id=item.product_id,
                product_name=item.product_name,
                product_amount=item.product_amount,
                product_price=item.product_price,
            )
            for item in request.items
        ]

        order = Order.create(
            request.invoice_email_address,
            invoice_address,
            credit_card,
            items,
            clock=self.clock,
            rng=self.rng,
        )

        created = await self.order_repository.add(order)

        logger.info(
            f"Order created: {created.order_number.value} "
            f"(items={len(created.items)}, total={created.total_amount})"
        )
        return OrderResponse.from_domain(created)
