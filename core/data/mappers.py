"""Static mappers for domain entities ↔ database models."""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional
from uuid import UUID

from core.domain.entities.order import Order
from core.domain.enums import OrderStatus
from core.domain.value_objects import (
    CreditCardNumber,
    InvoiceAddress,
    OrderItem,
    OrderNumber,
)

from .models.order_model import OrderItemModel, OrderModel


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """SQLite drops tzinfo; stored values are always UTC."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class OrderItemMapper:
    """Static mapper for OrderItem ↔ OrderItemModel transformation."""

    @staticmethod
    def to_domain(model: OrderItemModel) -> OrderItem:
        """Convert ORM model to domain value object.

        Args:
            model: OrderItemModel instance

        Returns:
            OrderItem value object
        """
        return OrderItem(
            product_id=model.product_id,
            product_name=model.product_name,
            product_amount=model.product_amount,
            product_price=Decimal(str(model.product_price)),
        )

    @staticmethod
    def to_persistence(entity: OrderItem, order_id: str, position: int) -> OrderItemModel:
        """Convert domain value object to ORM model.

        Args:
            entity: OrderItem value object
            order_id: Owning order id
            position: Index of the item within the order

        Returns:
            OrderItemModel instance
        """
        return OrderItemModel(
            order_id=order_id,
            position=position,
            product_id=entity.product_id,
            product_name=entity.product_name,
            product_amount=entity.product_amount,
            product_price=entity.product_price,
        )


class OrderMapper:
    """Static mapper for Order ↔ OrderModel transformation with nested items."""

    @staticmethod
    def to_domain(model: OrderModel) -> Order:
        """Convert ORM model to domain aggregate (with nested items).

        Args:
            model: OrderModel instance

        Returns:
            Order domain aggregate
        """
        items = [OrderItemMapper.to_domain(item_model) for item_model in model.items]

        return Order.rehydrate(
            id=UUID(model.id),
            order_number=OrderNumber(value=model.order_number),
            invoice_email_address=model.invoice_email_address,
            invoice_address=InvoiceAddress(value=model.invoice_address),
            invoice_credit_card_number=CreditCardNumber(value=model.invoice_credit_card_number),
            items=items,
            status=OrderStatus(model.status),
            created_at=_as_utc(model.created_at),
            updated_at=_as_utc(model.updated_at),
            notes=model.notes,
        )

    @staticmethod
    def to_persistence(entity: Order) -> OrderModel:
        """Convert domain aggregate to ORM model (with nested items).

        Args:
            entity: Order domain aggregate

        Returns:
            OrderModel instance
        """
        order_id = str(entity.id)
        order_model = OrderModel(
            id=order_id,
            order_number=entity.order_number.value,
            invoice_email_address=entity.invoice_email_address,
            invoice_address=entity.invoice_address.value,
            invoice_credit_card_number=entity.invoice_credit_card_number.value,
            status=entity.status.value,
            notes=entity.notes,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

        order_model.items = [
            OrderItemMapper.to_persistence(item, order_id, position)
            for position, item in enumerate(entity.items)
        ]

        return order_model

    @staticmethod
    def update_persistence(entity: Order, model: OrderModel) -> OrderModel:
        """Update existing ORM model from domain entity (for updates).

        Args:
            entity: Order domain aggregate
            model: Existing OrderModel instance

        Returns:
            Updated OrderModel instance
        """
        model.invoice_email_address = entity.invoice_email_address
        model.invoice_address = entity.invoice_address.value
        model.invoice_credit_card_number = entity.invoice_credit_card_number.value
        model.status = entity.status.value
        model.notes = entity.notes
        model.updated_at = entity.updated_at

        # Clear and rebuild items
        model.items.clear()
        model.items.extend(
            OrderItemMapper.to_persistence(item, model.id, position)
            for position, item in enumerate(entity.items)
        )

        return model
