"""SQLAlchemy ORM models for Order aggregate."""

import uuid

from sqlalchemy import Column, DateTime, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import relationship

from .base import Base


class OrderModel(Base):
    """SQLAlchemy ORM model for orders table."""

    __tablename__ = "orders"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    order_number = Column(String(30), unique=True, nullable=False, index=True)
    invoice_email_address = Column(String(255), nullable=False)
    invoice_address = Column(String(500), nullable=False)
    invoice_credit_card_number = Column(String(64), nullable=False)
    status = Column(String(20), nullable=False, default="Pending")
    notes = Column(String(1000), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=True)

    # Relationship to items (eager, async sessions cannot lazy-load)
    items = relationship(
        "OrderItemModel",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItemModel.position",
        lazy="selectin",
    )


class OrderItemModel(Base):
    """SQLAlchemy ORM model for order_items table."""

    __tablename__ = "order_items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    order_id = Column(String(36), ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True)
    position = Column(Integer, nullable=False, default=0)
    product_id = Column(String(50), nullable=False)
    product_name = Column(String(200), nullable=False)
    product_amount = Column(Integer, nullable=False)
    product_price = Column(Numeric(18, 2), nullable=False)

    # Relationship back to order
    order = relationship("OrderModel", back_populates="items")
