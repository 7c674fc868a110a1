"""Application DTOs for Order operations."""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Annotated, List, Optional

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, field_validator
from pydantic.alias_generators import to_camel

from core.domain.entities.order import Order
from core.domain.value_objects.credit_card_number import MAX_DIGITS, MIN_DIGITS, strip_separators


# Money goes over the wire as a JSON number, not a string
JsonDecimal = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class CamelModel(BaseModel):
    """Base for DTOs exchanged as camelCase JSON."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


# =============================================================================
# REQUESTS
# =============================================================================

class CreateOrderItemRequest(CamelModel):
    """Request DTO for one order line."""

    product_id: str = Field(..., min_length=1, max_length=50, description="Product identifier")
    product_name: str = Field(..., min_length=1, max_length=200, description="Product name")
    product_amount: int = Field(..., gt=0, le=1000, description="Quantity ordered")
    product_price: Decimal = Field(
        ..., gt=0, le=Decimal("999999.99"), decimal_places=2, description="Unit price"
    )

    @field_validator("product_id", "product_name")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value


class CreateOrderRequest(CamelModel):
    """Request DTO for creating an order."""

    items: List[CreateOrderItemRequest] = Field(..., min_length=1, description="Order items")
    invoice_address: str = Field(..., min_length=10, max_length=500, description="Billing address")
    invoice_email_address: str = Field(..., description="Billing email address")
    invoice_credit_card_number: str = Field(..., description="Card number (digits, spaces or hyphens)")

    @field_validator("invoice_email_address")
    @classmethod
    def valid_email(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Invoice email address is required")
        try:
            validate_email(value.strip(), check_deliverability=False, globally_deliverable=False)
        except EmailNotValidError:
            raise ValueError("Please provide a valid email address format (e.g., customer@example.com)")
        return value

    @field_validator("invoice_credit_card_number")
    @classmethod
    def valid_card_format(cls, value: str) -> str:
        cleaned = strip_separators(value)
        if not (cleaned.isascii() and cleaned.isdigit() and MIN_DIGITS <= len(cleaned) <= MAX_DIGITS):
            raise ValueError(
                f"Credit card number must contain only digits, spaces or hyphens "
                f"and have {MIN_DIGITS}-{MAX_DIGITS} digits"
            )
        return value


# =============================================================================
# RESPONSES
# =============================================================================

class OrderItemResponse(CamelModel):
    """Response DTO for one order line."""

    product_id: str
    product_name: str
    product_amount: int
    product_price: JsonDecimal


class OrderResponse(CamelModel):
    """Response DTO for order details."""

    order_number: str = Field(..., description="Order number (ORD-...)")
    items: List[OrderItemResponse] = Field(default_factory=list)
    invoice_address: str
    invoice_email_address: str
    invoice_credit_card_number: str = Field(..., description="Masked card number")
    status: str
    total_amount: JsonDecimal
    created_at: datetime

    @classmethod
    def from_domain(cls, order: Order) -> "OrderResponse":
        """Transform Order aggregate to OrderResponse.

        The card is only ever exposed masked.
        """
        return cls(
            order_number=order.order_number.value,
            items=[
                OrderItemResponse(
                    product_id=item.product_id,
                    product_name=item.product_name,
                    product_amount=item.product_amount,
                    product_price=item.product_price,
                )
                for item in order.items
            ],
            invoice_address=order.invoice_address.value,
            invoice_email_address=order.invoice_email_address,
            invoice_credit_card_number=order.invoice_credit_card_number.masked_value,
            status=order.status.value,
            total_amount=order.total_amount,
            created_at=order.created_at,
        )


class ValidationErrorDetail(CamelModel):
    """One field-level validation problem."""

    field: str
    message: str


class ErrorResponse(CamelModel):
    """Body of every 4xx/5xx response."""

    title: str
    message: str
    status_code: int
    errors: List[ValidationErrorDetail] = Field(default_factory=list)
    trace_id: Optional[str] = None
    request_path: Optional[str] = None
    request_method: Optional[str] = None
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
