"""
Order aggregate root.

CRITICAL: This file must contain ZERO imports from:
- sqlalchemy
- pydantic
- fastapi
"""
from datetime import datetime
from decimal import Decimal
from typing import Iterable, List, Optional, Tuple
from uuid import UUID, uuid4

from email_validator import EmailNotValidError, validate_email

from ..clock import Clock, RandomSource, utc_now
from ..enums import OrderStatus
from ..exceptions import InvalidArgumentError, InvalidStateError, NotFoundError
from ..value_objects import CreditCardNumber, InvoiceAddress, OrderItem, OrderNumber


MAX_ITEMS = 50
MAX_ORDER_TOTAL = Decimal("100000")
MAX_NOTES_LENGTH = 1000


def is_valid_email(email: str) -> bool:
    """Mailbox syntax check only: no DNS lookups, no deliverability policy."""
    try:
        validate_email(email, check_deliverability=False, globally_deliverable=False)
    except EmailNotValidError:
        return False
    return True


def _sum_totals(items: Iterable[OrderItem]) -> Decimal:
    return sum((item.total_price for item in items), Decimal("0"))


class Order:
    """
    Order aggregate root.

    All state changes go through the methods below; attributes are
    exposed read-only. Every method validates before touching any field,
    so a failed call leaves the order exactly as it was.

    Use `Order.create()` for new orders and `Order.rehydrate()` to rebuild
    one from storage.
    """

    def __init__(
        self,
        id: UUID,
        order_number: OrderNumber,
        invoice_email_address: str,
        invoice_address: InvoiceAddress,
        invoice_credit_card_number: CreditCardNumber,
        items: List[OrderItem],
        status: OrderStatus,
        created_at: datetime,
        updated_at: Optional[datetime] = None,
        notes: Optional[str] = None,
        clock: Clock = utc_now,
    ):
        self._id = id
        self._order_number = order_number
        self._invoice_email_address = invoice_email_address
        self._invoice_address = invoice_address
        self._invoice_credit_card_number = invoice_credit_card_number
        self._items: List[OrderItem] = list(items)
        self._status = status
        self._created_at = created_at
        self._updated_at = updated_at
        self._notes = notes
        self._clock = clock

    # =========================================================================
    # FACTORIES
    # =========================================================================

    @classmethod
    def create(
        cls,
        invoice_email_address: str,
        invoice_address: InvoiceAddress,
        invoice_credit_card_number: CreditCardNumber,
        items: List[OrderItem],
        notes: Optional[str] = None,
        *,
        clock: Clock = utc_now,
        rng: Optional[RandomSource] = None,
    ) -> "Order":
        """
        Factory method to create a new Order.

        Args:
            invoice_email_address: Billing email (normalized to trimmed lowercase)
            invoice_address: Billing address
            invoice_credit_card_number: Billing card
            items: Order lines (copied, the caller's list stays independent)
            notes: Optional free-text notes (max 1000 characters)
            clock: Source of the creation timestamp
            rng: Random source used for the order number suffix

        Returns:
            New Order in Pending status

        Raises:
            InvalidArgumentError: Missing or malformed input
            InvalidStateError: Order total or item count above the limits
        """
        if not isinstance(invoice_email_address, str) or not invoice_email_address.strip():
            raise InvalidArgumentError("email required")

        email = invoice_email_address.strip()
        if not is_valid_email(email):
            raise InvalidArgumentError("invalid email format")

        if invoice_address is None:
            raise InvalidArgumentError("invoice address required")

        if invoice_credit_card_number is None:
            raise InvalidArgumentError("credit card number required")

        if not items:
            raise InvalidArgumentError("at least one item required")

        items = list(items)

        # Business rule: maximum order value
        if _sum_totals(items) > MAX_ORDER_TOTAL:
            raise InvalidStateError(
                f"order total exceeds maximum of {MAX_ORDER_TOTAL}"
            )

        # Business rule: maximum items per order
        if len(items) > MAX_ITEMS:
            raise InvalidStateError(
                f"too many distinct products (max {MAX_ITEMS})"
            )

        _check_notes(notes)

        return cls(
            id=uuid4(),
            order_number=OrderNumber.generate(clock=clock, rng=rng),
            invoice_email_address=email.lower(),
            invoice_address=invoice_address,
            invoice_credit_card_number=invoice_credit_card_number,
            items=items,
            status=OrderStatus.PENDING,
            created_at=clock(),
            notes=notes,
            clock=clock,
        )

    @classmethod
    def rehydrate(
        cls,
        id: UUID,
        order_number: OrderNumber,
        invoice_email_address: str,
        invoice_address: InvoiceAddress,
        invoice_credit_card_number: CreditCardNumber,
        items: List[OrderItem],
        status: OrderStatus,
        created_at: datetime,
        updated_at: Optional[datetime] = None,
        notes: Optional[str] = None,
        clock: Clock = utc_now,
    ) -> "Order":
        """Rebuild a persisted order as-is (no new number, no timestamps touched)."""
        return cls(
            id=id,
            order_number=order_number,
            invoice_email_address=invoice_email_address,
            invoice_address=invoice_address,
            invoice_credit_card_number=invoice_credit_card_number,
            items=items,
            status=OrderStatus(status),
            created_at=created_at,
            updated_at=updated_at,
            notes=notes,
            clock=clock,
        )

    # =========================================================================
    # READ-ONLY STATE
    # =========================================================================

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def order_number(self) -> OrderNumber:
        return self._order_number

    @property
    def invoice_email_address(self) -> str:
        return self._invoice_email_address

    @property
    def invoice_address(self) -> InvoiceAddress:
        return self._invoice_address

    @property
    def invoice_credit_card_number(self) -> CreditCardNumber:
        return self._invoice_credit_card_number

    @property
    def items(self) -> Tuple[OrderItem, ...]:
        return tuple(self._items)

    @property
    def status(self) -> OrderStatus:
        return self._status

    @property
    def notes(self) -> Optional[str]:
        return self._notes

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> Optional[datetime]:
        return self._updated_at

    @property
    def total_amount(self) -> Decimal:
        return _sum_totals(self._items)

    # =========================================================================
    # STATUS
    # =========================================================================

    def can_transition_to(self, new_status: OrderStatus) -> bool:
        return self._status.can_transition_to(OrderStatus(new_status))

    def update_status(self, new_status: OrderStatus) -> None:
        """
        Move the order to a new status.

        Raises:
            InvalidStateError: Transition not allowed from the current status
        """
        new_status = OrderStatus(new_status)
        if not self._status.can_transition_to(new_status):
            raise InvalidStateError(
                f"cannot transition from {self._status.value} to {new_status.value}"
            )

        self._status = new_status
        self._touch()

    # =========================================================================
    # ITEMS
    # =========================================================================

    def add_item(self, item: OrderItem) -> None:
        """Append an item; Pending orders only."""
        self._ensure_pending()

        if len(self._items) >= MAX_ITEMS:
            raise InvalidStateError(f"cannot add more than {MAX_ITEMS} items to an order")

        if self.total_amount + item.total_price > MAX_ORDER_TOTAL:
            raise InvalidStateError(f"order total exceeds maximum of {MAX_ORDER_TOTAL}")

        self._items.append(item)
        self._touch()

    def remove_item(self, product_id: str) -> None:
        """
        Remove the item for product_id; absent products are ignored.

        Raises:
            InvalidStateError: Order not Pending, or product is the last item
        """
        self._ensure_pending()

        item = self._find_item(product_id)
        if item is None:
            return

        if len(self._items) == 1:
            raise InvalidStateError("order must keep at least one item")

        self._items.remove(item)
        self._touch()

    def update_item_quantity(self, product_id: str, new_quantity: int) -> None:
        """
        Replace the item for product_id with one carrying the new quantity.

        Raises:
            InvalidStateError: Order not Pending, or new total above the maximum
            NotFoundError: Product not in the order
            InvalidArgumentError: new_quantity <= 0
        """
        self._ensure_pending()

        item = self._find_item(product_id)
        if item is None:
            raise NotFoundError(f"Product {product_id} not found in order")

        if new_quantity <= 0:
            raise InvalidArgumentError("Quantity must be greater than zero")

        replacement = item.with_amount(new_quantity)
        if self.total_amount - item.total_price + replacement.total_price > MAX_ORDER_TOTAL:
            raise InvalidStateError(f"order total exceeds maximum of {MAX_ORDER_TOTAL}")

        # OrderItem is immutable: remove and re-add
        self._items.remove(item)
        self._items.append(replacement)
        self._touch()

    def contains_product(self, product_id: str) -> bool:
        return self._find_item(product_id) is not None

    def get_product_quantity(self, product_id: str) -> int:
        item = self._find_item(product_id)
        return item.product_amount if item else 0

    # =========================================================================
    # NOTES
    # =========================================================================

    def update_notes(self, notes: Optional[str]) -> None:
        _check_notes(notes)
        self._notes = notes
        self._touch()

    # =========================================================================
    # INTERNALS
    # =========================================================================

    def _ensure_pending(self) -> None:
        if self._status != OrderStatus.PENDING:
            raise InvalidStateError("cannot modify non-pending order")

    def _find_item(self, product_id: str) -> Optional[OrderItem]:
        for item in self._items:
            if item.product_id == product_id:
                return item
        return None

    def _touch(self) -> None:
        self._updated_at = self._clock()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Order):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"Order(order_number={self._order_number.value!r}, "
            f"status={self._status.value!r}, items={len(self._items)}, "
            f"total_amount={self.total_amount})"
        )


def _check_notes(notes: Optional[str]) -> None:
    if notes is not None and len(notes) > MAX_NOTES_LENGTH:
        raise InvalidArgumentError(f"Notes cannot exceed {MAX_NOTES_LENGTH} characters")
