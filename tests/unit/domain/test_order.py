"""
Tests for the Order aggregate.

Covers creation rules, the status machine, item mutation and notes.
"""
from datetime import datetime, timezone
from decimal import Decimal

import pytest

from core.domain.entities import MAX_ITEMS, Order
from core.domain.enums import OrderStatus
from core.domain.exceptions import InvalidArgumentError, InvalidStateError, NotFoundError
from core.domain.value_objects import OrderItem


def _create(items, invoice_address, credit_card, clock, rng, email="customer@example.com", **kwargs):
    return Order.create(email, invoice_address, credit_card, items, clock=clock, rng=rng, **kwargs)


@pytest.fixture
def order(items, invoice_address, credit_card, clock, rng) -> Order:
    return _create(items, invoice_address, credit_card, clock, rng)


class TestOrderCreate:

    def test_create_normalizes_and_totals(self, items, invoice_address, credit_card, clock, rng):
        order = _create(items, invoice_address, credit_card, clock, rng, email="Test@Example.com")

        assert order.invoice_email_address == "test@example.com"
        assert order.total_amount == Decimal("2999.98")
        assert order.status == OrderStatus.PENDING
        assert order.created_at == clock()
        assert order.updated_at is None
        assert order.order_number.value.startswith("ORD-20250101120000-")
        assert len(order.items) == 1

    def test_email_trimmed_before_check(self, items, invoice_address, credit_card, clock, rng):
        order = _create(items, invoice_address, credit_card, clock, rng, email="  A@B.COM ")

        assert order.invoice_email_address == "a@b.com"

    @pytest.mark.parametrize("email", ["", "   ", None])
    def test_missing_email(self, email, items, invoice_address, credit_card, clock, rng):
        with pytest.raises(InvalidArgumentError, match="email required"):
            _create(items, invoice_address, credit_card, clock, rng, email=email)

    @pytest.mark.parametrize(
        "email", ["buyer@shop.test", "ops@localhost", "a@b", "user@corp.local"]
    )
    def test_syntactically_valid_email_without_public_domain(
        self, email, items, invoice_address, credit_card, clock, rng
    ):
        order = _create(items, invoice_address, credit_card, clock, rng, email=email)

        assert order.invoice_email_address == email

    @pytest.mark.parametrize("email", ["invalid-email", "customer.example.com", "a@"])
    def test_malformed_email(self, email, items, invoice_address, credit_card, clock, rng):
        with pytest.raises(InvalidArgumentError, match="invalid email format"):
            _create(items, invoice_address, credit_card, clock, rng, email=email)

    def test_missing_address(self, items, credit_card, clock, rng):
        with pytest.raises(InvalidArgumentError, match="invoice address required"):
            _create(items, None, credit_card, clock, rng)

    def test_missing_card(self, items, invoice_address, clock, rng):
        with pytest.raises(InvalidArgumentError, match="credit card number required"):
            _create(items, invoice_address, None, clock, rng)

    @pytest.mark.parametrize("no_items", [[], None])
    def test_no_items(self, no_items, invoice_address, credit_card, clock, rng):
        with pytest.raises(InvalidArgumentError, match="at least one item required"):
            _create(no_items, invoice_address, credit_card, clock, rng)

    def test_total_above_maximum(self, invoice_address, credit_card, clock, rng):
        items = [OrderItem("P1", "Server Rack", 2, Decimal("50000.01"))]

        with pytest.raises(InvalidStateError, match="order total exceeds maximum"):
            _create(items, invoice_address, credit_card, clock, rng)

    def test_total_at_maximum_is_allowed(self, invoice_address, credit_card, clock, rng):
        items = [OrderItem("P1", "Server Rack", 2, Decimal("50000.00"))]

        order = _create(items, invoice_address, credit_card, clock, rng)

        assert order.total_amount == Decimal("100000.00")

    def test_too_many_items(self, invoice_address, credit_card, clock, rng):
        items = [OrderItem(f"P{i}", f"Product {i}", 1, Decimal("1.00")) for i in range(MAX_ITEMS + 1)]

        with pytest.raises(InvalidStateError, match="too many distinct products"):
            _create(items, invoice_address, credit_card, clock, rng)

    def test_exactly_max_items_is_allowed(self, invoice_address, credit_card, clock, rng):
        items = [OrderItem(f"P{i}", f"Product {i}", 1, Decimal("1.00")) for i in range(MAX_ITEMS)]

        order = _create(items, invoice_address, credit_card, clock, rng)

        assert len(order.items) == MAX_ITEMS

    def test_items_are_copied(self, items, invoice_address, credit_card, clock, rng):
        order = _create(items, invoice_address, credit_card, clock, rng)

        items.append(OrderItem("P2", "Mouse", 1, Decimal("10.00")))

        assert len(order.items) == 1

    def test_items_are_read_only(self, order):
        assert isinstance(order.items, tuple)

    def test_notes_length(self, items, invoice_address, credit_card, clock, rng):
        order = _create(items, invoice_address, credit_card, clock, rng, notes="x" * 1000)
        assert order.notes == "x" * 1000

        with pytest.raises(InvalidArgumentError):
            _create(items, invoice_address, credit_card, clock, rng, notes="x" * 1001)


class TestOrderStatusMachine:

    def test_happy_path(self, order, clock):
        for status in (
            OrderStatus.CONFIRMED,
            OrderStatus.PROCESSING,
            OrderStatus.SHIPPED,
            OrderStatus.DELIVERED,
        ):
            clock.advance(minutes=1)
            order.update_status(status)
            assert order.status == status
            assert order.updated_at == clock()

    def test_pending_to_delivered_fails(self, order):
        with pytest.raises(InvalidStateError, match="cannot transition from Pending to Delivered"):
            order.update_status(OrderStatus.DELIVERED)

        assert order.status == OrderStatus.PENDING
        assert order.updated_at is None

    def test_cancelled_is_terminal(self, order):
        order.update_status(OrderStatus.CANCELLED)

        with pytest.raises(InvalidStateError):
            order.update_status(OrderStatus.CONFIRMED)

    def test_accepts_status_string(self, order):
        order.update_status("Confirmed")

        assert order.status == OrderStatus.CONFIRMED

    def test_can_transition_to(self, order):
        assert order.can_transition_to(OrderStatus.CONFIRMED)
        assert not order.can_transition_to(OrderStatus.SHIPPED)


class TestOrderItems:

    def test_add_item(self, order, clock):
        clock.advance(seconds=30)

        order.add_item(OrderItem("67890", "Mouse", 3, Decimal("25.00")))

        assert order.total_amount == Decimal("3074.98")
        assert order.contains_product("67890")
        assert order.updated_at == clock()

    def test_add_item_on_confirmed_order_fails(self, order):
        order.update_status(OrderStatus.CONFIRMED)

        with pytest.raises(InvalidStateError, match="cannot modify non-pending order"):
            order.add_item(OrderItem("67890", "Mouse", 1, Decimal("25.00")))

    def test_add_item_respects_item_limit(self, invoice_address, credit_card, clock, rng):
        items = [OrderItem(f"P{i}", f"Product {i}", 1, Decimal("1.00")) for i in range(MAX_ITEMS)]
        order = _create(items, invoice_address, credit_card, clock, rng)

        with pytest.raises(InvalidStateError):
            order.add_item(OrderItem("EXTRA", "Extra", 1, Decimal("1.00")))

        assert len(order.items) == MAX_ITEMS

    def test_add_item_respects_total_limit(self, order):
        with pytest.raises(InvalidStateError, match="order total exceeds maximum"):
            order.add_item(OrderItem("BIG", "Big", 1, Decimal("99000.00")))

        assert order.total_amount == Decimal("2999.98")

    def test_remove_item(self, order, clock):
        order.add_item(OrderItem("67890", "Mouse", 1, Decimal("25.00")))
        clock.advance(seconds=5)

        order.remove_item("67890")

        assert not order.contains_product("67890")
        assert order.total_amount == Decimal("2999.98")
        assert order.updated_at == clock()

    def test_remove_missing_item_is_noop(self, order):
        order.remove_item("nope")

        assert len(order.items) == 1
        assert order.updated_at is None

    def test_remove_last_item_fails(self, order):
        with pytest.raises(InvalidStateError, match="at least one item"):
            order.remove_item("12345")

        assert order.contains_product("12345")
        assert order.total_amount == Decimal("2999.98")
        assert order.updated_at is None

    def test_update_item_quantity(self, order, clock):
        clock.advance(minutes=5)

        order.update_item_quantity("12345", 5)

        assert order.get_product_quantity("12345") == 5
        assert order.total_amount == Decimal("7499.95")
        assert order.updated_at == clock()
        assert len(order.items) == 1

    def test_update_quantity_unknown_product(self, order):
        with pytest.raises(NotFoundError):
            order.update_item_quantity("nope", 2)

    @pytest.mark.parametrize("quantity", [0, -3])
    def test_update_quantity_non_positive(self, order, quantity):
        with pytest.raises(InvalidArgumentError):
            order.update_item_quantity("12345", quantity)

        assert order.get_product_quantity("12345") == 2

    def test_update_quantity_respects_total_limit(self, order):
        with pytest.raises(InvalidStateError):
            order.update_item_quantity("12345", 100)

        assert order.get_product_quantity("12345") == 2

    def test_get_product_quantity_absent(self, order):
        assert order.get_product_quantity("nope") == 0


class TestOrderNotesAndIdentity:

    def test_update_notes(self, order, clock):
        clock.advance(seconds=1)

        order.update_notes("Leave at the door")

        assert order.notes == "Leave at the door"
        assert order.updated_at == clock()

    def test_update_notes_too_long(self, order):
        with pytest.raises(InvalidArgumentError):
            order.update_notes("x" * 1001)

        assert order.notes is None

    def test_equality_by_id(self, order):
        twin = Order.rehydrate(
            id=order.id,
            order_number=order.order_number,
            invoice_email_address="other@example.com",
            invoice_address=order.invoice_address,
            invoice_credit_card_number=order.invoice_credit_card_number,
            items=list(order.items),
            status=OrderStatus.CONFIRMED,
            created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
        )

        assert twin == order
        assert hash(twin) == hash(order)
        assert twin.status == OrderStatus.CONFIRMED
