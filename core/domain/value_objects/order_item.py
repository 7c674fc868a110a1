"""Order line item value object."""
from dataclasses import dataclass, replace
from decimal import Decimal, InvalidOperation

from ..exceptions import InvalidArgumentError


# Prices are whole cents
CENT = Decimal("0.01")


@dataclass(frozen=True)
class OrderItem:
    """
    One product line of an order.

    Immutable: changing the quantity means replacing the item
    (see `with_amount`).

    CRITICAL: product_price is always a Decimal, never float!
    """
    product_id: str
    product_name: str
    product_amount: int
    product_price: Decimal

    def __post_init__(self):
        if not isinstance(self.product_id, str) or not self.product_id.strip():
            raise InvalidArgumentError("Product ID cannot be null or empty")

        if not isinstance(self.product_name, str) or not self.product_name.strip():
            raise InvalidArgumentError("Product name cannot be null or empty")

        if (
            isinstance(self.product_amount, bool)
            or not isinstance(self.product_amount, int)
            or self.product_amount <= 0
        ):
            raise InvalidArgumentError("Product amount must be greater than zero")

        price = self.product_price
        if not isinstance(price, Decimal):
            try:
                price = Decimal(str(price))
            except InvalidOperation:
                raise InvalidArgumentError("Product price must be a valid decimal number")

        if not price.is_finite() or price <= 0:
            raise InvalidArgumentError("Product price must be greater than zero")

        try:
            whole_cents = price == price.quantize(CENT)
        except InvalidOperation:
            whole_cents = False
        if not whole_cents:
            raise InvalidArgumentError("Product price cannot have more than 2 decimal places")

        object.__setattr__(self, 'product_id', self.product_id.strip())
        object.__setattr__(self, 'product_name', self.product_name.strip())
        object.__setattr__(self, 'product_price', price)

    @property
    def total_price(self) -> Decimal:
        return self.product_price * self.product_amount

    def with_amount(self, product_amount: int) -> "OrderItem":
        """Return a copy of this item with a different quantity."""
        return replace(self, product_amount=product_amount)
