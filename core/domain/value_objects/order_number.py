"""Order number value object."""
from dataclasses import dataclass
from typing import Optional

from ..clock import Clock, RandomSource, default_random, utc_now
from ..exceptions import InvalidArgumentError


MIN_LENGTH = 3
MAX_LENGTH = 30
PREFIX = "ORD-"


@dataclass(frozen=True)
class OrderNumber:
    """
    Business key of an order.

    Format of generated numbers: ORD-<yyyyMMddHHmmss UTC>-<4 random digits>
    Examples:
    - ORD-20250113103000-4821
    - ORD-20250113103001-1077

    Any 3-30 character string is accepted when looking an order up.
    """
    value: str

    def __post_init__(self):
        if not isinstance(self.value, str) or not self.value.strip():
            raise InvalidArgumentError("Order number cannot be null or empty")

        if not (MIN_LENGTH <= len(self.value) <= MAX_LENGTH):
            raise InvalidArgumentError(
                f"Order number must be between {MIN_LENGTH} and {MAX_LENGTH} characters"
            )

    @classmethod
    def generate(
        cls,
        clock: Clock = utc_now,
        rng: Optional[RandomSource] = None,
    ) -> "OrderNumber":
        """Generate a new order number from the given clock and random source."""
        rng = rng or default_random()
        timestamp = clock().strftime("%Y%m%d%H%M%S")
        suffix = rng.randint(1000, 9998)
        return cls(value=f"{PREFIX}{timestamp}-{suffix}")

    def __str__(self) -> str:
        return self.value
