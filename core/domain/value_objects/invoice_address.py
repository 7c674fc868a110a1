"""Invoice address value object."""
from dataclasses import dataclass

from ..exceptions import InvalidArgumentError


@dataclass(frozen=True)
class InvoiceAddress:
    """Free-text billing address, stored trimmed."""
    value: str

    def __post_init__(self):
        if not isinstance(self.value, str) or not self.value.strip():
            raise InvalidArgumentError("Invoice address cannot be null or empty")

        object.__setattr__(self, 'value', self.value.strip())

    def __str__(self) -> str:
        return self.value
