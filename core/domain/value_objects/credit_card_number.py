"""
Credit card number value object.

The stored value is the raw input run through base64. This is a reversible,
keyless encoding kept for storage compatibility; it is NOT encryption and
gives no protection to the card number.
"""
import base64
import binascii
from dataclasses import dataclass

from ..exceptions import InvalidArgumentError


MIN_DIGITS = 13
MAX_DIGITS = 19
SEPARATORS = ("-", " ")


def strip_separators(number: str) -> str:
    """Remove hyphens and spaces from a card number."""
    for separator in SEPARATORS:
        number = number.replace(separator, "")
    return number


def is_valid_luhn(digits: str) -> bool:
    """
    Luhn checksum.

    Walk the digits right-to-left, doubling every second one and
    subtracting 9 from any doubled value above 9. Valid iff the sum is a
    multiple of 10.
    """
    if not digits or not (digits.isascii() and digits.isdigit()):
        return False

    total = 0
    for index, char in enumerate(reversed(digits)):
        n = int(char)
        if index % 2 == 1:
            n *= 2
            if n > 9:
                n -= 9
        total += n

    return total % 10 == 0


def is_valid_card_number(number: str) -> bool:
    """Digits only after stripping separators, 13-19 long, Luhn valid."""
    cleaned = strip_separators(number)
    if not (MIN_DIGITS <= len(cleaned) <= MAX_DIGITS):
        return False
    return is_valid_luhn(cleaned)


def _encode(raw: str) -> str:
    return base64.b64encode(raw.encode("utf-8")).decode("ascii")


def _decode(encoded: str) -> str:
    try:
        return base64.b64decode(encoded.encode("ascii"), validate=True).decode("utf-8")
    except (binascii.Error, UnicodeError, ValueError):
        raise InvalidArgumentError("Invalid credit card number format")


@dataclass(frozen=True)
class CreditCardNumber:
    """
    Invoice credit card.

    Build it from user input with `CreditCardNumber.create(raw)`. Constructing
    it directly from an encoded `value` (as the persistence layer does)
    decodes and re-validates, so an instance always holds a valid card.
    """
    value: str

    def __post_init__(self):
        if not isinstance(self.value, str) or not self.value:
            raise InvalidArgumentError("Credit card number cannot be null or empty")

        if not is_valid_card_number(_decode(self.value)):
            raise InvalidArgumentError("Invalid credit card number format")

    @classmethod
    def create(cls, credit_card_number: str) -> "CreditCardNumber":
        if not isinstance(credit_card_number, str) or not credit_card_number.strip():
            raise InvalidArgumentError("Credit card number cannot be null or empty")

        if not is_valid_card_number(credit_card_number):
            raise InvalidArgumentError("Invalid credit card number format")

        return cls(value=_encode(credit_card_number))

    @property
    def last_four(self) -> str:
        return strip_separators(_decode(self.value))[-4:]

    @property
    def masked_value(self) -> str:
        return f"****-****-****-{self.last_four}"

    def __str__(self) -> str:
        return self.masked_value

    def __repr__(self) -> str:
        return f"CreditCardNumber(masked_value={self.masked_value!r})"
