"""
Domain exceptions.

Every failure raised by the Order aggregate and its value objects is a
DomainError subclass carrying a human-readable reason. The HTTP layer maps
them to status codes; the domain only signals the kind of failure.
"""


class DomainError(Exception):
    """Base class for domain rule violations."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class InvalidArgumentError(DomainError, ValueError):
    """Malformed input (empty field, bad format, non-positive amount)."""


class InvalidStateError(DomainError):
    """Business rule or status-machine violation."""


class NotFoundError(DomainError):
    """Referenced order or order item does not exist."""
