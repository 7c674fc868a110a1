"""Time and randomness capabilities injected into the domain."""
import random
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional, Protocol


Clock = Callable[[], datetime]


class RandomSource(Protocol):
    """Anything that can pick an integer in a closed range."""

    def randint(self, a: int, b: int) -> int:
        ...


_default_random = random.Random()


def utc_now() -> datetime:
    """System clock (timezone-aware UTC)."""
    return datetime.now(timezone.utc)


def default_random() -> RandomSource:
    return _default_random


class FixedClock:
    """Clock frozen at a given instant; call `advance` to move it."""

    def __init__(self, now: Optional[datetime] = None):
        self.now = now or datetime(2025, 1, 1, 12, 0, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float = 0, minutes: float = 0) -> None:
        self.now = self.now + timedelta(seconds=seconds, minutes=minutes)
