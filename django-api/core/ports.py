"""Injectable sources of time, identifiers and randomness.

Services take these as constructor arguments so tests can pass fixed
clocks, deterministic id sequences and seeded ``random.Random`` instances.
"""

from collections.abc import Callable
from datetime import datetime, timezone
from uuid import uuid4

Clock = Callable[[], datetime]
IdFactory = Callable[[], str]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_id() -> str:
    return str(uuid4())
