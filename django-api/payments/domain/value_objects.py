"""Domain primitives for PIX keys and orders."""

import random
import re
import string
from datetime import datetime, timedelta, timezone
from enum import Enum

ORDER_CODE_PREFIX = "GM"
_BASE36_ALPHABET = string.digits + string.ascii_lowercase
_NON_DIGITS = re.compile(r"\D")
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_MILLISECOND = timedelta(milliseconds=1)


class KeyKind(Enum):
    """Formats a PIX key can take."""

    CPF = "cpf"
    CNPJ = "cnpj"
    EMAIL = "email"
    PHONE = "phone"
    RANDOM = "random"


class OrderStatus(Enum):
    PENDING = "pending"
    PAID = "paid"


def digits_only(value: str | None) -> str:
    """Strip every non-digit character; ``None`` becomes an empty string."""
    if not value:
        return ""
    return _NON_DIGITS.sub("", str(value))


def to_base36(number: int) -> str:
    if number == 0:
        return "0"
    digits = []
    while number:
        number, remainder = divmod(number, 36)
        digits.append(_BASE36_ALPHABET[remainder])
    return "".join(reversed(digits))


def generate_order_code(created_at: datetime, rng: random.Random) -> str:
    """Human-readable order code: ``GM-<base36 ms timestamp>-<4 random chars>``.

    Codes are not guaranteed unique.
    """
    millis = (created_at - _EPOCH) // _MILLISECOND
    suffix = "".join(rng.choice(_BASE36_ALPHABET) for _ in range(4))
    return f"{ORDER_CODE_PREFIX}-{to_base36(millis).upper()}-{suffix.upper()}"

