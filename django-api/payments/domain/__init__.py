from payments.domain.models import Customer, LineItem, Order, PaymentKey, PaymentKeySnapshot
from payments.domain.value_objects import KeyKind, OrderStatus

__all__ = [
    "Customer",
    "LineItem",
    "Order",
    "PaymentKey",
    "PaymentKeySnapshot",
    "KeyKind",
    "OrderStatus",
]
