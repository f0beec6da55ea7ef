from payments.handlers.views import (
    AdminOrderListView,
    OrderDetailView,
    PaymentConfirmView,
    PaymentCreateView,
    PaymentKeyDetailView,
    PaymentKeyListView,
)

__all__ = [
    "AdminOrderListView",
    "OrderDetailView",
    "PaymentConfirmView",
    "PaymentCreateView",
    "PaymentKeyDetailView",
    "PaymentKeyListView",
]
