from django.urls import path

from payments.handlers import (
    AdminOrderListView,
    OrderDetailView,
    PaymentConfirmView,
    PaymentCreateView,
    PaymentKeyDetailView,
    PaymentKeyListView,
)

urlpatterns = [
    path("payment", PaymentCreateView.as_view(), name="payment-create"),
    path(
        "payment/<str:order_id>/confirm",
        PaymentConfirmView.as_view(),
        name="payment-confirm",
    ),
    path("order/<str:order_id>", OrderDetailView.as_view(), name="order-detail"),
    path("admin/pix-keys", PaymentKeyListView.as_view(), name="pix-key-list"),
    path(
        "admin/pix-keys/<str:key_id>",
        PaymentKeyDetailView.as_view(),
        name="pix-key-detail",
    ),
    path("admin/orders", AdminOrderListView.as_view(), name="admin-order-list"),
]
