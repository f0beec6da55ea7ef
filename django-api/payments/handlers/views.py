"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Never contain business logic
- Leave domain error mapping to core.handlers.exceptions
"""

from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from core.container import get_container
from core.handlers.payloads import json_object, optional_str
from payments.handlers.serializers import (
    OrderConfirmationSerializer,
    OrderDetailSerializer,
    OrderSummarySerializer,
    PaymentCreatedSerializer,
    PaymentKeySerializer,
)


class PaymentCreateView(APIView):
    """Handler for POST /api/payment"""

    def post(self, request: Request) -> Response:
        payload = json_object(request)
        order = get_container().orders.create(
            customer=payload.get("customer"),
            items=payload.get("items"),
            total=payload.get("total"),
        )
        return Response(
            {
                "success": True,
                **PaymentCreatedSerializer(order).data,
                "message": "Copy the PIX key and complete the payment",
            }
        )


class PaymentConfirmView(APIView):
    """Handler for POST /api/payment/{order_id}/confirm"""

    def post(self, request: Request, order_id: str) -> Response:
        order = get_container().orders.confirm(order_id)
        return Response(
            {
                "success": True,
                "order": OrderConfirmationSerializer(order).data,
                "message": "Payment confirmed",
            }
        )


class OrderDetailView(APIView):
    """Handler for GET /api/order/{order_id}"""

    def get(self, request: Request, order_id: str) -> Response:
        order = get_container().orders.get(order_id)
        return Response({"success": True, "order": OrderDetailSerializer(order).data})


class PaymentKeyListView(APIView):
    """Handler for GET/POST /api/admin/pix-keys"""

    def get(self, request: Request) -> Response:
        keys = get_container().keys.list_keys()
        return Response(
            {
                "success": True,
                "keys": PaymentKeySerializer(keys, many=True).data,
                "total": len(keys),
                "active": sum(1 for k in keys if k.active),
            }
        )

    def post(self, request: Request) -> Response:
        payload = json_object(request)
        payment_key = get_container().keys.add_key(
            key=optional_str(payload, "key"),
            kind=optional_str(payload, "type"),
            name=optional_str(payload, "name"),
        )
        return Response(
            {
                "success": True,
                "key": PaymentKeySerializer(payment_key).data,
                "message": "PIX key added",
            }
        )


class PaymentKeyDetailView(APIView):
    """Handler for PUT/DELETE /api/admin/pix-keys/{key_id}"""

    def put(self, request: Request, key_id: str) -> Response:
        payload = json_object(request)
        payment_key = get_container().keys.update_key(
            key_id,
            key=optional_str(payload, "key"),
            kind=optional_str(payload, "type"),
            name=optional_str(payload, "name"),
            active=payload.get("active"),
        )
        return Response(
            {
                "success": True,
                "key": PaymentKeySerializer(payment_key).data,
                "message": "PIX key updated",
            }
        )

    def delete(self, request: Request, key_id: str) -> Response:
        get_container().keys.remove_key(key_id)
        return Response({"success": True, "message": "PIX key removed"})


class AdminOrderListView(APIView):
    """Handler for GET /api/admin/orders"""

    def get(self, request: Request) -> Response:
        orders = get_container().orders.list_summaries()
        return Response(
            {
                "success": True,
                "orders": OrderSummarySerializer(orders, many=True).data,
                "total": len(orders),
            }
        )
