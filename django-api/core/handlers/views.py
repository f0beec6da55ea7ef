"""Service index and liveness handlers."""

from django.utils import timezone
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from core.container import get_container

ENDPOINTS = {
    "health": "GET /health",
    "payment": "POST /api/payment",
    "confirm": "POST /api/payment/:orderId/confirm",
    "order": "GET /api/order/:orderId",
    "pixKeys": "GET /api/admin/pix-keys",
    "orders": "GET /api/admin/orders",
    "dashboard": "GET /api/analytics/dashboard?key=",
}


class IndexView(APIView):
    """Handler for GET /"""

    def get(self, request: Request) -> Response:
        return Response(
            {
                "success": True,
                "status": "ok",
                "message": "Ticket payment API is running",
                "timestamp": timezone.now(),
                "endpoints": ENDPOINTS,
            }
        )


class HealthView(APIView):
    """Handler for GET /health"""

    def get(self, request: Request) -> Response:
        container = get_container()
        return Response(
            {
                "success": True,
                "status": "ok",
                "message": "Backend running",
                "pixKeysCount": container.keys.count_active(),
                "ordersCount": container.orders.count(),
                "timestamp": timezone.now(),
            }
        )
