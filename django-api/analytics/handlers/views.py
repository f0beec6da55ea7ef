"""HTTP handlers for funnel tracking and the protected dashboard."""

from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from analytics.handlers.serializers import DashboardSerializer
from core.container import get_container
from core.handlers.payloads import json_object, optional_str

ACK = {"success": True}


class PageViewTrackView(APIView):
    """Handler for POST /api/analytics/pageview"""

    def post(self, request: Request) -> Response:
        payload = json_object(request)
        get_container().analytics.record_page_view(
            page=optional_str(payload, "page"),
            event_id=optional_str(payload, "eventId"),
            session_id=optional_str(payload, "sessionId"),
            referrer=optional_str(payload, "referrer"),
            user_agent=request.META.get("HTTP_USER_AGENT"),
            ip_address=request.META.get("REMOTE_ADDR"),
        )
        return Response(ACK)


class ClickTrackView(APIView):
    """Handler for POST /api/analytics/click"""

    def post(self, request: Request) -> Response:
        payload = json_object(request)
        get_container().analytics.record_click(
            event_id=optional_str(payload, "eventId"),
            action=optional_str(payload, "action"),
            session_id=optional_str(payload, "sessionId"),
            data=payload.get("data"),
        )
        return Response(ACK)


class CheckoutTrackView(APIView):
    """Handler for POST /api/analytics/checkout"""

    def post(self, request: Request) -> Response:
        payload = json_object(request)
        get_container().analytics.record_checkout_started(
            event_id=optional_str(payload, "eventId"),
            session_id=optional_str(payload, "sessionId"),
            items=payload.get("items"),
            total=payload.get("total"),
        )
        return Response(ACK)


class ConversionTrackView(APIView):
    """Handler for POST /api/analytics/conversion"""

    def post(self, request: Request) -> Response:
        payload = json_object(request)
        get_container().analytics.record_conversion_completed(
            event_id=optional_str(payload, "eventId"),
            order_id=optional_str(payload, "orderId"),
            session_id=optional_str(payload, "sessionId"),
            total=payload.get("total"),
        )
        return Response(ACK)


class DashboardView(APIView):
    """Handler for GET /api/analytics/dashboard?key=..."""

    def get(self, request: Request) -> Response:
        dashboard = get_container().analytics.dashboard(request.query_params.get("key"))
        return Response({"success": True, **DashboardSerializer(dashboard).data})


class AnalyticsResetView(APIView):
    """Handler for POST /api/analytics/reset"""

    def post(self, request: Request) -> Response:
        payload = json_object(request)
        get_container().analytics.reset(optional_str(payload, "key"))
        return Response({"success": True, "message": "Analytics reset"})
