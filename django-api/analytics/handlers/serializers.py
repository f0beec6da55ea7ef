"""Serializers for the analytics dashboard."""

from rest_framework import serializers

from analytics.domain import Dashboard, EventBreakdown
from core.handlers.fields import money_field


class SummarySerializer(serializers.Serializer):
    totalPageViews = serializers.IntegerField(source="total_page_views")
    uniqueSessions = serializers.IntegerField(source="unique_sessions")
    totalOrders = serializers.IntegerField(source="total_orders")
    totalCheckouts = serializers.IntegerField(source="total_checkouts")
    totalConversions = serializers.IntegerField(source="total_conversions")
    conversionRate = serializers.CharField(source="conversion_rate")
    totalRevenue = money_field("total_revenue")


class EventBreakdownSerializer(serializers.Serializer):
    eventId = serializers.CharField(source="event_id")
    views = serializers.IntegerField()
    uniqueViews = serializers.IntegerField(source="unique_views")
    clicks = serializers.SerializerMethodField()
    checkouts = serializers.IntegerField()
    conversions = serializers.IntegerField()
    revenue = money_field()
    conversionRate = serializers.SerializerMethodField()

    def get_clicks(self, obj: EventBreakdown) -> dict[str, int]:
        return {action.value: count for action, count in obj.clicks.items()}

    def get_conversionRate(self, obj: EventBreakdown) -> str | int:
        return obj.conversion_rate


class ConversionRecordSerializer(serializers.Serializer):
    id = serializers.CharField()
    eventId = serializers.CharField(source="event_id", allow_null=True)
    sessionId = serializers.CharField(source="session_id", allow_null=True)
    items = serializers.JSONField()
    total = money_field("total.amount")
    status = serializers.CharField(source="status.value")
    timestamp = serializers.DateTimeField()
    orderId = serializers.CharField(source="order_id", allow_null=True)
    completedAt = serializers.DateTimeField(source="completed_at", allow_null=True)


class HourlyTrafficSerializer(serializers.Serializer):
    hour = serializers.IntegerField()
    views = serializers.IntegerField()


class DashboardSerializer(serializers.Serializer):
    summary = SummarySerializer(source="*")
    events = EventBreakdownSerializer(many=True)
    pages = serializers.SerializerMethodField()
    recentConversions = ConversionRecordSerializer(source="recent_conversions", many=True)
    trafficByHour = HourlyTrafficSerializer(source="traffic_by_hour", many=True)
    timestamp = serializers.DateTimeField(source="generated_at")

    def get_pages(self, obj: Dashboard) -> dict[str | None, int]:
        return dict(obj.pages)
