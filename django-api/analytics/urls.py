from django.urls import path

from analytics.handlers import (
    AnalyticsResetView,
    CheckoutTrackView,
    ClickTrackView,
    ConversionTrackView,
    DashboardView,
    PageViewTrackView,
)

urlpatterns = [
    path("pageview", PageViewTrackView.as_view(), name="analytics-pageview"),
    path("click", ClickTrackView.as_view(), name="analytics-click"),
    path("checkout", CheckoutTrackView.as_view(), name="analytics-checkout"),
    path("conversion", ConversionTrackView.as_view(), name="analytics-conversion"),
    path("dashboard", DashboardView.as_view(), name="analytics-dashboard"),
    path("reset", AnalyticsResetView.as_view(), name="analytics-reset"),
]
