from analytics.handlers.views import (
    AnalyticsResetView,
    CheckoutTrackView,
    ClickTrackView,
    ConversionTrackView,
    DashboardView,
    PageViewTrackView,
)

__all__ = [
    "AnalyticsResetView",
    "CheckoutTrackView",
    "ClickTrackView",
    "ConversionTrackView",
    "DashboardView",
    "PageViewTrackView",
]
