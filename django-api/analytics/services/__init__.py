from analytics.services.analytics_service import (
    AnalyticsService,
    conversion_rate,
    event_conversion_rate,
)

__all__ = ["AnalyticsService", "conversion_rate", "event_conversion_rate"]
