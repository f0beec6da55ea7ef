from analytics.domain.models import (
    ConversionRecord,
    Dashboard,
    EventBreakdown,
    EventStats,
    HourlyTraffic,
    PageView,
)
from analytics.domain.value_objects import TICKET_SELECT, ClickAction, ConversionStatus

__all__ = [
    "ConversionRecord",
    "Dashboard",
    "EventBreakdown",
    "EventStats",
    "HourlyTraffic",
    "PageView",
    "ClickAction",
    "ConversionStatus",
    "TICKET_SELECT",
]
