"""Domain models for the conversion funnel."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any

from analytics.domain.value_objects import ClickAction, ConversionStatus
from core.value_objects import Money


@dataclass(frozen=True)
class PageView:
    id: str
    page: str | None
    event_id: str | None
    session_id: str | None
    referrer: str | None
    user_agent: str | None
    ip_address: str | None
    timestamp: datetime


@dataclass(frozen=True)
class ConversionRecord:
    """A checkout that was started and, possibly, paid for."""

    id: str
    event_id: str | None
    session_id: str | None
    items: Any
    total: Money
    status: ConversionStatus
    timestamp: datetime
    order_id: str | None = None
    completed_at: datetime | None = None


def _empty_clicks() -> dict[ClickAction, int]:
    return {action: 0 for action in ClickAction}


@dataclass
class EventStats:
    """Funnel counters for one event, created on first reference."""

    event_id: str
    views: int = 0
    unique_views: set[str | None] = field(default_factory=set)
    clicks: dict[ClickAction, int] = field(default_factory=_empty_clicks)
    ticket_selections: list[dict[str, Any]] = field(default_factory=list)
    checkouts: int = 0
    conversions: int = 0
    total_revenue: Decimal = Decimal("0")


@dataclass(frozen=True)
class EventBreakdown:
    event_id: str
    views: int
    unique_views: int
    clicks: dict[ClickAction, int]
    checkouts: int
    conversions: int
    revenue: Decimal
    conversion_rate: str | int


@dataclass(frozen=True)
class HourlyTraffic:
    hour: int
    views: int


@dataclass(frozen=True)
class Dashboard:
    """Aggregated statistics computed on demand."""

    total_page_views: int
    unique_sessions: int
    total_orders: int
    total_checkouts: int
    total_conversions: int
    conversion_rate: str
    total_revenue: Decimal
    events: tuple[EventBreakdown, ...]
    pages: dict[str | None, int]
    recent_conversions: tuple[ConversionRecord, ...]
    traffic_by_hour: tuple[HourlyTraffic, ...]
    generated_at: datetime
