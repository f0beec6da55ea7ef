"""Analytics service - funnel ingestion and dashboard aggregation.

Ingestion never fails on unknown event ids: stats entries are created on
first reference. Reading or clearing the data requires the shared
analytics secret.
"""

import logging
from collections import Counter
from collections.abc import Callable, Mapping
from datetime import datetime, timedelta, timezone, tzinfo
from decimal import Decimal
from typing import Any

from analytics.domain import (
    TICKET_SELECT,
    ClickAction,
    ConversionRecord,
    ConversionStatus,
    Dashboard,
    EventBreakdown,
    EventStats,
    HourlyTraffic,
    PageView,
)
from analytics.stores.interfaces import AnalyticsStore
from core.errors import UnauthorizedError, ValidationError
from core.ports import Clock, IdFactory, new_id, utcnow
from core.value_objects import Money

logger = logging.getLogger(__name__)

RECENT_CONVERSIONS = 10
HOURS_PER_DAY = 24


def conversion_rate(conversions: int, checkouts: int) -> str:
    """Completed over started checkouts as a percentage string."""
    if checkouts == 0:
        return "0%"
    return f"{conversions / checkouts * 100:.2f}%"


def event_conversion_rate(conversions: int, checkouts: int) -> str | int:
    """Per-event rate: two decimals without a percent sign, or 0."""
    if checkouts == 0:
        return 0
    return f"{conversions / checkouts * 100:.2f}"


def _optional_money(value: Any, field: str) -> Money:
    return Money.zero() if value is None else Money.parse(value, field=field)


class AnalyticsService:
    """Service for funnel tracking and the protected dashboard."""

    def __init__(
        self,
        store: AnalyticsStore,
        secret: str,
        order_count: Callable[[], int] = lambda: 0,
        clock: Clock = utcnow,
        id_factory: IdFactory = new_id,
        tz: tzinfo = timezone.utc,
    ) -> None:
        self._store = store
        self._secret = secret
        self._order_count = order_count
        self._clock = clock
        self._new_id = id_factory
        self._tz = tz

    def record_page_view(
        self,
        page: str | None,
        event_id: str | None,
        session_id: str | None,
        referrer: str | None = None,
        user_agent: str | None = None,
        ip_address: str | None = None,
    ) -> PageView:
        page_view = PageView(
            id=self._new_id(),
            page=page,
            event_id=event_id,
            session_id=session_id,
            referrer=referrer,
            user_agent=user_agent,
            ip_address=ip_address,
            timestamp=self._clock(),
        )
        with self._store.atomic():
            self._store.add_page_view(page_view)
            if event_id:
                stats = self._store.stats_for(event_id)
                stats.views += 1
                stats.unique_views.add(session_id)
        return page_view

    def record_click(
        self,
        event_id: str | None,
        action: str | None,
        session_id: str | None,
        data: Mapping[str, Any] | None = None,
    ) -> None:
        """Count a click on a known action and keep ticket selections.

        Unknown actions create the event's stats entry but count nothing.
        """
        if data is not None and not isinstance(data, Mapping):
            raise ValidationError("data must be an object")
        if not event_id:
            return

        with self._store.atomic():
            stats = self._store.stats_for(event_id)
            counted = ClickAction.counted(action)
            if counted is not None:
                stats.clicks[counted] += 1
            if action == TICKET_SELECT:
                stats.ticket_selections.append(
                    {"sessionId": session_id, **(data or {}), "timestamp": self._clock()}
                )

    def record_checkout_started(
        self,
        event_id: str | None,
        session_id: str | None,
        items: Any = None,
        total: Any = None,
    ) -> ConversionRecord:
        record = ConversionRecord(
            id=self._new_id(),
            event_id=event_id,
            session_id=session_id,
            items=items,
            total=_optional_money(total, "total"),
            status=ConversionStatus.STARTED,
            timestamp=self._clock(),
        )
        with self._store.atomic():
            if event_id:
                self._store.stats_for(event_id).checkouts += 1
            self._store.add_conversion(record)
        return record

    def record_conversion_completed(
        self,
        event_id: str | None,
        order_id: str | None,
        session_id: str | None,
        total: Any = None,
    ) -> ConversionRecord | None:
        """Count a paid checkout and promote the session's first started record.

        Event counters move even when the session has no started record;
        the return value is then None.
        """
        amount = _optional_money(total, "total")
        with self._store.atomic():
            if event_id:
                stats = self._store.stats_for(event_id)
                stats.conversions += 1
                stats.total_revenue += amount.amount
            promoted = self._store.complete_first_started(session_id, order_id, self._clock())

        if promoted is None:
            logger.info("Conversion for session %s had no started checkout", session_id)
        return promoted

    def dashboard(self, secret: str | None) -> Dashboard:
        """Raises UnauthorizedError unless ``secret`` is the analytics secret."""
        self._authorize(secret, "dashboard")
        now = self._clock()
        with self._store.atomic():
            page_views = self._store.list_page_views()
            conversions = self._store.list_conversions()
            events = tuple(self._breakdown(stats) for stats in self._store.list_stats())

        started = [c for c in conversions if c.status is ConversionStatus.STARTED]
        completed = [c for c in conversions if c.status is ConversionStatus.COMPLETED]

        return Dashboard(
            total_page_views=len(page_views),
            unique_sessions=len({pv.session_id for pv in page_views}),
            total_orders=self._order_count(),
            total_checkouts=len(started),
            total_conversions=len(completed),
            conversion_rate=conversion_rate(len(completed), len(started)),
            total_revenue=sum((c.total.amount for c in completed), Decimal("0")),
            events=events,
            pages=dict(Counter(pv.page for pv in page_views)),
            recent_conversions=tuple(reversed(completed[-RECENT_CONVERSIONS:])),
            traffic_by_hour=self._traffic_by_hour(page_views, now),
            generated_at=now,
        )

    def reset(self, secret: str | None) -> None:
        """Raises UnauthorizedError unless ``secret`` is the analytics secret."""
        self._authorize(secret, "reset")
        with self._store.atomic():
            self._store.clear()
        logger.info("Analytics data reset")

    def _authorize(self, secret: str | None, action: str) -> None:
        if secret != self._secret:
            logger.warning("Rejected analytics %s request: invalid key", action)
            raise UnauthorizedError()

    def _breakdown(self, stats: EventStats) -> EventBreakdown:
        return EventBreakdown(
            event_id=stats.event_id,
            views=stats.views,
            unique_views=len(stats.unique_views),
            clicks=dict(stats.clicks),
            checkouts=stats.checkouts,
            conversions=stats.conversions,
            revenue=stats.total_revenue,
            conversion_rate=event_conversion_rate(stats.conversions, stats.checkouts),
        )

    def _traffic_by_hour(
        self, page_views: list[PageView], now: datetime
    ) -> tuple[HourlyTraffic, ...]:
        """Page views of the last 24 hours bucketed by local hour of day.

        Buckets are keyed on the hour of day only, so views from two
        calendar days that share an hour land in the same bucket. The
        result runs from the oldest hour to the current one.
        """
        since = now - timedelta(hours=HOURS_PER_DAY)
        recent_hours = [
            pv.timestamp.astimezone(self._tz).hour for pv in page_views if pv.timestamp > since
        ]
        per_hour = Counter(recent_hours)
        buckets = []
        for offset in range(HOURS_PER_DAY):
            hour = (now - timedelta(hours=offset)).astimezone(self._tz).hour
            buckets.append(HourlyTraffic(hour=hour, views=per_hour[hour]))
        return tuple(reversed(buckets))
