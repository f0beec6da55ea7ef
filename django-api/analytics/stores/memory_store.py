"""In-process analytics store. Nothing survives a restart."""

import threading
from contextlib import AbstractContextManager
from dataclasses import replace
from datetime import datetime

from analytics.domain import ConversionRecord, ConversionStatus, EventStats, PageView
from analytics.stores.interfaces import AnalyticsStore


class InMemoryAnalyticsStore(AnalyticsStore):
    def __init__(self) -> None:
        self._page_views: list[PageView] = []
        self._stats: dict[str, EventStats] = {}
        self._conversions: list[ConversionRecord] = []
        self._lock = threading.RLock()

    def atomic(self) -> AbstractContextManager:
        return self._lock

    def add_page_view(self, page_view: PageView) -> None:
        self._page_views.append(page_view)

    def list_page_views(self) -> list[PageView]:
        return list(self._page_views)

    def stats_for(self, event_id: str) -> EventStats:
        if event_id not in self._stats:
            self._stats[event_id] = EventStats(event_id=event_id)
        return self._stats[event_id]

    def list_stats(self) -> list[EventStats]:
        return list(self._stats.values())

    def add_conversion(self, record: ConversionRecord) -> None:
        self._conversions.append(record)

    def list_conversions(self) -> list[ConversionRecord]:
        return list(self._conversions)

    def complete_first_started(
        self, session_id: str | None, order_id: str | None, completed_at: datetime
    ) -> ConversionRecord | None:
        for index, record in enumerate(self._conversions):
            if record.session_id == session_id and record.status is ConversionStatus.STARTED:
                completed = replace(
                    record,
                    status=ConversionStatus.COMPLETED,
                    order_id=order_id,
                    completed_at=completed_at,
                )
                self._conversions[index] = completed
                return completed
        return None

    def clear(self) -> None:
        self._page_views.clear()
        self._stats.clear()
        self._conversions.clear()
