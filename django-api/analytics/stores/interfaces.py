"""Store interface for funnel data.

Linear scans (session lookups, listings) stay behind this interface so a
backend can index them without touching the service.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from datetime import datetime

from analytics.domain import ConversionRecord, EventStats, PageView


class AnalyticsStore(ABC):
    """Interface for analytics persistence operations."""

    @abstractmethod
    def atomic(self) -> AbstractContextManager:
        """Return the context manager guarding one logical operation."""
        ...

    @abstractmethod
    def add_page_view(self, page_view: PageView) -> None:
        ...

    @abstractmethod
    def list_page_views(self) -> list[PageView]:
        """Return page views in the order they were recorded."""
        ...

    @abstractmethod
    def stats_for(self, event_id: str) -> EventStats:
        """Return the stats entry for an event, creating it on first use."""
        ...

    @abstractmethod
    def list_stats(self) -> list[EventStats]:
        """Return stats entries in the order events were first seen."""
        ...

    @abstractmethod
    def add_conversion(self, record: ConversionRecord) -> None:
        ...

    @abstractmethod
    def list_conversions(self) -> list[ConversionRecord]:
        """Return conversion records in the order they were started."""
        ...

    @abstractmethod
    def complete_first_started(
        self, session_id: str | None, order_id: str | None, completed_at: datetime
    ) -> ConversionRecord | None:
        """Promote the earliest started record of a session to completed.

        Returns the promoted record, or None when the session has no
        started record.
        """
        ...

    @abstractmethod
    def clear(self) -> None:
        """Drop page views, event stats and conversion records."""
        ...
