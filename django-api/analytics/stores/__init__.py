from analytics.stores.interfaces import AnalyticsStore
from analytics.stores.memory_store import InMemoryAnalyticsStore

__all__ = ["AnalyticsStore", "InMemoryAnalyticsStore"]
