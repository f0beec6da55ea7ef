"""Process-wide wiring of stores and services.

Built once on first use from Django settings and re-seeded with the
startup PIX key(s) every time it is rebuilt. Tests call
``reset_container()`` to start from a fresh, seeded state.
"""

import logging
from dataclasses import dataclass
from datetime import timedelta
from functools import lru_cache
from zoneinfo import ZoneInfo

from django.conf import settings

from analytics.services import AnalyticsService
from analytics.stores import InMemoryAnalyticsStore
from payments.services import KeyService, OrderService
from payments.stores import InMemoryOrderStore, InMemoryPaymentKeyStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Container:
    keys: KeyService
    orders: OrderService
    analytics: AnalyticsService


def build_container() -> Container:
    keys = KeyService(InMemoryPaymentKeyStore(), max_keys=settings.PIX_MAX_KEYS)
    orders = OrderService(
        InMemoryOrderStore(),
        keys,
        ttl=timedelta(minutes=settings.ORDER_TTL_MINUTES),
    )
    analytics = AnalyticsService(
        InMemoryAnalyticsStore(),
        secret=settings.ANALYTICS_SECRET,
        order_count=orders.count,
        tz=ZoneInfo(settings.TIME_ZONE),
    )
    keys.seed(settings.PIX_SEED_KEYS)
    logger.info("Services ready with %d active PIX key(s)", keys.count_active())
    return Container(keys=keys, orders=orders, analytics=analytics)


@lru_cache(maxsize=1)
def get_container() -> Container:
    return build_container()


def reset_container() -> None:
    get_container.cache_clear()
