"""Pytest configuration and shared fixtures."""

import itertools
import random
from datetime import datetime, timedelta, timezone

import pytest
from rest_framework.test import APIClient

from analytics.services import AnalyticsService
from analytics.stores import InMemoryAnalyticsStore
from payments.services import KeyService, OrderService
from payments.stores import InMemoryOrderStore, InMemoryPaymentKeyStore

ANALYTICS_SECRET = "test-secret"


class FakeClock:
    """Callable clock that only moves when told to."""

    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **delta: float) -> datetime:
        self.now += timedelta(**delta)
        return self.now


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def fresh_container():
    from core.container import reset_container

    reset_container()
    yield
    reset_container()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(2024, 3, 10, 13, 30, tzinfo=timezone.utc))


@pytest.fixture
def id_factory():
    counter = itertools.count(1)
    return lambda: f"id-{next(counter)}"


@pytest.fixture
def key_service(clock, id_factory) -> KeyService:
    return KeyService(
        InMemoryPaymentKeyStore(),
        rng=random.Random(7),
        clock=clock,
        id_factory=id_factory,
    )


@pytest.fixture
def order_service(key_service, clock, id_factory) -> OrderService:
    return OrderService(
        InMemoryOrderStore(),
        key_service,
        rng=random.Random(11),
        clock=clock,
        id_factory=id_factory,
    )


@pytest.fixture
def analytics_service(clock, id_factory) -> AnalyticsService:
    return AnalyticsService(
        InMemoryAnalyticsStore(),
        secret=ANALYTICS_SECRET,
        clock=clock,
        id_factory=id_factory,
    )


@pytest.fixture
def customer() -> dict:
    return {
        "name": "Maria Souza",
        "email": "maria@example.com",
        "cpf": "123.456.789-09",
        "phone": "(11) 98765-4321",
    }


@pytest.fixture
def items() -> list[dict]:
    return [
        {"title": "Pista - Inteira", "unitPrice": 120.0, "quantity": 2},
        {"title": "Camarote", "unit_price": "300.50", "quantity": 1},
    ]
