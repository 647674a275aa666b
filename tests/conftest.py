"""Pytest configuration and shared fixtures."""
import os

import pytest

from stellara_events.bus.memory import InMemoryEventLog
from stellara_events.config.settings import get_settings
from stellara_events.events.emitter import EventEmitter
from stellara_events.events.values import Address
from stellara_events.observability.metrics import MetricsCollector


class FakeContext:
    """Execution context with a hand-driven clock."""

    def __init__(self, identity: str = "CONTRACT_SELF", now: int = 1_700_000_000):
        self.identity = Address(identity)
        self.now = now

    def current_identity(self) -> Address:
        return self.identity

    def current_time(self) -> int:
        return self.now

    def advance(self, seconds: int = 1) -> None:
        self.now += seconds


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    """Isolate every test from the developer's environment / .env file."""
    for key in [k for k in os.environ if k.startswith("STELLARA_")]:
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def ctx():
    return FakeContext()


@pytest.fixture
def log():
    return InMemoryEventLog()


@pytest.fixture
def metrics():
    return MetricsCollector()


@pytest.fixture
def emitter(log, metrics):
    return EventEmitter(log, metrics=metrics)


@pytest.fixture
def alice():
    return Address("GALICE")


@pytest.fixture
def bob():
    return Address("GBOB")


@pytest.fixture
def token():
    return Address("CTOKEN")
