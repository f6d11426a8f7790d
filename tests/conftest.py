"""Pytest configuration and fixtures for neo-cache-store tests."""

import pytest
from unittest.mock import AsyncMock, MagicMock

from neo_cache_store import FallbackCache, InMemoryStore, ReadThroughCache


class EventRecorder:
    """Collects emitted cache events in order."""
    
    EVENTS = ("cache:hit", "cache:miss", "cache:set", "cache:deleted")
    
    def __init__(self):
        self.events = []
    
    def attach(self, component):
        for name in self.EVENTS:
            component.on(name, self._listener_for(name))
        return self
    
    def _listener_for(self, name):
        def listener(*args):
            self.events.append((name, *args))
        return listener
    
    def names(self):
        return [event[0] for event in self.events]


@pytest.fixture
def data_store():
    """Authoritative in-memory store."""
    return InMemoryStore()


@pytest.fixture
def cache_store():
    """In-memory cache store."""
    return InMemoryStore()


@pytest.fixture
def read_through_cache(data_store, cache_store):
    """Read-through cache over the two in-memory stores."""
    return ReadThroughCache(store=data_store, cache=cache_store)


@pytest.fixture
def fallback_cache(data_store, cache_store):
    """Fallback cache over the two in-memory stores."""
    return FallbackCache(store=data_store, cache=cache_store)


@pytest.fixture
def recorder():
    """Event recorder, attach with recorder.attach(component)."""
    return EventRecorder()


@pytest.fixture
def mock_store():
    """Mock store satisfying the Store protocol."""
    store = MagicMock()
    store.get = AsyncMock(return_value=None)
    store.set = AsyncMock(return_value=None)
    store.delete = AsyncMock(return_value=False)
    store.has = AsyncMock(return_value=False)
    store.clear = AsyncMock(return_value=None)
    return store


@pytest.fixture
def mock_redis_client():
    """Mock async Redis client."""
    client = MagicMock()
    client.get = AsyncMock(return_value=None)
    client.set = AsyncMock(return_value=True)
    client.delete = AsyncMock(return_value=0)
    client.exists = AsyncMock(return_value=0)
    client.aclose = AsyncMock(return_value=None)
    return client
