"""
Test configuration and fixtures for the URL shortener.
This centralizes all test setup, making individual tests clean.
"""

import fakeredis
import mongomock
import pytest
from fastapi.testclient import TestClient

from shortit.app_factory import create_app
from shortit.config import Settings
from shortit.store.strategies import (
    InMemoryMappingStore,
    MongoMappingStore,
    RedisMappingStore,
    SQLMappingStore,
)


@pytest.fixture
def settings():
    """Development settings, never reading a local .env file"""
    return Settings(_env_file=None, port=4000)


@pytest.fixture
def store():
    return InMemoryMappingStore()


@pytest.fixture
def client(settings, store):
    """
    Create a test client backed by a fresh in-memory store.
    This is the main fixture that tests will use.
    """
    app = create_app(settings, store=store)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def mongo_client():
    client = mongomock.MongoClient()
    yield client
    client.close()


@pytest.fixture
def mongo_store(mongo_client):
    """MongoDB store on top of mongomock"""
    return MongoMappingStore(mongo_client["urls"]["beta"])


@pytest.fixture
def redis_store():
    """Redis store on top of fakeredis"""
    return RedisMappingStore(fakeredis.FakeRedis(decode_responses=True))


@pytest.fixture
def sql_store():
    """SQL store on an in-memory SQLite database"""
    store = SQLMappingStore("sqlite://")
    yield store
    store.close()


@pytest.fixture(params=["store", "mongo_store", "redis_store", "sql_store"])
def any_store(request):
    """Every store backend, for tests of the shared insert/fetch contract"""
    return request.getfixturevalue(request.param)
