"""
Factory for creating mapping store instances.

The store is created once by the application lifespan and closed on
shutdown, so the factory itself keeps no instance around.
"""

import logging
from enum import Enum

from shortit.config import Settings
from shortit.exceptions import StoreError, UnknownBackendError
from .strategies import (
    InMemoryMappingStore,
    MappingStore,
    MongoMappingStore,
    RedisMappingStore,
    SQLMappingStore,
)

logger = logging.getLogger(__name__)


class StoreBackend(Enum):
    """Available mapping store backends"""
    MEMORY = "memory"
    MONGODB = "mongodb"
    SQL = "sql"
    REDIS = "redis"


class StoreFactory:
    """
    Simple factory for creating mapping stores.

    Remote backends are connected and pinged here: an unreachable
    database at startup is fatal, there is no fallback backend.
    """

    @classmethod
    def create(cls, backend: StoreBackend, settings: Settings) -> MappingStore:
        """
        Create and connect a mapping store.

        Args:
            backend: Type of store backend (from enum)
            settings: Application settings with connection details

        Returns:
            Ready-to-use mapping store

        Raises:
            StoreError: if the backend cannot be reached
            UnknownBackendError: if the backend is not supported
        """
        if backend == StoreBackend.MEMORY:
            store = InMemoryMappingStore()

        elif backend == StoreBackend.MONGODB:
            store = cls._create_mongo(settings)

        elif backend == StoreBackend.SQL:
            store = SQLMappingStore(settings.database_url)

        elif backend == StoreBackend.REDIS:
            store = cls._create_redis(settings)

        else:
            raise UnknownBackendError(f"Unknown store backend: {backend}")

        logger.info(f"{backend.value} mapping store initialized")
        return store

    @classmethod
    def from_name(cls, name: str, settings: Settings) -> MappingStore:
        """Create a store from its configured name (e.g. settings.store_backend)"""
        try:
            backend = StoreBackend(name)
        except ValueError:
            raise UnknownBackendError(f"Unknown store backend: {name!r}") from None
        return cls.create(backend, settings)

    @staticmethod
    def _create_mongo(settings: Settings) -> MongoMappingStore:
        from pymongo import MongoClient
        from pymongo.errors import PyMongoError

        if not settings.mongodb_uri:
            raise StoreError("MONGODB_URI environment variable is not set")

        client = MongoClient(
            settings.mongodb_uri,
            serverSelectionTimeoutMS=settings.mongodb_timeout_ms,
        )
        try:
            # Fail fast instead of on the first request
            client.admin.command("ping")
        except PyMongoError as e:
            client.close()
            logger.error(f"MongoDB connection failed: {e}")
            raise StoreError("Could not connect to MongoDB") from e

        collection = client[settings.mongodb_database][settings.mongodb_collection]
        logger.info(
            f"Connected to MongoDB collection "
            f"{settings.mongodb_database}.{settings.mongodb_collection}"
        )
        return MongoMappingStore(collection, client=client)

    @staticmethod
    def _create_redis(settings: Settings) -> RedisMappingStore:
        import redis

        redis_client = redis.from_url(
            settings.redis_url,
            decode_responses=True,
            socket_connect_timeout=2,
            socket_timeout=2,
        )
        try:
            redis_client.ping()
        except redis.RedisError as e:
            logger.error(f"Redis connection failed: {e}")
            raise StoreError("Could not connect to Redis") from e

        return RedisMappingStore(redis_client)
