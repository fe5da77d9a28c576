"""
Mapping store strategies using Strategy Pattern.

Allows switching between different storage backends for key -> URL mappings:
- In-memory: single process, lock-guarded dict
- MongoDB: document collection, one {key, url} document per mapping
- SQL: any SQLAlchemy database, one row per mapping
- Redis: one string value per mapping

Every backend has upsert semantics: inserting an existing key replaces its URL.
"""

import logging
import threading
from abc import ABC, abstractmethod
from typing import Dict, Optional

from pymongo.collection import Collection
from pymongo.errors import PyMongoError
from redis import Redis, RedisError
from sqlalchemy.exc import SQLAlchemyError

from shortit.database.connection import Base, build_engine, build_session_factory
from shortit.exceptions import StoreError
from shortit.models.mapping import MappingRecord

logger = logging.getLogger(__name__)


class MappingStore(ABC):
    """
    Abstract base class for mapping stores.

    Operations are synchronous: route handlers run in FastAPI's threadpool,
    so implementations must be safe to call from several threads at once.
    """

    @abstractmethod
    def insert(self, key: str, url: str) -> None:
        """
        Store a mapping, replacing any URL already stored under key.

        Raises:
            StoreError: if the backend write fails
        """
        pass

    @abstractmethod
    def fetch(self, key: str) -> Optional[str]:
        """
        Look up the URL stored under key.

        Returns:
            The URL, or None if the key is unknown

        Raises:
            StoreError: if the backend read fails
        """
        pass

    def ping(self) -> bool:
        """Check that the backend is reachable"""
        return True

    def close(self) -> None:
        """Release backend resources"""
        pass


class InMemoryMappingStore(MappingStore):
    """
    In-memory store using a dict guarded by a single lock.

    Every operation, read or write, takes the same lock.
    Mappings are lost on restart.
    """

    def __init__(self):
        self._mappings: Dict[str, str] = {}
        self._lock = threading.Lock()

    def insert(self, key: str, url: str) -> None:
        with self._lock:
            self._mappings[key] = url

    def fetch(self, key: str) -> Optional[str]:
        with self._lock:
            return self._mappings.get(key)

    def __len__(self) -> int:
        with self._lock:
            return len(self._mappings)


class MongoMappingStore(MappingStore):
    """
    MongoDB implementation, one document per mapping: {key, url}.

    The driver owns connection pooling and thread safety; one client is
    shared for the lifetime of the process.
    """

    def __init__(self, collection: Collection, client=None):
        """
        Args:
            collection: Collection holding the mapping documents
            client: Owning MongoClient, closed by close() if given
        """
        self.collection = collection
        self.client = client
        try:
            self.collection.create_index("key", unique=True)
        except PyMongoError as e:
            logger.error(f"MongoDB index creation failed: {e}")
            raise StoreError("Failed to prepare mapping collection") from e

    def insert(self, key: str, url: str) -> None:
        try:
            self.collection.update_one(
                {"key": key},
                {"$set": {"url": url}},
                upsert=True,
            )
        except PyMongoError as e:
            logger.error(f"MongoDB insert error for key {key}: {e}")
            raise StoreError("Failed to store mapping") from e

    def fetch(self, key: str) -> Optional[str]:
        try:
            document = self.collection.find_one({"key": key})
        except PyMongoError as e:
            logger.error(f"MongoDB fetch error for key {key}: {e}")
            raise StoreError("Failed to fetch mapping") from e

        if document is None:
            return None

        url = document.get("url")
        if not isinstance(url, str):
            logger.error(f"MongoDB document for key {key} has no usable url field")
            raise StoreError("Failed to decode mapping")
        return url

    def ping(self) -> bool:
        try:
            client = self.client if self.client is not None else self.collection.database.client
            client.admin.command("ping")
            return True
        except PyMongoError as e:
            logger.error(f"MongoDB ping failed: {e}")
            return False

    def close(self) -> None:
        if self.client is not None:
            self.client.close()
            logger.info("MongoDB connection closed")


class SQLMappingStore(MappingStore):
    """
    SQLAlchemy implementation (SQLite, PostgreSQL, ...).

    Uses a short-lived session per operation; the engine's pool is shared.
    """

    def __init__(self, database_url: str):
        self.engine = build_engine(database_url)
        self.session_factory = build_session_factory(self.engine)
        try:
            Base.metadata.create_all(bind=self.engine)
        except SQLAlchemyError as e:
            logger.error(f"SQL schema creation failed: {e}")
            raise StoreError("Failed to prepare mapping table") from e

    def insert(self, key: str, url: str) -> None:
        try:
            with self.session_factory() as session:
                # merge() is an upsert on the primary key
                session.merge(MappingRecord(key=key, url=url))
                session.commit()
        except SQLAlchemyError as e:
            logger.error(f"SQL insert error for key {key}: {e}")
            raise StoreError("Failed to store mapping") from e

    def fetch(self, key: str) -> Optional[str]:
        try:
            with self.session_factory() as session:
                record = session.get(MappingRecord, key)
                return record.url if record else None
        except SQLAlchemyError as e:
            logger.error(f"SQL fetch error for key {key}: {e}")
            raise StoreError("Failed to fetch mapping") from e

    def close(self) -> None:
        self.engine.dispose()


class RedisMappingStore(MappingStore):
    """
    Redis implementation, one string value per mapping under "url:<key>".

    SET already overwrites, which gives the upsert semantics for free.
    """

    def __init__(self, redis_client: Redis, prefix: str = "url:"):
        """
        Args:
            redis_client: Client created with decode_responses=True
            prefix: Namespace for mapping keys
        """
        self.redis = redis_client
        self.prefix = prefix

    def _redis_key(self, key: str) -> str:
        return f"{self.prefix}{key}"

    def insert(self, key: str, url: str) -> None:
        try:
            self.redis.set(self._redis_key(key), url)
        except RedisError as e:
            logger.error(f"Redis insert error for key {key}: {e}")
            raise StoreError("Failed to store mapping") from e

    def fetch(self, key: str) -> Optional[str]:
        try:
            value = self.redis.get(self._redis_key(key))
        except RedisError as e:
            logger.error(f"Redis fetch error for key {key}: {e}")
            raise StoreError("Failed to fetch mapping") from e

        if value is None:
            return None
        if isinstance(value, bytes):
            try:
                return value.decode("utf-8")
            except UnicodeDecodeError as e:
                raise StoreError("Failed to decode mapping") from e
        return value

    def ping(self) -> bool:
        try:
            return bool(self.redis.ping())
        except RedisError as e:
            logger.error(f"Redis ping failed: {e}")
            return False

    def close(self) -> None:
        self.redis.close()
