"""
Mapping store module.
Implements Strategy Pattern for interchangeable key -> URL storage backends.
"""

from .strategies import (
    MappingStore,
    InMemoryMappingStore,
    MongoMappingStore,
    SQLMappingStore,
    RedisMappingStore,
)
from .factory import StoreFactory, StoreBackend

__all__ = [
    "MappingStore",
    "InMemoryMappingStore",
    "MongoMappingStore",
    "SQLMappingStore",
    "RedisMappingStore",
    "StoreFactory",
    "StoreBackend",
]
