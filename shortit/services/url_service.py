import logging
from typing import Optional

from shortit.schemas.mapping import Mapping
from shortit.services.key_strategies import KeyStrategy
from shortit.store.strategies import MappingStore

logger = logging.getLogger(__name__)


class URLService:
    """
    URL Service with dependency injection for the store and key strategy.
    
    Neither collaborator is created here: the application builds them once
    at startup and the routes get a service wrapping them per request.
    """
    
    def __init__(self, store: MappingStore, key_strategy: KeyStrategy):
        self.store = store
        self.key_strategy = key_strategy

    def shorten(self, url: str) -> Mapping:
        """Create a new mapping for url under a freshly generated key.
        
        The same URL submitted twice gets two different keys; there is no
        deduplication and no check for an existing key.
        
        Raises:
            ValueError: if url is empty
            StoreError: if the store write fails
        """
        if not url:
            raise ValueError("URL is required")
        
        key = self.key_strategy.generate()
        self.store.insert(key, url)
        logger.info(f"URL mapped successfully: {key}")
        return Mapping(key=key, url=url)

    def resolve(self, key: str) -> Optional[str]:
        """Return the URL stored under key, or None for an unknown key.
        
        Raises:
            StoreError: if the store read fails
        """
        if not key:
            return None
        return self.store.fetch(key)

    @staticmethod
    def short_url(base_url: str, key: str) -> str:
        return f"{base_url.rstrip('/')}/short/{key}"
